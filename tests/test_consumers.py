"""
Display consumers: mount lifecycle, refresh on change, and the two-tab
last-write-wins behaviour.
"""

from datetime import date

import defaults
import editors
from consumers import (
    ConsumerState,
    FooterView,
    HighlightsSection,
    NavigationMenu,
    SkillsSection,
    blog_section,
    projects_section,
    services_section,
)
from schemas import Project


class TestLifecycle:
    def test_unmounted_to_ready(self, repos):
        section = SkillsSection(repos)
        assert section.state is ConsumerState.UNMOUNTED

        section.mount()

        assert section.state is ConsumerState.READY
        assert section.render_count == 1
        section.unmount()
        assert section.state is ConsumerState.UNMOUNTED

    def test_one_refresh_per_write(self, repos):
        with SkillsSection(repos) as section:
            repos.skills.write_all([])
            repos.skills.write_all([])
            assert section.render_count == 3

    def test_fine_listener_refreshes_again(self, repos):
        with SkillsSection(repos, listen_fine=True) as section:
            editors.delete(repos.skills, "skill-1")
            assert section.render_count == 3

    def test_unrelated_keys_are_ignored(self, repos):
        with SkillsSection(repos) as section:
            repos.projects.write_all([])
            assert section.render_count == 1

    def test_unmounted_consumer_stops_listening(self, repos):
        section = SkillsSection(repos).mount()
        section.unmount()
        repos.skills.write_all([])
        assert section.render_count == 1

    def test_mount_twice_subscribes_once(self, repos):
        section = SkillsSection(repos)
        section.mount()
        section.mount()
        repos.skills.write_all([])
        assert section.render_count == 2


def test_new_skill_shows_up_with_80_percent_bar(repos):
    with SkillsSection(repos) as section:
        editors.create(repos.skills, {"id": "skill-x", "name": "Rust", "level": 4, "category": "development"})

        ids = [s.id for s in repos.skills.read_all()]
        assert ids == [s["id"] for s in defaults.SKILLS] + ["skill-x"]
        assert section.bar_width("skill-x") == "80%"


def test_skills_grouped_by_capitalised_category(repos):
    with SkillsSection(repos) as section:
        groups = section.view()
    assert [g["category"] for g in groups] == ["Development", "3d", "Design", "Ai"]
    react = groups[0]["items"][0]
    assert react["name"] == "React"
    assert react["level"] == 100


def test_two_tabs_last_write_wins(repos, other_tab):
    tab_a, tab_b = repos, other_tab
    a_items = tab_a.projects.read_all()
    b_items = tab_b.projects.read_all()

    a_items.append(Project(id="P1", title="From A", description="a"))
    tab_a.projects.write_all(a_items)
    b_items.append(Project(id="P2", title="From B", description="b"))
    tab_b.projects.write_all(b_items)

    ids = [p.id for p in tab_a.projects.read_all()]
    assert ids == [p["id"] for p in defaults.PROJECTS] + ["P2"]
    assert "P1" not in ids


def test_other_tab_sees_coarse_change_but_not_fine(repos, other_tab):
    fine = []
    other_tab.signal.subscribe(fine.append, fine=True)

    with projects_section(other_tab) as section:
        editors.create(repos.projects, {"id": "P1", "title": "T", "description": "D"})

        assert section.render_count == 2
        assert [p.id for p in section.data][-1] == "P1"
    assert fine == []


def test_featured_views(repos):
    with blog_section(repos, featured_only=True) as blog, services_section(repos, featured_only=True) as services:
        assert [p.id for p in blog.view()] == ["1", "2"]
        assert [s.title for s in services.view()] == ["Web Development", "UI/UX Design", "3D Modeling & Animation"]


def test_navigation_menu_sorts_active_items(repos):
    items = repos.navigation.read_all()
    items[0].order = 10
    items[1].is_active = False
    with NavigationMenu(repos) as menu:
        repos.navigation.write_all(items)
        view = menu.view()

    assert view["logo"] == "Portfolio"
    assert view["links"][0] == ("Services", "/services")
    assert view["links"][-1] == ("Home", "/")
    assert ("Projects", "/projects") not in view["links"]


def test_footer_fills_in_year(repos):
    with FooterView(repos) as footer:
        view = footer.view()
    assert view["copyright"] == f"© {date.today().year} Portfolio. All rights reserved."
    assert [link.name for link in view["legal"]] == ["Privacy Policy", "Terms of Service"]


def test_highlights_show_only_active_stats(repos):
    with HighlightsSection(repos) as section:
        assert [s.label for s in section.stats()] == [
            "Web Projects", "Logo Designs", "3D Graphics", "Years of Development",
        ]

        config = repos.highlights.read()
        config.stats[4].active = True
        config.title = "By the numbers"
        repos.highlights.write(config)

        view = section.view()
    assert view["title"] == "By the numbers"
    assert "GitHub Repositories" in [s.label for s in view["stats"]]
    assert section.render_count == 2


def test_skills_heading_follows_section_settings(repos):
    with SkillsSection(repos) as section:
        assert section.heading.title == "Skills Overview"

        settings = repos.section_settings.read()
        settings.skills.title = "Toolbox"
        repos.section_settings.write(settings)

        assert section.heading.title == "Toolbox"
        assert section.render_count == 2
