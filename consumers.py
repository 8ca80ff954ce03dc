"""
Display-side consumers of content repositories.

A consumer reads its repository once when mounted, then re-reads on every
change signal until unmounted.
"""

from collections import OrderedDict
from datetime import date
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from events import Change, ChangeSignal


class ConsumerState(str, Enum):
    UNMOUNTED = "unmounted"
    LOADING = "loading"
    READY = "ready"


class ResourceConsumer:
    """
    Base consumer. Subclasses set ``keys`` (the store keys they depend on) and
    override ``load`` and optionally ``view``.

    Coarse signals carrying a key outside ``keys`` are ignored; signals
    without a key always trigger a reload.
    """

    keys: tuple = ()

    def __init__(self, signal: ChangeSignal, listen_fine: bool = False):
        self.signal = signal
        self.listen_fine = listen_fine
        self.state = ConsumerState.UNMOUNTED
        self.data: Any = None
        self.render_count = 0
        self._unsubscribers: List[Callable[[], None]] = []

    def load(self) -> Any:
        raise NotImplementedError

    def view(self) -> Any:
        return self.data

    def mount(self) -> "ResourceConsumer":
        if self.state != ConsumerState.UNMOUNTED:
            return self
        self.state = ConsumerState.LOADING
        self.refresh()
        self._unsubscribers.append(self.signal.subscribe(self._on_change))
        if self.listen_fine:
            self._unsubscribers.append(self.signal.subscribe(self._on_change, fine=True))
        return self

    def unmount(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self.state = ConsumerState.UNMOUNTED

    def refresh(self) -> None:
        self.data = self.load()
        self.state = ConsumerState.READY
        self.render_count += 1

    def _on_change(self, change: Change) -> None:
        if self.state == ConsumerState.UNMOUNTED:
            return
        if change.key is not None and self.keys and change.key not in self.keys:
            return
        self.refresh()

    def __enter__(self):
        return self.mount()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.unmount()


def level_to_percentage(level: int) -> int:
    return level * 20


class SkillsSection(ResourceConsumer):
    keys = ("skills", "sectionSettings")

    def __init__(self, repos, **kwargs):
        super().__init__(repos.signal, **kwargs)
        self.repos = repos
        self.heading = None

    def load(self):
        self.heading = self.repos.section_settings.read().skills
        return self.repos.skills.read_all()

    def view(self) -> List[Dict[str, Any]]:
        groups: Dict[str, List[Dict[str, Any]]] = OrderedDict()
        for skill in self.data or []:
            category = skill.category[:1].upper() + skill.category[1:]
            groups.setdefault(category, []).append({
                "id": skill.id,
                "name": skill.name,
                "icon": skill.icon,
                "iconType": skill.icon_type,
                "level": level_to_percentage(skill.level),
            })
        return [{"category": category, "items": items} for category, items in groups.items()]

    def bar_width(self, skill_id: str) -> Optional[str]:
        for group in self.view():
            for item in group["items"]:
                if item["id"] == skill_id:
                    return f"{item['level']}%"
        return None


class NavigationMenu(ResourceConsumer):
    keys = ("navItems", "siteConfig")

    def __init__(self, repos, **kwargs):
        super().__init__(repos.signal, **kwargs)
        self.repos = repos

    def load(self):
        return {"items": self.repos.navigation.read_all(), "site": self.repos.site_config.read()}

    def view(self):
        items = sorted((i for i in self.data["items"] if i.is_active), key=lambda i: i.order)
        return {"logo": self.data["site"].logo_text, "links": [(i.name, i.href) for i in items]}


class FooterView(ResourceConsumer):
    keys = ("footerConfig",)

    def __init__(self, repos, **kwargs):
        super().__init__(repos.signal, **kwargs)
        self.repos = repos

    def load(self):
        return self.repos.footer_config.read()

    def view(self):
        footer = self.data

        def active(links):
            return sorted((link for link in links if link.is_active), key=lambda link: link.order)

        return {
            "description": footer.description,
            "copyright": footer.copyright_text.replace("{year}", str(date.today().year)),
            "social": active(footer.social_links),
            "quick": active(footer.quick_links),
            "legal": active(footer.legal_links),
            "contact": footer.contact_info,
        }


class HighlightsSection(ResourceConsumer):
    keys = ("highlightsConfig",)

    def __init__(self, repos, **kwargs):
        super().__init__(repos.signal, **kwargs)
        self.repos = repos

    def load(self):
        return self.repos.highlights.read()

    def stats(self):
        return [stat for stat in self.data.stats if stat.active]

    def view(self):
        return {"title": self.data.title, "description": self.data.description, "stats": self.stats()}


class CollectionSection(ResourceConsumer):
    """Plain list view of one collection, optionally only the featured records."""

    def __init__(self, repo, featured_only: bool = False, **kwargs):
        super().__init__(repo.signal, **kwargs)
        self.repo = repo
        self.keys = (repo.key,)
        self.featured_only = featured_only

    def load(self):
        return self.repo.read_all()

    def view(self):
        if self.featured_only:
            return [item for item in self.data if getattr(item, "featured", False)]
        return list(self.data)


def projects_section(repos, **kwargs) -> CollectionSection:
    return CollectionSection(repos.projects, **kwargs)


def blog_section(repos, **kwargs) -> CollectionSection:
    return CollectionSection(repos.blog_posts, **kwargs)


def services_section(repos, **kwargs) -> CollectionSection:
    return CollectionSection(repos.services, **kwargs)


def testimonials_section(repos, **kwargs) -> CollectionSection:
    return CollectionSection(repos.testimonials, **kwargs)


def timeline_section(repos, **kwargs) -> CollectionSection:
    return CollectionSection(repos.timeline, **kwargs)
