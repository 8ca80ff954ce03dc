"""
HTTP API tests against an in-memory content store.
"""

import pytest
from fastapi.testclient import TestClient

import main
from config import ADMIN_EMAIL, ADMIN_PASSWORD
from database import MemoryRecordStore


@pytest.fixture
def app_repos(tmp_path):
    return main.configure(MemoryRecordStore(), public_dir=tmp_path / "public", pages_dir=tmp_path / "pages")


@pytest.fixture
def client(app_repos):
    return TestClient(main.app)


@pytest.fixture
def admin_headers(client):
    response = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def headers_for(email):
    return {"Authorization": f"Bearer {main.create_access_token({'sub': email})}"}


class TestAuth:
    def test_root(self, client):
        assert client.get("/").json() == {"status": "ok", "service": "portfolio-cms"}

    def test_bad_credentials(self, client):
        response = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": "wrong"})
        assert response.status_code == 401

    def test_write_requires_token(self, client):
        assert client.post("/api/skills", json={"name": "Go"}).status_code == 401

    def test_garbage_token(self, client):
        response = client.delete("/api/skills/skill-1", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401

    def test_unbound_identity_is_forbidden(self, client):
        response = client.delete("/api/skills/skill-1", headers=headers_for("stranger@example.com"))
        assert response.status_code == 403


class TestSkills:
    def test_list_defaults(self, client):
        skills = client.get("/api/skills").json()["skills"]
        assert skills[0] == {"id": "skill-1", "name": "React", "icon": "react", "iconType": "predefined",
                             "level": 5, "category": "development"}

    def test_crud(self, client, admin_headers, app_repos):
        created = client.post(
            "/api/skills",
            json={"name": "Rust", "level": 4, "category": "development"},
            headers=admin_headers,
        ).json()["skill"]
        skill_id = created["id"]
        assert skill_id.startswith("skill-")

        assert client.get(f"/api/skills/{skill_id}").json()["skill"]["name"] == "Rust"

        updated = client.put(f"/api/skills/{skill_id}", json={"level": 2}, headers=admin_headers)
        assert updated.json()["skill"]["level"] == 2
        assert app_repos.skills.find(skill_id).level == 2

        assert client.delete(f"/api/skills/{skill_id}", headers=admin_headers).status_code == 200
        assert client.get(f"/api/skills/{skill_id}").status_code == 404

    def test_invalid_level(self, client, admin_headers):
        response = client.post(
            "/api/skills",
            json={"name": "Rust", "level": 9, "category": "development"},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_duplicate_id(self, client, admin_headers):
        response = client.post(
            "/api/skills",
            json={"id": "skill-1", "name": "Again", "level": 1, "category": "x"},
            headers=admin_headers,
        )
        assert response.status_code == 409

    def test_update_missing(self, client, admin_headers):
        assert client.put("/api/skills/nope", json={"level": 1}, headers=admin_headers).status_code == 404


class TestProjectsAndTimeline:
    def test_list_projects(self, client):
        assert len(client.get("/api/projects").json()["projects"]) == 3

    def test_create_project(self, client, admin_headers):
        body = {"title": "New", "description": "Desc", "technologies": ["Python"]}
        data = client.post("/api/projects", json=body, headers=admin_headers).json()
        assert data["success"] is True
        assert data["project"]["id"].startswith("project-")
        assert len(data["projects"]) == 4

    def test_create_project_missing_fields(self, client, admin_headers):
        response = client.post("/api/projects", json={"title": "New"}, headers=admin_headers)
        assert response.status_code == 400

    def test_timeline(self, client):
        timeline = client.get("/api/timeline").json()["timeline"]
        assert timeline[0]["link"] == {"url": "https://example.com/company1", "text": "View Company"}


class TestContent:
    def test_read_document(self, client):
        assert client.get("/api/content/heroSettings").json()["title"] == "Creative"

    def test_replace_collection(self, client, admin_headers, app_repos):
        items = [{"id": "nav-home", "name": "Start", "href": "/", "order": 1, "isActive": True}]
        response = client.put("/api/content/navItems", json=items, headers=admin_headers)
        assert response.json() == items
        assert app_repos.navigation.read_all()[0].name == "Start"

    def test_collection_needs_list(self, client, admin_headers):
        response = client.put("/api/content/navItems", json={"id": "x"}, headers=admin_headers)
        assert response.status_code == 400

    def test_replace_document(self, client, admin_headers):
        response = client.put("/api/content/modelSettings", json={"sizeMultiplier": 2.5}, headers=admin_headers)
        assert response.json() == {"sizeMultiplier": 2.5}

    def test_unknown_kind(self, client):
        assert client.get("/api/content/bogus").status_code == 404

    def test_users_not_exposed(self, client):
        assert client.get("/api/content/portfolioUsers").status_code == 404

    def test_role_limits_writes(self, client, admin_headers):
        client.post(
            "/api/users",
            json={"email": "writer@example.com", "name": "Writer", "role": "content_writer"},
            headers=admin_headers,
        )
        writer = headers_for("writer@example.com")

        assert client.put("/api/content/skills", json=[], headers=writer).status_code == 403
        assert client.put("/api/content/blogPosts", json=[], headers=writer).status_code == 200


class TestUsers:
    def test_admin_lists_and_binds(self, client, admin_headers):
        response = client.post(
            "/api/users",
            json={"email": "mod@example.com", "name": "Mod", "role": "moderator"},
            headers=admin_headers,
        )
        assert response.json()["user"]["role"] == "moderator"

        emails = [u["email"] for u in client.get("/api/users", headers=admin_headers).json()["users"]]
        assert emails == [ADMIN_EMAIL, "mod@example.com"]

    def test_moderator_cannot_list(self, client, admin_headers):
        client.post(
            "/api/users",
            json={"email": "mod@example.com", "name": "Mod", "role": "moderator"},
            headers=admin_headers,
        )
        assert client.get("/api/users", headers=headers_for("mod@example.com")).status_code == 403


class TestPages:
    def test_create_page(self, client, admin_headers, tmp_path, app_repos):
        body = {"pageName": "About Me", "pageUrl": "/about-me", "pageTemplate": "basic"}
        response = client.post("/api/pages", json=body, headers=admin_headers)

        assert response.json()["pageUrl"] == "/about-me"
        page = tmp_path / "pages" / "about-me" / "index.html"
        assert "About Me" in page.read_text(encoding="utf-8")
        assert "about-me" in app_repos.page_contents.read().root

    def test_existing_page(self, client, admin_headers):
        body = {"pageName": "About", "pageUrl": "about"}
        client.post("/api/pages", json=body, headers=admin_headers)
        assert client.post("/api/pages", json=body, headers=admin_headers).status_code == 409

    def test_missing_fields(self, client, admin_headers):
        assert client.post("/api/pages", json={"pageName": "X"}, headers=admin_headers).status_code == 400

    def test_path_traversal(self, client, admin_headers):
        body = {"pageName": "Evil", "pageUrl": "../evil"}
        assert client.post("/api/pages", json=body, headers=admin_headers).status_code == 400


class TestUpload:
    def test_logo(self, client, admin_headers, tmp_path):
        response = client.post(
            "/api/upload",
            files={"file": ("logo.png", b"png-bytes", "image/png")},
            data={"fileType": "logo"},
            headers=admin_headers,
        )
        data = response.json()
        assert data["originalName"] == "logo.png"
        assert data["filePath"].startswith("/images/logos/logo-")
        assert data["filePath"].endswith(".png")
        assert (tmp_path / "public" / data["filePath"].lstrip("/")).read_bytes() == b"png-bytes"

    def test_favicon_gets_fixed_name(self, client, admin_headers, tmp_path):
        response = client.post(
            "/api/upload",
            files={"file": ("icon.ico", b"ico", "image/x-icon")},
            data={"type": "favicon"},
            headers=admin_headers,
        )
        assert response.json()["filePath"] == "/favicon.ico"
        assert (tmp_path / "public" / "favicon.ico").read_bytes() == b"ico"

    def test_unknown_type(self, client, admin_headers):
        response = client.post(
            "/api/upload",
            files={"file": ("a.txt", b"x", "text/plain")},
            data={"fileType": "virus"},
            headers=admin_headers,
        )
        assert response.status_code == 400

    def test_no_file(self, client, admin_headers):
        response = client.post("/api/upload", data={"fileType": "logo"}, headers=admin_headers)
        assert response.status_code == 400


class TestLogos:
    def test_activate_switches_within_type(self, client, admin_headers, app_repos):
        response = client.post(
            "/api/logos",
            json={"id": "logo-new", "name": "New", "type": "frontend", "imageUrl": "/images/logos/new.svg"},
            headers=admin_headers,
        )
        assert response.json()["logo"]["text"] == "Portfolio"

        response = client.post("/api/logos/logo-new/activate", headers=admin_headers)

        assert response.json()["logo"]["active"] is True
        active = {logo.id for logo in app_repos.logos.read_all() if logo.active}
        assert active == {"logo-new", "backend-default"}

    def test_active_logo_cannot_be_deleted(self, client, admin_headers):
        response = client.delete("/api/logos/frontend-default", headers=admin_headers)
        assert response.status_code == 409

    def test_inactive_logo_can_be_deleted(self, client, admin_headers, app_repos):
        client.post("/api/logos", json={"id": "logo-old", "name": "Old", "type": "backend"}, headers=admin_headers)
        assert client.delete("/api/logos/logo-old", headers=admin_headers).status_code == 200
        assert app_repos.logos.find("logo-old") is None


class TestSiteSections:
    def test_read_new_documents(self, client):
        assert client.get("/api/content/highlightsConfig").json()["title"] == "Portfolio Highlights"
        assert client.get("/api/content/sectionSettings").json()["skills"]["title"] == "Skills Overview"
        assert client.get("/api/content/contactSettings").json()["email"] == "hello@example.com"

    def test_contact_settings_follow_contact_permission(self, client, admin_headers):
        client.post(
            "/api/users",
            json={"email": "mod@example.com", "name": "Mod", "role": "moderator"},
            headers=admin_headers,
        )
        moderator = headers_for("mod@example.com")
        contact = client.get("/api/content/contactSettings").json()
        contact["phone"] = "+1 (555) 000-0000"

        assert client.put("/api/content/contactSettings", json=contact, headers=moderator).status_code == 200
        assert client.put("/api/content/highlightsConfig", json={"stats": []}, headers=moderator).status_code == 403

    def test_highlight_stats_must_be_a_list(self, client, admin_headers):
        response = client.put("/api/content/highlightsConfig", json={"stats": "many"}, headers=admin_headers)
        assert response.status_code == 422


class TestLifespan:
    def test_startup_opens_the_configured_store(self, app_repos, monkeypatch):
        opened = []

        def fake_open_store():
            opened.append(True)
            return MemoryRecordStore()

        monkeypatch.setattr(main, "open_store", fake_open_store)
        app_repos.close()
        main.app.state.repos = None

        with TestClient(main.app) as client:
            assert client.get("/api/skills").status_code == 200
            assert main.app.state.repos is not None

        assert opened == [True]
        assert main.app.state.repos is None

    def test_startup_keeps_an_existing_store(self, app_repos, monkeypatch):
        monkeypatch.setattr(main, "open_store", lambda: pytest.fail("store opened twice"))

        with TestClient(main.app):
            assert main.app.state.repos is app_repos
