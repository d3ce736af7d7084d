"""Tests for serving the optional frontend."""

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from docheadings.config import Settings
from docheadings.frontend import register_frontend
from main import create_app


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    path = tmp_path / "public"
    (path / "assets").mkdir(parents=True)
    (path / "index.html").write_text("<html>app shell</html>")
    (path / "assets" / "app.js").write_text("console.log('hi')")
    (tmp_path / "secret.txt").write_text("do not serve")
    return path


@pytest.fixture
def frontend_client(tmp_path: Path, public_dir: Path) -> TestClient:
    settings = Settings(upload_dir=tmp_path / "uploads", public_dir=public_dir)
    return TestClient(create_app(settings))


class TestRegisterFrontend:
    """Tests for register_frontend."""

    def test_missing_directory_registers_nothing(self, tmp_path: Path):
        app = FastAPI()
        routes_before = len(app.routes)

        assert register_frontend(app, tmp_path / "missing") is False
        assert len(app.routes) == routes_before

    def test_existing_directory_registers_route(self, public_dir: Path):
        app = FastAPI()
        assert register_frontend(app, public_dir) is True

    def test_serves_index_at_root(self, frontend_client: TestClient):
        response = frontend_client.get("/")

        assert response.status_code == 200
        assert "app shell" in response.text

    def test_serves_static_file(self, frontend_client: TestClient):
        response = frontend_client.get("/assets/app.js")

        assert response.status_code == 200
        assert "console.log" in response.text

    def test_unknown_path_falls_back_to_index(self, frontend_client: TestClient):
        response = frontend_client.get("/results/42")

        assert response.status_code == 200
        assert "app shell" in response.text

    def test_does_not_serve_outside_public_dir(self, frontend_client: TestClient):
        response = frontend_client.get("/%2E%2E/secret.txt")

        assert "do not serve" not in response.text

    def test_api_routes_take_precedence(self, frontend_client: TestClient):
        response = frontend_client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_unknown_api_path_is_json_404(self, frontend_client: TestClient):
        response = frontend_client.get("/api/missing")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}

    def test_missing_index_is_404(self, tmp_path: Path):
        public = tmp_path / "bare"
        public.mkdir()
        client = TestClient(create_app(Settings(upload_dir=tmp_path / "u", public_dir=public)))

        assert client.get("/anything").status_code == 404
