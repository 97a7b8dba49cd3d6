"""Tests for API endpoints."""

from __future__ import annotations

import inspect

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from svgparse import __version__
from svgparse.config import Settings
from svgparse.dependencies import get_settings
from svgparse.main import app
from svgparse.models.responses import HealthResponse
from tests.conftest import BAR_CHART_SVG, HOME_SVG, MALFORMED_SVG, SMILEY_SVG


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == __version__


def test_health_version_is_required():
    with pytest.raises(ValidationError):
        HealthResponse(status="ok")


# ---------------------------------------------------------------------------
# /api/events
# ---------------------------------------------------------------------------

def test_events_smiley():
    response = client.post("/api/events", json={"svg": SMILEY_SVG})
    assert response.status_code == 200
    data = response.json()
    assert data["error_count"] == 0
    assert [event["name"] for event in data["events"]] == ["svg", "circle", "circle", "circle", "path", "svg"]
    assert data["events"][0]["kind"] == "start"
    assert data["events"][0]["attributes"]["viewBox"] == "0 0 24 24"
    assert data["events"][-1]["kind"] == "end"


def test_events_text_and_comment():
    response = client.post("/api/events", json={"svg": "<t>hi</t><!-- note -->"})
    events = response.json()["events"]
    assert events[1] == {
        "type": "text",
        "name": None,
        "kind": None,
        "attributes": None,
        "content": "hi",
        "error": None,
    }
    assert events[3]["type"] == "comment"
    assert events[3]["content"] == "<!-- note -->"


def test_events_malformed():
    response = client.post("/api/events", json={"svg": MALFORMED_SVG})
    assert response.status_code == 200
    data = response.json()
    assert data["error_count"] == 2
    error = data["events"][2]["error"]
    assert error["message"] == "found an unexpected ending of a tag"
    assert (error["line"], error["column"]) == (3, 9)
    assert error["formatted"] == "found an unexpected ending of a tag (line 3, column 9)"


def test_events_missing_body():
    response = client.post("/api/events", json={})
    assert response.status_code == 422


@pytest.fixture
def small_limit():
    app.dependency_overrides[get_settings] = lambda: Settings(max_document_chars=10)
    yield
    app.dependency_overrides.clear()


def test_document_too_large(small_limit):
    response = client.post("/api/events", json={"svg": SMILEY_SVG})
    assert response.status_code == 413
    response = client.post("/api/paths", json={"svg": SMILEY_SVG})
    assert response.status_code == 413


# ---------------------------------------------------------------------------
# /api/path
# ---------------------------------------------------------------------------

def test_parse_path():
    response = client.post("/api/path/parse", json={"d": "M1,2 l3,4 z"})
    assert response.status_code == 200
    data = response.json()
    assert data["commands"] == [
        {"command": "move", "positioning": "absolute", "parameters": [1.0, 2.0]},
        {"command": "line", "positioning": "relative", "parameters": [3.0, 4.0]},
        {"command": "close", "positioning": None, "parameters": []},
    ]
    assert data["d"] == "M1,2 l3,4 z"


def test_parse_path_normalizes():
    response = client.post("/api/path/parse", json={"d": "a32 32 0 00.03-45.22"})
    assert response.json()["d"] == "a32,32,0,0,0,0.03,-45.22"


def test_parse_path_error():
    response = client.post("/api/path/parse", json={"d": "M1 2 #"})
    assert response.status_code == 422
    assert response.json()["detail"] == "expected a path command (line 1, column 6)"


def test_serialize_path():
    response = client.post("/api/path/serialize", json={
        "commands": [
            {"command": "line", "positioning": "absolute", "parameters": [1, 2]},
            {"command": "cubic_curve", "positioning": "relative", "parameters": [1, 2.5, 3, 4, 5, 6]},
            {"command": "close"},
        ],
    })
    assert response.status_code == 200
    assert response.json() == {"d": "L1,2 c1,2.5,3,4,5,6 z"}


def test_serialize_missing_positioning():
    response = client.post("/api/path/serialize", json={"commands": [{"command": "line", "parameters": [1, 2]}]})
    assert response.status_code == 422


def test_serialize_unknown_command():
    response = client.post("/api/path/serialize", json={"commands": [{"command": "spiral"}]})
    assert response.status_code == 422


# ---------------------------------------------------------------------------
# /api/paths
# ---------------------------------------------------------------------------

def test_paths_home():
    response = client.post("/api/paths", json={"svg": HOME_SVG})
    assert response.status_code == 200
    paths = response.json()["paths"]
    assert [path["index"] for path in paths] == [0, 1]
    assert paths[0]["d"] == "M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"
    assert len(paths[1]["commands"]) == 11
    assert all(path["error"] is None for path in paths)


def test_paths_isolates_errors():
    svg = '<svg><path d="M0 0 #"/><path/><path d="M1 1"/></svg>'
    paths = client.post("/api/paths", json={"svg": svg}).json()["paths"]
    assert len(paths) == 2
    assert paths[0]["error"]["message"] == "expected a path command"
    assert paths[0]["commands"] == []
    assert paths[1]["commands"] == [{"command": "move", "positioning": "absolute", "parameters": [1.0, 1.0]}]


def test_paths_without_path_elements():
    response = client.post("/api/paths", json={"svg": BAR_CHART_SVG})
    assert response.status_code == 200
    assert response.json() == {"paths": []}


@pytest.mark.parametrize("path", ["/api/events", "/api/paths", "/api/path/parse", "/api/path/serialize"])
def test_parsing_handlers_run_in_threadpool(path):
    (route,) = [route for route in app.routes if getattr(route, "path", None) == path]
    assert not inspect.iscoroutinefunction(route.endpoint)
