# tests/test_health.py
from __future__ import annotations

import time

import pytest
from fastapi.testclient import TestClient

# Latență maximă acceptată pentru /health (secunde)
MAX_HEALTH_LATENCY = 1.5


@pytest.mark.timeout(5)
def test_health_ok(client: TestClient):
    t0 = time.perf_counter()
    r = client.get("/health")
    dt = time.perf_counter() - t0

    assert r.status_code == 200, r.text
    assert dt <= MAX_HEALTH_LATENCY, f"/health too slow: {dt:.3f}s > {MAX_HEALTH_LATENCY:.3f}s"
    # Contract minim: {"status": "ok"}
    assert r.json() == {"status": "ok"}


@pytest.mark.timeout(5)
def test_health_headers(client: TestClient):
    r = client.get("/health")
    assert r.headers.get("X-Request-ID")
    assert r.headers.get("Server-Timing", "").startswith("app;dur=")
    assert r.headers.get("X-Content-Type-Options") == "nosniff"


@pytest.mark.timeout(5)
def test_request_id_is_propagated(client: TestClient):
    r = client.get("/health", headers={"X-Request-ID": "abc123"})
    assert r.headers["X-Request-ID"] == "abc123"


@pytest.mark.timeout(5)
def test_health_head_or_options_do_not_error(client: TestClient):
    """Acceptăm 200/204/405/404 pentru HEAD/OPTIONS, dar nu 5xx."""
    assert client.head("/health").status_code < 500
    assert client.options("/health").status_code < 500


@pytest.mark.timeout(5)
def test_root_and_uptime(client: TestClient):
    assert client.get("/").json()["name"]
    body = client.get("/health/uptime").json()
    assert body["uptime_seconds"] >= 0
    assert isinstance(body["started_at"], int)


@pytest.mark.timeout(5)
def test_health_catalog_reports_store(client: TestClient):
    r = client.get("/health/catalog")
    assert r.status_code == 200, r.text
    assert r.json() == {"status": "ok", "products": 3, "next_id": 4}


@pytest.mark.timeout(5)
def test_unknown_route_is_uniform_json(client: TestClient):
    r = client.get("/nope")
    assert r.status_code == 404
    assert r.json()["detail"] == {"message": "Not Found", "path": "/nope"}
