"""
Tests for the local invocation app.
"""
import asyncio
import time
import pytest
from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport
from request_recorder import handler as handler_module
from request_recorder.handler import RequestHandler, get_default_handler
from request_recorder.main import app
from request_recorder.metrics import metrics
from .conftest import ContextCapturingStore, FailingStore, FixedClock

client = TestClient(app)


def test_invoke_stores_event():
    r = client.post("/invoke", json={"foo": "bar"})

    assert r.status_code == 200
    assert r.json() == {"statusCode": 200, "body": {}}
    items = get_default_handler().recorder.store.items("requests")
    assert items[0]["event"] == {"foo": "bar"}
    assert items[0]["id"].isdigit()


def test_invoke_reports_store_failure(monkeypatch):
    failing = RequestHandler(store=FailingStore(RuntimeError("table missing")), clock=FixedClock(1))
    monkeypatch.setattr(handler_module, "_default_handler", failing)

    r = client.post("/invoke", json={"foo": "bar"})

    assert r.status_code == 400
    assert r.json() == {
        "statusCode": 400,
        "body": {"name": "RuntimeError", "message": "table missing"},
    }


def test_health_liveness():
    r = client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["service"] == "request-recorder"
    assert "timestamp" in data


def test_health_readiness_memory_store():
    r = client.get("/health/ready")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ready"
    assert data["checks"]["store"] == {"status": "ok", "backend": "memory"}


def test_health_readiness_unhealthy_store(monkeypatch):
    monkeypatch.setattr(handler_module, "_default_handler", RequestHandler(store=FailingStore(RuntimeError())))

    r = client.get("/health/ready")
    assert r.status_code == 503
    assert r.json()["status"] == "not_ready"


def test_metrics_endpoint():
    client.post("/invoke", json={"foo": "bar"})
    r = client.get("/metrics")
    assert r.status_code == 200
    content = r.text
    assert "recorder_writes_total" in content
    assert "http_requests_total" in content
    assert "app_up" in content


def test_correlation_id_propagation():
    r = client.get("/health", headers={"x-correlation-id": "test-correlation-id-123"})
    assert r.headers["x-correlation-id"] == "test-correlation-id-123"


def test_correlation_id_is_bound_for_handler_logs(monkeypatch):
    store = ContextCapturingStore()
    monkeypatch.setattr(handler_module, "_default_handler", RequestHandler(store=store, clock=FixedClock(77)))

    r = client.post("/invoke", json={"foo": "bar"}, headers={"x-correlation-id": "cid-1"})

    assert r.status_code == 200
    context = store.contexts[0]
    assert context["correlation_id"] == "cid-1"
    assert context["aws_request_id"] == "cid-1"
    assert context["request_id"] == "77"
    assert context["http_path"] == "/invoke"


@pytest.mark.asyncio
async def test_slow_write_does_not_block_other_requests(monkeypatch):
    """A blocking store write must not stall concurrent requests."""
    slow = RequestHandler(store=ContextCapturingStore(delay=0.5))
    monkeypatch.setattr(handler_module, "_default_handler", slow)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:

        async def timed_health():
            await asyncio.sleep(0.05)
            start = time.perf_counter()
            response = await ac.get("/health")
            return response, time.perf_counter() - start

        invoke_response, (health_response, health_elapsed) = await asyncio.gather(
            ac.post("/invoke", json={"foo": "bar"}),
            timed_health(),
        )

    assert invoke_response.status_code == 200
    assert health_response.status_code == 200
    assert health_elapsed < 0.3


def test_app_up_follows_lifespan():
    labels = {"service": "request-recorder", "version": "0.1.0"}
    with TestClient(app) as c:
        assert c.get("/health").status_code == 200
        assert metrics.registry.get_sample_value("app_up", labels) == 1
    assert metrics.registry.get_sample_value("app_up", labels) == 0
