"""API integration tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from textsearcher.app import app


@pytest.fixture
def client() -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


def test_health(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["ok"] is True


def test_search_directory(client: TestClient, corpus: dict[str, Path], tmp_path: Path) -> None:
    resp = client.post(
        "/search",
        json={"groups": [["bar"], ["baz", "xxxx哈哈"]], "paths": [str(tmp_path)]},
    )
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["count"] == 1
    assert Path(payload["results"][0]["path"]).name == "hello.txt"
    assert payload["results"][0]["context"] is None


def test_search_with_context(client: TestClient, corpus: dict[str, Path]) -> None:
    resp = client.post(
        "/search",
        json={
            "groups": [["中文"]],
            "paths": [str(corpus["cjk.txt"]), str(corpus["hello.txt"])],
            "before": 0,
            "after": 0,
            "parallel": False,
        },
    )
    assert resp.status_code == 200
    results = resp.json()["results"]
    assert len(results) == 1
    assert results[0]["context"] == "中 文"


def test_search_rejects_empty_query(client: TestClient) -> None:
    resp = client.post("/search", json={"groups": [], "paths": []})
    assert resp.status_code == 422


def test_search_rejects_negative_context(client: TestClient) -> None:
    resp = client.post("/search", json={"groups": [["a"]], "paths": [], "before": -1, "after": 1})
    assert resp.status_code == 422


def test_match_and_compile(client: TestClient) -> None:
    resp = client.post("/match", json={"groups": [["hello world"]], "text": "HELLO\n world"})
    assert resp.status_code == 200
    assert resp.json() == {"matched": True}

    resp = client.post("/compile", json={"atoms": ["中文 hello", "  "]})
    assert resp.status_code == 200
    assert resp.json() == {"patterns": [r"中\s*文\s*hello", ""]}


def test_metrics_exposed(client: TestClient) -> None:
    client.post("/match", json={"groups": [["x"]], "text": "x"})
    resp = client.get("/metrics")
    assert resp.status_code == 200
    assert "txts_requests_total" in resp.text


def _sample(metrics_text: str, prefix: str) -> float:
    for line in metrics_text.splitlines():
        if line.startswith(prefix):
            return float(line.rsplit(" ", 1)[1])
    return 0.0


def test_validation_rejections_are_counted(client: TestClient) -> None:
    counter = 'txts_requests_total{endpoint="search",method="POST",status="422"}'
    before = _sample(client.get("/metrics").text, counter)

    assert client.post("/search", json={"groups": [], "paths": []}).status_code == 422
    assert client.post("/search", json={"groups": [["a"]], "paths": [], "before": -1}).status_code == 422

    assert _sample(client.get("/metrics").text, counter) == before + 2


def test_compile_latency_recorded(client: TestClient) -> None:
    histogram = 'txts_request_latency_seconds_count{endpoint="compile",method="POST"}'
    before = _sample(client.get("/metrics").text, histogram)

    assert client.post("/compile", json={"atoms": ["abc"]}).status_code == 200

    assert _sample(client.get("/metrics").text, histogram) == before + 1
