"""Tests for the HTTP sidecar."""

import json
import threading
import urllib.error
import urllib.request
from http.server import HTTPServer

import pytest

from resume_redactor import server as sidecar
from resume_redactor.config import normalize_config
from resume_redactor.offload import DetectionResponse

TEXT = "Email me at jane@x.com today"


@pytest.fixture
def base_url(monkeypatch):
    monkeypatch.setattr(sidecar, "_config", normalize_config({"skip_categories": ["age"]}))
    monkeypatch.setattr(sidecar, "_detector", None)
    httpd = HTTPServer(("127.0.0.1", 0), sidecar.RedactorHandler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{httpd.server_address[1]}"
    httpd.shutdown()
    httpd.server_close()


def call(url, body=None):
    data = None if body is None else json.dumps(body).encode()
    req = urllib.request.Request(url, data=data, headers={"Content-Type": "application/json"})
    try:
        with urllib.request.urlopen(req, timeout=5) as resp:
            return resp.status, json.loads(resp.read())
    except urllib.error.HTTPError as e:
        return e.code, json.loads(e.read())


def test_health(base_url):
    assert call(base_url + "/health") == (200, {"status": "ok"})


def test_detect(base_url):
    status, data = call(base_url + "/detect", {"text": TEXT + " Age: 30"})
    assert status == 200
    cats = [f["category"] for f in data["findings"]]
    assert "email" in cats
    assert "age" not in cats


def test_redact_with_ignore(base_url):
    status, data = call(base_url + "/redact", {"text": TEXT})
    assert (status, data["text"]) == (200, "Email me at [email redacted] today")
    _, data = call(base_url + "/redact", {"text": TEXT, "ignore": ["pii-0", "pii-1"]})
    assert data["text"] == TEXT


def test_highlight_and_stats(base_url):
    _, data = call(base_url + "/highlight", {"text": TEXT})
    assert 'data-pii-id="pii-0"' in data["html"]
    _, data = call(base_url + "/stats", {"text": TEXT})
    assert data["by_category"]["email"] == 1


def test_request_rules(base_url):
    body = {"text": "Badge EMP-123", "rules": [{"name": "Employee ID", "pattern": r"EMP-\d+"},
                                               {"name": "Bad", "pattern": "("}]}
    _, data = call(base_url + "/detect", body)
    assert [f["value"] for f in data["findings"]] == ["EMP-123"]
    assert data["skipped_rules"][0]["name"] == "Bad"


def test_non_string_text_is_rejected_outright(base_url):
    status, data = call(base_url + "/detect", {"text": 42})
    assert status == 400
    assert "str" in data["error"]
    assert "retryable" not in data


class FailingDetector:
    def submit(self, text, rules=()):
        return DetectionResponse(id=0, error="worker crashed")


def test_detection_failure_is_retryable(base_url, monkeypatch):
    monkeypatch.setattr(sidecar, "_detector", FailingDetector())
    status, data = call(base_url + "/detect", {"text": TEXT})
    assert status == 422
    assert data == {"findings": [], "error": "worker crashed", "retryable": True}


def test_bad_request(base_url):
    status, _ = call(base_url + "/detect", ["not", "an", "object"])
    assert status == 400
    status, _ = call(base_url + "/detect", {"text": "x", "rules": [{"pattern": "x"}]})
    assert status == 400


def test_unknown_path(base_url):
    assert call(base_url + "/nope", {})[0] == 404
