"""HTTP sidecar server for resume-redactor.

Runs a small stdlib HTTP server on localhost so a UI or batch job in
another process can call the engine without importing it.

Endpoints:
    GET  /health          Health check
    POST /detect          Findings for a document
    POST /redact          Redacted text
    POST /highlight       Review HTML
    POST /stats           Finding counts

All endpoints expect/return JSON.
Body format: {"text": "...", "rules": [{...}], "ignore": ["pii-3", ...]}

Detection is deterministic, so ids returned by /detect are stable for the
same text and rules and can be sent back in ``ignore``.
"""

from __future__ import annotations
import json
import logging
import os
from http.server import HTTPServer, BaseHTTPRequestHandler
from typing import Any

from .config import create_offloaded, load_from_yaml, normalize_config
from .errors import InputError, RedactorError
from .offload import DetectionResponse, OffloadedDetector
from .render import get_stats, highlight, redact
from .types import CustomRule

logger = logging.getLogger(__name__)

DEFAULT_PORT = int(os.environ.get("RESUME_REDACTOR_PORT", "18792"))

# Shared state
_detector: OffloadedDetector | None = None
_config: dict[str, Any] = normalize_config({})


def _get_detector() -> OffloadedDetector:
    global _detector
    if _detector is None:
        _detector = create_offloaded(_config)
    return _detector


def _run(body: dict[str, Any]) -> tuple[str, DetectionResponse]:
    text = body.get("text", "")
    if not isinstance(text, str):
        raise InputError(f"text must be str, not {type(text).__name__}")
    rules = list(_config["rules"]) + [CustomRule.from_dict(r) for r in body.get("rules") or []]
    response = _get_detector().submit(text, rules)
    ignored = set(body.get("ignore") or [])
    for f in response.findings:
        if f.id in ignored:
            f.set_redact(False)
    return text, response


class RedactorHandler(BaseHTTPRequestHandler):
    """HTTP request handler for the redactor sidecar."""

    def _read_json(self) -> dict[str, Any]:
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length).decode("utf-8")
        data = json.loads(body) if body else {}
        if not isinstance(data, dict):
            raise ValueError("request body must be a JSON object")
        return data

    def _respond(self, status: int, data: Any) -> None:
        body = json.dumps(data, ensure_ascii=False).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        logger.debug("%s - %s", self.address_string(), format % args)

    def do_GET(self) -> None:
        if self.path == "/health":
            self._respond(200, {"status": "ok"})
        else:
            self._respond(404, {"error": "not found"})

    def do_POST(self) -> None:
        if self.path not in ("/detect", "/redact", "/highlight", "/stats"):
            self._respond(404, {"error": "not found"})
            return
        try:
            text, response = _run(self._read_json())
        except (ValueError, KeyError, TypeError, RedactorError) as e:
            self._respond(400, {"error": str(e)})
            return

        if not response.ok:
            # Zero findings plus a retryable error; the caller keeps its text
            self._respond(422, {"findings": [], "error": response.error, "retryable": True})
            return

        findings = response.findings
        if self.path == "/detect":
            self._respond(200, {
                "findings": [f.to_dict() for f in findings],
                "skipped_rules": [{"name": n, "error": e} for n, e in response.skipped_rules],
            })
        elif self.path == "/redact":
            self._respond(200, {"text": redact(text, findings)})
        elif self.path == "/highlight":
            self._respond(200, {"html": highlight(text, findings)})
        else:
            self._respond(200, get_stats(findings).to_dict())


def serve(port: int = DEFAULT_PORT, config: dict[str, Any] | None = None) -> None:
    """Start the redactor HTTP sidecar."""
    global _config, _detector
    _config = normalize_config(config or {})
    _detector = None

    server = HTTPServer(("127.0.0.1", port), RedactorHandler)
    logger.info("resume-redactor sidecar listening on http://127.0.0.1:%d", port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        server.shutdown()
    finally:
        if _detector is not None:
            _detector.close()


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="resume-redactor HTTP sidecar")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--config", default="", help="YAML config file")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    serve(port=args.port, config=load_from_yaml(args.config) if args.config else None)
