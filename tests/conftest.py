"""Pytest configuration and fixtures."""

import json
import os
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from blueprint import Blueprint, Feature, Role, parse_blueprint

TODO_RESPONSE = {
    "appName": "Todo",
    "roles": [
        {
            "name": "User",
            "features": [
                {
                    "entity": "Task",
                    "name": "Manage Tasks",
                    "inputFields": ["Title", "Due Date"],
                    "buttons": ["Add", "Delete"],
                }
            ],
        }
    ],
}


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["EXTRACTION_SERVICE_URL"] = "https://extract.test/extract"
    os.environ["EXTRACTION_TIMEOUT_SECONDS"] = "25"
    os.environ["VERIFICATION_TTL_SECONDS"] = "300"
    os.environ["LOG_LEVEL"] = "INFO"


@pytest.fixture
def todo_response():
    return TODO_RESPONSE


@pytest.fixture
def todo_blueprint():
    return parse_blueprint(TODO_RESPONSE)


@pytest.fixture
def uneven_blueprint():
    """Two roles: the first with three features, the second with one."""

    def feature(entity, name, fields=("Name",)):
        return Feature(entity=entity, name=name, input_fields=tuple(fields), buttons=("Save",))

    return Blueprint(
        app_name="Clinic",
        roles=(
            Role(
                name="Doctor",
                features=(
                    feature("Patient", "Manage Patients"),
                    feature("Appointment", "Schedule Appointments"),
                    feature("Prescription", "Write Prescriptions"),
                ),
            ),
            Role(name="Receptionist", features=(feature("Appointment", "Schedule Appointments"),)),
        ),
    )


class FakeExtractionClient:
    """Records calls and returns a canned blueprint or raises a canned error."""

    def __init__(self, blueprint=None, error=None):
        self.blueprint = blueprint
        self.error = error
        self.calls = []

    def extract(self, description, verification):
        self.calls.append((description, verification))
        if self.error is not None:
            raise self.error
        return self.blueprint


class FakeVerifier:
    """Verifier that always holds the given token until invalidated."""

    def __init__(self, token="tok123"):
        self.token = token
        self.invalidations = 0
        self.generation = 0
        self.question = "What is 1 + 1?"

    @property
    def verified(self):
        return self.token is not None

    def answer(self, value):
        return True

    def obtain(self):
        return self.token

    def invalidate(self):
        self.token = None
        self.invalidations += 1
        self.generation += 1


class StubExtractionService:
    """Local HTTP server standing in for the extraction service."""

    def __init__(self):
        self.status = 200
        self.body = TODO_RESPONSE
        self.requests = []
        stub = self

        class Handler(BaseHTTPRequestHandler):
            def do_POST(self):
                length = int(self.headers.get("Content-Length", 0))
                stub.requests.append(json.loads(self.rfile.read(length) or b"null"))
                payload = json.dumps(stub.body).encode()
                self.send_response(stub.status)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(payload)))
                self.end_headers()
                self.wfile.write(payload)

            def log_message(self, format, *args):
                pass

        self._server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
        self.url = f"http://127.0.0.1:{self._server.server_address[1]}/extract"
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)

    def start(self):
        self._thread.start()

    def stop(self):
        self._server.shutdown()
        self._server.server_close()


@pytest.fixture
def stub_service(monkeypatch):
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(name, raising=False)
    service = StubExtractionService()
    service.start()
    monkeypatch.setenv("EXTRACTION_SERVICE_URL", service.url)
    yield service
    service.stop()
