# tests/conftest.py
"""
Pytest configuration and fixtures for bashpy tests.
"""

import json
import logging

import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep BASHPY_* overrides from the developer's shell out of every test."""
    for key in ("BASHPY_PATTERN", "BASHPY_FIELD", "BASHPY_MIN_SIZE",
                "BASHPY_DEFAULT_NAME", "BASHPY_TIMEOUT", "BASHPY_VERBOSE"):
        monkeypatch.delenv(key, raising=False)

    yield

    logger = logging.getLogger("bashpy")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture
def log_file(tmp_path):
    """A small log with three ERROR lines, one of them repeating the word."""
    path = tmp_path / "app.log"
    path.write_text(
        "INFO starting\n"
        "ERROR disk full\n"
        "WARN retrying\n"
        "ERROR ERROR twice on one line\n"
        "error lower case is not counted\n"
        "done ERROR at the end\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def config_file(tmp_path):
    """config.json with service.region set."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"service": {"region": "us-east-1", "replicas": 3}}))
    return path


@pytest.fixture
def sized_directory(tmp_path):
    """A directory holding a 500 KB file, a 2 MB file and a large file inside a subdirectory."""
    (tmp_path / "small.bin").write_bytes(b"\0" * 500 * 1024)
    (tmp_path / "big.bin").write_bytes(b"\0" * 2 * 1024 * 1024)
    sub = tmp_path / "nested"
    sub.mkdir()
    (sub / "hidden_big.bin").write_bytes(b"\0" * 2 * 1024 * 1024)
    return tmp_path


class DummyResponse:
    """Stand-in for requests.Response."""

    def __init__(self, status_code):
        self.status_code = status_code
        self.closed = False

    def close(self):
        self.closed = True


@pytest.fixture
def fake_get(monkeypatch):
    """Patch requests.get; returns a recorder whose ``.status`` or ``.exc`` drives the reply."""
    import requests

    class Recorder:
        status = 200
        exc = None
        calls = []
        responses = []

    recorder = Recorder()
    recorder.calls = []
    recorder.responses = []

    def _get(url, timeout=None):
        recorder.calls.append((url, timeout))
        if recorder.exc is not None:
            raise recorder.exc
        response = DummyResponse(recorder.status)
        recorder.responses.append(response)
        return response

    monkeypatch.setattr(requests, "get", _get)
    return recorder


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that drive the console-script entry points"
    )
    config.addinivalue_line(
        "markers", "network: Tests that would touch the network if requests were not patched"
    )
