"""Shared test fixtures for parsequery."""
import io

import pytest

from parsequery.options import reset_defaults


@pytest.fixture(autouse=True)
def _clean_defaults(monkeypatch):
    """Every test starts from the built-in defaults and no CGI query."""
    monkeypatch.delenv("QUERY_STRING", raising=False)
    reset_defaults()
    yield
    reset_defaults()


def make_environ(path="/", query_string="", method="GET", host="localhost"):
    """Create a minimal WSGI environ dict for testing."""
    return {
        "REQUEST_METHOD": method,
        "PATH_INFO": path,
        "QUERY_STRING": query_string,
        "SERVER_NAME": host,
        "SERVER_PORT": "80",
        "HTTP_HOST": host,
        "wsgi.version": (1, 0),
        "wsgi.url_scheme": "http",
        "wsgi.input": io.BytesIO(b""),
        "wsgi.errors": io.BytesIO(),
        "wsgi.multithread": False,
        "wsgi.multiprocess": False,
        "wsgi.run_once": False,
        "SCRIPT_NAME": "",
    }


@pytest.fixture
def environ_factory():
    return make_environ
