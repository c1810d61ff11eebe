"""The ambient "current" query string.

``parse_query()`` without a ``query`` option parses whatever this module
reports as the current query: the one bound with :func:`bind_query` (or by
:class:`QueryStringMiddleware` for the duration of a request), falling back
to the CGI ``QUERY_STRING`` environment variable.
"""
import contextlib
import contextvars
import os

from parsequery.exceptions import DecodeError

_query_var = contextvars.ContextVar("parsequery.current_query")


def current_query():
    """Return the query string of the current context, or ``""``."""
    try:
        return _query_var.get()
    except LookupError:
        return os.environ.get("QUERY_STRING", "")


@contextlib.contextmanager
def bind_query(query):
    """Make ``query`` the current query string inside the ``with`` block."""
    token = _query_var.set(query)
    try:
        yield query
    finally:
        _query_var.reset(token)


def _environ_query(environ):
    # PEP 3333 hands the query over as latin-1 decoded bytes.
    raw = environ.get("QUERY_STRING", "")
    try:
        return raw.encode("latin-1").decode("utf-8")
    except UnicodeError as e:
        raise DecodeError(raw, "invalid UTF-8 in query string") from e


class QueryStringMiddleware:
    """WSGI middleware binding each request's query string.

    Inside the wrapped application ``parse_query()`` then parses the query
    of the request being served. A query that is not valid UTF-8 raises
    :class:`~parsequery.exceptions.DecodeError`::

        app.wsgi_app = QueryStringMiddleware(app.wsgi_app)
    """

    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        with bind_query(_environ_query(environ)):
            return self.app(environ, start_response)
