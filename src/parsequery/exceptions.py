"""Exceptions raised while parsing query strings."""
from werkzeug.exceptions import BadRequest


class DecodeError(BadRequest, ValueError):
    """Raised when a raw key or value cannot be percent-decoded.

    This is a :class:`~werkzeug.exceptions.BadRequest`, so a WSGI
    application that lets it escape answers with ``400 Bad Request``.
    The malformed input is kept on :attr:`value`.
    """

    def __init__(self, value, reason="URI malformed"):
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}: {value!r}")

    def __str__(self):
        return f"{self.reason}: {self.value!r}"


class OptionsError(TypeError):
    """Raised for an option that cannot be used by the parser."""
