"""Decode functions for raw query string keys and values.

A decoder passed as the ``decode`` option is called as
``decode(value, context, options)``:

* ``value`` is the raw, still percent-encoded text, or ``None`` when the
  token had no ``=`` at all.
* ``context`` is ``None`` while decoding a key, and the already decoded key
  while decoding that key's value.
* ``options`` is the :class:`~parsequery.options.ParseOptions` bundle of the
  current call, so ``options.default_decode`` and any custom fields are
  reachable.
"""
import re

from parsequery.exceptions import DecodeError
from parsequery.matching import key_predicate

_escape_run_re = re.compile(r"((?:%[0-9A-Fa-f]{2})+)")


def _decode_octets(run):
    octets = bytes.fromhex(run.replace("%", ""))
    try:
        # Surrogate pairs encoded as two 3-byte sequences (CESU-8) are
        # accepted and joined; lone surrogates are rejected.
        text = octets.decode("utf-8", "surrogatepass")
        return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le")
    except UnicodeError as e:
        raise DecodeError(run, "invalid UTF-8 sequence") from e


def percent_decode(text):
    """Strictly decode ``%XX`` escapes in ``text``.

    Raises :class:`DecodeError` for a ``%`` that does not start a two digit
    hex escape, or for escaped octets that are not valid CESU-8.
    """
    if "%" not in text:
        return text
    parts = _escape_run_re.split(text)
    for i, part in enumerate(parts):
        if i % 2:
            parts[i] = _decode_octets(part)
        elif "%" in part:
            raise DecodeError(text)
    return "".join(parts)


def default_decode(value):
    """Decode a raw key or value.

    ``None`` decodes to the empty string. The first literal ``+`` becomes a
    space, then ``%``-escapes are decoded as UTF-8.
    """
    return percent_decode((value or "").replace("+", " ", 1))


def plain_decode(value, context, options):
    """The default ``decode`` option: delegate to ``options.default_decode``."""
    return options.default_decode(value)


def int_keys_decode(value, context, options):
    """Coerce values of keys matching ``options["int_keys"]`` to ``int``.

    ``int_keys`` may be anything accepted for ``array_keys``.
    """
    value = options.default_decode(value)
    if context is not None and key_predicate(options.get("int_keys"))(context):
        try:
            return int(value)
        except ValueError:
            raise DecodeError(value, f"{context} was not a number") from None
    return value


def plural_keys_decode(value, context, options):
    """Rename keys ending in ``[]`` so they end in ``s`` instead.

    ``id[]=1&id[]=2`` then yields the key ``ids``, which pairs well with an
    ``array_keys`` pattern such as ``^ids$``.
    """
    value = options.default_decode(value)
    if context is None and value.endswith("[]"):
        return value[:-2] + "s"
    return value
