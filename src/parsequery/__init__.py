"""parsequery — parse URL query strings into dicts."""

from parsequery.decoders import (
    default_decode,
    int_keys_decode,
    plain_decode,
    plural_keys_decode,
)
from parsequery.exceptions import DecodeError, OptionsError
from parsequery.location import QueryStringMiddleware, bind_query, current_query
from parsequery.options import ParseOptions, defaults, reset_defaults
from parsequery.parser import parse_query

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "parse_query",
    "ParseOptions",
    "defaults",
    "reset_defaults",
    "DecodeError",
    "OptionsError",
    "default_decode",
    "plain_decode",
    "int_keys_decode",
    "plural_keys_decode",
    "current_query",
    "bind_query",
    "QueryStringMiddleware",
]
