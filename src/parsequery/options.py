"""The configuration bundle handed to the parser and to decode functions."""
import logging
import os
import re

from werkzeug.utils import import_string

from parsequery.decoders import default_decode, plain_decode

logger = logging.getLogger(__name__)

#: Names of the options the parser itself understands. Any other key is
#: carried along for custom decode functions.
OPTION_NAMES = ("query", "separator", "decode", "default_decode", "array_keys")


class ParseOptions(dict):
    """A dict of parse options, also readable as attributes.

    Besides the recognised options (``separator``, ``decode``,
    ``default_decode``, ``array_keys`` and ``query``) a bundle may carry any
    field a custom ``decode`` function wants to read, e.g.::

        options = ParseOptions(decode=int_keys_decode, int_keys=r"_id$")
        parse_query(options.merged(query="a_id=1&b_id=2"))
    """

    def __init__(self, defaults=None, **kwargs):
        super().__init__(defaults or {})
        self.update(kwargs)

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no option {name!r}"
            ) from None

    def __setattr__(self, name, value):
        self[name] = value

    def __delattr__(self, name):
        try:
            del self[name]
        except KeyError:
            raise AttributeError(name) from None

    def copy(self):
        return type(self)(self)

    def merged(self, *layers, **fields):
        """Return a new bundle with each layer applied over this one in order."""
        rv = self.copy()
        for layer in layers:
            if layer:
                rv.from_mapping(layer)
        rv.from_mapping(fields)
        return rv

    def from_mapping(self, mapping=None, **kwargs):
        """Update options from a mapping, an iterable of pairs or keywords.

        Returns True.
        """
        if mapping is not None:
            if hasattr(mapping, "items"):
                for key, value in mapping.items():
                    self[key] = value
            else:
                for key, value in mapping:
                    self[key] = value
        for key, value in kwargs.items():
            self[key] = value
        return True

    def from_object(self, obj):
        """Update options from an object's attributes.

        The object can be a module, a class or an instance; a string is
        imported first. Attributes named like a recognised option are
        loaded, as is every name listed in the object's ``__all__``.
        Returns True.
        """
        if isinstance(obj, str):
            obj = import_string(obj)
        names = set(OPTION_NAMES) | set(getattr(obj, "__all__", ()))
        for key in sorted(names):
            if hasattr(obj, key):
                self[key] = getattr(obj, key)
        return True

    def from_prefixed_env(self, prefix="PARSEQUERY"):
        """Update options from environment variables with the given prefix.

        ``PARSEQUERY_SEPARATOR`` is used as a literal separator,
        ``PARSEQUERY_SEPARATOR_PATTERN`` and ``PARSEQUERY_ARRAY_KEYS`` are
        compiled as regular expressions, and ``PARSEQUERY_DECODE`` is a
        ``module:function`` import path. Any other variable is stored
        under its lowercased suffix as a plain string.
        """
        prefix = prefix + "_"
        plen = len(prefix)
        for key, value in sorted(os.environ.items()):
            if not key.startswith(prefix):
                continue
            name = key[plen:].lower()
            if name == "separator_pattern":
                self["separator"] = re.compile(value)
            elif name == "array_keys":
                self["array_keys"] = re.compile(value)
            elif name == "decode":
                self["decode"] = import_string(value)
            else:
                self[name] = value
            logger.debug("Loaded option %r from %s", name, key)
        return True

    def __repr__(self):
        return f"<ParseOptions {dict.__repr__(self)}>"


def builtin_defaults():
    """The options a call falls back to when nothing else sets them."""
    return ParseOptions(
        separator="&",
        decode=plain_decode,
        default_decode=default_decode,
        array_keys=None,
    )


#: Process-wide defaults merged under every call's options. Changing them
#: affects all later calls that do not set the same option; changes made
#: while another thread is parsing are last-write-wins.
defaults = builtin_defaults()


def reset_defaults():
    """Restore :data:`defaults` to the built-in options."""
    defaults.clear()
    defaults.update(builtin_defaults())
