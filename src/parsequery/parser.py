"""Query string parsing."""
from parsequery.exceptions import OptionsError
from parsequery.location import current_query
from parsequery.matching import key_predicate, separator
from parsequery import options as _options


def resolve_options(options=None, **fields):
    """Build the options bundle for one call.

    ``options`` may be a query string, a mapping of options, or ``None``.
    Keyword ``fields`` take precedence over ``options``, which takes
    precedence over :data:`parsequery.options.defaults`.
    """
    if isinstance(options, str):
        options = {"query": options}
    elif options is not None and not hasattr(options, "items"):
        raise OptionsError(
            f"options must be a query string or a mapping,"
            f" not {type(options).__name__!r}"
        )
    for layer in (options, fields):
        if layer and "default_decode" in layer and (
            layer["default_decode"] is not _options.defaults.get("default_decode")
        ):
            raise OptionsError(
                "default_decode cannot be replaced for a single call;"
                " pass decode instead"
            )
    config = _options.builtin_defaults().merged(_options.defaults, options, fields)
    if config.get("query") is None:
        config["query"] = current_query()
    return config


def split_token(token):
    """Split a token on its first ``=``.

    The raw value is ``None`` when there is no ``=`` at all, so ``a``
    and ``a=`` stay distinguishable for the decoder.
    """
    key, sep, value = token.partition("=")
    return key, (value if sep else None)


def parse_query(options=None, **fields):
    """Parse a query string into a dict.

    ``options`` is a query string or a mapping of options (see
    :class:`~parsequery.options.ParseOptions`); keyword arguments are
    merged over it. Without a ``query`` the current query string is used
    (see :func:`~parsequery.location.current_query`).

    >>> parse_query("?a=b&c=d")
    {'a': 'b', 'c': 'd'}
    >>> parse_query("a=b&a=c")
    {'a': 'c'}

    Keys matched by ``array_keys`` collect every value in a list::

        >>> parse_query("a[]=b&a[]=c&d=e&d=f", array_keys=r"\\[\\]$")
        {'a[]': ['b', 'c'], 'd': 'f'}

    Any error raised while decoding, including
    :class:`~parsequery.exceptions.DecodeError` for malformed escapes,
    propagates and no mapping is returned.
    """
    config = resolve_options(options, **fields)
    query = config["query"]
    if query.startswith("?"):
        query = query[1:]

    decode = config["decode"]
    is_array_key = key_predicate(config["array_keys"])
    params = {}
    for token in separator(config["separator"]).split(query):
        raw_key, raw_value = split_token(token)
        key = decode(raw_key, None, config)
        if not isinstance(key, str):
            key = str(key)
        value = decode(raw_value, key, config)

        if is_array_key(key):
            params.setdefault(key, []).append(value)
        else:
            params[key] = value
    return params
