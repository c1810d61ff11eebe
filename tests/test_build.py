"""The package imports and exposes its public API."""


def test_import_parsequery():
    import parsequery
    assert parsequery is not None


def test_version_string():
    import parsequery
    assert isinstance(parsequery.__version__, str)
    assert parsequery.__version__ == "1.0.0"


def test_public_names():
    import parsequery
    for name in parsequery.__all__:
        assert hasattr(parsequery, name), name
