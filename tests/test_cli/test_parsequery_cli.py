"""Tests for the parsequery command line."""
import json

from click.testing import CliRunner

from parsequery.cli import main


def invoke(*args, **kwargs):
    runner = CliRunner()
    return runner.invoke(main, list(args), **kwargs)


class TestCli:
    def test_parses_argument(self):
        result = invoke("a=b&c=d")
        assert result.exit_code == 0
        assert json.loads(result.output) == {"a": "b", "c": "d"}

    def test_non_ascii_output(self):
        result = invoke("%C3%A6=ae")
        assert result.exit_code == 0
        assert "æ" in result.output

    def test_sorted_output(self):
        result = invoke("b=1&a=2", "--sort")
        assert result.output.strip() == '{"a": "2", "b": "1"}'

    def test_array_keys(self):
        result = invoke("a[]=b&a[]=c&d=e&d=f", "--array-keys", r"\[\]$")
        assert json.loads(result.output) == {"a[]": ["b", "c"], "d": "f"}

    def test_separator(self):
        result = invoke("a=1;b=2", "--separator", ";")
        assert json.loads(result.output) == {"a": "1", "b": "2"}

    def test_separator_pattern(self):
        result = invoke("a=1;b=2&c=3", "--separator-pattern", "[&;]")
        assert json.loads(result.output) == {"a": "1", "b": "2", "c": "3"}

    def test_decode_and_extra_options(self):
        result = invoke("a_id=1&name=x",
                        "--decode", "parsequery.decoders:int_keys_decode",
                        "--set", "int_keys=_id$")
        assert json.loads(result.output) == {"a_id": 1, "name": "x"}

    def test_query_from_environment(self):
        result = invoke(env={"QUERY_STRING": "?x=y"})
        assert json.loads(result.output) == {"x": "y"}

    def test_options_from_prefixed_env(self):
        result = invoke("a=1;b=2", env={"PARSEQUERY_SEPARATOR": ";"})
        assert json.loads(result.output) == {"a": "1", "b": "2"}


class TestCliErrors:
    def test_decode_error(self):
        result = invoke("a=%")
        assert result.exit_code == 1
        assert "URI malformed" in result.output

    def test_bad_regex(self):
        result = invoke("a=1", "--array-keys", "(")
        assert result.exit_code == 2
        assert "invalid regular expression" in result.output

    def test_bad_import(self):
        result = invoke("a=1", "--decode", "parsequery.nope:decode")
        assert result.exit_code == 2

    def test_bad_set(self):
        result = invoke("a=1", "--set", "novalue")
        assert result.exit_code == 2
        assert "NAME=VALUE" in result.output


class TestCliDebug:
    def test_debug_logs_options(self):
        result = invoke("a=1", "--debug")
        assert result.exit_code == 0


class TestCliOptionErrors:
    def test_default_decode_override(self):
        result = invoke("a=1", "--set", "default_decode=x")
        assert result.exit_code == 2
        assert "default_decode cannot be replaced" in result.output

    def test_empty_separator(self):
        result = invoke("a=1", "--separator", "")
        assert result.exit_code == 2
        assert "separator must not be empty" in result.output

    def test_default_decode_from_environment(self):
        result = invoke("a=1", env={"PARSEQUERY_DEFAULT_DECODE": "x"})
        assert result.exit_code == 2
