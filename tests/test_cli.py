"""Tests for the command-line layer (cli/app.py, cli/loader.py, cli/describe.py).

Commands run through ``main(argv)`` against ``http.HTTPStatus`` (an
``IntEnum`` from the standard library), so no fixture modules are
needed on the import path.
"""

from __future__ import annotations

from decimal import Decimal
from http import HTTPStatus

import pytest

from value_converter.cli import exit_codes
from value_converter.cli.app import cli, main
from value_converter.cli.describe import member_rows
from value_converter.cli.loader import resolve_type
from value_converter.exceptions import (
    InvalidArgumentError,
    NotBoundedTypeError,
    TypeResolutionError,
)


# ---------------------------------------------------------------------------
# Type resolution
# ---------------------------------------------------------------------------

class TestResolveType:
    @pytest.mark.parametrize(
        ("reference", "expected"),
        [("int", int), ("Decimal", Decimal), ("bool", bool), ("http:HTTPStatus", HTTPStatus)],
    )
    def test_resolves(self, reference: str, expected: type) -> None:
        assert resolve_type(reference) is expected

    @pytest.mark.parametrize(
        "reference",
        [
            "HTTPStatus",
            ":HTTPStatus",
            "http:",
            "http:NoSuchThing",
            "no_such_module_xyz:Thing",
            "http:HTTPStatus.OK",
        ],
    )
    def test_invalid(self, reference: str) -> None:
        with pytest.raises(TypeResolutionError):
            resolve_type(reference)


# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------

class TestRouting:
    def test_no_args_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == exit_codes.SUCCESS
        assert "describe" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0


# ---------------------------------------------------------------------------
# parse
# ---------------------------------------------------------------------------

class TestParseCommand:
    def test_name(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["parse", "http:HTTPStatus", "NOT_FOUND"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "NOT_FOUND"

    def test_code_prints_canonical_name(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["parse", "http:HTTPStatus", "404"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "NOT_FOUND"

    def test_no_codes(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["parse", "http:HTTPStatus", "404", "--no-codes"])
        assert code == exit_codes.NO_VALUE
        assert capsys.readouterr().out == ""

    def test_ignore_case(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["parse", "http:HTTPStatus", "not_found", "--ignore-case"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "NOT_FOUND"

    def test_unmapped_without_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["parse", "http:HTTPStatus", "999"]) == exit_codes.NO_VALUE
        assert "No value" in capsys.readouterr().err

    def test_unmapped_with_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["parse", "http:HTTPStatus", "999", "--default", "unknown"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "unknown"

    def test_primitive(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["parse", "int", "0x10"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "16"

    def test_primitive_false_is_a_value(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["parse", "bool", "false"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "False"

    def test_malformed_primitive(self) -> None:
        assert main(["parse", "float", "abc"]) == exit_codes.NO_VALUE


# ---------------------------------------------------------------------------
# code
# ---------------------------------------------------------------------------

class TestCodeCommand:
    def test_declared(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["code", "http:HTTPStatus", "200"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "OK"

    def test_unmapped_uses_default_member(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["code", "http:HTTPStatus", "999", "--default", "INTERNAL_SERVER_ERROR"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "INTERNAL_SERVER_ERROR"

    def test_unmapped_without_default(self) -> None:
        assert main(["code", "http:HTTPStatus", "-1"]) == exit_codes.NO_VALUE

    @pytest.mark.parametrize("default", ["NOPE", "ok"])
    def test_unknown_default_is_usage_error(self, default: str) -> None:
        with pytest.raises(InvalidArgumentError, match="--default"):
            main(["code", "http:HTTPStatus", "200", "--default", default])

    def test_primitive_type_is_usage_error(self) -> None:
        with pytest.raises(NotBoundedTypeError):
            main(["code", "int", "1"])


# ---------------------------------------------------------------------------
# describe
# ---------------------------------------------------------------------------

class TestDescribeCommand:
    def test_rows(self) -> None:
        rows = member_rows(HTTPStatus)
        assert ("OK", "200", "200", "") in rows

    def test_renders_members(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["describe", "http:HTTPStatus"]) == exit_codes.SUCCESS
        assert "NOT_FOUND" in capsys.readouterr().err

    def test_non_enum(self) -> None:
        with pytest.raises(NotBoundedTypeError):
            main(["describe", "int"])


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_known_error_exits_general(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.argv", ["value-converter", "describe", "nope:Nothing"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert "Error" in capsys.readouterr().err

    def test_success_exit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.argv", ["value-converter", "parse", "int", "7"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.SUCCESS

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from value_converter.cli import app as app_module

        def _interrupt(argv: list[str] | None = None) -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "main", _interrupt)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from value_converter.cli import app as app_module

        def _boom(argv: list[str] | None = None) -> int:
            raise RuntimeError("boom")

        monkeypatch.setattr(app_module, "main", _boom)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR
