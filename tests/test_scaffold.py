"""Smoke tests that verify package wiring.

These tests prove that:
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
* ``python -m cfov`` delegates to the CLI boundary.
"""

from __future__ import annotations

import runpy
import sys

import pytest

from cfov import __version__
from cfov.cli import exit_codes
from cfov.exceptions import (
    USAGE_HINT,
    AspectRatioError,
    CfovError,
    ConflictingDirectionError,
    EnvironmentError,
    GeometricOverflowError,
    InvalidAspectRatioError,
    InvalidFovError,
    MalformedRatioError,
    MissingArgumentsError,
    MissingDirectionError,
    UsageError,
    ZeroHeightError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            AspectRatioError,
            InvalidFovError,
            UsageError,
            GeometricOverflowError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[CfovError]
    ) -> None:
        assert issubclass(exc_class, CfovError)

    @pytest.mark.parametrize(
        "exc_class",
        [MalformedRatioError, ZeroHeightError, InvalidAspectRatioError],
    )
    def test_ratio_errors_share_a_base(self, exc_class: type[CfovError]) -> None:
        assert issubclass(exc_class, AspectRatioError)

    @pytest.mark.parametrize(
        "exc_class",
        [ConflictingDirectionError, MissingDirectionError, MissingArgumentsError],
    )
    def test_usage_errors_point_at_help(self, exc_class: type[UsageError]) -> None:
        err = exc_class("bad usage")
        assert isinstance(err, UsageError)
        assert err.hint == USAGE_HINT

    def test_zero_height_is_not_malformed(self) -> None:
        assert not issubclass(ZeroHeightError, MalformedRatioError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(CfovError, Exception)

    def test_hint_is_stored(self) -> None:
        err = CfovError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = CfovError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# python -m cfov
# ---------------------------------------------------------------------------

class TestModuleEntryPoint:
    def test_runs_cli(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(sys, "argv", ["fov", "-v", "16:9", "90"])
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("cfov", run_name="__main__")
        assert exc_info.value.code == exit_codes.SUCCESS
        assert float(capsys.readouterr().out) == pytest.approx(58.7155, abs=1e-3)
