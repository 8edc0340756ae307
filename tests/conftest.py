"""Shared pytest fixtures and configuration for the cfov test suite.

Guidelines
----------
* Core tests must be pure, with no side effects.
* CLI tests drive :func:`cfov.cli.app.main` with an explicit argv list.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import pytest

from cfov.core.models import AspectRatio


@pytest.fixture
def ratio_4_3() -> AspectRatio:
    return AspectRatio.parse("4:3")


@pytest.fixture
def ratio_16_9() -> AspectRatio:
    return AspectRatio.parse("16:9")
