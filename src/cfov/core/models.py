"""Domain models for cfov.

The value types are **frozen** dataclasses that validate themselves on
construction: once an :class:`AspectRatio` or :class:`FovAngle` exists,
its value is known to be inside the domain.  There is no way to repair
or mutate an invalid instance; construction simply raises.

Parsing from command-line text goes through the ``parse`` classmethods,
which report *why* the text was rejected with a typed exception.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from cfov.exceptions import (
    InvalidAspectRatioError,
    InvalidFovError,
    MalformedRatioError,
    ZeroHeightError,
)

RATIO_SEPARATOR: str = ":"
"""Separator between width and height in the ``W:H`` ratio form."""

MAX_FOV_DEGREES: float = 180.0
"""Largest representable field of view, inclusive."""


def _is_real_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_float(text: str) -> float | None:
    """Return *text* as a float, or ``None`` when it is not a number."""
    if not text.isascii() or "_" in text or text != text.strip():
        return None
    try:
        return float(text)
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Aspect ratio
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AspectRatio:
    """Width divided by height of a viewport or sensor.

    Invariant: ``value`` is finite and strictly positive.
    """

    value: float
    """Ratio of width to height (e.g. ``1.777…`` for 16:9)."""

    def __post_init__(self) -> None:
        if not _is_real_number(self.value):
            raise InvalidAspectRatioError(
                f"Aspect ratio must be a number, got {self.value!r}"
            )
        try:
            value = float(self.value)
        except OverflowError as exc:
            raise InvalidAspectRatioError(
                "Aspect ratio is too large to represent as a float"
            ) from exc
        if not math.isfinite(value) or value <= 0.0:
            raise InvalidAspectRatioError(
                f"Aspect ratio must be positive and finite, got {value!r}"
            )
        object.__setattr__(self, "value", value)

    @classmethod
    def parse(cls, text: str) -> AspectRatio:
        """Build an aspect ratio from ``"1.33"`` or ``"4:3"`` style text.

        Raises
        ------
        MalformedRatioError
            Wrong number of ``:``-separated tokens, or a token that is
            not a number.
        ZeroHeightError
            The ``W:H`` form has a height of zero.
        InvalidAspectRatioError
            The resulting ratio is non-positive or non-finite.
        """
        parts = text.split(RATIO_SEPARATOR)

        if len(parts) == 1:
            value = _parse_float(parts[0])
            if value is None:
                raise MalformedRatioError(
                    f"Unable to parse aspect ratio {text!r} as a number or W:H pair"
                )
            return cls(value)

        if len(parts) != 2:
            raise MalformedRatioError(
                f"Aspect ratio {text!r} must be a single number or a W:H pair"
            )

        width = _parse_float(parts[0])
        if width is None:
            raise MalformedRatioError(
                f"Unable to parse width in aspect ratio {text!r}"
            )
        height = _parse_float(parts[1])
        if height is None:
            raise MalformedRatioError(
                f"Unable to parse height in aspect ratio {text!r}"
            )
        if height == 0.0:
            raise ZeroHeightError(f"Aspect ratio {text!r} has a height of zero")

        try:
            return cls(width / height)
        except InvalidAspectRatioError as exc:
            raise InvalidAspectRatioError(
                f"Aspect ratio {text!r} does not describe a positive, finite ratio"
            ) from exc

    def inverted(self) -> AspectRatio:
        """Return height/width, i.e. the same viewport rotated 90 degrees."""
        return AspectRatio(1.0 / self.value)

    def __float__(self) -> float:
        return self.value


# ---------------------------------------------------------------------------
# Field of view
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FovAngle:
    """A field-of-view angle in degrees.

    Invariant: ``0 < value <= 180`` and finite.
    """

    value: float
    """Angle in degrees."""

    def __post_init__(self) -> None:
        if not _is_real_number(self.value):
            raise InvalidFovError(f"FOV must be a number, got {self.value!r}")
        try:
            value = float(self.value)
        except OverflowError as exc:
            raise InvalidFovError("FOV is too large to represent as a float") from exc
        if not math.isfinite(value) or value <= 0.0 or value > MAX_FOV_DEGREES:
            raise InvalidFovError(
                f"FOV must be greater than 0 and at most "
                f"{MAX_FOV_DEGREES:g} degrees, got {value!r}"
            )
        object.__setattr__(self, "value", value)

    @classmethod
    def parse(cls, text: str) -> FovAngle:
        """Build an FOV from a decimal token such as ``"90"`` or ``"55.4"``."""
        value = _parse_float(text)
        if value is None:
            raise InvalidFovError(
                f"Unable to parse input FOV {text!r} as a floating point number"
            )
        return cls(value)

    @property
    def radians(self) -> float:
        return math.radians(self.value)

    def __float__(self) -> float:
        return self.value


# ---------------------------------------------------------------------------
# Conversion direction / request
# ---------------------------------------------------------------------------

class FovDirection(Enum):
    """Which axis to compute.

    ``VERTICAL`` takes a horizontal FOV as input; ``HORIZONTAL`` takes a
    vertical one.
    """

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True, slots=True)
class ConversionRequest:
    """Everything needed to run one conversion."""

    direction: FovDirection
    ratio: AspectRatio
    fov: FovAngle
