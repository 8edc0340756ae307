"""Pure horizontal/vertical FOV conversion.

For a pinhole camera with a rectangular viewport, the half-angle
tangents along the two axes scale with the viewport's width and height:

    tan(hfov / 2) / tan(vfov / 2) == width / height

so each direction is one ``atan`` away from the other.  Every function
here is deterministic and side-effect free.

Results are handed back to :class:`~cfov.core.models.FovAngle`, so an
angle that the geometry pushes out of ``(0, 180]`` surfaces as
:class:`~cfov.exceptions.GeometricOverflowError` instead of a
meaningless number.
"""

from __future__ import annotations

import math

from cfov.core.models import AspectRatio, ConversionRequest, FovAngle, FovDirection
from cfov.exceptions import GeometricOverflowError, InvalidFovError


def _scale_fov(fov: FovAngle, factor: float) -> FovAngle:
    """Return ``2 * atan(tan(fov / 2) * factor)`` as a validated angle."""
    half_tangent = math.tan(fov.radians / 2.0) * factor
    degrees = math.degrees(2.0 * math.atan(half_tangent))
    try:
        return FovAngle(degrees)
    except InvalidFovError as exc:
        raise GeometricOverflowError(
            f"Converting {fov.value!r} degrees gives {degrees!r}, "
            f"which is not a valid field of view",
            hint="Check that the aspect ratio is not extremely large or small.",
        ) from exc


def vertical_from_horizontal(ratio: AspectRatio, hfov: FovAngle) -> FovAngle:
    """Compute the vertical FOV matching *hfov* at *ratio* (width/height)."""
    return _scale_fov(hfov, 1.0 / ratio.value)


def horizontal_from_vertical(ratio: AspectRatio, vfov: FovAngle) -> FovAngle:
    """Compute the horizontal FOV matching *vfov* at *ratio* (width/height)."""
    return _scale_fov(vfov, ratio.value)


def convert(ratio: AspectRatio, fov: FovAngle, direction: FovDirection) -> FovAngle:
    """Compute the FOV along the *direction* axis from the other axis' *fov*."""
    if direction is FovDirection.VERTICAL:
        return vertical_from_horizontal(ratio, fov)
    return horizontal_from_vertical(ratio, fov)


def run(request: ConversionRequest) -> FovAngle:
    """Execute a :class:`ConversionRequest`."""
    return convert(request.ratio, request.fov, request.direction)
