"""Core layer: value types and pure conversion math.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from cfov.core.conversion import (
    convert,
    horizontal_from_vertical,
    run,
    vertical_from_horizontal,
)
from cfov.core.models import AspectRatio, ConversionRequest, FovAngle, FovDirection

__all__: list[str] = [
    "AspectRatio",
    "ConversionRequest",
    "FovAngle",
    "FovDirection",
    "convert",
    "horizontal_from_vertical",
    "run",
    "vertical_from_horizontal",
]
