"""cfov: horizontal / vertical field-of-view converter.

Converts a field-of-view angle along one axis into the matching angle
along the other axis, given the aspect ratio of the viewport.
"""

from cfov.version import __version__

__all__: list[str] = ["__version__"]
