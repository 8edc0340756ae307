"""Custom exception hierarchy for cfov.

All exceptions that cross layer boundaries must inherit from
:class:`CfovError`.  The core layer raises them at the point where an
input is found to be invalid; only the CLI error boundary turns them
into a message and an exit code.

Hierarchy
---------
CfovError
├── AspectRatioError
│   ├── MalformedRatioError
│   ├── ZeroHeightError
│   └── InvalidAspectRatioError
├── InvalidFovError
├── UsageError
│   ├── ConflictingDirectionError
│   ├── MissingDirectionError
│   └── MissingArgumentsError
├── GeometricOverflowError
└── EnvironmentError
"""

from __future__ import annotations

USAGE_HINT: str = "Use --help for usage information."


class CfovError(Exception):
    """Base exception for all cfov errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Aspect ratio ----------------------------------------------------------

class AspectRatioError(CfovError):
    """Base for every aspect-ratio parse or validation failure."""


class MalformedRatioError(AspectRatioError):
    """Raised when a ratio string has the wrong token count or a non-numeric token."""


class ZeroHeightError(AspectRatioError):
    """Raised when a ``W:H`` ratio has a height of zero."""


class InvalidAspectRatioError(AspectRatioError):
    """Raised when a ratio value is non-positive or non-finite."""


# --- Field of view ---------------------------------------------------------

class InvalidFovError(CfovError):
    """Raised when an FOV is unparsable, non-finite, <= 0 or > 180 degrees."""


# --- Command-line usage ----------------------------------------------------

class UsageError(CfovError):
    """Base for command-line usage mistakes.

    Usage errors carry a pointer to ``--help`` unless a more specific
    hint is supplied.
    """

    def __init__(self, message: str, *, hint: str | None = USAGE_HINT) -> None:
        super().__init__(message, hint=hint)


class ConflictingDirectionError(UsageError):
    """Raised when both ``--vertical`` and ``--horizontal`` are given."""


class MissingDirectionError(UsageError):
    """Raised when neither ``--vertical`` nor ``--horizontal`` is given."""


class MissingArgumentsError(UsageError):
    """Raised when the aspect ratio and FOV positionals are not both present."""


# --- Conversion ------------------------------------------------------------

class GeometricOverflowError(CfovError):
    """Raised when a computed FOV falls outside the valid FOV domain."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CfovError):
    """Raised when an optional runtime dependency is not available."""
