# src/core/errors.py - v1
"""Exception hierarchy shared by the orchestration engine.

Validation and gateway errors end the current run and are surfaced to the
user. Persistence errors are recovered by the store that owns the data.
"""

from __future__ import annotations


class StyleMorphError(Exception):
    """Base class for all stylemorph errors."""


class InputValidationError(StyleMorphError):
    """Run inputs are unusable (no files, or a blank prompt)."""


class PipelineBusyError(StyleMorphError):
    """A run is already in flight."""


class GatewayError(StyleMorphError):
    """The text-generation service failed to produce output."""


class PersistenceError(StyleMorphError):
    """A key-value backend could not read or write a value."""


class TemplateNotFoundError(StyleMorphError, KeyError):
    """No template with the requested id."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class TemplateNotEditableError(StyleMorphError):
    """Built-in templates cannot be renamed or deleted."""


class RunNotFoundError(StyleMorphError, KeyError):
    """No run with the requested id in the run history."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
