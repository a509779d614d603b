# topmark:header:start
#
#   project      : CallInspect
#   file         : errors.py
#   file_relpath : src/callinspect/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the CallInspect library.

Only construction can fail: query methods on
[`CallableInspector`][callinspect.inspector.CallableInspector] degrade to empty
results instead of raising.
"""

from __future__ import annotations


class CallInspectError(Exception):
    """Base class for all CallInspect library errors."""


class InvalidArgumentError(CallInspectError, TypeError):
    """Raised when a value handed to `from_value` is not callable.

    Attributes:
        value (object): The rejected value.
    """

    def __init__(self, value: object, message: str = "The provided argument is not callable.") -> None:
        super().__init__(message)
        self.value = value


class ConfigError(CallInspectError, ValueError):
    """Raised when a configuration value cannot be interpreted."""
