# topmark:header:start
#
#   project      : CallInspect
#   file         : locator.py
#   file_relpath : src/callinspect/core/locator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source location lookup for functions, methods and classes.

[`Locator`][callinspect.core.locator.Locator] is the capability the inspector
depends on; [`InspectLocator`][callinspect.core.locator.InspectLocator] is the
default implementation, built on the standard `inspect` module. Tests and
embedders may supply their own.
"""

from __future__ import annotations

import inspect
from typing import Any, Protocol

from callinspect.config.logging import CallInspectLogger, get_logger
from callinspect.core.model import SourceLocation

logger: CallInspectLogger = get_logger(__name__)


class Locator(Protocol):
    """Reports where a function, method or class is defined."""

    def locate(self, ref: Any) -> SourceLocation | None:
        """Return the definition site of ``ref``.

        Args:
            ref (Any): A function, method, class or ``__call__`` implementation.

        Returns:
            SourceLocation | None: The location; its fields are None when ``ref`` has
            no source (builtins). None means ``ref`` cannot be introspected.

        Raises:
            Exception: Implementations may raise when ``ref`` cannot be resolved;
                callers treat any exception like a None result.
        """
        ...


def is_pseudo_filename(filename: str) -> bool:
    """Return True for names like ``"<string>"`` or ``"<stdin>"`` that are not real files."""
    return filename.startswith("<") and filename.endswith(">")


class InspectLocator:
    """[`Locator`][callinspect.core.locator.Locator] backed by the `inspect` module.

    - Decorated callables are unwrapped (``__wrapped__``) first.
    - Bound methods are located through their underlying function.
    - Functions report ``co_filename`` and ``co_firstlineno``; the first line of a
      decorated function is the line of its first decorator.
    - Classes report their source file and the first line of the ``class`` block.
    - Builtins and other callables without code objects have no location.
    """

    def locate(self, ref: Any) -> SourceLocation | None:
        """Return the definition site of ``ref``.

        Args:
            ref (Any): A function, method, class or ``__call__`` implementation.

        Returns:
            SourceLocation | None: The location; empty for callables without source.

        Raises:
            ValueError: If unwrapping ``ref`` runs into a cycle.
        """
        obj: Any = inspect.unwrap(ref)
        if inspect.ismethod(obj):
            obj = inspect.unwrap(obj.__func__)

        if inspect.isclass(obj):
            return self._locate_class(obj)

        code: Any = getattr(obj, "__code__", None)
        if code is None:
            logger.trace("No code object for %r", obj)
            return SourceLocation()

        filename: str = code.co_filename
        if is_pseudo_filename(filename):
            return SourceLocation(file=None, line=code.co_firstlineno)
        return SourceLocation(file=filename, line=code.co_firstlineno)

    def _locate_class(self, cls: type) -> SourceLocation:
        try:
            filename: str = inspect.getfile(cls)
        except TypeError:
            # Builtin classes have no file.
            return SourceLocation()
        if is_pseudo_filename(filename):
            return SourceLocation()

        try:
            _lines, line = inspect.getsourcelines(cls)
        except (OSError, TypeError, IndexError) as exc:
            logger.debug("No source lines for %r: %s", cls, exc)
            return SourceLocation(file=filename)
        return SourceLocation(file=filename, line=line or None)


#: Shared default locator.
DEFAULT_LOCATOR: Locator = InspectLocator()
