# topmark:header:start
#
#   project      : CallInspect
#   file         : inspector.py
#   file_relpath : src/callinspect/inspector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Describe which callable is behind a value.

[`CallableInspector`][callinspect.inspector.CallableInspector] wraps a callable
value (function, lambda, bound method, class, invokable object, or a string /
pair reference to one) and reports a display name and the place where it is
defined:

```python
from callinspect import from_value

inspector = from_value(("datetime.datetime", "strptime"))
inspector.format_name()  # "datetime.datetime::strptime"
from_value("len").get_file_name_and_line_number()  # "" (builtin)
```

Only [`from_value`][callinspect.inspector.from_value] can fail. Source lookups
are performed lazily, at most once per inspector, and never raise: a callable
that cannot be introspected reports ``""`` and ``0``.
"""

from __future__ import annotations

import inspect
import threading
from typing import TYPE_CHECKING, Any

from callinspect.config.logging import CallInspectLogger, get_logger
from callinspect.constants import (
    CLOSURE_NAME,
    INSTANCE_SEPARATOR,
    LOCATION_SEPARATOR,
    STATIC_SEPARATOR,
    UNKNOWN_NAME,
)
from callinspect.core.classify import classify, is_callable_value, reflection_target
from callinspect.core.locator import DEFAULT_LOCATOR
from callinspect.core.model import CallableDescription, CallableKind, CallableShape
from callinspect.errors import InvalidArgumentError
from callinspect.utils.introspection import qualified_callable_name, qualified_type_name

if TYPE_CHECKING:
    from callinspect.core.locator import Locator
    from callinspect.core.model import SourceLocation

logger: CallInspectLogger = get_logger(__name__)


class CallableInspector:
    """Inspect a callable value without calling it.

    The value is classified once at construction. Its source location is looked
    up on first use and cached, whether the lookup succeeded or not.

    Args:
        value (Any): The callable value. It is not validated; use
            [`from_value`][callinspect.inspector.CallableInspector.from_value] to reject
            non-callable input.
        locator (Locator | None): Source location lookup; defaults to
            [`InspectLocator`][callinspect.core.locator.InspectLocator].
    """

    def __init__(self, value: Any, *, locator: Locator | None = None) -> None:
        self._value: Any = value
        self._shape: CallableShape = classify(value)
        self._locator: Locator = locator if locator is not None else DEFAULT_LOCATOR

        self._lock = threading.Lock()
        self._reflection_attempted: bool = False
        self._reflection: SourceLocation | None = None

    @classmethod
    def from_value(cls, value: Any, *, locator: Locator | None = None) -> CallableInspector:
        """Create an inspector for a callable value.

        Args:
            value (Any): A callable object, a function reference string (``"len"``,
                ``"os.path.join"``, ``"Type::member"``) or a ``(target, method_name)`` pair.
            locator (Locator | None): Optional source location lookup.

        Returns:
            CallableInspector: A new inspector; no lookup has been performed yet.

        Raises:
            InvalidArgumentError: If ``value`` is not callable.
        """
        if not is_callable_value(value):
            raise InvalidArgumentError(value)
        return cls(value, locator=locator)

    @property
    def value(self) -> Any:
        """The wrapped callable value."""
        return self._value

    @property
    def shape(self) -> CallableShape:
        """The classified value."""
        return self._shape

    @property
    def kind(self) -> CallableKind:
        """The shape of the wrapped value."""
        return self._shape.kind

    @property
    def reflection_attempted(self) -> bool:
        """Whether the source location has been looked up."""
        return self._reflection_attempted

    def format_name(self) -> str:
        """Get a formatted name for this callable.

        Examples:
            - ``"len"`` for the string ``"len"`` (strings are returned as-is).
            - ``"Foo::bar"`` for a static binding, ``(Foo, "bar")`` or ``Foo.classmethod``.
            - ``"Foo->bar"`` for an instance binding, ``(Foo(), "bar")`` or ``Foo().bar``.
            - ``"{closure}"`` for a lambda.
            - ``"pkg.mod.func"`` for a named function.
            - ``"pkg.mod.Foo"`` for a class, or for an instance of an invokable class ``Foo``.

        Returns:
            str: The formatted name; ``"unknown"`` for unclassifiable values.
        """
        kind: CallableKind = self._shape.kind
        target: Any = self._shape.target

        if kind == CallableKind.STRING:
            return target
        if kind == CallableKind.PAIR:
            return _format_binding(target, str(self._shape.member))
        if kind == CallableKind.CLOSURE:
            return CLOSURE_NAME
        if kind == CallableKind.FUNCTION:
            return qualified_callable_name(target)
        if kind == CallableKind.METHOD:
            return _format_binding(target.__self__, _method_name(target))
        if kind == CallableKind.CLASS:
            return qualified_type_name(target)
        if kind == CallableKind.OBJECT:
            return qualified_type_name(type(target))
        return UNKNOWN_NAME

    def get_reflection(self) -> SourceLocation | None:
        """Return the source location of this callable, looking it up on first use.

        Returns:
            SourceLocation | None: The cached location, or None if the callable
            cannot be introspected.
        """
        if self._reflection_attempted:
            return self._reflection

        with self._lock:
            if not self._reflection_attempted:
                self._reflection = self._resolve()
                self._reflection_attempted = True
        return self._reflection

    def _resolve(self) -> SourceLocation | None:
        try:
            ref: Any = reflection_target(self._shape)
            if ref is None:
                logger.trace("Nothing to introspect for %s", self.format_name())
                return None
            return self._locator.locate(ref)
        except Exception as exc:  # noqa: BLE001 - lookups degrade to "no location"
            logger.debug("Cannot locate %s: %s: %s", self.format_name(), type(exc).__name__, exc)
            return None

    def get_file_name(self) -> str:
        """Get the full path to the file where the callable is defined.

        Returns:
            str: The file name with forward slashes, or an empty string if the
            callable is not defined in a file (e.g. a builtin function).
        """
        location: SourceLocation | None = self.get_reflection()
        if location is None or not location.file:
            return ""
        # Normalize directory separators.
        return location.file.replace("\\", "/")

    def get_start_line(self) -> int:
        """Get the line number where the callable is defined.

        Returns:
            int: The 1-based line number, or 0 if the callable is not defined in a file
            or the line number cannot be determined.
        """
        location: SourceLocation | None = self.get_reflection()
        if location is None or not location.line:
            return 0
        return location.line

    def get_file_name_and_line_number(self) -> str:
        """Get the file name and line number of the callable, formatted as ``"/path/to/file.py:123"``.

        Returns:
            str: The file name and line number, or an empty string unless both are known.
        """
        file_name: str = self.get_file_name()
        line_number: int = self.get_start_line()

        if file_name == "" or line_number == 0:
            return ""
        return f"{file_name}{LOCATION_SEPARATOR}{line_number}"

    def describe(self) -> CallableDescription:
        """Return a snapshot of the name, kind and location of this callable."""
        return CallableDescription(
            name=self.format_name(),
            kind=self.kind,
            file=self.get_file_name(),
            line=self.get_start_line(),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.format_name()!r}, kind={self.kind.value!r})"

    def __str__(self) -> str:
        location: str = self.get_file_name_and_line_number()
        name: str = self.format_name()
        return f"{name} ({location})" if location else name


def _format_binding(target: Any, member: str) -> str:
    if isinstance(target, str):
        return f"{target}{STATIC_SEPARATOR}{member}"
    if inspect.isclass(target):
        return f"{qualified_type_name(target)}{STATIC_SEPARATOR}{member}"
    return f"{qualified_type_name(type(target))}{INSTANCE_SEPARATOR}{member}"


def _method_name(method: Any) -> str:
    name: str | None = getattr(method, "__name__", None)
    if name is None:
        # A bound callable object that has no name of its own.
        return qualified_type_name(type(method.__func__))
    return name


def from_value(value: Any, *, locator: Locator | None = None) -> CallableInspector:
    """Create a [`CallableInspector`][callinspect.inspector.CallableInspector] for a callable value.

    Args:
        value (Any): A callable object, a function reference string or a
            ``(target, method_name)`` pair.
        locator (Locator | None): Optional source location lookup.

    Returns:
        CallableInspector: The inspector.

    Raises:
        InvalidArgumentError: If ``value`` is not callable.
    """
    return CallableInspector.from_value(value, locator=locator)
