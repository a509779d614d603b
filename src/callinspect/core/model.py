# topmark:header:start
#
#   project      : CallInspect
#   file         : model.py
#   file_relpath : src/callinspect/core/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value types shared by the classifier, the locators and the inspector.

- [`CallableKind`][callinspect.core.model.CallableKind]: the shape of a callable value.
- [`CallableShape`][callinspect.core.model.CallableShape]: the classified value, computed once.
- [`SourceLocation`][callinspect.core.model.SourceLocation]: where a callable is defined.
- [`CallableDescription`][callinspect.core.model.CallableDescription]: a rendered snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from callinspect.constants import LOCATION_SEPARATOR


class CallableKind(str, Enum):
    """Shape of a callable value.

    Attributes:
        STRING: A string naming a function (``"len"``, ``"os.path.join"``) or a
            static member (``"datetime.datetime::strptime"``).
        PAIR: A ``(target, method_name)`` pair; ``target`` is an instance, a class,
            or a class path string.
        CLOSURE: An anonymous function (``lambda``).
        FUNCTION: A named Python or builtin function.
        METHOD: A bound method (instance or class binding).
        CLASS: A class object.
        OBJECT: Any other object implementing ``__call__``.
        UNKNOWN: Not a recognized callable shape.
    """

    STRING = "string"
    PAIR = "pair"
    CLOSURE = "closure"
    FUNCTION = "function"
    METHOD = "method"
    CLASS = "class"
    OBJECT = "object"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CallableShape:
    """A classified callable value.

    Attributes:
        kind (CallableKind): The shape of the value.
        target (Any): The function, object, class or pair target; the string itself for
            ``STRING``.
        member (str | None): The method name of a ``PAIR`` (None for other shapes).
    """

    kind: CallableKind
    target: Any
    member: str | None = None


@dataclass(frozen=True)
class SourceLocation:
    """Where a callable is defined.

    Attributes:
        file (str | None): Path of the defining file, None when the callable has no
            source file (builtins, C extensions, code compiled from a string).
        line (int | None): 1-based first line of the definition, None when unknown.
    """

    file: str | None = None
    line: int | None = None


@dataclass(frozen=True)
class CallableDescription:
    """Snapshot of everything an inspector reports about its callable.

    Attributes:
        name (str): The formatted name.
        kind (CallableKind): The classified shape.
        file (str): The normalized defining file, or ``""``.
        line (int): The start line, or ``0``.
    """

    name: str
    kind: CallableKind
    file: str
    line: int

    @property
    def location(self) -> str:
        """``"file:line"``, or ``""`` unless both parts are known."""
        if self.file == "" or self.line == 0:
            return ""
        return f"{self.file}{LOCATION_SEPARATOR}{self.line}"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this description."""
        return {
            "name": self.name,
            "kind": self.kind.value,
            "file": self.file,
            "line": self.line,
            "location": self.location,
        }
