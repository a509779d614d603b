# topmark:header:start
#
#   project      : CallInspect
#   file         : __init__.py
#   file_relpath : src/callinspect/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CallInspect package.

CallInspect describes callables for diagnostics: given a function, method,
lambda, invokable object, or a string / pair reference to one, it reports a
display name and the ``file:line`` where the callable is defined, without ever
calling it. It ships a small typed API and a CLI.
"""

from __future__ import annotations

from callinspect.core.classify import classify, is_callable_value
from callinspect.core.locator import InspectLocator, Locator
from callinspect.core.model import CallableDescription, CallableKind, CallableShape, SourceLocation
from callinspect.errors import CallInspectError, InvalidArgumentError
from callinspect.inspector import CallableInspector, from_value

__all__ = [
    "CallInspectError",
    "CallableDescription",
    "CallableInspector",
    "CallableKind",
    "CallableShape",
    "InspectLocator",
    "InvalidArgumentError",
    "Locator",
    "SourceLocation",
    "classify",
    "from_value",
    "is_callable_value",
]
