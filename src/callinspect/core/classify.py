# topmark:header:start
#
#   project      : CallInspect
#   file         : classify.py
#   file_relpath : src/callinspect/core/classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Classification of callable values and resolution of callable references.

A callable value is one of:

- a string naming a function: a builtin (``"len"``) or a dotted import path
  (``"os.path.join"``);
- a string naming a static member, ``"Type::member"``, where ``Type`` is a
  builtin class or a dotted class path (``"datetime.datetime::strptime"``);
- a ``(target, method_name)`` pair, ``target`` being an instance, a class, or a
  class path string;
- any object the interpreter can call (functions, lambdas, bound methods,
  classes, objects implementing ``__call__``).

Resolving a string reference imports the module it names.
"""

from __future__ import annotations

import builtins
import importlib
import inspect
from typing import Any

from callinspect.config.logging import CallInspectLogger, get_logger
from callinspect.constants import STATIC_SEPARATOR
from callinspect.core.model import CallableKind, CallableShape

logger: CallInspectLogger = get_logger(__name__)

_LAMBDA_NAME = "<lambda>"


def import_string(name: str) -> Any:
    """Resolve a builtin name or a dotted import path to an object.

    ``"len"`` resolves to the builtin; ``"os.path.join"`` imports the longest
    importable module prefix (``os.path``) and walks the remaining attributes.

    Args:
        name (str): The reference to resolve.

    Returns:
        Any: The referenced object.

    Raises:
        ImportError: If no module prefix of ``name`` can be imported, or if a bare
            name is not a builtin.
        AttributeError: If an attribute after the module prefix is missing.
    """
    if not name:
        raise ImportError("Empty reference")

    parts: list[str] = name.split(".")
    if len(parts) == 1:
        try:
            return getattr(builtins, name)
        except AttributeError:
            raise ImportError(f"No builtin named {name!r}") from None

    for i in range(len(parts) - 1, 0, -1):
        module_name: str = ".".join(parts[:i])
        try:
            obj: Any = importlib.import_module(module_name)
        except ModuleNotFoundError:
            continue
        for attr in parts[i:]:
            obj = getattr(obj, attr)
        return obj

    raise ImportError(f"Cannot import any module from {name!r}")


def split_static_reference(ref: str) -> tuple[str, str]:
    """Split ``"Type::member"`` into ``("Type", "member")``.

    Anything after a second separator is ignored.
    """
    parts: list[str] = ref.split(STATIC_SEPARATOR)
    return parts[0], parts[1]


def resolve_owner(target: Any) -> Any:
    """Return the object a pair or static reference looks its member up on."""
    if isinstance(target, str):
        return import_string(target)
    return target


def resolve_string_reference(ref: str) -> Any:
    """Resolve a function name or a ``"Type::member"`` string to the referenced object.

    The left side of a static reference is resolved on a best-effort basis: any
    object holding the attribute is accepted, class or not.

    Args:
        ref (str): The string reference.

    Returns:
        Any: The referenced object.

    Raises:
        ImportError: If a module part cannot be imported.
        AttributeError: If the named attribute does not exist.
    """
    if STATIC_SEPARATOR in ref:
        owner_name, member = split_static_reference(ref)
        return getattr(resolve_owner(owner_name), member)
    return import_string(ref)


def is_pair(value: Any) -> bool:
    """Return True for a two-element ``(target, "method_name")`` tuple or list."""
    return isinstance(value, (tuple, list)) and len(value) == 2 and isinstance(value[1], str)


def is_callable_value(value: Any) -> bool:
    """Return True if ``value`` is callable or references something callable.

    Args:
        value (Any): A candidate value.

    Returns:
        bool: ``True`` for callable objects, and for string or pair references that
        resolve to a callable object.
    """
    # Importing a module or reading an attribute runs user code, which may raise anything.
    if isinstance(value, str):
        try:
            return callable(resolve_string_reference(value))
        except Exception as exc:  # noqa: BLE001
            logger.debug("Unresolvable reference %r: %s: %s", value, type(exc).__name__, exc)
            return False
    if is_pair(value):
        try:
            return callable(getattr(resolve_owner(value[0]), value[1]))
        except Exception as exc:  # noqa: BLE001
            logger.debug("Unresolvable pair %r: %s: %s", value, type(exc).__name__, exc)
            return False
    return callable(value)


def classify(value: Any) -> CallableShape:
    """Classify ``value`` into a [`CallableShape`][callinspect.core.model.CallableShape].

    Checks run in priority order: strings, pairs, classes, bound methods, Python
    functions (lambdas are closures), builtin functions and methods, other
    routines, then any other callable object. The value is not validated.

    Args:
        value (Any): The value to classify.

    Returns:
        CallableShape: The shape; ``UNKNOWN`` for non-callable values.
    """
    shape: CallableShape
    if isinstance(value, str):
        shape = CallableShape(CallableKind.STRING, value)
    elif is_pair(value):
        shape = CallableShape(CallableKind.PAIR, value[0], value[1])
    elif inspect.isclass(value):
        shape = CallableShape(CallableKind.CLASS, value)
    elif inspect.ismethod(value):
        shape = CallableShape(CallableKind.METHOD, value)
    elif inspect.isfunction(value):
        kind = CallableKind.CLOSURE if value.__name__ == _LAMBDA_NAME else CallableKind.FUNCTION
        shape = CallableShape(kind, value)
    elif inspect.isbuiltin(value):
        # Builtin methods such as ``[].append`` are bound to their object, not a module.
        owner: Any = getattr(value, "__self__", None)
        if owner is None or inspect.ismodule(owner):
            shape = CallableShape(CallableKind.FUNCTION, value)
        else:
            shape = CallableShape(CallableKind.METHOD, value)
    elif inspect.isroutine(value):
        shape = CallableShape(CallableKind.FUNCTION, value)
    elif callable(value):
        shape = CallableShape(CallableKind.OBJECT, value)
    else:
        shape = CallableShape(CallableKind.UNKNOWN, value)

    logger.trace("Classified %r as %s", value, shape.kind.value)
    return shape


def reflection_target(shape: CallableShape) -> Any | None:
    """Return the object to locate for ``shape``, or None if it cannot be introspected.

    Args:
        shape (CallableShape): A classified callable value.

    Returns:
        Any | None: The function, method or class whose definition describes the
        callable; None when there is nothing to introspect.

    Raises:
        ImportError: If a string or pair reference names a missing module.
        AttributeError: If a string or pair reference names a missing member.
    """
    kind: CallableKind = shape.kind
    if kind in (CallableKind.CLOSURE, CallableKind.FUNCTION, CallableKind.METHOD, CallableKind.CLASS):
        return shape.target
    if kind == CallableKind.OBJECT:
        return getattr(type(shape.target), "__call__", None)
    if kind == CallableKind.PAIR:
        return getattr(resolve_owner(shape.target), str(shape.member))
    if kind == CallableKind.STRING:
        return resolve_string_reference(shape.target)
    return None
