# topmark:header:start
#
#   project      : CallInspect
#   file         : introspection.py
#   file_relpath : src/callinspect/utils/introspection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Naming helpers for classes and callables."""

from __future__ import annotations

from inspect import getmodule
from typing import Any

from callinspect.constants import BUILTINS_MODULE


def _join(mod_name: str | None, name: str) -> str:
    if not mod_name or mod_name == BUILTINS_MODULE:
        return name
    return f"{mod_name}.{name}"


def qualified_type_name(tp: type) -> str:
    """Return ``module.QualifiedName`` for a class.

    The module is omitted for builtins, so ``dict`` gives ``"dict"`` while
    ``datetime.datetime`` gives ``"datetime.datetime"``.

    Args:
        tp: The class to describe.

    Returns:
        The qualified class name.
    """
    name: str | None = getattr(tp, "__qualname__", None) or getattr(tp, "__name__", None)
    if name is None:
        name = repr(tp)
    return _join(getattr(tp, "__module__", None), name)


def qualified_callable_name(obj: Any) -> str:
    """Return a human-friendly ``module.qualname`` for any callable.

    Handles functions, builtins and method descriptors. Falls back to the
    callable's class name when needed, and uses ``inspect.getmodule`` as a last
    resort to resolve the module name.

    Args:
        obj: The callable object to describe.

    Returns:
        A string like ``"package.module.QualifiedName"`` or ``"QualifiedName"``
        if the module cannot be resolved.
    """
    mod_name: str | None = getattr(obj, "__module__", None)
    call_name: str | None = getattr(obj, "__qualname__", None)

    if call_name is None:
        call_name = getattr(obj, "__name__", None)
    if call_name is None:
        call_name = type(obj).__name__

    if not mod_name:
        mod = getmodule(obj)
        if mod is not None and getattr(mod, "__name__", None):
            mod_name = mod.__name__

    return _join(mod_name, call_name)
