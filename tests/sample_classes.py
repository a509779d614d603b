# topmark:header:start
#
#   project      : CallInspect
#   file         : sample_classes.py
#   file_relpath : tests/sample_classes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Callables with known definition lines, used by the inspector tests.

Tests assert exact line numbers against this file: append new samples at the end.
"""

from __future__ import annotations

import functools
from typing import Any, Callable


class ClassWithMethods:
    def public_method(self) -> str:
        return "Hello from an instance method!"

    @staticmethod
    def public_static_method() -> str:
        return "Hello from a static method!"

    @classmethod
    def public_class_method(cls) -> str:
        return "Hello from a class method!"


class Invokable:
    def __call__(self) -> str:
        return "Hello from an invokable object!"


class NotInvokable:
    pass


def free_function() -> str:
    return "Hello from a free function!"


def logged(func: Callable[..., Any]) -> Callable[..., Any]:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return func(*args, **kwargs)

    return wrapper


@logged
def decorated_function() -> str:
    return "Hello from a decorated function!"


anonymous = lambda: "Hello from a lambda!"  # noqa: E731
