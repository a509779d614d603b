# topmark:header:start
#
#   project      : CallInspect
#   file         : test_classify.py
#   file_relpath : tests/core/test_classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for callable classification and reference resolution."""

from __future__ import annotations

import functools
import os.path
from datetime import datetime

import pytest

from callinspect.core.classify import (
    classify,
    import_string,
    is_callable_value,
    reflection_target,
    resolve_string_reference,
    split_static_reference,
)
from callinspect.core.model import CallableKind, CallableShape
from tests.sample_classes import ClassWithMethods, Invokable, NotInvokable, anonymous, free_function


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        ("len", CallableKind.STRING),
        ("anything at all", CallableKind.STRING),
        ((ClassWithMethods, "public_method"), CallableKind.PAIR),
        ([ClassWithMethods(), "public_method"], CallableKind.PAIR),
        (anonymous, CallableKind.CLOSURE),
        (free_function, CallableKind.FUNCTION),
        (len, CallableKind.FUNCTION),
        (str.upper, CallableKind.FUNCTION),
        (ClassWithMethods().public_method, CallableKind.METHOD),
        (ClassWithMethods.public_class_method, CallableKind.METHOD),
        ([].append, CallableKind.METHOD),
        (ClassWithMethods, CallableKind.CLASS),
        (Invokable(), CallableKind.OBJECT),
        (functools.partial(free_function), CallableKind.OBJECT),
        (NotInvokable(), CallableKind.UNKNOWN),
        (42, CallableKind.UNKNOWN),
        ((1, 2), CallableKind.UNKNOWN),
    ],
)
def test_classify(value: object, kind: CallableKind) -> None:
    assert classify(value).kind == kind


def test_pair_shape_keeps_target_and_member() -> None:
    target = ClassWithMethods()
    assert classify((target, "public_method")) == CallableShape(
        CallableKind.PAIR, target, "public_method"
    )


def test_import_string_builtins_and_dotted_paths() -> None:
    assert import_string("len") is len
    assert import_string("os.path.join") is os.path.join
    assert import_string("datetime.datetime") is datetime
    assert import_string("builtins.len") is len


@pytest.mark.parametrize(
    ("ref", "error"),
    [
        ("", ImportError),
        ("no_such_builtin", ImportError),
        ("no_such_module.func", ImportError),
        ("os.path.no_such_function", AttributeError),
    ],
)
def test_import_string_failures(ref: str, error: type[Exception]) -> None:
    with pytest.raises(error):
        import_string(ref)


def test_split_static_reference_ignores_extra_parts() -> None:
    assert split_static_reference("Type::method") == ("Type", "method")
    assert split_static_reference("Type::method::extra") == ("Type", "method")


def test_resolve_static_reference_is_best_effort() -> None:
    """The left side of ``::`` does not have to be a class."""
    assert resolve_string_reference("datetime.datetime::strptime") == datetime.strptime
    assert resolve_string_reference("os.path::join") is os.path.join


def test_is_callable_value() -> None:
    assert is_callable_value("len")
    assert is_callable_value("os.path::join")
    assert is_callable_value(("datetime.datetime", "now"))
    assert is_callable_value(lambda: None)
    assert not is_callable_value("os.path")
    assert not is_callable_value(("datetime.datetime", "max"))
    assert not is_callable_value(NotInvokable())


def test_reflection_targets() -> None:
    assert reflection_target(classify(free_function)) is free_function
    assert reflection_target(classify(Invokable())) is Invokable.__call__
    assert reflection_target(classify("len")) is len
    assert reflection_target(classify((ClassWithMethods, "public_static_method"))) is (
        ClassWithMethods.public_static_method
    )
    assert reflection_target(classify(42)) is None


def test_reflection_target_propagates_lookup_errors() -> None:
    with pytest.raises(ImportError):
        reflection_target(classify("no_such_builtin"))
    with pytest.raises(AttributeError):
        reflection_target(classify((ClassWithMethods, "no_such_method")))
