# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for method signature reconstruction."""

from cie.model import MethodDescriptor
from cie.signatures import describe_method, replace_parameter_list
from cursor_fakes import constructor, method, parameter


def test_sig_001_constructor_with_one_parameter() -> None:
    descriptor = describe_method(constructor("simple", parameter("int", "alfa")))

    assert descriptor == MethodDescriptor(
        kind="realized", name="simple", signature="(int alfa)"
    )


def test_sig_002_constructor_without_parameters() -> None:
    assert describe_method(constructor("simple")).signature == "()"


def test_sig_003_method_parameters_are_named_and_return_type_kept() -> None:
    descriptor = describe_method(
        method(
            "with_params",
            "const char *(int, float)",
            parameter("int", "alfa"),
            parameter("float", "beta"),
        )
    )

    assert descriptor.signature == "const char *(int alfa, float beta)"
    assert descriptor.kind == "realized"


def test_sig_004_method_without_parameters_keeps_type_spelling() -> None:
    descriptor = describe_method(method("value", "int () const"))

    assert descriptor.signature == "int () const"


def test_sig_005_trailing_qualifiers_survive_parameter_replacement() -> None:
    descriptor = describe_method(
        method("get", "int (int) const", parameter("int", "index"))
    )

    assert descriptor.signature == "int (int index) const"


def test_sig_006_pure_virtual_method_is_pure() -> None:
    descriptor = describe_method(method("run", "void ()", pure=True))

    assert descriptor.kind == "pure"
    assert descriptor.name == "run"


def test_sig_007_unnamed_parameter_renders_type_only() -> None:
    descriptor = describe_method(constructor("tagged", parameter("int", "")))

    assert descriptor.signature == "(int)"


def test_sig_008_replace_parameter_list_respects_nested_parentheses() -> None:
    assert (
        replace_parameter_list("void (void (*)(int), int)", "(callback_t cb, int n)")
        == "void (callback_t cb, int n)"
    )


def test_sig_009_template_constructor_name_drops_template_arguments() -> None:
    descriptor = describe_method(constructor("box<T>", parameter("T", "v")))

    assert descriptor == MethodDescriptor(kind="realized", name="box", signature="(T v)")


def test_sig_010_variadic_method_keeps_ellipsis() -> None:
    descriptor = describe_method(
        method(
            "printf",
            "void (const char *, ...)",
            parameter("const char *", "fmt"),
            variadic=True,
        )
    )

    assert descriptor.signature == "void (const char * fmt, ...)"


def test_sig_011_variadic_constructor_keeps_ellipsis() -> None:
    assert describe_method(constructor("sink", variadic=True)).signature == "(...)"
    assert (
        describe_method(constructor("sink", parameter("int", "n"), variadic=True)).signature
        == "(int n, ...)"
    )
