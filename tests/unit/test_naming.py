# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for scope-qualified naming."""

from clang.cindex import CursorKind

from cie.naming import qualified_name, scope_names, template_parameters
from cursor_fakes import FakeCursor, class_decl, class_template, namespace, unit


def test_name_001_nested_class_template_gets_scopes_and_parameters() -> None:
    simple = class_template("simple", ["T", "U"])
    unit(namespace("general", namespace("my_namespace", simple)))

    assert qualified_name(simple) == "general::my_namespace::simple<T,U>"


def test_name_002_plain_class_at_global_scope() -> None:
    plain = class_decl("plain")
    unit(plain)

    assert qualified_name(plain) == "plain"


def test_name_003_class_without_definition_resolves_empty() -> None:
    forward = class_decl("forward", defined=False)
    unit(namespace("ns", forward))

    assert qualified_name(forward) == ""


def test_name_004_scope_walk_stops_at_invalid_parent() -> None:
    inner = class_decl("inner")
    scope = namespace("scope", inner)
    dangling = FakeCursor(CursorKind.INVALID_CODE, "garbage", children=[scope])
    namespace("outer", dangling)

    assert scope_names(inner) == ["scope", "inner"]


def test_name_005_scope_walk_stops_at_missing_parent() -> None:
    inner = class_decl("inner")
    namespace("detached", inner)

    assert qualified_name(inner) == "detached::inner"


def test_name_006_anonymous_namespace_contributes_no_component() -> None:
    hidden = class_decl("hidden")
    unit(namespace("outer", namespace("", hidden)))

    assert qualified_name(hidden) == "outer::hidden"


def test_name_007_template_parameters_skip_non_type_parameters() -> None:
    holder = class_decl(
        "holder",
        FakeCursor(CursorKind.TEMPLATE_TYPE_PARAMETER, "T"),
        FakeCursor(CursorKind.TEMPLATE_NON_TYPE_PARAMETER, "N"),
        FakeCursor(CursorKind.TEMPLATE_TYPE_PARAMETER, "U"),
        kind=CursorKind.CLASS_TEMPLATE,
    )
    unit(holder)

    assert template_parameters(holder) == ["T", "U"]
    assert qualified_name(holder) == "holder<T,U>"


def test_name_008_specialization_uses_display_name() -> None:
    specialization = FakeCursor(
        CursorKind.CLASS_DECL,
        "holder",
        displayname="holder<int, float>",
    )
    unit(namespace("general", specialization))

    assert qualified_name(specialization) == "general::holder<int, float>"
