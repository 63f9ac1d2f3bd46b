# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Scope-qualified naming of class-like cursors."""

import logging

from clang.cindex import Cursor, CursorKind

logger = logging.getLogger(__name__)

SCOPE_SEPARATOR = "::"

CLASS_LIKE_KINDS: frozenset[CursorKind] = frozenset(
    {CursorKind.CLASS_DECL, CursorKind.STRUCT_DECL, CursorKind.CLASS_TEMPLATE}
)

# Kinds libclang hands back for dangling or unresolvable parents.
_INVALID_KINDS: frozenset[CursorKind] = frozenset(
    {
        CursorKind.INVALID_FILE,
        CursorKind.NO_DECL_FOUND,
        CursorKind.NOT_IMPLEMENTED,
        CursorKind.INVALID_CODE,
    }
)

_SPECIALIZABLE_KINDS: frozenset[CursorKind] = frozenset(
    {CursorKind.CLASS_DECL, CursorKind.STRUCT_DECL}
)


def scope_names(cursor: Cursor) -> list[str]:
    """Return the names of ``cursor`` and its enclosing scopes, outermost first.

    The walk stops at the translation unit, at a missing parent or at a cursor
    of an invalid kind. Scopes without a spelling contribute nothing.

    Args:
        cursor: Declaration cursor to start from.

    Returns:
        Scope components, the cursor's own name last.
    """
    names: list[str] = []
    current: Cursor | None = cursor
    while current is not None and current.kind != CursorKind.TRANSLATION_UNIT:
        if current.kind in _INVALID_KINDS:
            logger.debug(
                f"Scope walk stopped at invalid parent (cursor={cursor.spelling} kind={current.kind})"
            )
            break
        name = _component_name(current)
        if name:
            names.insert(0, name)
        current = current.semantic_parent
    return names


def template_parameters(cursor: Cursor) -> list[str]:
    """Return the type template parameter names of a class template.

    Only direct children are inspected; non-type parameters are not reported.

    Args:
        cursor: Class template cursor.

    Returns:
        Parameter names in declaration order.
    """
    return [
        child.spelling
        for child in cursor.get_children()
        if child.kind == CursorKind.TEMPLATE_TYPE_PARAMETER
    ]


def qualified_name(cursor: Cursor) -> str:
    """Return the fully-qualified name of a class-like cursor.

    Args:
        cursor: Class, struct or class template cursor.

    Returns:
        ``a::b::name`` with ``<T,U>`` appended for class templates, or an empty
        string when the class has no reachable definition.
    """
    if cursor.get_definition() is None:
        return ""
    names = scope_names(cursor)
    if not names:
        return ""
    if cursor.kind == CursorKind.CLASS_TEMPLATE:
        names[-1] = f"{names[-1]}<{','.join(template_parameters(cursor))}>"
    return SCOPE_SEPARATOR.join(names)


def _component_name(cursor: Cursor) -> str:
    # Template specializations carry their argument list in the display name.
    if cursor.kind in _SPECIALIZABLE_KINDS and "<" in cursor.displayname:
        return cursor.displayname
    return cursor.spelling
