# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Method and constructor signature reconstruction."""

from typing import Iterable

from clang.cindex import Cursor, CursorKind

from cie.model import MethodDescriptor, MethodKind

METHOD_KINDS: frozenset[CursorKind] = frozenset(
    {CursorKind.CXX_METHOD, CursorKind.CONSTRUCTOR}
)


def describe_method(cursor: Cursor) -> MethodDescriptor:
    """Build the descriptor of a method or constructor cursor.

    Args:
        cursor: ``CXX_METHOD`` or ``CONSTRUCTOR`` cursor.

    Returns:
        Method descriptor with kind, name and signature.
    """
    kind: MethodKind = "pure" if cursor.is_pure_virtual_method() else "realized"
    parameters = list(cursor.get_arguments())
    variadic = cursor.type.is_function_variadic()
    if cursor.kind == CursorKind.CONSTRUCTOR:
        signature = parameter_list(parameters, variadic)
    else:
        signature = cursor.type.spelling
        if parameters:
            signature = replace_parameter_list(
                signature, parameter_list(parameters, variadic)
            )
    return MethodDescriptor(kind=kind, name=method_name(cursor), signature=signature)


def method_name(cursor: Cursor) -> str:
    """Return the declared name of a method or constructor.

    Constructors of class templates are spelled with the template arguments by
    some libclang releases (``box<T>``); the argument list is dropped.
    """
    if cursor.kind == CursorKind.CONSTRUCTOR:
        return cursor.spelling.split("<", 1)[0]
    return cursor.spelling


def parameter_list(parameters: Iterable[Cursor], variadic: bool = False) -> str:
    """Render parameter declarations as ``(Type name, Type name)``.

    Args:
        parameters: ``PARM_DECL`` cursors in declaration order.
        variadic: Whether the function takes a trailing ``...``.

    Returns:
        Parenthesized list; ``()`` when there are no parameters.
    """
    rendered = [
        f"{parameter.type.spelling} {parameter.spelling}".strip()
        for parameter in parameters
    ]
    if variadic:
        rendered.append("...")
    return f"({', '.join(rendered)})"


def replace_parameter_list(type_spelling: str, parameters: str) -> str:
    """Swap the parameter list of a function type spelling.

    The segment opened by the first ``(`` is replaced up to its balanced closing
    parenthesis. The return type before it and qualifiers after it are kept.

    Args:
        type_spelling: Function type as spelled by the front end, e.g. ``int (int) const``.
        parameters: Replacement parenthesized list.

    Returns:
        Signature text with named parameters.
    """
    start = type_spelling.find("(")
    if start < 0:
        return f"{type_spelling}{parameters}"
    depth = 0
    for position in range(start, len(type_spelling)):
        char = type_spelling[position]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return type_spelling[:start] + parameters + type_spelling[position + 1 :]
    return type_spelling[:start] + parameters
