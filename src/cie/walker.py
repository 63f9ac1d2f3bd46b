# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Syntax tree traversal producing interface records."""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path

from clang.cindex import Cursor, CursorKind, SourceLocation

from cie.bases import BaseSpecifierResolver
from cie.model import InterfaceDescription, MethodDescriptor
from cie.naming import CLASS_LIKE_KINDS, qualified_name
from cie.signatures import METHOD_KINDS, describe_method

logger = logging.getLogger(__name__)


@dataclass
class WalkContext:
    """Carry the state shared by one traversal.

    Attributes:
        main_file: File under analysis; only its classes produce records.
        seed: Placeholder record every new record is derived from.
        bases: Resolver for base specifiers of this tree.
    """

    main_file: Path
    seed: InterfaceDescription
    bases: BaseSpecifierResolver
    _membership: dict[str, bool] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self.main_file = self.main_file.resolve()

    def is_in_main_file(self, location: SourceLocation) -> bool:
        """Return whether ``location`` lies in the analyzed file.

        Paths are compared canonically so relative spellings and symlinks of
        the same file match.
        """
        source_file = location.file
        if source_file is None:
            return False
        name = source_file.name
        cached = self._membership.get(name)
        if cached is None:
            cached = Path(name).resolve() == self.main_file
            self._membership[name] = cached
        return cached


def walk(root: Cursor, context: WalkContext) -> list[InterfaceDescription]:
    """Collect the interface records of the classes below ``root``.

    Args:
        root: Translation unit cursor.
        context: Traversal state.

    Returns:
        Records in depth-first pre-order, one per class identity.
    """
    records: list[InterfaceDescription] = []
    seen: set[str] = set()
    for child in root.get_children():
        for record in visit(child, context):
            if record.qualified_name in seen:
                logger.debug(
                    f"Duplicate class identity dropped (class={record.qualified_name})"
                )
                continue
            seen.add(record.qualified_name)
            records.append(record)
    return records


def visit(cursor: Cursor, context: WalkContext) -> list[InterfaceDescription]:
    """Dispatch one top-level or namespace-level cursor by kind."""
    if cursor.kind == CursorKind.NAMESPACE:
        return visit_namespace(cursor, context)
    if cursor.kind in CLASS_LIKE_KINDS:
        record = visit_class(cursor, context)
        return [record] if record is not None else []
    return []


def visit_namespace(cursor: Cursor, context: WalkContext) -> list[InterfaceDescription]:
    """Collect records from the declarations of one namespace block."""
    if not context.is_in_main_file(cursor.location):
        return []
    records: list[InterfaceDescription] = []
    for child in cursor.get_children():
        records.extend(visit(child, context))
    return records


def visit_class(cursor: Cursor, context: WalkContext) -> InterfaceDescription | None:
    """Build the record of one class-like cursor.

    Returns:
        The record, or ``None`` for classes outside the analyzed file, classes
        without a reachable definition and classes with neither bases nor methods.
    """
    if not context.is_in_main_file(cursor.location):
        return None
    name = qualified_name(cursor)
    if not name:
        logger.debug(f"Skipping class without definition (class={cursor.spelling})")
        return None

    base_classes: list[str] = []
    methods: list[MethodDescriptor] = []
    for child in cursor.get_children():
        if child.kind == CursorKind.CXX_BASE_SPECIFIER:
            base_classes.append(context.bases.resolve(child, cursor))
        elif child.kind in METHOD_KINDS:
            methods.append(describe_method(child))

    record = replace(
        context.seed,
        qualified_name=name,
        base_classes=tuple(base_classes),
        methods=tuple(methods),
    )
    if record.is_empty:
        logger.debug(f"Discarding class without bases or methods (class={name})")
        return None
    logger.debug(
        f"Interface collected (class={name} bases={len(base_classes)} methods={len(methods)})"
    )
    return record
