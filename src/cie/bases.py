# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Resolution of base specifiers to qualified class names.

Bases are first resolved through their definition cursor. Bases the front end
cannot bind, typically a template instantiated with the enclosing template's
own parameters, are looked up by bare name in an index of every class template
in the tree.
"""

import logging
from collections.abc import Iterator

from clang.cindex import Cursor, CursorKind

from cie.naming import CLASS_LIKE_KINDS, SCOPE_SEPARATOR, qualified_name, scope_names

logger = logging.getLogger(__name__)

_ELABORATION_KEYWORDS: tuple[str, ...] = ("class ", "struct ")


def bare_template_name(base_text: str) -> str:
    """Strip keyword, template arguments and scope prefix from a base spelling.

    Args:
        base_text: Literal base text, e.g. ``class ns::holder<T, U>``.

    Returns:
        Bare name, e.g. ``holder``.
    """
    text = base_text.strip()
    for keyword in _ELABORATION_KEYWORDS:
        if text.startswith(keyword):
            text = text[len(keyword) :]
    text = text.split("<", 1)[0]
    return text.rsplit(SCOPE_SEPARATOR, 1)[-1].strip()


def base_literal(base: Cursor) -> str:
    """Return the best-effort literal text of a base specifier."""
    text = base.spelling.strip()
    for keyword in _ELABORATION_KEYWORDS:
        if text.startswith(keyword):
            return text[len(keyword) :]
    return text


class TemplateIndex:
    """Index the qualified names of every class template in a syntax tree."""

    def __init__(self, entries: dict[str, list[str]]) -> None:
        self._entries = entries

    @classmethod
    def build(cls, root: Cursor) -> "TemplateIndex":
        """Walk the tree once and index class templates by bare name.

        Namespaces and class bodies are descended; subtrees located in system
        headers are skipped.

        Args:
            root: Translation unit cursor.

        Returns:
            Populated index.
        """
        entries: dict[str, list[str]] = {}
        for template in _iter_class_templates(root):
            name = qualified_name(template)
            if not name:
                continue
            candidates = entries.setdefault(template.spelling, [])
            if name not in candidates:
                candidates.append(name)
        logger.debug(f"Template index built (templates={len(entries)})")
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, bare_name: str, scope: list[str] | None = None) -> str | None:
        """Return the best candidate for ``bare_name``.

        Args:
            bare_name: Template name without scope or arguments.
            scope: Scope components of the referencing class; the candidate
                sharing the longest prefix with it wins, ties go to the first
                indexed.

        Returns:
            Qualified template name, or ``None`` when nothing matches.
        """
        candidates = self._entries.get(bare_name)
        if not candidates:
            return None
        scope = scope or []
        best = candidates[0]
        best_shared = -1
        for candidate in candidates:
            shared = _shared_prefix(_scope_of(candidate), scope)
            if shared > best_shared:
                best, best_shared = candidate, shared
        return best


class BaseSpecifierResolver:
    """Resolve base specifiers of the classes of one syntax tree."""

    def __init__(self, root: Cursor) -> None:
        """Initialize the resolver.

        Args:
            root: Translation unit cursor used to build the fallback index.
        """
        self._root = root
        self._index: TemplateIndex | None = None

    @property
    def index(self) -> TemplateIndex:
        """Template index, built on first use."""
        if self._index is None:
            self._index = TemplateIndex.build(self._root)
        return self._index

    def resolve(self, base: Cursor, enclosing: Cursor) -> str:
        """Resolve one direct base of ``enclosing``.

        Args:
            base: ``CXX_BASE_SPECIFIER`` cursor.
            enclosing: Class-like cursor owning the base list.

        Returns:
            Qualified base name, or the literal base text when unresolvable.
        """
        resolved = self._resolve_definition(base)
        if resolved:
            return resolved

        literal = base_literal(base)
        fallback = self.index.lookup(bare_template_name(literal), scope_names(enclosing))
        if fallback:
            logger.debug(
                f"Base resolved by template index (class={enclosing.spelling} base={literal} resolved={fallback})"
            )
            return fallback

        logger.warning(
            f"Unresolved base class kept as written (class={enclosing.spelling} base={literal})"
        )
        return literal

    def _resolve_definition(self, base: Cursor) -> str:
        definition = base.get_definition()
        if definition is None or definition.kind not in CLASS_LIKE_KINDS:
            return ""
        return qualified_name(definition)


def _iter_class_templates(cursor: Cursor) -> Iterator[Cursor]:
    for child in cursor.get_children():
        if child.location.is_in_system_header:
            continue
        if child.kind == CursorKind.CLASS_TEMPLATE:
            yield child
            yield from _iter_class_templates(child)
        elif child.kind == CursorKind.NAMESPACE or child.kind in CLASS_LIKE_KINDS:
            yield from _iter_class_templates(child)


def _scope_of(name: str) -> list[str]:
    return name.split("<", 1)[0].split(SCOPE_SEPARATOR)[:-1]


def _shared_prefix(left: list[str], right: list[str]) -> int:
    shared = 0
    for left_name, right_name in zip(left, right):
        if left_name != right_name:
            break
        shared += 1
    return shared
