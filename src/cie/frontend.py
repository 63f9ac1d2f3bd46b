# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Parsing front end contracts and failure types."""

from contextlib import AbstractContextManager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Protocol, Sequence

# clang.cindex raises TranslationUnitLoadError without the CXError_* code, so the
# libclang front end only produces "failure" and "invalid_arguments"; the other
# reasons are available to front ends that can report them.
ParseFailureReason = Literal[
    "failure", "crashed", "invalid_arguments", "ast_read_error", "unknown"
]
DiagnosticSeverity = Literal["error", "fatal"]


class ParseFailureError(RuntimeError):
    """Represent a front end failure that produced no syntax tree."""

    def __init__(self, file_path: str, reason: ParseFailureReason, detail: str = "") -> None:
        message = f"{reason.replace('_', ' ')} while reading file: {file_path}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.file_path = file_path
        self.reason = reason


@dataclass(frozen=True)
class CompileDiagnostic:
    """Represent one error or fatal diagnostic reported by the front end.

    Attributes:
        severity: ``error`` or ``fatal``.
        file_path: File the diagnostic points at; empty when unknown.
        line: 1-based line, ``0`` when unknown.
        column: 1-based column, ``0`` when unknown.
        message: Diagnostic text as reported by the front end.
    """

    severity: DiagnosticSeverity
    file_path: str
    line: int
    column: int
    message: str

    def __str__(self) -> str:
        location = (
            f"{self.file_path}:{self.line}:{self.column}"
            if self.file_path
            else "unknown location"
        )
        return f"{location}: {self.severity}: {self.message}"


class CompileDiagnosticError(RuntimeError):
    """Represent a syntax tree built from input the front end rejected."""

    def __init__(self, file_path: str, diagnostics: Sequence[CompileDiagnostic]) -> None:
        super().__init__("\n".join(str(diagnostic) for diagnostic in diagnostics))
        self.file_path = file_path
        self.diagnostics = tuple(diagnostics)


class ParserFrontEnd(Protocol):
    """Produce syntax trees for single source files."""

    def open_tree(
        self, file_path: Path, include_dirs: Sequence[str] = ()
    ) -> AbstractContextManager[Any]:
        """Parse ``file_path`` and yield the root cursor of its syntax tree.

        Args:
            file_path: Source file to parse.
            include_dirs: Include search paths, forwarded verbatim.

        Returns:
            A context manager yielding the tree root and releasing the tree on exit.

        Raises:
            ParseFailureError: If no tree could be produced.
            CompileDiagnosticError: If the tree carries error or fatal diagnostics.
        """
