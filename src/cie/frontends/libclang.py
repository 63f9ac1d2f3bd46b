# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""libclang parsing front end."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from clang.cindex import (
    Config,
    Cursor,
    Diagnostic,
    Index,
    TranslationUnit,
    TranslationUnitLoadError,
)

from cie.frontend import (
    CompileDiagnostic,
    CompileDiagnosticError,
    DiagnosticSeverity,
    ParseFailureError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrontEndConfig:
    """Describe how libclang is loaded and invoked.

    Attributes:
        language: Language passed with ``-x``.
        extra_args: Additional compiler arguments appended after the language.
        library_file: Optional path of the libclang shared library.
    """

    language: str = "c++"
    extra_args: tuple[str, ...] = ()
    library_file: str | None = None


class ClangFrontEnd:
    """Parse single C++ files with libclang."""

    def __init__(self, config: FrontEndConfig | None = None) -> None:
        """Initialize the front end.

        Args:
            config: Front end configuration; defaults to plain ``-x c++``.
        """
        self._config = config or FrontEndConfig()
        if self._config.library_file and not Config.loaded:
            Config.set_library_file(self._config.library_file)

    def build_args(self, include_dirs: Sequence[str]) -> list[str]:
        """Build compiler arguments for one parse.

        Args:
            include_dirs: Include search paths, in priority order.

        Returns:
            Argument list passed to libclang.
        """
        args = [f"-I{include_dir}" for include_dir in include_dirs]
        args.extend(["-c", "-x", self._config.language])
        args.extend(self._config.extra_args)
        return args

    @contextmanager
    def open_tree(
        self, file_path: Path, include_dirs: Sequence[str] = ()
    ) -> Iterator[Cursor]:
        """Parse one file and yield its translation unit cursor.

        Args:
            file_path: Source file to parse.
            include_dirs: Include search paths, forwarded as ``-I`` arguments.

        Yields:
            Root cursor of the translation unit.

        Raises:
            ParseFailureError: If libclang cannot produce a translation unit.
            CompileDiagnosticError: If error or fatal diagnostics were reported.
        """
        if not file_path.is_file():
            logger.warning(f"Input file does not exist (file_path={file_path})")
            raise ParseFailureError(str(file_path), "invalid_arguments", "no such file")

        args = self.build_args(include_dirs)
        logger.debug(f"Parsing translation unit (file_path={file_path} args={args})")
        index = Index.create()
        unit: TranslationUnit | None = None
        try:
            try:
                unit = index.parse(
                    str(file_path), args=args, options=TranslationUnit.PARSE_NONE
                )
            except TranslationUnitLoadError as exc:
                logger.warning(
                    f"Translation unit could not be created (file_path={file_path} error={exc})"
                )
                raise ParseFailureError(str(file_path), "failure", str(exc)) from exc

            diagnostics = collect_fatal_diagnostics(unit)
            if diagnostics:
                logger.warning(
                    f"Front end reported errors (file_path={file_path} count={len(diagnostics)})"
                )
                raise CompileDiagnosticError(str(file_path), diagnostics)
            yield unit.cursor
        finally:
            del unit
            del index


def collect_fatal_diagnostics(unit: TranslationUnit) -> list[CompileDiagnostic]:
    """Return the error and fatal diagnostics of a translation unit.

    Args:
        unit: Parsed translation unit.

    Returns:
        Diagnostics in reporting order.
    """
    collected: list[CompileDiagnostic] = []
    for diagnostic in unit.diagnostics:
        if diagnostic.severity < Diagnostic.Error:
            continue
        severity: DiagnosticSeverity = (
            "fatal" if diagnostic.severity >= Diagnostic.Fatal else "error"
        )
        location = diagnostic.location
        collected.append(
            CompileDiagnostic(
                severity=severity,
                file_path=location.file.name if location.file else "",
                line=int(location.line),
                column=int(location.column),
                message=diagnostic.spelling,
            )
        )
    return collected
