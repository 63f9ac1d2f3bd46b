# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Interface record building for one analyzed file."""

import logging
from pathlib import Path
from typing import Sequence

from clang.cindex import Cursor

from cie.bases import BaseSpecifierResolver
from cie.frontend import ParserFrontEnd
from cie.frontends import ClangFrontEnd
from cie.model import InterfaceDescription
from cie.walker import WalkContext, walk

logger = logging.getLogger(__name__)


class InterfaceBuilder:
    """Build interface records from a parsed syntax tree."""

    def build(
        self, root: Cursor, header: str, packages: Sequence[str] = ()
    ) -> list[InterfaceDescription]:
        """Build the records of the classes declared in ``header``.

        Args:
            root: Translation unit cursor.
            header: Path of the analyzed file; copied into every record.
            packages: Package tags copied into every record.

        Returns:
            Records in depth-first pre-order of namespaces and classes.
        """
        seed = InterfaceDescription(packages=tuple(packages), header=header)
        context = WalkContext(
            main_file=Path(header),
            seed=seed,
            bases=BaseSpecifierResolver(root),
        )
        return walk(root, context)


def extract_interfaces(
    file_path: Path | str,
    include_dirs: Sequence[str] = (),
    packages: Sequence[str] = (),
    front_end: ParserFrontEnd | None = None,
) -> list[InterfaceDescription]:
    """Parse one file and return the interfaces it declares.

    Args:
        file_path: Header or source file to analyze.
        include_dirs: Include search paths for the front end.
        packages: Package tags copied into every record.
        front_end: Parsing front end; defaults to libclang.

    Returns:
        Interface records of the file.

    Raises:
        ParseFailureError: If the front end produced no syntax tree.
        CompileDiagnosticError: If the front end reported errors.
    """
    front_end = front_end or ClangFrontEnd()
    path = Path(file_path)
    with front_end.open_tree(path, include_dirs) as root:
        records = InterfaceBuilder().build(root, header=str(file_path), packages=packages)
    logger.info(f"Interface extraction completed (file_path={path} records={len(records)})")
    return records
