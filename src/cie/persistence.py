# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Persistence contracts."""

from pathlib import Path
from typing import Protocol

from cie.model import InterfaceDescription


class PersistenceError(RuntimeError):
    """Represent a fatal description write failure."""


class DescriptionWriter(Protocol):
    """Define the contract for persisting one interface description."""

    def write(self, description: InterfaceDescription) -> Path:
        """Persist one description and return the written file path."""
