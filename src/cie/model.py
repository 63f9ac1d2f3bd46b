# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for extracted C++ interfaces."""

from dataclasses import dataclass, field
from typing import Literal

MethodKind = Literal["pure", "realized"]


@dataclass(frozen=True)
class MethodDescriptor:
    """Represent one method or constructor of an interface.

    Attributes:
        kind: ``pure`` for pure-virtual methods, ``realized`` for everything else.
        name: Method spelling as declared.
        signature: Parenthesized parameter list, prefixed by the return type for
            non-constructor methods.
    """

    kind: MethodKind
    name: str
    signature: str


@dataclass(frozen=True)
class InterfaceDescription:
    """Represent the interface of one class declared in the analyzed file.

    Attributes:
        packages: Caller-supplied package tags.
        header: Path of the analyzed file, as given by the caller.
        qualified_name: Scope-qualified class name, with ``<T,U>`` for templates.
        base_classes: Resolved names of direct bases, in declaration order.
        methods: Methods and constructors, in declaration order.
    """

    packages: tuple[str, ...] = ()
    header: str = ""
    qualified_name: str = ""
    base_classes: tuple[str, ...] = field(default_factory=tuple)
    methods: tuple[MethodDescriptor, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Return whether the record carries neither bases nor methods."""
        return not self.base_classes and not self.methods
