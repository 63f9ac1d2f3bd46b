# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Parsing front ends for the interface extractor."""

from cie.frontends.libclang import ClangFrontEnd, FrontEndConfig

__all__ = ["ClangFrontEnd", "FrontEndConfig"]
