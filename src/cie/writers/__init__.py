# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Description writers for the interface extractor."""

from cie.writers.xml_writer import XmlDescriptionWriter

__all__ = ["XmlDescriptionWriter"]
