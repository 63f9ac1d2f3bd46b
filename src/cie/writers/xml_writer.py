# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""XML description writer."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from cie.model import InterfaceDescription
from cie.naming import SCOPE_SEPARATOR
from cie.persistence import PersistenceError

logger = logging.getLogger(__name__)

ROOT_NODE = "description"
PACKAGES_NODE = "packages"
PACKAGE_ITEM = "package"
HEADER_NODE = "header"
CLASS_NODE = "class"
INHERITANCE_NODE = "inheritance"
METHODS_NODE = "methods"
METHOD_ITEM = "method"
METHOD_TYPE = "type"
METHOD_NAME = "name"
METHOD_SIGNATURE = "signature"


def description_path(destination: Path, qualified_name: str) -> Path:
    """Return the file path a description is written to.

    Enclosing scopes become nested directories; the file is named after the
    class without scopes or template arguments.

    Args:
        destination: Root output directory.
        qualified_name: Qualified class name, e.g. ``a::b::simple<T,U>``.

    Returns:
        ``destination/a/b/simple.xml``.
    """
    components = qualified_name.split("<", 1)[0].split(SCOPE_SEPARATOR)
    return destination.joinpath(*components[:-1]) / f"{components[-1]}.xml"


def build_document(description: InterfaceDescription) -> ET.ElementTree:
    """Build the XML document of one description."""
    root = ET.Element(ROOT_NODE)
    packages = ET.SubElement(root, PACKAGES_NODE)
    for package in description.packages:
        ET.SubElement(packages, PACKAGE_ITEM).text = package
    ET.SubElement(root, HEADER_NODE).text = description.header
    ET.SubElement(root, CLASS_NODE).text = description.qualified_name
    inheritance = ET.SubElement(root, INHERITANCE_NODE)
    for base_class in description.base_classes:
        ET.SubElement(inheritance, CLASS_NODE).text = base_class
    methods = ET.SubElement(root, METHODS_NODE)
    for method in description.methods:
        method_node = ET.SubElement(methods, METHOD_ITEM)
        ET.SubElement(method_node, METHOD_TYPE).text = method.kind
        ET.SubElement(method_node, METHOD_NAME).text = method.name
        ET.SubElement(method_node, METHOD_SIGNATURE).text = method.signature
    tree = ET.ElementTree(root)
    ET.indent(tree)
    return tree


class XmlDescriptionWriter:
    """Write descriptions as XML files below a destination directory."""

    def __init__(self, destination: Path) -> None:
        """Initialize the writer.

        Args:
            destination: Existing root output directory.
        """
        self._destination = destination

    def write(self, description: InterfaceDescription) -> Path:
        """Write one description.

        Args:
            description: Description to persist.

        Returns:
            Path of the written XML file.

        Raises:
            PersistenceError: If the destination is missing or writing fails.
        """
        if not self._destination.is_dir():
            raise PersistenceError(f"directory: {self._destination} not exists")
        output_path = description_path(self._destination, description.qualified_name)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            build_document(description).write(
                output_path, encoding="UTF-8", xml_declaration=True
            )
        except OSError as exc:
            logger.warning(
                f"Failed to write description (class={description.qualified_name} output_path={output_path} error={exc})"
            )
            raise PersistenceError(str(exc)) from exc
        logger.debug(
            f"Description written (class={description.qualified_name} output_path={output_path})"
        )
        return output_path
