"""Extract dependency coordinates from a project manifest (pom)."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import List, Optional, Union

from jarfetch.modules.artifacts.domain import Coordinate
from jarfetch.modules.artifacts.exceptions import ManifestParseError

XML_DECLARATION = "<?xml"

_FIELDS = ("groupId", "artifactId", "version")


def strip_xml_declaration(text: str) -> str:
    """Drop a leading ``<?xml ... ?>`` prolog; other documents are returned unmodified."""
    stripped = text.lstrip()
    if not stripped.startswith(XML_DECLARATION):
        return text
    end = stripped.find("?>")
    if end == -1:
        return ""
    return stripped[end + 2:]


def _local_name(tag: str) -> str:
    # "{http://maven.apache.org/POM/4.0.0}dependency" -> "dependency"
    return tag.rsplit("}", 1)[-1] if isinstance(tag, str) else ""


def _child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _coordinate_from(entry: ET.Element, position: int) -> Coordinate:
    values = {}
    for field in _FIELDS:
        node = _child(entry, field)
        text = (node.text or "").strip() if node is not None else ""
        if not text:
            raise ManifestParseError(f"dependency #{position} has no {field}")
        values[field] = text
    return Coordinate(group=values["groupId"], name=values["artifactId"], version=values["version"])


def dependencies(manifest: Union[str, bytes]) -> List[Coordinate]:
    """Return the declared dependencies, in declaration order.

    Only ``project/dependencies/dependency`` entries are read. A manifest
    without a ``dependencies`` element is rejected rather than treated as empty.
    """
    if isinstance(manifest, (bytes, bytearray)):
        try:
            manifest = bytes(manifest).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ManifestParseError(f"manifest is not valid UTF-8: {exc}") from exc

    try:
        root = ET.fromstring(strip_xml_declaration(manifest))
    except ET.ParseError as exc:
        raise ManifestParseError(f"malformed manifest: {exc}") from exc

    if _local_name(root.tag) != "project":
        raise ManifestParseError(f"expected <project> root, found <{_local_name(root.tag)}>")

    container = _child(root, "dependencies")
    if container is None:
        raise ManifestParseError("manifest has no <dependencies> element")

    entries = [child for child in container if _local_name(child.tag) == "dependency"]
    return [_coordinate_from(entry, index) for index, entry in enumerate(entries, start=1)]
