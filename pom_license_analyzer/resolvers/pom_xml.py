"""POM document parsing and local Maven repository access.

Only the elements needed for license reporting are read: coordinates,
``<name>``, ``<licenses>``, ``<scm>`` and ``<parent>``. Element lookups
ignore XML namespaces so POMs with and without the Maven 4.0.0 namespace
parse the same way.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional
from xml.etree.ElementTree import Element

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from pom_license_analyzer.exceptions import PomParseError
from pom_license_analyzer.models.coordinates import Coordinate
from pom_license_analyzer.models.pom import RawLicense, RawModel

logger = logging.getLogger(__name__)

SCM_APPEND_PATH_ATTRIBUTE = "child.scm.url.inherit.append.path"

_PROPERTY_PATTERN = re.compile(r"\$\{([^}]+)\}")
# Bounds nested ${...} expansion; self-referencing properties stay unexpanded.
_MAX_INTERPOLATION_ROUNDS = 10


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child(element: Optional[Element], name: str) -> Optional[Element]:
    if element is None:
        return None
    for child in element:
        if isinstance(child.tag, str) and _local_name(child.tag) == name:
            return child
    return None


def _children(element: Optional[Element], name: str) -> list[Element]:
    if element is None:
        return []
    return [
        child
        for child in element
        if isinstance(child.tag, str) and _local_name(child.tag) == name
    ]


def _text(element: Optional[Element], name: str) -> Optional[str]:
    found = _child(element, name)
    if found is None or found.text is None:
        return None
    value = found.text.strip()
    return value or None


def _parse_flag(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    return None


class _Interpolator:
    """Expands ``${...}`` references against project values and properties."""

    def __init__(self, values: dict[str, str]) -> None:
        self._values = values

    def __call__(self, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        for _ in range(_MAX_INTERPOLATION_ROUNDS):
            expanded = _PROPERTY_PATTERN.sub(self._replace, value)
            if expanded == value:
                break
            value = expanded
        return value

    def _replace(self, match: re.Match[str]) -> str:
        return self._values.get(match.group(1), match.group(0))


def parse_pom(text: str, source: str = "<pom>") -> RawModel:
    """Parse a POM document into a RawModel.

    ``groupId`` and ``version`` fall back to the ``<parent>`` values when
    the project does not declare them, as Maven does. ``${project.*}`` and
    ``<properties>`` references in the name, license and SCM values are
    expanded; unknown references are left as written.

    Args:
        text: POM XML text.
        source: Description of where the text came from, for messages.

    Returns:
        The parsed, unmerged model.

    Raises:
        PomParseError: If the XML is malformed or unsafe, the root element
            is not ``<project>``, or ``<artifactId>`` is missing.
    """
    try:
        root = ET.fromstring(text)
    except (ET.ParseError, DefusedXmlException) as e:
        raise PomParseError(f"Cannot parse POM '{source}': {e}") from e

    if _local_name(root.tag) != "project":
        raise PomParseError(
            f"Cannot parse POM '{source}': expected <project> root element, "
            f"got <{_local_name(root.tag)}>"
        )

    parent_element = _child(root, "parent")
    parent_group = _text(parent_element, "groupId")
    parent_artifact = _text(parent_element, "artifactId")
    parent_version = _text(parent_element, "version")

    artifact_id = _text(root, "artifactId")
    if artifact_id is None:
        raise PomParseError(f"Cannot parse POM '{source}': missing <artifactId>")
    group_id = _text(root, "groupId") or parent_group
    version = _text(root, "version") or parent_version

    values: dict[str, str] = {}
    properties = _child(root, "properties")
    if properties is not None:
        for element in properties:
            if isinstance(element.tag, str):
                values[_local_name(element.tag)] = (element.text or "").strip()
    project_values = {
        "groupId": group_id,
        "artifactId": artifact_id,
        "version": version,
        "name": _text(root, "name"),
        "url": _text(root, "url"),
        "parent.groupId": parent_group,
        "parent.artifactId": parent_artifact,
        "parent.version": parent_version,
    }
    for key, value in project_values.items():
        if value is not None:
            values[f"project.{key}"] = value
            values[f"pom.{key}"] = value
    interpolate = _Interpolator(values)

    licenses = [
        RawLicense(
            name=interpolate(_text(element, "name")),
            url=interpolate(_text(element, "url")),
        )
        for element in _children(_child(root, "licenses"), "license")
    ]

    scm = _child(root, "scm")
    append_path = None
    if scm is not None:
        append_path = _parse_flag(scm.get(SCM_APPEND_PATH_ATTRIBUTE))

    parent = None
    if parent_group and parent_artifact and parent_version:
        parent = Coordinate(group=parent_group, artifact=parent_artifact, version=parent_version)

    return RawModel(
        group_id=group_id,
        artifact_id=artifact_id,
        version=version,
        name=interpolate(_text(root, "name")),
        licenses=licenses,
        scm_url=interpolate(_text(scm, "url")),
        child_scm_url_inherit_append_path=append_path,
        parent=parent,
    )


class MavenRepository:
    """Reads POM documents from a directory laid out like a Maven repository.

    A coordinate ``com.example:lib:1.0`` maps to
    ``com/example/lib/1.0/lib-1.0.pom`` under the repository root.
    Instances are callable so they can be handed directly to
    :class:`~pom_license_analyzer.resolvers.pom.PomInheritanceResolver`.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    def path_for(self, coordinate: Coordinate) -> Path:
        return (
            self._root.joinpath(*coordinate.group.split("."))
            / coordinate.artifact
            / coordinate.version
            / f"{coordinate.artifact}-{coordinate.version}.pom"
        )

    def load(self, coordinate: Coordinate) -> Optional[RawModel]:
        """Load and parse the POM for a coordinate.

        Returns:
            The parsed model, or None if the repository has no POM for it.

        Raises:
            PomParseError: If the POM exists but cannot be read or parsed.
        """
        path = self.path_for(coordinate)
        if not path.is_file():
            logger.debug("No POM for %s at %s", coordinate, path)
            return None
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise PomParseError(f"Cannot read POM '{path}': {e}") from e
        return parse_pom(text, source=str(path))

    def __call__(self, coordinate: Coordinate) -> Optional[RawModel]:
        return self.load(coordinate)
