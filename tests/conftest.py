"""Shared fixtures for pom-license-analyzer tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pytest
from click.testing import CliRunner

from pom_license_analyzer.spdx.table import SpdxLicenses

POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"


def build_pom(
    coordinate: str,
    *,
    name: Optional[str] = None,
    licenses: tuple[tuple[Optional[str], Optional[str]], ...] = (),
    scm_url: Optional[str] = None,
    scm_append_path: Optional[str] = None,
    parent: Optional[str] = None,
    extra: str = "",
) -> str:
    """Render a minimal POM document.

    Args:
        coordinate: ``group:artifact:version``; an empty group or version
            leaves that element out.
        name: Project name.
        licenses: ``(name, url)`` pairs; None leaves the element out.
        scm_url: ``<scm><url>`` value.
        scm_append_path: Value of the ``child.scm.url.inherit.append.path``
            attribute on ``<scm>``.
        parent: Parent ``group:artifact:version``.
        extra: Raw XML inserted into ``<project>``.
    """
    group, artifact, version = coordinate.split(":")
    parts = [f'<project xmlns="{POM_NAMESPACE}">', "<modelVersion>4.0.0</modelVersion>"]
    if parent is not None:
        p_group, p_artifact, p_version = parent.split(":")
        parts.append(
            f"<parent><groupId>{p_group}</groupId><artifactId>{p_artifact}</artifactId>"
            f"<version>{p_version}</version></parent>"
        )
    if group:
        parts.append(f"<groupId>{group}</groupId>")
    parts.append(f"<artifactId>{artifact}</artifactId>")
    if version:
        parts.append(f"<version>{version}</version>")
    if name is not None:
        parts.append(f"<name>{name}</name>")
    if licenses:
        parts.append("<licenses>")
        for license_name, license_url in licenses:
            parts.append("<license>")
            if license_name is not None:
                parts.append(f"<name>{license_name}</name>")
            if license_url is not None:
                parts.append(f"<url>{license_url}</url>")
            parts.append("</license>")
        parts.append("</licenses>")
    if scm_url is not None or scm_append_path is not None:
        attribute = ""
        if scm_append_path is not None:
            attribute = f' child.scm.url.inherit.append.path="{scm_append_path}"'
        url = f"<url>{scm_url}</url>" if scm_url is not None else ""
        parts.append(f"<scm{attribute}>{url}</scm>")
    parts.append(extra)
    parts.append("</project>")
    return "\n".join(parts)


class MavenRepoWriter:
    """Writes POM files into a temporary Maven repository layout."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def add(self, coordinate: str, **kwargs: object) -> Path:
        """Write a POM for ``group:artifact:version`` and return its path."""
        group, artifact, version = coordinate.split(":")
        directory = self.root.joinpath(*group.split("."), artifact, version)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{artifact}-{version}.pom"
        path.write_text(build_pom(coordinate, **kwargs), encoding="utf-8")  # type: ignore[arg-type]
        return path


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def spdx() -> SpdxLicenses:
    """Provide the bundled SPDX license table."""
    return SpdxLicenses.embedded()


@pytest.fixture
def maven_repo(tmp_path: Path) -> MavenRepoWriter:
    """Provide an empty Maven repository directory with a POM writer."""
    root = tmp_path / "repository"
    root.mkdir()
    return MavenRepoWriter(root)


@pytest.fixture
def pom_builder() -> Callable[..., str]:
    """Provide the POM document builder."""
    return build_pom
