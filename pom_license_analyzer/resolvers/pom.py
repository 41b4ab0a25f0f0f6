"""POM metadata resolution across the parent chain.

License, name and SCM data are often declared once in a parent POM and
inherited by every module. The resolver walks the chain of raw models and
merges it from the oldest ancestor down, the child winning wherever it
declares a value.
"""

from __future__ import annotations

import logging
from typing import Callable, NamedTuple, Optional

from pom_license_analyzer.exceptions import PomInheritanceError
from pom_license_analyzer.models.coordinates import Coordinate
from pom_license_analyzer.models.pom import PomInfo, RawLicense, RawModel

logger = logging.getLogger(__name__)

RawModelSource = Callable[[Coordinate], Optional[RawModel]]


class _Resolved(NamedTuple):
    """Merged data for one POM plus the SCM append flag its children see."""

    info: PomInfo
    append_path: Optional[bool]


def _unique(licenses: list[RawLicense]) -> list[RawLicense]:
    return list(dict.fromkeys(licenses))


def _strip_suffix(url: Optional[str], suffix: str) -> Optional[str]:
    if url is not None and url.endswith(suffix):
        return url[: -len(suffix)]
    return url


def _merge_scm_url(model: RawModel, parent: _Resolved) -> Optional[str]:
    # Inheritance may leave the child's "/<artifactId>" on an SCM URL; the
    # suffix is removed to report the repository itself.
    suffix = f"/{model.artifact_id}"
    parent_url = parent.info.scm_url
    if parent.append_path is None:
        if model.scm_url is not None:
            return _strip_suffix(model.scm_url, suffix)
        return _strip_suffix(parent_url, suffix)
    if parent.append_path is False:
        if parent_url is not None:
            return _strip_suffix(parent_url, suffix)
        return model.scm_url
    if model.scm_url is not None:
        return model.scm_url
    return parent_url + suffix if parent_url is not None else None


def _merge(model: RawModel, parent: Optional[_Resolved]) -> _Resolved:
    if parent is None:
        return _Resolved(
            info=PomInfo(
                name=model.name,
                licenses=_unique(model.licenses),
                scm_url=model.scm_url,
            ),
            append_path=model.child_scm_url_inherit_append_path,
        )

    append_path = model.child_scm_url_inherit_append_path
    if append_path is None:
        append_path = parent.append_path
    return _Resolved(
        info=PomInfo(
            name=model.name if model.name is not None else parent.info.name,
            licenses=_unique(model.licenses) if model.licenses else parent.info.licenses,
            scm_url=_merge_scm_url(model, parent),
        ),
        append_path=append_path,
    )


class PomInheritanceResolver:
    """Resolves merged PomInfo for coordinates.

    Results are memoized for the lifetime of the resolver, so one instance
    should be used per analysis run. Ancestors shared by many artifacts are
    fetched and merged once.
    """

    def __init__(self, raw_models: RawModelSource) -> None:
        """Initialize the resolver.

        Args:
            raw_models: Returns the unmerged model for a coordinate, or
                None when no POM is available for it.
        """
        self._raw_models = raw_models
        self._resolved: dict[Coordinate, _Resolved] = {}
        self._missing: set[Coordinate] = set()

    def resolve(self, coordinate: Coordinate) -> PomInfo:
        """Return the merged metadata for a coordinate.

        Args:
            coordinate: Artifact whose POM to resolve.

        Returns:
            Merged PomInfo, or an empty PomInfo when the artifact has no
            POM. A parent whose POM is unavailable ends the chain.

        Raises:
            PomInheritanceError: If the parent chain contains a cycle.
        """
        if coordinate in self._resolved:
            return self._resolved[coordinate].info
        if coordinate in self._missing:
            return PomInfo.empty()

        model = self._raw_models(coordinate)
        if model is None:
            logger.debug("No POM available for %s", coordinate)
            self._missing.add(coordinate)
            return PomInfo.empty()

        chain: list[tuple[Coordinate, RawModel]] = [(coordinate, model)]
        in_chain = {coordinate}
        base: Optional[_Resolved] = None
        current = model
        while current.parent is not None:
            parent = current.parent
            if parent in in_chain:
                cycle = " -> ".join(str(c) for c, _ in chain)
                raise PomInheritanceError(f"Cyclic POM parent chain: {cycle} -> {parent}")
            if parent in self._resolved:
                base = self._resolved[parent]
                break
            parent_model = self._raw_models(parent)
            if parent_model is None:
                logger.debug("Parent POM %s of %s is unavailable", parent, chain[-1][0])
                break
            chain.append((parent, parent_model))
            in_chain.add(parent)
            current = parent_model

        for link_coordinate, link_model in reversed(chain):
            base = _merge(link_model, base)
            self._resolved[link_coordinate] = base
        return self._resolved[coordinate].info
