"""SPDX license table with identifier and URL lookups.

The table is built from a document in the SPDX ``license-list-data`` JSON
format. The package bundles SPDX license list 3.25.0; another release
can be supplied at runtime with :meth:`SpdxLicenses.load_database`.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from pom_license_analyzer.exceptions import SpdxDatabaseError
from pom_license_analyzer.models.artifact import SpdxLicense
from pom_license_analyzer.models.pom import RawLicense
from pom_license_analyzer.spdx.fallback import FALLBACK_URLS, canonicalize_url

logger = logging.getLogger(__name__)

EMBEDDED_DATABASE = "data/licenses.json"


class UrlCollisionPolicy(Enum):
    """Which records to return when several share one license URL.

    Some SPDX records list the same URL (for example ``GPL-2.0-only`` and
    ``GPL-2.0-or-later``), so a URL lookup can yield more than one record.
    """

    ALL = "all"
    FIRST = "first"
    SHORTEST_IDENTIFIER = "shortest-identifier"


class _SpdxEntry(BaseModel):
    model_config = {"extra": "ignore"}

    license_id: str = Field(alias="licenseId")
    name: str
    reference: str
    see_also: list[str] = Field(default_factory=list, alias="seeAlso")


class _SpdxDocument(BaseModel):
    model_config = {"extra": "ignore"}

    licenses: list[_SpdxEntry]


def _https(url: str) -> str:
    if url.startswith("http://"):
        return "https://" + url[len("http://"):]
    return url


class SpdxLicenses:
    """Lookup table over SPDX license records.

    Records are indexed three ways: by identifier, by every URL the SPDX
    list associates with them (the reference URL, each see-also URL, and
    an ``https://`` twin of each ``http://`` see-also URL), and by the
    canonical form of known historical URL variants. URL buckets keep
    records in registration order.
    """

    def __init__(
        self,
        licenses: list[SpdxLicense],
        urls: Optional[dict[str, list[str]]] = None,
        collision: UrlCollisionPolicy = UrlCollisionPolicy.ALL,
    ) -> None:
        """Build the indexes.

        Args:
            licenses: Records in document order.
            urls: URLs to index per identifier. Records without an entry
                are indexed under their own url.
            collision: Selection applied to URL and fallback lookups.
        """
        self._collision = collision
        self._by_identifier: dict[str, SpdxLicense] = {}
        self._by_url: dict[str, list[SpdxLicense]] = {}
        for record in licenses:
            self._by_identifier[record.identifier] = record
            record_urls = (urls or {}).get(record.identifier, [record.url])
            for url in record_urls:
                bucket = self._by_url.setdefault(url, [])
                if record not in bucket:
                    bucket.append(record)

        self._fallback: dict[str, list[SpdxLicense]] = {}
        for key, identifiers in FALLBACK_URLS.items():
            records: list[SpdxLicense] = []
            for identifier in identifiers:
                record = self._by_identifier.get(identifier)
                if record is None:
                    logger.debug(
                        "Skipping fallback '%s' -> '%s': identifier not in database",
                        key,
                        identifier,
                    )
                    continue
                records.append(record)
            if records:
                self._fallback[key] = records

    @classmethod
    def parse_json(
        cls,
        text: str,
        collision: UrlCollisionPolicy = UrlCollisionPolicy.ALL,
    ) -> SpdxLicenses:
        """Build a table from SPDX ``licenses.json`` text.

        Args:
            text: JSON document with a ``licenses`` array.
            collision: Selection applied to URL and fallback lookups.

        Returns:
            The populated table.

        Raises:
            SpdxDatabaseError: If the document is not valid JSON or an
                entry lacks a required key.
        """
        try:
            document = _SpdxDocument.model_validate_json(text)
        except ValidationError as e:
            raise SpdxDatabaseError(f"Invalid SPDX license database: {e}") from e

        licenses: list[SpdxLicense] = []
        urls: dict[str, list[str]] = {}
        for entry in document.licenses:
            canonical = entry.see_also[0] if entry.see_also else entry.reference
            licenses.append(
                SpdxLicense(
                    identifier=entry.license_id,
                    name=entry.name,
                    url=_https(canonical),
                )
            )
            indexed = [entry.reference]
            for url in entry.see_also:
                indexed.append(url)
                if url.startswith("http://"):
                    indexed.append(_https(url))
            urls[entry.license_id] = indexed
        table = cls(licenses, urls=urls, collision=collision)
        logger.debug("Loaded %d SPDX licenses", len(table))
        return table

    @classmethod
    def embedded(
        cls,
        collision: UrlCollisionPolicy = UrlCollisionPolicy.ALL,
    ) -> SpdxLicenses:
        """Return the table built from the bundled database.

        The bundled data is parsed once per process and policy.
        """
        return _load_embedded(collision)

    @classmethod
    def load_database(
        cls,
        path: Path,
        collision: UrlCollisionPolicy = UrlCollisionPolicy.ALL,
    ) -> SpdxLicenses:
        """Build a table from an SPDX ``licenses.json`` file on disk.

        Raises:
            SpdxDatabaseError: If the file cannot be read or parsed.
        """
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise SpdxDatabaseError(f"Cannot read SPDX license database '{path}': {e}") from e
        return cls.parse_json(text, collision=collision)

    def __len__(self) -> int:
        return len(self._by_identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._by_identifier

    def find_by_identifier(self, identifier: str) -> Optional[SpdxLicense]:
        return self._by_identifier.get(identifier)

    def find_by_url(self, url: str) -> list[SpdxLicense]:
        """Return the records registered under exactly this URL."""
        return self._select(self._by_url.get(url, []))

    def find_fallback(self, url: str) -> list[SpdxLicense]:
        """Return the records a historical URL variant stands for."""
        return self._select(self._fallback.get(canonicalize_url(url), []))

    def match(self, declared: RawLicense) -> list[SpdxLicense]:
        """Classify a declared license.

        A declared URL decides on its own: the exact URL index is tried,
        then the fallback table, and the name is never consulted. Without
        a URL, the name is looked up as an SPDX identifier.

        Args:
            declared: License as declared in a POM.

        Returns:
            Matched records, empty when the license is unknown.
        """
        if declared.url is not None:
            return self.find_by_url(declared.url) or self.find_fallback(declared.url)
        if declared.name is not None:
            record = self.find_by_identifier(declared.name)
            return [record] if record is not None else []
        return []

    def lookup(self, value: str) -> list[SpdxLicense]:
        """Resolve either an SPDX identifier or a license URL."""
        record = self.find_by_identifier(value)
        if record is not None:
            return [record]
        return self.match(RawLicense(url=value))

    def _select(self, records: list[SpdxLicense]) -> list[SpdxLicense]:
        if not records or self._collision is UrlCollisionPolicy.ALL:
            return list(records)
        if self._collision is UrlCollisionPolicy.FIRST:
            return records[:1]
        return [min(records, key=lambda record: len(record.identifier))]


@lru_cache(maxsize=None)
def _load_embedded(collision: UrlCollisionPolicy) -> SpdxLicenses:
    text = (
        resources.files("pom_license_analyzer.spdx")
        .joinpath(EMBEDDED_DATABASE)
        .read_text(encoding="utf-8")
    )
    return SpdxLicenses.parse_json(text, collision=collision)
