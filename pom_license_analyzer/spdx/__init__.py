"""SPDX license table and historical URL fallbacks."""

from pom_license_analyzer.spdx.fallback import FALLBACK_URLS, canonicalize_url
from pom_license_analyzer.spdx.table import SpdxLicenses, UrlCollisionPolicy

__all__ = [
    "FALLBACK_URLS",
    "SpdxLicenses",
    "UrlCollisionPolicy",
    "canonicalize_url",
]
