"""Historical license URL variants mapped to SPDX identifiers.

Many POMs point at URLs that the SPDX list does not carry: old opensource.org
paths, GitHub API license endpoints, mirrors with a ``.txt`` or ``.html``
suffix. The table below maps those URLs, in canonical form, to the
identifiers they stand for.
"""

from __future__ import annotations

_SCHEMES = ("https://", "http://")
_SUFFIXES = (".txt", ".php", ".html")

# Canonical URL -> SPDX identifiers, most specific first.
FALLBACK_URLS: dict[str, tuple[str, ...]] = {}


def canonicalize_url(url: str) -> str:
    """Reduce a license URL to the form used as a fallback key.

    The URL is lower-cased, its scheme and a leading ``www.`` are dropped,
    trailing slashes are removed, and then one ``.txt``, ``.php`` or
    ``.html`` suffix is removed.

    Args:
        url: License URL as declared in a POM.

    Returns:
        Canonical key, e.g. ``opensource.org/licenses/mit`` for
        ``http://www.opensource.org/licenses/MIT.html``.
    """
    key = url.strip().lower()
    for scheme in _SCHEMES:
        if key.startswith(scheme):
            key = key[len(scheme):]
            break
    if key.startswith("www."):
        key = key[len("www."):]
    key = key.rstrip("/")
    for suffix in _SUFFIXES:
        if key.endswith(suffix):
            key = key[: -len(suffix)]
            break
    return key


def _register(identifiers: tuple[str, ...], *urls: str) -> None:
    for url in urls:
        FALLBACK_URLS[canonicalize_url(url)] = identifiers


_register(
    ("Apache-2.0",),
    "http://www.apache.org/licenses/LICENSE-2.0.txt",
    "http://www.apache.org/licenses/LICENSE-2.0.html",
    "https://opensource.org/licenses/apache2.0.php",
    "https://opensource.org/license/apache-2-0/",
    "https://api.github.com/licenses/apache-2.0",
    "http://opensource.org/licenses/Apache-2.0",
)
_register(
    ("CC0-1.0",),
    "http://creativecommons.org/publicdomain/zero/1.0/",
    "https://creativecommons.org/publicdomain/zero/1.0/legalcode",
    "https://api.github.com/licenses/cc0-1.0",
)
_register(
    ("LGPL-2.1-only",),
    "http://www.opensource.org/licenses/LGPL-2.1",
    "https://www.gnu.org/licenses/old-licenses/lgpl-2.1.html",
    "https://api.github.com/licenses/lgpl-2.1",
)
_register(
    ("MIT",),
    "http://www.opensource.org/licenses/mit-license.php",
    "https://opensource.org/licenses/MIT",
    "https://opensource.org/license/mit/",
    "https://api.github.com/licenses/mit",
    "https://mit-license.org",
)
_register(
    ("BSD-2-Clause",),
    "http://www.opensource.org/licenses/bsd-license.php",
    "https://opensource.org/licenses/BSD-2-Clause",
    "https://api.github.com/licenses/bsd-2-clause",
)
_register(
    ("BSD-3-Clause",),
    "https://opensource.org/licenses/BSD-3-Clause",
    "https://api.github.com/licenses/bsd-3-clause",
)
_register(
    ("GPL-2.0-with-classpath-exception",),
    "http://www.gnu.org/software/classpath/license.html",
)
_register(
    ("GPL-2.0", "GPL-2.0-or-later"),
    "https://choosealicense.com/licenses/gpl-2.0/",
    "https://opensource.org/license/gpl-2-0/",
    "https://www.gnu.org/licenses/old-licenses/gpl-2.0.html",
    "https://api.github.com/licenses/gpl-2.0",
)
_register(
    ("LGPL-2.0", "LGPL-2.0-or-later"),
    "https://www.gnu.org/licenses/old-licenses/lgpl-2.0.html",
    "http://www.gnu.org/copyleft/library.txt",
)
_register(
    ("EPL-1.0",),
    "http://www.eclipse.org/org/documents/epl-v10.php",
    "http://www.eclipse.org/legal/epl-v10.html",
    "https://api.github.com/licenses/epl-1.0",
)
_register(
    ("EPL-2.0",),
    "https://www.eclipse.org/legal/epl-2.0/",
    "https://api.github.com/licenses/epl-2.0",
)
_register(
    ("ISC",),
    "https://opensource.org/licenses/isc-license.txt",
    "https://opensource.org/licenses/ISC",
)
