"""Default policy values for pom-license-analyzer."""

from __future__ import annotations

from pom_license_analyzer.models.config import LicensePolicy

# Policy file names looked up in the working directory, in order
DEFAULT_CONFIG_NAMES = [".pom-license-analyzer.yaml", ".pom-license-analyzer.yml"]


def get_default_config() -> LicensePolicy:
    """Get the policy used when no policy file is given or found.

    The default policy is deny-all:

    - no SPDX identifiers, license URLs or dependencies are allowed, so
      every artifact with a license fails validation;
    - no dependencies are ignored, so the whole graph is checked;
    - ``violation_action`` is ``fail``, so any error fails the run;
    - ``unused_allow_action``, ``unused_allow_url_action`` and
      ``unused_allow_dependency_action`` are ``log``.

    An empty policy file, or one holding only comments, loads as this
    policy too.

    Returns:
        A fresh LicensePolicy with the defaults above.
    """
    return LicensePolicy()
