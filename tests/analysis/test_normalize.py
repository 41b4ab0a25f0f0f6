"""Tests for license normalization."""

from pom_license_analyzer.analysis.normalize import normalize_license_info
from pom_license_analyzer.models.coordinates import Coordinate
from pom_license_analyzer.models.pom import PomInfo, RawLicense
from pom_license_analyzer.spdx.table import SpdxLicenses

MIT_URL = "https://opensource.org/license/mit/"
APACHE_URL = "https://www.apache.org/licenses/LICENSE-2.0"


def _coordinate(text: str) -> Coordinate:
    group, artifact, version = text.split(":")
    return Coordinate(group=group, artifact=artifact, version=version)


class TestNormalizeLicenseInfo:
    """Tests for normalize_license_info function."""

    def test_splits_known_and_unknown(self, spdx: SpdxLicenses) -> None:
        """Test that matched licenses become SPDX records and the rest stay raw."""
        custom = RawLicense(name="Custom", url="https://example.com/LICENSE")
        details = normalize_license_info(
            {
                _coordinate("g:a:1"): PomInfo(
                    name="A",
                    licenses=[RawLicense(name="Apache 2", url=APACHE_URL), custom],
                    scm_url="https://github.com/g/a",
                )
            },
            spdx,
        )
        assert len(details) == 1
        detail = details[0]
        assert [r.identifier for r in detail.spdx_licenses] == ["Apache-2.0"]
        assert detail.unknown_licenses == [custom]
        assert detail.name == "A"
        assert detail.scm_url == "https://github.com/g/a"

    def test_duplicates_collapse_in_order(self, spdx: SpdxLicenses) -> None:
        """Test that repeated matches and repeated unknowns are kept once."""
        details = normalize_license_info(
            {
                _coordinate("g:a:1"): PomInfo(
                    licenses=[
                        RawLicense(name="MIT", url=MIT_URL),
                        RawLicense(url=APACHE_URL),
                        RawLicense(name="The MIT License", url="http://opensource.org/licenses/MIT"),
                        RawLicense(name="Unknown"),
                        RawLicense(name="Unknown"),
                    ]
                )
            },
            spdx,
        )
        detail = details[0]
        assert [r.identifier for r in detail.spdx_licenses] == ["MIT", "Apache-2.0"]
        assert detail.unknown_licenses == [RawLicense(name="Unknown")]

    def test_shared_url_attaches_every_record(self, spdx: SpdxLicenses) -> None:
        """Test that a URL shared by several records attaches all of them."""
        details = normalize_license_info(
            {_coordinate("g:a:1"): PomInfo(licenses=[RawLicense(url="https://www.mozilla.org/MPL/2.0/")])},
            spdx,
        )
        assert [r.identifier for r in details[0].spdx_licenses] == [
            "MPL-2.0",
            "MPL-2.0-no-copyleft-exception",
        ]

    def test_missing_pom_gives_license_free_artifact(self, spdx: SpdxLicenses) -> None:
        """Test that empty POM info yields an artifact without licenses."""
        details = normalize_license_info({_coordinate("g:a:1"): PomInfo.empty()}, spdx)
        assert not details[0].has_licenses
        assert details[0].name is None

    def test_sorted_by_coordinate(self, spdx: SpdxLicenses) -> None:
        """Test that output is sorted by group, artifact and version."""
        details = normalize_license_info(
            {
                _coordinate("org:z:1"): PomInfo(),
                _coordinate("com:b:2"): PomInfo(),
                _coordinate("com:b:10"): PomInfo(),
                _coordinate("com:a:1"): PomInfo(),
            },
            spdx,
        )
        assert [str(d.coordinate) for d in details] == [
            "com:a:1",
            "com:b:10",
            "com:b:2",
            "org:z:1",
        ]
