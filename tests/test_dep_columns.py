"""Tests for the dependency verification columns."""

from depview.deps.columns import build_dep_columns
from depview.deps.models import (
    ComputedDep,
    CountPair,
    Dep,
    TrustedPair,
    VerificationStatus,
    latest_trusted_version_string,
)
from depview.formatters.palette import CellStyle
from depview.table.columns import allocate_widths


def computed(**overrides) -> ComputedDep:
    values = dict(
        trust=VerificationStatus.VERIFIED,
        reviews=CountPair(1, 4),
        issues=TrustedPair(0, 0),
        latest_trusted_version="1.0.0",
        downloads=CountPair(500, 1_000_000),
        owners=TrustedPair(1, 3),
        loc=15_000,
    )
    values.update(overrides)
    return ComputedDep(**values)


def cells(dep: Dep) -> dict:
    """Map column position to the cell rendered for a dependency."""
    return {index: column.cell_fn(dep) for index, column in enumerate(build_dep_columns())}


class TestDepColumns:
    """Tests for build_dep_columns."""

    def test_column_layout(self):
        """Thirteen columns with their names and width bounds."""
        columns = build_dep_columns()
        assert [c.name for c in columns] == [
            "crate", "version", "trust", "last trusted", "reviews", "reviews",
            "downloads", "downloads", "owners", "owners", "issues", "issues", "l.o.c.",
        ]
        assert (columns[0].min_width, columns[0].max_width) == (10, 80)
        assert (columns[3].min_width, columns[3].max_width) == (12, 16)

    def test_widths_on_80_columns(self):
        """On 80 columns everything but lines of code fits at minimum width."""
        widths = allocate_widths(build_dep_columns(), 80, spacing=1)
        assert widths == [10, 9, 6, 12, 3, 3, 6, 6, 2, 3, 2, 3, 0]

    def test_uncomputed_dep_uses_placeholders(self):
        """Before computation, cells show ? or nothing and never fail."""
        rendered = cells(Dep("serde", "1.0.0"))
        assert rendered[0].text == "serde"
        assert rendered[1].text == "1.0.0"
        assert rendered[2].text == "?"
        assert rendered[2].style is CellStyle.MEDIUM
        assert rendered[3].text == "?"
        assert rendered[4].text == "?"
        assert all(rendered[index].text == "" for index in range(6, 13))

    def test_trust_cells(self):
        """Trust outcomes map to labels and styles."""
        expected = {
            VerificationStatus.VERIFIED: ("high", CellStyle.GOOD),
            VerificationStatus.INSUFFICIENT: ("none", CellStyle.NONE),
            VerificationStatus.NEGATIVE: ("NO", CellStyle.BAD),
        }
        for trust, (text, style) in expected.items():
            cell = cells(Dep("a", "1.0.0", computed(trust=trust)))[2]
            assert (cell.text, cell.style) == (text, style)

    def test_computed_counts(self):
        """Counts are shown with magnitudes and highlighted when notable."""
        rendered = cells(Dep("a", "1.0.0", computed(issues=TrustedPair(1, 2))))
        assert rendered[3].text == "="
        assert rendered[4].text == "1"
        assert rendered[5].text == "4"
        assert (rendered[6].text, rendered[6].style) == ("500", CellStyle.MEDIUM)
        assert (rendered[7].text, rendered[7].style) == ("976K", CellStyle.STD)
        assert (rendered[8].text, rendered[8].style) == ("1", CellStyle.GOOD)
        assert rendered[9].text == "3"
        assert (rendered[10].text, rendered[10].style) == ("1", CellStyle.BAD)
        assert (rendered[11].text, rendered[11].style) == ("2", CellStyle.MEDIUM)
        assert rendered[12].text == "14K"

    def test_zero_counts_blank(self):
        """Zero owners and issues leave the cells empty."""
        rendered = cells(Dep("a", "1.0.0", computed(owners=TrustedPair(0, 0), reviews=CountPair(0, 0))))
        assert rendered[8].text == ""
        assert rendered[9].text == ""
        assert rendered[10].text == ""
        assert rendered[4].text == ""


class TestLatestTrustedVersion:
    """Tests for latest_trusted_version_string."""

    def test_nothing_trusted(self):
        assert latest_trusted_version_string("1.0.0", None) == ""

    def test_same_version(self):
        assert latest_trusted_version_string("1.2.3", "1.2.3") == "="

    def test_newer_trusted(self):
        """Numeric parts compare as numbers."""
        assert latest_trusted_version_string("1.2.0", "1.10.0") == "↑1.10.0"

    def test_older_trusted(self):
        assert latest_trusted_version_string("1.2.0", "0.9.1") == "↓0.9.1"

    def test_prerelease_older_than_release(self):
        """A pre-release sorts before the release it leads up to."""
        assert latest_trusted_version_string("1.0.0", "1.0.0-alpha") == "↓1.0.0-alpha"
        assert latest_trusted_version_string("1.0.0-alpha", "1.0.0") == "↑1.0.0"
        assert latest_trusted_version_string("0.9.0", "1.0.0-rc.1") == "↑1.0.0-rc.1"

    def test_prerelease_identifiers(self):
        """Numeric identifiers compare as numbers and sort before text."""
        assert latest_trusted_version_string("1.0.0-rc.2", "1.0.0-rc.10") == "↑1.0.0-rc.10"
        assert latest_trusted_version_string("1.0.0-alpha", "1.0.0-1") == "↓1.0.0-1"

    def test_build_metadata_ignored(self):
        """Versions differing only in build metadata are the same version."""
        assert latest_trusted_version_string("1.2.3", "1.2.3+build.5") == "="
        assert latest_trusted_version_string("1.2.3+a", "1.2.4+b") == "↑1.2.4+b"
