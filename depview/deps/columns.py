"""Columns of the dependency verification table."""

from __future__ import annotations

from ..formatters.palette import CellStyle
from ..table.columns import Column, StyledCell
from ..utils.magnitude import format_magnitude
from ..utils.string_utils import Alignment
from .models import Dep, VerificationStatus, latest_trusted_version_string

UNKNOWN = "?"
LOW_DOWNLOADS = 1000

TRUST_CELLS = {
    VerificationStatus.VERIFIED: StyledCell("high", CellStyle.GOOD),
    VerificationStatus.INSUFFICIENT: StyledCell("none", CellStyle.NONE),
    VerificationStatus.NEGATIVE: StyledCell("NO", CellStyle.BAD),
}


def crate_cell(dep: Dep) -> StyledCell:
    return StyledCell(dep.name)


def version_cell(dep: Dep) -> StyledCell:
    return StyledCell(dep.version)


def trust_cell(dep: Dep) -> StyledCell:
    if dep.computed is None:
        return StyledCell(UNKNOWN, CellStyle.MEDIUM)
    return TRUST_CELLS[dep.computed.trust]


def last_trusted_cell(dep: Dep) -> StyledCell:
    if dep.computed is None:
        return StyledCell(UNKNOWN)
    return StyledCell(latest_trusted_version_string(dep.version, dep.computed.latest_trusted_version))


def version_reviews_cell(dep: Dep) -> StyledCell:
    if dep.computed is None:
        return StyledCell(UNKNOWN)
    return StyledCell(format_magnitude(dep.computed.reviews.version))


def total_reviews_cell(dep: Dep) -> StyledCell:
    if dep.computed is None:
        return StyledCell(UNKNOWN)
    return StyledCell(format_magnitude(dep.computed.reviews.total))


def _downloads_cell(count: int) -> StyledCell:
    style = CellStyle.MEDIUM if count < LOW_DOWNLOADS else CellStyle.STD
    return StyledCell(format_magnitude(count), style)


def version_downloads_cell(dep: Dep) -> StyledCell:
    if dep.computed is None or dep.computed.downloads is None:
        return StyledCell("")
    return _downloads_cell(dep.computed.downloads.version)


def total_downloads_cell(dep: Dep) -> StyledCell:
    if dep.computed is None or dep.computed.downloads is None:
        return StyledCell("")
    return _downloads_cell(dep.computed.downloads.total)


def trusted_owners_cell(dep: Dep) -> StyledCell:
    owners = dep.computed.owners if dep.computed else None
    if owners is not None and owners.trusted > 0:
        return StyledCell(str(owners.trusted), CellStyle.GOOD)
    return StyledCell("")


def total_owners_cell(dep: Dep) -> StyledCell:
    owners = dep.computed.owners if dep.computed else None
    if owners is not None and owners.total > 0:
        return StyledCell(str(owners.total))
    return StyledCell("")


def trusted_issues_cell(dep: Dep) -> StyledCell:
    if dep.computed is not None and dep.computed.issues.trusted > 0:
        return StyledCell(str(dep.computed.issues.trusted), CellStyle.BAD)
    return StyledCell("")


def total_issues_cell(dep: Dep) -> StyledCell:
    if dep.computed is not None and dep.computed.issues.total > 0:
        return StyledCell(str(dep.computed.issues.total), CellStyle.MEDIUM)
    return StyledCell("")


def loc_cell(dep: Dep) -> StyledCell:
    if dep.computed is None or dep.computed.loc is None:
        return StyledCell("")
    return StyledCell(format_magnitude(dep.computed.loc))


def build_dep_columns() -> list[Column[Dep]]:
    """Build the verification table columns, in display order."""
    return [
        Column("crate", 10, 80, crate_cell, Alignment.LEFT),
        Column("version", 9, 13, version_cell, Alignment.RIGHT),
        Column("trust", 6, 6, trust_cell),
        Column("last trusted", 12, 16, last_trusted_cell, Alignment.RIGHT),
        Column("reviews", 3, 3, version_reviews_cell, Alignment.CENTER),
        Column("reviews", 3, 3, total_reviews_cell, Alignment.CENTER),
        Column("downloads", 6, 6, version_downloads_cell, Alignment.RIGHT),
        Column("downloads", 6, 6, total_downloads_cell, Alignment.RIGHT),
        Column("owners", 2, 2, trusted_owners_cell, Alignment.RIGHT),
        Column("owners", 3, 3, total_owners_cell, Alignment.RIGHT),
        Column("issues", 2, 2, trusted_issues_cell, Alignment.RIGHT),
        Column("issues", 3, 3, total_issues_cell, Alignment.RIGHT),
        Column("l.o.c.", 6, 6, loc_cell, Alignment.RIGHT),
    ]
