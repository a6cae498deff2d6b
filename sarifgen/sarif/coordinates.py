# Coordinate translation: 0-based analyzer regions -> 1-based SARIF regions.

from sarifgen.findings.models import UNSET, SourceRegion
from sarifgen.sarif.schema import Region


def to_one_based(value: int) -> int:
    """Return value + 1, or -1 unchanged when the coordinate is unknown."""
    if value == UNSET:
        return UNSET
    return value + 1


def map_region(region: SourceRegion) -> Region:
    """
    Translate a 0-based region into a SARIF region.

    Each field is mapped on its own; spans with end before start are passed
    through as they are. charOffset and byteOffset stay absent so they are not
    written as -1 defaults.
    """
    return Region(
        start_line=to_one_based(region.start_line),
        end_line=to_one_based(region.end_line),
        start_column=to_one_based(region.start_column),
        end_column=to_one_based(region.end_column),
    )
