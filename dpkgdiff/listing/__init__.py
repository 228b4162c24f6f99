from dpkgdiff.listing.differ import DiffResult, ListingDiff, diff_listings
from dpkgdiff.listing.status_listing import (
    PackageRecord,
    parse_line,
    parse_listing,
    read_listing,
    split_name_and_arch,
)

__all__ = [
    "DiffResult",
    "ListingDiff",
    "diff_listings",
    "PackageRecord",
    "parse_line",
    "parse_listing",
    "read_listing",
    "split_name_and_arch",
]
