from dpkgdiff.versions.comparator import (
    DEFAULT_COMPARATOR,
    Direction,
    DpkgVersionComparator,
    VersionChange,
    VersionComparator,
    classify_changes,
)

__all__ = [
    "DEFAULT_COMPARATOR",
    "Direction",
    "DpkgVersionComparator",
    "VersionChange",
    "VersionComparator",
    "classify_changes",
]
