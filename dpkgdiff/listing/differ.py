from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from dpkgdiff.versions.comparator import VersionChange


@dataclass(frozen=True)
class ListingDiff:
    deleted: MappingProxyType[str, str]
    added: MappingProxyType[str, str]
    changed: MappingProxyType[str, tuple[str, str]]


@dataclass(frozen=True)
class DiffResult:
    deleted: MappingProxyType[str, str]
    added: MappingProxyType[str, str]
    changed: MappingProxyType[str, VersionChange]


def diff_listings(old: Mapping[str, str], new: Mapping[str, str]) -> ListingDiff:
    """Computes what happened between the old and new listing.
    Packages with the same version in both listings are not part of the result."""
    deleted: dict[str, str] = {}
    changed: dict[str, tuple[str, str]] = {}
    for name, old_version in old.items():
        if name not in new:
            deleted[name] = old_version
        elif new[name] != old_version:
            changed[name] = (old_version, new[name])

    added = {name: new_version for name, new_version in new.items() if name not in old}
    return ListingDiff(
        deleted=MappingProxyType(deleted),
        added=MappingProxyType(added),
        changed=MappingProxyType(changed),
    )
