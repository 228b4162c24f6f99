from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable

INSTALLED_STATUS = 'ii'
EXCLUDED_ARCH = 'i386'


@dataclass(frozen=True)
class PackageRecord:
    name: str
    version: str


def split_name_and_arch(value: str) -> tuple[str, str | None]:
    name, sep, arch = value.partition(':')
    if not sep:
        return name, None
    return name, arch


def parse_line(line: str) -> PackageRecord | None:
    """Parses one `dpkg -l` row. Returns None for rows that should not be part of the listing."""
    fields = line.split()
    if len(fields) < 3:
        return None
    status, package, version = fields[:3]
    if status != INSTALLED_STATUS:
        return None
    name, arch = split_name_and_arch(package)
    if arch == EXCLUDED_ARCH:
        return None
    return PackageRecord(name=name, version=version)


def parse_listing(lines: Iterable[str]) -> MappingProxyType[str, str]:
    result: dict[str, str] = {}
    for line in lines:
        record = parse_line(line)
        if record:
            # Multiple architectures of the same package collapse into one entry, the last one wins
            result[record.name] = record.version
    return MappingProxyType(result)


def read_listing(path: Path | str) -> MappingProxyType[str, str]:
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return parse_listing(f)
