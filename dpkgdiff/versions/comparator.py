import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Mapping

import click

DEFAULT_COMPARATOR = ('dpkg', '--compare-versions')


class Direction(StrEnum):
    upgrade = 'UPGRADE'
    downgrade = 'DOWNGRADE'
    unknown = 'UNKNOWN'


@dataclass(frozen=True)
class VersionChange:
    from_: str
    to: str
    direction: Direction

    @property
    def upgrade(self) -> bool:
        return self.direction is Direction.upgrade


class VersionComparator(ABC):
    @abstractmethod
    def compare(self, from_: str, to: str) -> Direction:  # pragma: no cover
        pass


class DpkgVersionComparator(VersionComparator):
    command: tuple[str, ...]

    def __init__(self, command: tuple[str, ...] = DEFAULT_COMPARATOR) -> None:
        self.command = tuple(command)

    def compare(self, from_: str, to: str) -> Direction:
        """Asks the comparator whether from_ is strictly lower than to.
        Exit code 0 means it is, 1 means it isn't. Anything else is reported and treated as unknown"""
        # N.B. "lt" is the strict operator. dpkg's legacy "<" means less than or equal
        args = [*self.command, from_, 'lt', to]
        try:
            result = subprocess.run(args, capture_output=True, text=True)
        except OSError as e:
            click.echo(f"Could not run {' '.join(self.command)}: {e}", err=True)
            return Direction.unknown

        if result.returncode == 0:
            return Direction.upgrade
        elif result.returncode == 1:
            return Direction.downgrade

        click.echo(f"Comparing {from_} with {to} failed with exit code {result.returncode}", err=True)
        if result.stderr:
            click.echo(result.stderr.rstrip(), err=True)
        return Direction.unknown


def classify_changes(
    changed: Mapping[str, tuple[str, str]], comparator: VersionComparator
) -> MappingProxyType[str, VersionChange]:
    classified: dict[str, VersionChange] = {}
    for name in sorted(changed):
        from_, to = changed[name]
        classified[name] = VersionChange(from_=from_, to=to, direction=comparator.compare(from_, to))
    return MappingProxyType(classified)
