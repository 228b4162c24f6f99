from pathlib import Path
from typing import Any, Callable, Generator
from unittest.mock import Mock, patch

import pytest

from dpkgdiff.versions.comparator import Direction, VersionComparator

DPKG_HEADER = """\
Desired=Unknown/Install/Remove/Purge/Hold
| Status=Not/Inst/Conf-files/Unpacked/halF-conf/Half-inst/trig-aWait/Trig-pend
|/ Err?=(none)/Reinst-required (Status,Err: uppercase=bad)
||/ Name                Version          Architecture Description
+++-===================-================-============-=================================
"""


class FakeComparator(VersionComparator):
    """Treats every pair listed in upgrades as an upgrade, and everything else as a downgrade"""

    def __init__(self, upgrades: set[tuple[str, str]] | None = None, unknown: set[tuple[str, str]] | None = None):
        self.upgrades = upgrades or set()
        self.unknown = unknown or set()
        self.calls: list[tuple[str, str]] = []

    def compare(self, from_: str, to: str) -> Direction:
        self.calls.append((from_, to))
        if (from_, to) in self.unknown:
            return Direction.unknown
        if (from_, to) in self.upgrades:
            return Direction.upgrade
        return Direction.downgrade


@pytest.fixture
def write_listing(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(name: str, body: str) -> Path:
        path = tmp_path / name
        path.write_text(DPKG_HEADER + body)
        return path

    return _write


@pytest.fixture
def mock_compare_versions() -> Generator[Callable[..., Mock], None, None]:
    """Patches subprocess.run so that dpkg --compare-versions answers from a set of (lower, higher) pairs"""
    with patch('subprocess.run') as mock_run:

        def configure(lower_than: set[tuple[str, str]]) -> Mock:
            def side_effect(args: list[str], *_: Any, **kwargs: Any) -> Mock:
                from_, operator, to = args[-3:]
                assert operator == 'lt'
                return Mock(returncode=0 if (from_, to) in lower_than else 1, stdout='', stderr='')

            mock_run.side_effect = side_effect
            return mock_run

        yield configure


@pytest.fixture
def fake_comparator() -> type[FakeComparator]:
    return FakeComparator
