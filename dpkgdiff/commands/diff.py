from pathlib import Path

import click

from dpkgdiff.commands.report import format_report
from dpkgdiff.listing.differ import DiffResult, diff_listings
from dpkgdiff.listing.status_listing import read_listing
from dpkgdiff.versions.comparator import Direction, VersionComparator, classify_changes


def generate_diff(
    file_a: Path | str, file_b: Path | str, *, comparator: VersionComparator, verbose: bool = False
) -> DiffResult:
    old = read_listing(file_a)
    if verbose:
        click.echo(f"Read {len(old)} installed packages from {file_a}", err=True)
    new = read_listing(file_b)
    if verbose:
        click.echo(f"Read {len(new)} installed packages from {file_b}", err=True)

    listing_diff = diff_listings(old, new)
    if verbose and listing_diff.changed:
        click.echo(f"Comparing versions of {len(listing_diff.changed)} changed packages...", err=True)
    changed = classify_changes(listing_diff.changed, comparator)

    result = DiffResult(deleted=listing_diff.deleted, added=listing_diff.added, changed=changed)
    if verbose:
        _echo_summary(result)
    return result


def print_report(result: DiffResult) -> None:
    for line in format_report(result):
        click.echo(line)


def _echo_summary(result: DiffResult) -> None:
    directions = [change.direction for change in result.changed.values()]
    click.echo(
        f"{len(result.deleted)} removed, {len(result.added)} added, "
        f"{directions.count(Direction.upgrade)} upgraded, {directions.count(Direction.downgrade)} downgraded, "
        f"{directions.count(Direction.unknown)} could not be compared",
        err=True,
    )
