from dpkgdiff.listing.differ import DiffResult


def format_report(result: DiffResult) -> list[str]:
    """Renders the diff as text lines: deletions, then additions, then version changes.
    Each group is sorted by package name"""
    lines = [f"D {name} {result.deleted[name]}" for name in sorted(result.deleted)]
    lines.extend(f"A {name} {result.added[name]}" for name in sorted(result.added))
    for name in sorted(result.changed):
        change = result.changed[name]
        # Versions that could not be compared are reported like downgrades
        marker = "M^" if change.upgrade else "Mv"
        lines.append(f"{marker} {name} {change.from_} -> {change.to}")
    return lines
