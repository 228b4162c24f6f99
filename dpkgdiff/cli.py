from pathlib import Path

import click

from dpkgdiff.__about__ import __version__
from dpkgdiff.commands import generate_diff, load_config, print_report
from dpkgdiff.helpers.handle_errors import handle_errors
from dpkgdiff.versions.comparator import DpkgVersionComparator


@click.command()
@click.version_option(__version__, prog_name="dpkgdiff")
@click.option('--verbose', '-v', is_flag=True, help='Print progress and a summary to stderr', default=False)
@click.argument('file_a', type=click.Path(path_type=Path))
@click.argument('file_b', type=click.Path(path_type=Path))
@handle_errors
def main(verbose: bool, file_a: Path, file_b: Path):
    """Compare two `dpkg -l` listings, FILE_A being the old state and FILE_B the new one."""
    config = load_config()
    comparator = DpkgVersionComparator(config.comparator)
    result = generate_diff(file_a, file_b, comparator=comparator, verbose=verbose)
    print_report(result)


if __name__ == "__main__":
    main()
