from dpkgdiff.commands.diff import generate_diff, print_report
from dpkgdiff.commands.load_config import get_config_paths, load_config
from dpkgdiff.commands.report import format_report
