import sys
from functools import wraps
from typing import Callable, ParamSpec, TypeVar

import click

P = ParamSpec('P')
R = TypeVar('R')


def handle_errors(func: Callable[P, R]) -> Callable[P, R]:
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except OSError as e:
            # Unreadable listings abort the whole run, nothing is printed to stdout
            click.echo(click.style(str(e), fg="red"), err=True)
            sys.exit(1)
        except ValueError as e:
            click.echo(click.style(str(e), fg="red"), err=True)
            sys.exit(1)
        except RuntimeError:
            # Let RuntimeError bubble up to be handled by Click's CliRunner
            raise

    return wrapper
