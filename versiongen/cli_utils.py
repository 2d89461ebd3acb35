"""
Common CLI utilities and decorators for consistent command behavior.
"""

import sys
import logging
from functools import wraps

import click

from .exit_codes import (
    SUCCESS, INTERRUPTED,
    get_exit_code_for_exception, CommandError
)

logger = logging.getLogger(__name__)


def standard_command(func):
    """
    Decorator that provides standard CLI behavior:
    - Outputs on stdout, diagnostics on stderr
    - Consistent error handling: a fatal error prints its message to stderr
      and exits non-zero without writing any outputs
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            func(*args, **kwargs)
        except KeyboardInterrupt:
            click.echo("Interrupted by user", err=True)
            sys.exit(INTERRUPTED)
        except click.ClickException:
            # Click exceptions already have their exit code
            raise
        except CommandError as e:
            click.echo(f"ERROR: {e}", err=True)
            sys.exit(e.exit_code)
        except Exception as e:
            logger.debug("Unexpected failure", exc_info=True)
            click.echo(f"ERROR: Command failed: {e}", err=True)
            sys.exit(get_exit_code_for_exception(e))
        sys.exit(SUCCESS)

    return wrapper


# Standard options
common_options = {
    'verbose': click.option('-v', '--verbose', is_flag=True,
                            help='Log git commands and decisions to stderr'),
    'repo': click.option('-C', '--repo', 'repo_path',
                         type=click.Path(file_okay=False),
                         help='Repository path (default: $GITHUB_WORKSPACE or cwd)'),
}


def add_common_options(*option_names):
    """
    Decorator to add common options to a command.

    Example:
        @add_common_options('verbose', 'repo')
        def my_command(verbose, repo_path):
            ...
    """
    def decorator(func):
        for name in reversed(option_names):
            if name in common_options:
                func = common_options[name](func)
        return func
    return decorator
