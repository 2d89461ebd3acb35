#!/usr/bin/env python3

import os

import click

from versiongen import __version__
from versiongen.api import VersionGen
from versiongen.cli_utils import standard_command, add_common_options
from versiongen.config import CIEnvironment, configure_logging, load_config, logger
from versiongen.exit_codes import VersionMismatchError
from versiongen.format_utils import (
    FORMATS,
    format_annotation,
    format_output,
    format_set_output,
    render_outputs_table,
    write_github_output,
)


@click.command(name='versiongen')
@click.version_option(version=__version__, prog_name='versiongen')
@add_common_options('repo', 'verbose')
@click.option('--event', 'event_name', help='Triggering event name (default: $GITHUB_EVENT_NAME)')
@click.option('--ref', help='Triggering ref (default: $GITHUB_REF)')
@click.option('-f', '--format', 'output_format', type=click.Choice(FORMATS),
              help='Output format (default: github, or output.format from config)')
@click.option('--output-file', type=click.Path(dir_okay=False),
              help='Step output file for the github format (default: $GITHUB_OUTPUT)')
@click.option('--strict/--no-strict', default=None,
              help='Fail when a project file version disagrees with the pushed tag')
@standard_command
def cli(repo_path, verbose, event_name, ref, output_format, output_file, strict):
    """Generate version outputs for a CI run from git tags.

    Reads the triggering event and ref, inspects the repository's tags and
    prints the resulting outputs.

    Examples:

    \b
        # In a GitHub Actions step: writes to $GITHUB_OUTPUT
        versiongen

    \b
        # Locally, as if main had just been pushed
        versiongen --event push --ref refs/heads/main -f table
    """
    ci = CIEnvironment.from_env()
    repo_path = repo_path or ci.workspace or os.getcwd()

    config = load_config(repo_path)
    configure_logging(config, verbose)

    output_format = output_format or config['output']['format']
    if strict is None:
        strict = bool(config['project_files'].get('strict', False))

    info = VersionGen(repo_path, config=config).resolve(event_name, ref)
    outputs = info.to_outputs()

    if info.version_mismatch:
        if strict:
            raise VersionMismatchError(info.version_mismatch.split('::', 1)[1])
        logger.warning(info.version_mismatch.split('::', 1)[1])

    if output_format == 'table':
        render_outputs_table(outputs)
        return

    if output_format != 'github':
        for line in format_output(outputs, output_format):
            click.echo(line)
        return

    output_file = output_file or ci.github_output
    if output_file:
        write_github_output(outputs, output_file)
        lines = format_output(outputs, output_format)
    else:
        lines = format_set_output(outputs)
    for line in lines:
        click.echo(line)
    if info.version_mismatch:
        click.echo(format_annotation('warning', info.version_mismatch))


def main():
    cli()

if __name__ == "__main__":
    main()
