"""CLI entry point for cli-bridge."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from cli_bridge import __version__

log = logging.getLogger('clib.cli')


def _load_config(config_path: str | None, overrides: dict):
    from cli_bridge.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from cli_bridge.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_app_config,
    )

    try:
        raw = YamlConfigLoader().load_raw(config_path, overrides=overrides or None)
    except FileNotFoundError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    return build_app_config(raw)


def _bootstrap(config_path: str | None, overrides: dict):
    from cli_bridge.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: not needed for --help
        DependencyContainer,
    )
    from cli_bridge.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_logging,
    )

    config = _load_config(config_path, overrides)
    setup_logging(config.logging.level, Path(config.logging.file) if config.logging.file else None)
    return DependencyContainer(config)


_config_option = click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)


@click.group()
@click.version_option(version=__version__)
def cli():
    """cli-bridge -- turn OpenAI chat-completion requests into single-turn CLI input."""


@cli.command()
@click.argument('request_path', default='-', type=click.Path(dir_okay=False, allow_dash=True))
@_config_option
@click.option(
    '-f',
    '--format',
    'output_format',
    default=None,
    type=click.Choice(['json', 'prompt']),
    help='json: full CLI input record; prompt: flattened prompt text only.',
)
@click.option(
    '--log-file',
    default=None,
    type=click.Path(dir_okay=False),
    help='Write logs to this file instead of stderr.',
)
def convert(request_path, config_path, output_format, log_file):
    """Convert a chat request (file path, or - for stdin) into CLI input."""
    from cli_bridge.l1_entities.errors import InvalidRequestError  # noqa: PLC0415 -- deferred: pydantic not loaded on --help

    overrides: dict = {}
    if output_format:
        overrides['output'] = {'format': output_format}
    if log_file:
        overrides['logging'] = {'file': log_file}
    container = _bootstrap(config_path, overrides)

    try:
        if request_path == '-':
            request = container.request_loader.load_text(sys.stdin.read())
        else:
            request = container.request_loader.load(request_path)
    except (InvalidRequestError, FileNotFoundError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    cli_input = container.convert_request.execute(request)
    log.info('Converted request: model=%s → %s, prompt=%d chars', request.model, cli_input.model, len(cli_input.prompt))

    output = container.config.output
    if output.format == 'prompt':
        click.echo(cli_input.prompt)
    else:
        click.echo(cli_input.model_dump_json(exclude_none=True, indent=output.indent))


@cli.command()
@_config_option
@click.option('--created', default=None, type=int, help='Unix timestamp reported as each model\'s creation time.')
def models(config_path, created):
    """List the advertised models in OpenAI /v1/models format."""
    container = _bootstrap(config_path, {})
    model_list = container.list_models.execute(created=created)
    click.echo(model_list.model_dump_json(exclude_none=True, indent=container.config.output.indent))
