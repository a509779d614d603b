# topmark:header:start
#
#   project      : CallInspect
#   file         : main.py
#   file_relpath : src/callinspect/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point of the CallInspect CLI.

Group-level options are resolved once and placed into ``ctx.obj``:

- ``config``: the [`CallInspectConfig`][callinspect.config.model.CallInspectConfig];
- ``verbosity_level``: the number of ``-v`` flags;
- ``console``: the program-output console.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from callinspect.cli.commands.describe import describe_command
from callinspect.cli.commands.version import version_command
from callinspect.cli.console import ClickConsole
from callinspect.cli.errors import CallInspectConfigError
from callinspect.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_log_level,
)
from callinspect.config.logging import get_logger, resolve_env_log_level, setup_logging
from callinspect.config.model import load_config
from callinspect.errors import ConfigError

if TYPE_CHECKING:
    from callinspect.cli.console import ConsoleLike
    from callinspect.config.model import CallInspectConfig

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state (config, logging, color) on the Click context.

    Logging level precedence: ``-v``/``-q`` flags, then the ``log_level`` config
    key, then ``CALLINSPECT_LOG_LEVEL``.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_path (Path | None): Explicit configuration file from ``--config``.

    Raises:
        CallInspectConfigError: If the configuration holds invalid values.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int | None = resolve_log_level(verbose, quiet)
    ctx.obj["verbosity_level"] = verbose

    try:
        config: CallInspectConfig = load_config(config_path)
    except ConfigError as exc:
        raise CallInspectConfigError(str(exc)) from exc
    ctx.obj["config"] = config

    level: int | None = level_cli
    if level is None:
        level = config.log_level
    if level is None:
        level = resolve_env_log_level()
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(effective_color_mode)
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: config=%r, log_level=%r, color=%r", config, level, enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="CallInspect CLI",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file (TOML). Defaults to [tool.callinspect] in ./pyproject.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the CallInspect CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_path=config_path,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'callinspect describe REF...' to describe callables.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(describe_command)

if __name__ == "__main__":
    cli()
