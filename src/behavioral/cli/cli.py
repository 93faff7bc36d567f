"""
Behavioral CLI - Behavioral design pattern examples
"""

from typing import Optional

import click

from behavioral import __version__

from .commands import calc, config, patterns

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.version_option(version=__version__, prog_name="behavioral")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a TOML configuration file",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default from config: INFO)",
)
def cli(config_path: Optional[str], log_level: Optional[str]) -> None:
    """Behavioral - design pattern examples with an undoable calculator

    Use 'behavioral COMMAND --help' for more information on a command.
    """
    from behavioral.config import load_config, set_config
    from behavioral.core.logger import get_logger, set_level

    loaded = load_config(config_path)
    set_config(loaded)

    try:
        set_level(log_level or loaded.log_level)
    except ValueError as e:
        get_logger(__name__).warning(f"{e}; keeping the current level")


# Register command groups
cli.add_command(calc)
cli.add_command(config)
cli.add_command(patterns)


if __name__ == "__main__":
    cli()
