"""Configuration management commands."""

import click


@click.group()
def config() -> None:
    """Configuration commands."""
    pass


@config.command("show")
def config_show() -> None:
    """Show current configuration."""
    from behavioral.cli.output import console
    from behavioral.config import get_config

    config_obj = get_config()

    console.print("\n[bold]Current Configuration[/bold]")
    if config_obj._source:
        console.print(f"[dim]Source: {config_obj._source}[/dim]\n")
    else:
        console.print("[dim]Source: defaults (no config file found)[/dim]\n")

    for section_name, section in config_obj.to_dict().items():
        if section:
            console.print(f"[bold blue]\\[{section_name}][/bold blue]")
            for key, value in section.items():
                console.print(f"  {key} = {value}")
            console.print()


@config.command("init")
@click.option("--output", "-o", default="behavioral.toml", help="Output file path")
@click.option("--force", "-f", is_flag=True, help="Overwrite existing file")
def config_init(output: str, force: bool) -> None:
    """Create a default configuration file."""
    from pathlib import Path

    from behavioral.cli.output import print_error, print_success
    from behavioral.config import create_default_config_file

    if Path(output).exists() and not force:
        print_error(f"Config file already exists: {output}")
        click.echo("Use --force to overwrite.")
        raise SystemExit(1)

    path = create_default_config_file(output)
    print_success(f"Created config file: {path}")
