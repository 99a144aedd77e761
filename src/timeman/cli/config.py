"""Config command - manage configuration."""

from pathlib import Path

import rich_click as click
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from timeman.cli.main import Context, pass_context

console = Console()


@click.group()
def config_cmd() -> None:
    """Manage configuration."""
    pass


@config_cmd.command("show")
@pass_context
def show(ctx: Context) -> None:
    """Show current configuration."""
    from timeman.core.config import SEARCH_LOCATIONS, find_config_file

    config_path = ctx.config_path or find_config_file()
    config = ctx.config

    table = Table(title="Effective settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("format", Text(config.format))
    table.add_row("offset", Text(config.offset or "local"))
    table.add_row("duration_flags", Text(config.duration_flags or "YMWDhmsn"))
    table.add_row("pretty", str(config.pretty).lower())
    console.print(table)

    if config_path is None:
        console.print("[yellow]No configuration file found[/yellow]")
        console.print("Using default settings")
        console.print("\nSearch locations:")
        for number, location in enumerate(SEARCH_LOCATIONS, start=1):
            console.print(f"  {number}. {location}", markup=False, highlight=False)
        return

    console.print("[bold]Config file:[/bold]", Text(str(config_path)))
    console.print()

    # Read and display the config file
    content = config_path.read_text()
    syntax = Syntax(content, "toml", theme="monokai", line_numbers=True)
    console.print(syntax)


@config_cmd.command("init")
@click.option("--global", "-g", "global_config", is_flag=True, help="Create global config")
@pass_context
def init(ctx: Context, global_config: bool) -> None:
    """Create a new configuration file."""
    from timeman.core.config import CONFIG_FILENAME, DEFAULT_CONFIG_TEMPLATE, user_config_path

    if global_config:
        config_path = user_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
    else:
        config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        if not click.confirm(f"{config_path} already exists. Overwrite?"):
            console.print("[yellow]Cancelled[/yellow]")
            return

    config_path.write_text(DEFAULT_CONFIG_TEMPLATE)
    console.print(f"[green]Created {config_path}[/green]")


@config_cmd.command("path")
@pass_context
def path(ctx: Context) -> None:
    """Show path to active configuration file."""
    from timeman.core.config import find_config_file

    config_path = ctx.config_path or find_config_file()

    if config_path:
        console.print(str(config_path), markup=False, highlight=False, soft_wrap=True)
    else:
        console.print("[yellow]No configuration file found[/yellow]")
