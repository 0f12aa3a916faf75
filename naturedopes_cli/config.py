import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from typing_extensions import Annotated

from naturedopes_cli.lib.config_store import (
    RECOGNISED_KEYS,
    get_config_file_path,
    get_config_value,
    list_config_fields,
    set_config_value,
)

KEY_HELP = f"Configuration key, one of: {', '.join(RECOGNISED_KEYS)}"


def set_config_command(
    key: Annotated[str, typer.Argument(help=KEY_HELP)],
    value: Annotated[str, typer.Argument(help="New value of the key")],
    debug_mode: Annotated[
        bool,
        typer.Option(
            "--debug-mode/--no-debug-mode",
            help="Flag enabling errors stack traces to be displayed (helpful for debugging)",
        ),
    ] = False,
) -> None:
    try:
        set_config_value(key=key, value=value)
        typer.echo(f"New {key} has been set")
    except KeyboardInterrupt:
        print("Command interrupted.")
        raise typer.Exit(code=2)
    except Exception as error:
        if debug_mode:
            raise error
        typer.echo(f"Command failed. Cause: {error}")
        raise typer.Exit(code=1)


def get_config_command(
    key: Annotated[str, typer.Argument(help=KEY_HELP)],
    debug_mode: Annotated[
        bool,
        typer.Option(
            "--debug-mode/--no-debug-mode",
            help="Flag enabling errors stack traces to be displayed (helpful for debugging)",
        ),
    ] = False,
) -> None:
    try:
        value = get_config_value(key=key)
        typer.echo(f"Current {key} is: {value}")
    except KeyboardInterrupt:
        print("Command interrupted.")
        raise typer.Exit(code=2)
    except Exception as error:
        if debug_mode:
            raise error
        typer.echo(f"Command failed. Cause: {error}")
        raise typer.Exit(code=1)


def list_config_command(
    debug_mode: Annotated[
        bool,
        typer.Option(
            "--debug-mode/--no-debug-mode",
            help="Flag enabling errors stack traces to be displayed (helpful for debugging)",
        ),
    ] = False,
) -> None:
    try:
        display_config_fields(
            fields=list_config_fields(), config_path=get_config_file_path()
        )
    except KeyboardInterrupt:
        print("Command interrupted.")
        raise typer.Exit(code=2)
    except Exception as error:
        if debug_mode:
            raise error
        typer.echo(f"Command failed. Cause: {error}")
        raise typer.Exit(code=1)


def display_config_fields(fields, config_path: str) -> None:
    console = Console()
    table = Table(title=escape(f"Configuration [{config_path}]"), show_lines=True)
    table.add_column("Key", justify="left", style="cyan", no_wrap=True)
    table.add_column("Value", justify="left", overflow="fold")
    for name, value in fields:
        table.add_row(name, escape(value))
    console.print(table)
