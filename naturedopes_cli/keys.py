from typing import Optional

import typer
from typing_extensions import Annotated

from naturedopes_cli.lib.api.keys import (
    display_generated_key,
    display_keys,
    generate_key,
    list_keys,
    revoke_key,
)
from naturedopes_cli.lib.utils import ensure_api_key_is_set, initialise_client


def generate_key_command(
    name: Annotated[str, typer.Argument(help="Name of the new API key")],
    api_url: Annotated[
        Optional[str],
        typer.Option(
            "--api-url",
            help="Nature Dopes API URL. If not given - value from config file will be used",
        ),
    ] = None,
    api_key: Annotated[
        Optional[str],
        typer.Option(
            "--api-key",
            "-a",
            help="Nature Dopes API key. Not required to generate a key. If not given - value from config file will be used",
        ),
    ] = None,
    debug_mode: Annotated[
        bool,
        typer.Option(
            "--debug-mode/--no-debug-mode",
            help="Flag enabling errors stack traces to be displayed (helpful for debugging)",
        ),
    ] = False,
) -> None:
    try:
        client = initialise_client(api_url=api_url, api_key=api_key)
        display_generated_key(key=generate_key(client=client, name=name))
    except KeyboardInterrupt:
        print("Command interrupted.")
        raise typer.Exit(code=2)
    except Exception as error:
        if debug_mode:
            raise error
        typer.echo(f"Command failed. Cause: {error}")
        raise typer.Exit(code=1)


def list_keys_command(
    api_url: Annotated[
        Optional[str],
        typer.Option(
            "--api-url",
            help="Nature Dopes API URL. If not given - value from config file will be used",
        ),
    ] = None,
    api_key: Annotated[
        Optional[str],
        typer.Option(
            "--api-key",
            "-a",
            help="Nature Dopes API key. If not given - value from config file will be used",
        ),
    ] = None,
    debug_mode: Annotated[
        bool,
        typer.Option(
            "--debug-mode/--no-debug-mode",
            help="Flag enabling errors stack traces to be displayed (helpful for debugging)",
        ),
    ] = False,
) -> None:
    try:
        client = initialise_client(api_url=api_url, api_key=api_key)
        ensure_api_key_is_set(api_key=client.api_key)
        display_keys(keys=list_keys(client=client))
    except KeyboardInterrupt:
        print("Command interrupted.")
        raise typer.Exit(code=2)
    except Exception as error:
        if debug_mode:
            raise error
        typer.echo(f"Command failed. Cause: {error}")
        raise typer.Exit(code=1)


def revoke_key_command(
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip confirmation prompt",
        ),
    ] = False,
    api_url: Annotated[
        Optional[str],
        typer.Option(
            "--api-url",
            help="Nature Dopes API URL. If not given - value from config file will be used",
        ),
    ] = None,
    api_key: Annotated[
        Optional[str],
        typer.Option(
            "--api-key",
            "-a",
            help="API key to revoke. If not given - value from config file will be used",
        ),
    ] = None,
    debug_mode: Annotated[
        bool,
        typer.Option(
            "--debug-mode/--no-debug-mode",
            help="Flag enabling errors stack traces to be displayed (helpful for debugging)",
        ),
    ] = False,
) -> None:
    try:
        client = initialise_client(api_url=api_url, api_key=api_key)
        ensure_api_key_is_set(api_key=client.api_key)
        if not yes and not typer.confirm(
            "Are you sure you want to revoke your API key? This cannot be undone."
        ):
            typer.echo("Revoke cancelled")
            return None
        revoke_key(client=client)
        typer.echo("Your API key has been successfully revoked")
    except KeyboardInterrupt:
        print("Command interrupted.")
        raise typer.Exit(code=2)
    except Exception as error:
        if debug_mode:
            raise error
        typer.echo(f"Command failed. Cause: {error}")
        raise typer.Exit(code=1)
