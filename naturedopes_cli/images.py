from typing import Optional

import typer
from typing_extensions import Annotated

from naturedopes_cli.lib.api.images import (
    display_image_details,
    display_images,
    get_image,
    list_images,
    search_images,
)
from naturedopes_cli.lib.utils import initialise_client


def list_images_command(
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
        display_images(images=list_images(client=client))
    except KeyboardInterrupt:
        print("Command interrupted.")
        raise typer.Exit(code=2)
    except Exception as error:
        if debug_mode:
            raise error
        typer.echo(f"Command failed. Cause: {error}")
        raise typer.Exit(code=1)


def get_image_command(
    image_id: Annotated[
        int,
        typer.Argument(help="Identifier of the image (positive integer)", min=1),
    ],
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
        display_image_details(image=get_image(client=client, image_id=image_id))
    except KeyboardInterrupt:
        print("Command interrupted.")
        raise typer.Exit(code=2)
    except Exception as error:
        if debug_mode:
            raise error
        typer.echo(f"Command failed. Cause: {error}")
        raise typer.Exit(code=1)


def search_images_command(
    species_name: Annotated[
        str,
        typer.Option(
            "--species",
            "-s",
            help="Species name to filter images by",
        ),
    ] = "",
    user_id: Annotated[
        int,
        typer.Option(
            "--user-id",
            "-u",
            help="Identifier of the user who uploaded images (ignored if not positive)",
        ),
    ] = 0,
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
        images = search_images(
            client=client, species_name=species_name, user_id=user_id
        )
        display_images(images=images, title="Search Results")
    except KeyboardInterrupt:
        print("Command interrupted.")
        raise typer.Exit(code=2)
    except Exception as error:
        if debug_mode:
            raise error
        typer.echo(f"Command failed. Cause: {error}")
        raise typer.Exit(code=1)
