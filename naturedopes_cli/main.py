import os
from typing import Callable, List, NamedTuple, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from naturedopes_cli import config, images, keys


class CommandSpec(NamedTuple):
    name: str
    handler: Callable[..., None]
    help: str


class CommandGroup(NamedTuple):
    name: str
    help: str
    commands: List[CommandSpec]


COMMAND_GROUPS = [
    CommandGroup(
        name="images",
        help="Commands for browsing images in Nature Dopes catalog",
        commands=[
            CommandSpec("list", images.list_images_command, "List all images."),
            CommandSpec("get", images.get_image_command, "Get individual image."),
            CommandSpec(
                "search",
                images.search_images_command,
                "Search images by species name and / or user.",
            ),
        ],
    ),
    CommandGroup(
        name="keys",
        help="Commands for API keys management",
        commands=[
            CommandSpec(
                "generate", keys.generate_key_command, "Create new API key."
            ),
            CommandSpec("list", keys.list_keys_command, "List your API keys."),
            CommandSpec(
                "revoke", keys.revoke_key_command, "Revoke the configured API key."
            ),
        ],
    ),
    CommandGroup(
        name="config",
        help="Commands for managing CLI configuration",
        commands=[
            CommandSpec("set", config.set_config_command, "Set a configuration value."),
            CommandSpec("get", config.get_config_command, "Get a configuration value."),
            CommandSpec(
                "list", config.list_config_command, "List all configuration values."
            ),
        ],
    ),
]


def version_callback(value: bool):
    if value:
        from importlib.metadata import PackageNotFoundError, version

        try:
            package_version = version("naturedopes-cli")
        except PackageNotFoundError:
            from naturedopes_cli.version import __version__ as package_version

        typer.echo(f"naturedopes-cli version: v{package_version}")
        raise typer.Exit()


def main_callback(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
):
    load_dotenv(os.path.join(os.getcwd(), ".env"))


def build_app(command_groups: List[CommandGroup] = COMMAND_GROUPS) -> typer.Typer:
    root_app = typer.Typer(
        help="""CLI tool for Nature Dopes API. \n
    Manage images, search for flora species and work with API keys."""
    )
    root_app.callback()(main_callback)
    for group in command_groups:
        group_app = typer.Typer(help=group.help)
        for command in group.commands:
            group_app.command(name=command.name, help=command.help)(command.handler)
        root_app.add_typer(group_app, name=group.name)
    return root_app


app = build_app()


if __name__ == "__main__":
    app()
