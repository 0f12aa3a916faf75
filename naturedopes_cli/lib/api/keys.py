import json
from typing import List

from pydantic import TypeAdapter
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from naturedopes_cli.lib.api.client import NatureDopesAPIClient
from naturedopes_cli.lib.api.common import decode_response
from naturedopes_cli.lib.api.entities import ApiKey

KEYS_PATH = "/api/keys"

_API_KEY_ADAPTER = TypeAdapter(ApiKey)
_API_KEYS_LIST_ADAPTER = TypeAdapter(List[ApiKey])


def display_keys(keys: List[ApiKey]) -> None:
    if len(keys) == 0:
        print("No API keys found")
        return None
    console = Console()
    table = Table(title="API Keys", show_lines=True)
    table.add_column("ID", justify="center", style="cyan", no_wrap=True)
    table.add_column("Name", justify="left")
    table.add_column("Key", justify="left", style="magenta")
    table.add_column("Created", justify="center")
    table.add_column("Expires", justify="center")
    table.add_column("Last Used", justify="center")
    table.add_column("Revoked", justify="center")
    for key in keys:
        table.add_row(
            str(key.id),
            escape(key.name),
            escape(key.masked_key),
            escape(key.created_at),
            escape(key.expires_at),
            escape(key.last_used or "never"),
            "🚨" if key.revoked else "🟢",
        )
    console.print(table)


def display_generated_key(key: ApiKey) -> None:
    console = Console()
    heading_text = Text(
        f"API key `{key.name}` generated",
        style="bold grey89 on steel_blue",
        justify="center",
    )
    console.print(Panel(heading_text, expand=True, border_style="steel_blue"))
    console.print(f"Key value: [bold]{escape(key.key)}[/bold]", highlight=False)
    console.print(f"Expires at: {escape(key.expires_at)}", highlight=False)
    console.print(
        "[yellow]Please save this key now - you won't be able to see it again.[/yellow]"
    )


def generate_key(client: NatureDopesAPIClient, name: str) -> ApiKey:
    body = json.dumps({"name": name}, separators=(",", ":")).encode("utf-8")
    payload = client.execute(method="POST", path=KEYS_PATH, body=body)
    return decode_response(
        payload=payload, adapter=_API_KEY_ADAPTER, operation_name="generate key"
    )


def list_keys(client: NatureDopesAPIClient) -> List[ApiKey]:
    payload = client.execute(method="GET", path=KEYS_PATH)
    return decode_response(
        payload=payload, adapter=_API_KEYS_LIST_ADAPTER, operation_name="list keys"
    )


def revoke_key(client: NatureDopesAPIClient) -> None:
    # the key being revoked is the one sent in the X-API-Key header
    client.execute(method="DELETE", path=KEYS_PATH)
