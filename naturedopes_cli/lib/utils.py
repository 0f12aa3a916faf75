from typing import Optional

from naturedopes_cli.lib.api.client import NatureDopesAPIClient
from naturedopes_cli.lib.config_store import load_config
from naturedopes_cli.lib.exceptions import APIKeyNotConfiguredError


def initialise_client(
    api_url: Optional[str] = None,
    api_key: Optional[str] = None,
) -> NatureDopesAPIClient:
    config = load_config()
    if api_url is not None:
        config.api_url = api_url
    if api_key is not None:
        config.api_key = api_key
    return NatureDopesAPIClient.from_config(config=config)


def ensure_api_key_is_set(api_key: Optional[str]) -> None:
    if not api_key:
        raise APIKeyNotConfiguredError(
            "No API key configured. To get started, generate an API key with "
            "`naturedopes keys generate <name>` and store it with "
            "`naturedopes config set api-key <key>`"
        )
