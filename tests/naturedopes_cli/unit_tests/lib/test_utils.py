import pytest

from naturedopes_cli.lib.config_store import Config, save_config
from naturedopes_cli.lib.exceptions import APIKeyNotConfiguredError
from naturedopes_cli.lib.utils import ensure_api_key_is_set, initialise_client


def test_initialise_client_from_config_file(config_file_path: str) -> None:
    # given
    save_config(config=Config(api_url="http://x", api_key="k"))

    # when
    result = initialise_client()

    # then
    assert result.api_url == "http://x"
    assert result.api_key == "k"


def test_initialise_client_with_overrides(config_file_path: str) -> None:
    # given
    save_config(config=Config(api_url="http://x", api_key="k"))

    # when
    result = initialise_client(api_url="http://other", api_key="other-key")

    # then
    assert result.api_url == "http://other"
    assert result.api_key == "other-key"


@pytest.mark.parametrize("api_key", [None, ""])
def test_ensure_api_key_is_set_when_key_is_missing(api_key) -> None:
    # when
    with pytest.raises(APIKeyNotConfiguredError):
        ensure_api_key_is_set(api_key=api_key)


def test_ensure_api_key_is_set_when_key_is_present() -> None:
    # when
    ensure_api_key_is_set(api_key="k")

    # then - no error
