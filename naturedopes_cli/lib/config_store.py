import json
import os
from typing import List, Tuple

from pydantic import AnyHttpUrl, BaseModel, TypeAdapter, ValidationError

from naturedopes_cli.lib.env import (
    API_KEY_ENV,
    API_URL_ENV,
    CONFIG_DIR_NAME,
    CONFIG_DIR_PERMISSIONS,
    CONFIG_FILE_NAME,
    CONFIG_FILE_PERMISSIONS,
    DEFAULT_API_URL,
)
from naturedopes_cli.lib.exceptions import (
    ConfigIOError,
    DecodeError,
    InvalidConfigKeyError,
    InvalidConfigValueError,
)
from naturedopes_cli.lib.logger import CLI_LOGGER

API_URL_KEY = "api-url"
API_KEY_KEY = "api-key"
RECOGNISED_KEYS = (API_URL_KEY, API_KEY_KEY)

_URL_VALIDATOR = TypeAdapter(AnyHttpUrl)


class Config(BaseModel):
    api_url: str
    api_key: str = ""


def get_config_file_path() -> str:
    home_dir = os.path.expanduser("~")
    # expanduser() returns its input unchanged when home cannot be resolved
    if home_dir == "~":
        raise ConfigIOError("User home directory not found.")
    return os.path.join(home_dir, CONFIG_DIR_NAME, CONFIG_FILE_NAME)


def load_config() -> Config:
    path = get_config_file_path()
    if not os.path.exists(path):
        CLI_LOGGER.debug(
            f"Config file {path} not found - using defaults from environment"
        )
        return Config(
            api_url=os.getenv(API_URL_ENV) or DEFAULT_API_URL,
            api_key=os.getenv(API_KEY_ENV, ""),
        )
    try:
        with open(path, "rb") as f:
            content = f.read()
    except OSError as error:
        raise ConfigIOError(f"Could not read config file: {path}") from error
    try:
        return Config.model_validate(json.loads(content))
    except ValueError as error:
        raise DecodeError(f"Could not decode config file: {path}") from error


def save_config(config: Config) -> None:
    path = get_config_file_path()
    try:
        os.makedirs(
            os.path.dirname(path), mode=CONFIG_DIR_PERMISSIONS, exist_ok=True
        )
        with open(path, "w") as f:
            json.dump(config.model_dump(), f, indent=2)
        os.chmod(path, CONFIG_FILE_PERMISSIONS)
    except OSError as error:
        raise ConfigIOError(f"Could not write config file: {path}") from error
    CLI_LOGGER.debug(f"Config saved to {path}")


def set_config_value(key: str, value: str) -> None:
    ensure_config_key_is_valid(key=key)
    if key == API_URL_KEY:
        ensure_api_url_is_valid(api_url=value)
    config = load_config()
    if key == API_URL_KEY:
        config.api_url = value
    else:
        config.api_key = value
    save_config(config=config)


def get_config_value(key: str) -> str:
    ensure_config_key_is_valid(key=key)
    config = load_config()
    if key == API_URL_KEY:
        return config.api_url
    return config.api_key


def list_config_fields() -> List[Tuple[str, str]]:
    config = load_config()
    return [
        ("api_url", config.api_url),
        ("api_key", config.api_key),
    ]


def ensure_config_key_is_valid(key: str) -> None:
    if key not in RECOGNISED_KEYS:
        raise InvalidConfigKeyError(
            f"Invalid key: {key}. Supported keys: {', '.join(RECOGNISED_KEYS)}"
        )


def ensure_api_url_is_valid(api_url: str) -> None:
    try:
        _URL_VALIDATOR.validate_python(api_url)
    except ValidationError as error:
        raise InvalidConfigValueError(
            f"Please use a valid url for the {API_URL_KEY} field, got: {api_url}"
        ) from error
