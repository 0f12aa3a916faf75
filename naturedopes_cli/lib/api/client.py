import os
from typing import Optional

import requests

from naturedopes_cli.lib.config_store import Config
from naturedopes_cli.lib.env import REQUEST_TIMEOUT_ENV
from naturedopes_cli.lib.exceptions import APIError, TransportError
from naturedopes_cli.lib.logger import CLI_LOGGER

API_KEY_HEADER = "X-API-Key"
JSON_HEADERS = {
    "Content-Type": "application/json",
}


class NatureDopesAPIClient:
    """Thin executor of requests against the Nature Dopes REST API.

    Every call goes through `execute(...)`, which returns raw response bytes
    for successful calls and raises `APIError` for status codes >= 400 and
    `TransportError` when the call could not be made at all. No retries are
    performed.
    """

    @classmethod
    def init(
        cls,
        api_url: str,
        api_key: str = "",
        session: Optional[requests.Session] = None,
    ) -> "NatureDopesAPIClient":
        return cls(api_url=api_url, api_key=api_key, session=session)

    @classmethod
    def from_config(
        cls,
        config: Config,
        session: Optional[requests.Session] = None,
    ) -> "NatureDopesAPIClient":
        return cls(api_url=config.api_url, api_key=config.api_key, session=session)

    def __init__(
        self,
        api_url: str,
        api_key: str = "",
        session: Optional[requests.Session] = None,
    ):
        self.__api_url = api_url
        self.__api_key = api_key or ""
        self.__session = session

    @property
    def api_url(self) -> str:
        return self.__api_url

    @property
    def api_key(self) -> str:
        return self.__api_key

    def execute(self, method: str, path: str, body: Optional[bytes] = None) -> bytes:
        url = f"{self.__api_url}{path}"
        headers = {}
        if body:
            headers.update(JSON_HEADERS)
        if self.__api_key:
            headers[API_KEY_HEADER] = self.__api_key
        requester = requests if self.__session is None else self.__session
        CLI_LOGGER.debug(f"Sending {method} request to {url}")
        try:
            response = requester.request(
                method=method,
                url=url,
                data=body or None,
                headers=headers,
                timeout=get_request_timeout(),
            )
        except requests.RequestException as error:
            raise TransportError(
                f"Could not send {method} request to {url}. Cause: {error}"
            ) from error
        CLI_LOGGER.debug(f"{method} {url} responded with {response.status_code}")
        if response.status_code >= 400:
            raise APIError(
                status_code=response.status_code,
                api_message=response.text,
            )
        return response.content


def get_request_timeout() -> Optional[float]:
    value = os.getenv(REQUEST_TIMEOUT_ENV)
    if not value:
        return None
    try:
        timeout = float(value)
    except ValueError:
        CLI_LOGGER.warning(
            f"Invalid value of {REQUEST_TIMEOUT_ENV} env variable: `{value}` - "
            f"requests will be sent without timeout"
        )
        return None
    if timeout <= 0:
        CLI_LOGGER.warning(
            f"{REQUEST_TIMEOUT_ENV} must be positive, got: {value} - "
            f"requests will be sent without timeout"
        )
        return None
    return timeout
