from typing import Optional


class NatureDopesCLIError(Exception):
    pass


class ConfigurationError(NatureDopesCLIError):
    pass


class ConfigIOError(ConfigurationError):
    """Config file could not be read / written or home directory is unknown."""

    pass


class InvalidConfigKeyError(ConfigurationError):
    pass


class InvalidConfigValueError(ConfigurationError):
    pass


class DecodeError(NatureDopesCLIError):
    """Persisted config or API response does not match the expected shape."""

    pass


class APICallError(NatureDopesCLIError):
    pass


class TransportError(APICallError):
    pass


class APIKeyNotConfiguredError(APICallError):
    pass


class APIError(APICallError):
    """Error for responses with status code >= 400.

    Attributes:
        status_code: HTTP status code returned by the service.
        api_message: Raw response body, as returned by the service.
    """

    def __init__(self, status_code: int, api_message: Optional[str]):
        super().__init__(
            f"Nature Dopes API returned status code: {status_code}, message: {api_message}"
        )
        self.__status_code = status_code
        self.__api_message = api_message

    @property
    def status_code(self) -> int:
        return self.__status_code

    @property
    def api_message(self) -> Optional[str]:
        return self.__api_message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"status_code={self.__status_code}, "
            f"api_message='{self.__api_message}')"
        )
