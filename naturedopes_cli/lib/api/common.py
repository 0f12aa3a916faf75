import json
from typing import Any

from pydantic import TypeAdapter

from naturedopes_cli.lib.exceptions import DecodeError


def decode_response(payload: bytes, adapter: TypeAdapter, operation_name: str) -> Any:
    try:
        return adapter.validate_python(json.loads(payload))
    except ValueError as error:
        raise DecodeError(
            f"Could not decode Nature Dopes API response for {operation_name} operation."
        ) from error
