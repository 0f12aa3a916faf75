import pytest

from naturedopes_cli.lib.api.entities import ApiKey


def _api_key(key: str) -> ApiKey:
    return ApiKey(
        id=1,
        key=key,
        name="research",
        created_at="2025-01-01",
        expires_at="2026-01-01",
        revoked=False,
    )


def test_api_key_last_used_defaults_to_none() -> None:
    # when
    result = _api_key(key="secret123")

    # then
    assert result.last_used is None


@pytest.mark.parametrize(
    "key, expected_result",
    [
        ("secret123", "secret12..."),
        ("12345678", "12345678..."),
        ("short", "***"),
        ("", "***"),
    ],
)
def test_api_key_masked_key(key: str, expected_result: str) -> None:
    # when
    result = _api_key(key=key).masked_key

    # then
    assert result == expected_result
