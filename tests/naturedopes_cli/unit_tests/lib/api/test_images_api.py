import pytest
from requests_mock.mocker import Mocker

from naturedopes_cli.lib.api.client import NatureDopesAPIClient
from naturedopes_cli.lib.api.entities import Image
from naturedopes_cli.lib.api.images import (
    build_images_search_path,
    display_image_details,
    display_images,
    get_image,
    list_images,
    search_images,
)
from naturedopes_cli.lib.exceptions import APIError, DecodeError

IMAGE_PAYLOAD = {
    "id": 1,
    "species_name": "Oak",
    "gps_long": -1.5,
    "gps_lat": 52.25,
    "image_path": "/uploads/oak.jpg",
    "user_id": 7,
}


@pytest.fixture
def client() -> NatureDopesAPIClient:
    return NatureDopesAPIClient(api_url="http://x", api_key="k")


@pytest.mark.parametrize(
    "species_name, user_id, expected_path",
    [
        ("Oak", 0, "/images?species_name=Oak"),
        ("", 5, "/images?user_id=5"),
        ("", 0, "/images"),
        ("", -3, "/images"),
        ("Red Oak", 0, "/images?species_name=Red+Oak"),
        ("Oak & Ash", 2, "/images?species_name=Oak+%26+Ash&user_id=2"),
    ],
)
def test_build_images_search_path(
    species_name: str,
    user_id: int,
    expected_path: str,
) -> None:
    # when
    result = build_images_search_path(species_name=species_name, user_id=user_id)

    # then
    assert result == expected_path


def test_list_images_when_api_returns_images(
    requests_mock: Mocker,
    client: NatureDopesAPIClient,
) -> None:
    # given
    requests_mock.get("http://x/images", json=[IMAGE_PAYLOAD])

    # when
    result = list_images(client=client)

    # then
    assert result == [
        Image(
            id=1,
            species_name="Oak",
            gps_long=-1.5,
            gps_lat=52.25,
            image_path="/uploads/oak.jpg",
            user_id=7,
        )
    ]
    assert requests_mock.last_request.headers["X-API-Key"] == "k"


def test_list_images_when_api_returns_empty_list(
    requests_mock: Mocker,
    client: NatureDopesAPIClient,
) -> None:
    # given
    requests_mock.get("http://x/images", json=[])

    # when
    result = list_images(client=client)

    # then
    assert result == []


def test_list_images_when_api_returns_error(
    requests_mock: Mocker,
    client: NatureDopesAPIClient,
) -> None:
    # given
    requests_mock.get("http://x/images", status_code=404, text="not found")

    # when
    with pytest.raises(APIError) as error:
        _ = list_images(client=client)

    # then
    assert "404" in str(error.value)
    assert "not found" in str(error.value)


@pytest.mark.parametrize(
    "content",
    [b"not a json", b'{"id": 1}', b'[{"id": "not-a-number"}]'],
)
def test_list_images_when_api_returns_malformed_payload(
    requests_mock: Mocker,
    client: NatureDopesAPIClient,
    content: bytes,
) -> None:
    # given
    requests_mock.get("http://x/images", content=content)

    # when
    with pytest.raises(DecodeError):
        _ = list_images(client=client)


def test_get_image(requests_mock: Mocker, client: NatureDopesAPIClient) -> None:
    # given
    requests_mock.get("http://x/images/1", json=IMAGE_PAYLOAD)

    # when
    result = get_image(client=client, image_id=1)

    # then
    assert result.id == 1
    assert result.species_name == "Oak"
    assert requests_mock.last_request.method == "GET"


def test_get_image_when_api_returns_list(
    requests_mock: Mocker,
    client: NatureDopesAPIClient,
) -> None:
    # given
    requests_mock.get("http://x/images/1", json=[IMAGE_PAYLOAD])

    # when
    with pytest.raises(DecodeError):
        _ = get_image(client=client, image_id=1)


def test_search_images_with_both_filters(
    requests_mock: Mocker,
    client: NatureDopesAPIClient,
) -> None:
    # given
    requests_mock.get("http://x/images", json=[IMAGE_PAYLOAD])

    # when
    result = search_images(client=client, species_name="Red Oak", user_id=7)

    # then
    assert len(result) == 1
    assert requests_mock.last_request.qs == {
        "species_name": ["red oak"],
        "user_id": ["7"],
    }


def test_search_images_without_filters(
    requests_mock: Mocker,
    client: NatureDopesAPIClient,
) -> None:
    # given
    requests_mock.get("http://x/images", json=[])

    # when
    result = search_images(client=client)

    # then
    assert result == []
    assert requests_mock.last_request.url == "http://x/images"


def test_display_images_when_species_name_contains_markup(
    capsys: pytest.CaptureFixture,
) -> None:
    # given
    image = Image(**{**IMAGE_PAYLOAD, "species_name": "Oak [/x]"})

    # when
    display_images(images=[image])

    # then
    assert "Oak [/x]" in capsys.readouterr().out


def test_display_image_details_keeps_id_in_title(
    capsys: pytest.CaptureFixture,
) -> None:
    # given
    image = Image(
        **{
            **IMAGE_PAYLOAD,
            "species_name": "[bold]Oak",
            "image_path": "/uploads/[/p].jpg",
        }
    )

    # when
    display_image_details(image=image)

    # then
    output = capsys.readouterr().out
    assert "Image Overview [id=1]" in output
    assert "[bold]Oak" in output
    assert "/uploads/[/p].jpg" in output
