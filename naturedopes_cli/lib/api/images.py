from typing import List
from urllib.parse import urlencode

from pydantic import TypeAdapter
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from naturedopes_cli.lib.api.client import NatureDopesAPIClient
from naturedopes_cli.lib.api.common import decode_response
from naturedopes_cli.lib.api.entities import Image

IMAGES_PATH = "/images"

_IMAGE_ADAPTER = TypeAdapter(Image)
_IMAGES_LIST_ADAPTER = TypeAdapter(List[Image])


def display_images(images: List[Image], title: str = "Images") -> None:
    if len(images) == 0:
        print("No images found")
        return None
    console = Console()
    table = Table(title=escape(title), show_lines=True)
    table.add_column("ID", justify="center", style="cyan", no_wrap=True)
    table.add_column("Species", justify="left", style="green")
    table.add_column("GPS Long", justify="right")
    table.add_column("GPS Lat", justify="right")
    table.add_column("Image Path", justify="left", overflow="fold")
    table.add_column("User ID", justify="center")
    for image in images:
        table.add_row(
            str(image.id),
            escape(image.species_name),
            f"{image.gps_long:.6f}",
            f"{image.gps_lat:.6f}",
            escape(image.image_path),
            str(image.user_id),
        )
    console.print(table)


def display_image_details(image: Image) -> None:
    console = Console()
    table = Table(
        title=escape(f"Image Overview [id={image.id}]"), show_lines=True
    )
    table.add_column("Property", justify="left", style="cyan", no_wrap=True)
    table.add_column("Value", justify="left", overflow="fold")
    table.add_row("Species", escape(image.species_name))
    table.add_row("GPS Long", f"{image.gps_long:.6f}")
    table.add_row("GPS Lat", f"{image.gps_lat:.6f}")
    table.add_row("Image Path", escape(image.image_path))
    table.add_row("User ID", str(image.user_id))
    console.print(table)


def list_images(client: NatureDopesAPIClient) -> List[Image]:
    payload = client.execute(method="GET", path=IMAGES_PATH)
    return decode_response(
        payload=payload, adapter=_IMAGES_LIST_ADAPTER, operation_name="list images"
    )


def get_image(client: NatureDopesAPIClient, image_id: int) -> Image:
    payload = client.execute(method="GET", path=f"{IMAGES_PATH}/{image_id}")
    return decode_response(
        payload=payload, adapter=_IMAGE_ADAPTER, operation_name="get image"
    )


def search_images(
    client: NatureDopesAPIClient,
    species_name: str = "",
    user_id: int = 0,
) -> List[Image]:
    path = build_images_search_path(species_name=species_name, user_id=user_id)
    payload = client.execute(method="GET", path=path)
    return decode_response(
        payload=payload, adapter=_IMAGES_LIST_ADAPTER, operation_name="search images"
    )


def build_images_search_path(species_name: str = "", user_id: int = 0) -> str:
    params = {}
    if species_name:
        params["species_name"] = species_name
    if user_id > 0:
        params["user_id"] = user_id
    if not params:
        return IMAGES_PATH
    return f"{IMAGES_PATH}?{urlencode(params)}"
