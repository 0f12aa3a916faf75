from naturedopes_cli.lib.api.client import NatureDopesAPIClient
from naturedopes_cli.lib.api.entities import ApiKey, Image
