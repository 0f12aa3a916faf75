import logging

from rich.logging import RichHandler

from naturedopes_cli.lib.env import CLI_LOG_LEVEL

CLI_LOGGER = logging.getLogger("naturedopes-cli")
CLI_LOGGER.setLevel(CLI_LOG_LEVEL)
CLI_LOGGER.addHandler(RichHandler())
