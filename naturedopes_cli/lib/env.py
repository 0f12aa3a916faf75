import os

CLI_LOG_LEVEL = os.getenv("CLI_LOG_LEVEL", "INFO")

CONFIG_DIR_NAME = ".naturedopes-cli"
CONFIG_FILE_NAME = "config.json"
CONFIG_DIR_PERMISSIONS = 0o755
CONFIG_FILE_PERMISSIONS = 0o600

API_URL_ENV = "API_URL"
API_KEY_ENV = "API_KEY"
DEFAULT_API_URL = "http://localhost:8080"

# read on every request, so values loaded from .env are honoured
REQUEST_TIMEOUT_ENV = "NATUREDOPES_REQUEST_TIMEOUT"
