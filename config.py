"""
Configuration for the Zonos Graph client and logging behavior.
"""

import os
import logging
from dotenv import load_dotenv

load_dotenv()


# Graph endpoint settings
GRAPHQL_BASE_URL = os.getenv("GRAPHQL_BASE_URL", "http://localhost:5001/api/graphql").rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))

# App Settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE", "zonos_client.log")
DUMMY_API_PORT = int(os.getenv("DUMMY_API_PORT", "5001"))

# Validate config
if REQUEST_TIMEOUT <= 0:
    raise ValueError("REQUEST_TIMEOUT must be a positive number of seconds.")

if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    raise ValueError(
        f"LOG_LEVEL={LOG_LEVEL!r} is not a valid logging level. "
        "Set it in your .env file."
    )

if __name__ == "__main__":
    print(f"Graph base URL: {GRAPHQL_BASE_URL}")
    print(f"Timeout: {REQUEST_TIMEOUT}s")
    print(f"Log level: {LOG_LEVEL}")
    print(f"Log file: {LOG_FILE or '(disabled)'}")
