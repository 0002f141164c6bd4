import os

# Server Configuration
HOST = os.environ.get("TODO_APP_HOST", "127.0.0.1")
PORT = int(os.environ.get("TODO_APP_PORT", "3000"))

# Logging Configuration
LOG_LEVEL = os.environ.get("TODO_APP_LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("TODO_APP_LOG_FILE") or None
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# Page Configuration
PAGE_TITLE = "Get things done"

# Readiness probe
READY_ATTEMPTS = 20
READY_INTERVAL = 0.5   # seconds between probes
READY_TIMEOUT = 1      # seconds per probe request
