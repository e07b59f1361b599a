"""Default configuration constants for onionlayer."""

# Directory service
DEFAULT_REGISTRY_HOST = "127.0.0.1"
DEFAULT_REGISTRY_PORT = 8080
DEFAULT_REGISTRY_URL = f"http://localhost:{DEFAULT_REGISTRY_PORT}"

# HTTP settings (milliseconds)
DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_RETRY_DELAY_MS = 1_000
DEFAULT_MAX_RETRIES = 3

# Default retry status codes
DEFAULT_RETRY_STATUS_CODES = (408, 429, 500, 502, 503, 504)
