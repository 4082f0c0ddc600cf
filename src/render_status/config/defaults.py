"""Default configuration values for render-deploy-status."""

DEFAULT_RENDER_API_BASE_URL = "https://api.render.com/v1"
DEFAULT_GITHUB_API_URL = "https://api.github.com"

DEFAULT_MAX_ATTEMPTS = 100
DEFAULT_INTERVAL_MS = 10000
DEFAULT_ENVIRONMENT = "preview"
DEFAULT_LOOKBACK_HOURS = 24
DEFAULT_REQUEST_TIMEOUT = 30.0  # seconds
DEPLOY_LIST_LIMIT = 20

# Action input name -> ActionConfig field
INPUT_FIELD_MAP: dict[str, str] = {
    "render-api-key": "render_api_key",
    "github-token": "github_token",
    "render-api-base-url": "render_api_base_url",
    "max-attempts": "max_attempts",
    "interval": "interval",
    "status-mode": "status_mode",
    "environment": "environment",
    "lookback-hours": "lookback_hours",
    "request-timeout": "request_timeout",
}

# Environment variables consulted when an input is left empty
INPUT_ENV_FALLBACKS: dict[str, str] = {
    "render-api-key": "RENDER_API_KEY",
    "github-token": "GITHUB_TOKEN",
}
