"""Custom exception hierarchy for render-deploy-status."""


class RenderStatusError(Exception):
    """Base exception for all render-deploy-status errors.

    Every fatal condition of an action run inherits from this class, so the
    CLI boundary can turn any of them into a single failure message.
    """

    pass


class ConfigError(RenderStatusError):
    """Exception raised for configuration errors.

    Raised when action inputs are missing or fail validation.

    Attributes:
        field: The input that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Input name where the error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class EventError(RenderStatusError):
    """Exception raised when the triggering event cannot be used."""

    def __init__(self, message: str) -> None:
        """Create an event error."""
        self.message = message
        super().__init__(message)


class CommentParseError(RenderStatusError):
    """Exception raised when a Render comment is missing an expected field.

    Only raised for comments that carry the Render marker phrase. Comments
    from anyone else are skipped, not rejected.

    Attributes:
        field: Identity field that could not be extracted
        message: Human-readable error message
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize CommentParseError.

        Args:
            field: Identity field that was not found (e.g. "server_url")
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(message)


class DeployNotFoundError(RenderStatusError):
    """Exception raised when Render lists no deploys for a service."""

    def __init__(self, service_id: str) -> None:
        """Create a not-found error for a service."""
        self.service_id = service_id
        self.message = "No deploys found"
        super().__init__(f"No deploys found for service {service_id}")


class RenderAPIError(RenderStatusError):
    """Error raised when the Render API returns a non-2xx status.

    Attributes:
        url: Request URL that failed
        status_code: HTTP status code returned by Render
        detail: Error message extracted from the response body, if any
    """

    def __init__(self, url: str, status_code: int, detail: str | None = None) -> None:
        """Initialize RenderAPIError.

        Args:
            url: Request URL that failed
            status_code: HTTP status code
            detail: Optional error message from the response body
        """
        self.url = url
        self.status_code = status_code
        self.detail = detail
        message = f"Render API request to {url} failed with status {status_code}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class RenderConnectionError(RenderStatusError):
    """Error raised when the Render API is unreachable or times out."""

    def __init__(self, base_url: str, original_error: Exception | None = None) -> None:
        """Initialize RenderConnectionError.

        Args:
            base_url: Render API base URL that failed
            original_error: Underlying transport exception
        """
        self.base_url = base_url
        message = f"Failed to connect to Render API at {base_url}."
        if original_error:
            message += f"\nOriginal error: {original_error}"
        super().__init__(message)


class GitHubAPIError(RenderStatusError):
    """Error raised when the GitHub API returns a non-2xx status.

    Attributes:
        url: Request URL that failed
        status_code: HTTP status code returned by GitHub
        detail: Error message extracted from the response body, if any
    """

    def __init__(self, url: str, status_code: int, detail: str | None = None) -> None:
        """Initialize GitHubAPIError.

        Args:
            url: Request URL that failed
            status_code: HTTP status code
            detail: Optional error message from the response body
        """
        self.url = url
        self.status_code = status_code
        self.detail = detail
        message = f"GitHub API request to {url} failed with status {status_code}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class GitHubConnectionError(RenderStatusError):
    """Error raised when the GitHub API is unreachable or times out."""

    def __init__(self, base_url: str, original_error: Exception | None = None) -> None:
        """Initialize GitHubConnectionError.

        Args:
            base_url: GitHub API base URL that failed
            original_error: Underlying transport exception
        """
        self.base_url = base_url
        message = f"Failed to connect to GitHub API at {base_url}."
        if original_error:
            message += f"\nOriginal error: {original_error}"
        super().__init__(message)
