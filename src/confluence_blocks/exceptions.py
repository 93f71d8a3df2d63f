"""Exception hierarchy for Confluence blocks."""


class ConfluenceBlocksError(Exception):
    """Base exception for all confluence-blocks errors."""

    pass


class ConfluenceApiError(ConfluenceBlocksError):
    """Raised when the Confluence API answers with a non-2xx status.

    Carries the HTTP status code and the raw response body text so that
    callers can branch on the status without inspecting the message.
    """

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Confluence API error ({status_code}): {body}")
        self.status_code = status_code
        self.body = body


class ConfluenceAuthenticationError(ConfluenceApiError):
    """Raised when the Confluence API rejects the credentials (401/403)."""

    pass


class BlockInputError(ConfluenceBlocksError, ValueError):
    """Raised when a block's input config does not match its schema."""

    def __init__(self, block_name: str, detail: str):
        super().__init__(f"Invalid input for {block_name}: {detail}")
        self.block_name = block_name
        self.detail = detail


class BlockExecutionError(ConfluenceBlocksError):
    """Raised when a block fails; wraps the underlying error with a prefix."""

    def __init__(self, prefix: str, error: BaseException):
        message = str(error) or "Unknown error"
        super().__init__(f"{prefix}: {message}")
        self.prefix = prefix
        self.error = error

    @property
    def kind(self) -> str:
        """``"api"`` for Confluence API errors, ``"generic"`` for anything else."""
        return "api" if isinstance(self.error, ConfluenceApiError) else "generic"

    @property
    def status_code(self) -> int | None:
        if isinstance(self.error, ConfluenceApiError):
            return self.error.status_code
        return None
