class FetchError(Exception):
    """A page or detail request to the content source failed."""

    def __init__(self, token: str, reason: str = ""):
        self.token = token
        self.reason = reason
        message = f"Failed to fetch {token!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidArgument(ValueError):
    """A caller broke a precondition (e.g. non-positive words per minute)."""
