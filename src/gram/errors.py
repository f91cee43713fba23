"""gram error types.

All custom exceptions inherit from GramError so the CLI can
turn any of them into a non-zero exit with a readable message.
"""

DIFF_BANNER = "Actual settings differ from expected!"


class GramError(Exception):
    """Base exception for all gram errors."""

    pass


class ConfigurationError(GramError):
    """Invalid gram configuration."""

    pass


class SettingsParseError(GramError):
    """The desired settings file is missing or malformed."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class TransportError(GramError):
    """A call to the GitHub API failed."""

    def __init__(self, message: str, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class AuthenticationError(TransportError):
    """The GitHub API rejected the token."""

    def __init__(self, url: str) -> None:
        super().__init__(
            f"Encountered a http status of 401 when calling GET on url {url}. "
            "Is your token correct?",
            url,
            status_code=401,
        )


class DiscrepancyError(GramError):
    """Actual settings differ from the desired settings.

    Carries the sorted discrepancy lines; the message is the banner
    followed by one line per discrepancy.
    """

    def __init__(self, diffs: list[str]) -> None:
        self.diffs = list(diffs)
        super().__init__("\n".join([DIFF_BANNER, *self.diffs]))
