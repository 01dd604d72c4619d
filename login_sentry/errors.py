"""Login Sentry - Exceptions"""

from typing import Optional


class LoginSentryError(Exception):
    """Base class for all login sentry errors"""


class MalformedTimestamp(LoginSentryError):
    """Timestamp text is not of the form 'Mon DD HH:MM:SS'"""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Malformed timestamp: {text!r}")


class MalformedLogLine(LoginSentryError):
    """Log line does not follow the positional auth log layout"""

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed log line ({reason}): {line!r}")


class LookupFileUnavailable(LoginSentryError):
    """A banned-address or authorized-user file could not be read"""

    def __init__(self, path, error: Optional[Exception] = None):
        self.path = str(path)
        self.error = error
        message = f"Lookup file unavailable: {self.path}"
        if error is not None:
            message += f" ({error})"
        super().__init__(message)


class LogSourceUnavailable(LoginSentryError):
    """The log file or URL could not be opened"""

    def __init__(self, location: str, error: Optional[Exception] = None):
        self.location = location
        self.error = error
        message = f"Log source unavailable: {location}"
        if error is not None:
            message += f" ({error})"
        super().__init__(message)
