"""Custom exceptions for scribe.

This module defines structured exceptions for configuration handling, remote
API calls and command-line usage. Using typed exceptions improves:
- Error messages with actionable suggestions
- Test assertions on specific failure causes
- Separation of fatal and non-fatal failures in the CLI

Exception Hierarchy:
    ScribeError (base)
    ├── ConfigError
    │   ├── ConfigReadError - Config file cannot be opened or read
    │   ├── ConfigParseError - Config content is not valid YAML of the expected shape
    │   └── ConfigValidationError - Config violates a semantic rule
    ├── RemoteError - Remote API returned an error or an unusable response
    ├── ActionNotFoundError - Requested action id is not registered
    └── UsageError - Invalid combination of command-line arguments
"""

from typing import Any, Optional


class ScribeError(Exception):
    """Base exception for all scribe errors.

    Attributes:
        message: Human-readable error message
        suggestion: Optional suggestion for resolving the error
    """

    def __init__(self, message: str, suggestion: Optional[str] = None) -> None:
        self.message = message
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        if self.suggestion:
            return f"{self.message}. Suggestion: {self.suggestion}"
        return self.message


class ConfigError(ScribeError):
    """Base class for errors raised while loading configuration."""


class ConfigReadError(ConfigError):
    """Raised when the config file cannot be opened or read.

    Example:
        >>> raise ConfigReadError(
        ...     message="failed to read config file: [Errno 2] No such file or directory",
        ...     path="/home/user/.scribe/config.yml",
        ... )
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message=message)


class ConfigParseError(ConfigError):
    """Raised when the config content cannot be deserialized into a Config."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message=message)


class ConfigValidationError(ConfigError):
    """Raised when a loaded config violates a validation rule.

    Only the first violation found is reported.

    Attributes:
        rule: Identifier of the violated rule (e.g. "duplicate_id")
        action_id: Id of the offending action, if it has one
        action_index: 0-based position of the offending action
        field: Name of the missing field for "missing_field" violations
        value: Offending value for range and type violations

    Example:
        >>> raise ConfigValidationError(
        ...     "action 'summary' has invalid temperature 2.50 (must be between 0 and 2)",
        ...     rule="temperature_range",
        ...     action_id="summary",
        ...     action_index=0,
        ...     value=2.5,
        ... )
    """

    def __init__(
        self,
        message: str,
        rule: str,
        action_id: Optional[str] = None,
        action_index: Optional[int] = None,
        field: Optional[str] = None,
        value: Any = None,
    ) -> None:
        self.rule = rule
        self.action_id = action_id
        self.action_index = action_index
        self.field = field
        self.value = value
        super().__init__(message=message)


class RemoteError(ScribeError):
    """Raised when a remote API call fails.

    Common causes:
    - Non-2xx HTTP status (invalid API key, rate limit, oversized upload)
    - Network errors
    - Response body that cannot be parsed or has no choices

    Attributes:
        provider: Name of the remote capability (e.g. "OpenAI/Transcription")
        status_code: HTTP status code, when the server answered
        body: Raw response body text, when available
    """

    def __init__(
        self,
        message: str,
        provider: str = "Unknown",
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        self.provider = provider
        self.status_code = status_code
        self.body = body
        if status_code is not None:
            message = f"{message} with status {status_code}"
            if body:
                message = f"{message}: {body}"
        super().__init__(message=f"[{provider}] {message}")


class ActionNotFoundError(ScribeError):
    """Raised when a requested action id is absent from the registry."""

    def __init__(self, action_id: str) -> None:
        self.action_id = action_id
        super().__init__(
            message=f"Unknown action '{action_id}'",
            suggestion="Use --list-actions to see available options",
        )


class UsageError(ScribeError):
    """Raised when required command-line arguments are missing or conflict."""
