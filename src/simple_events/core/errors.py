"""Event library exceptions."""

from __future__ import annotations


class EventsError(Exception):
    """Base for event library errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, object] | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}
        self.original_error = original_error


class EventsConfigurationError(EventsError):
    """Config validation or load failure."""


class DispatchError(EventsError):
    """One or more handlers failed during a dispatch pass, or dispatch could not start."""

    def __init__(
        self,
        message: str,
        *,
        errors: list[BaseException] | None = None,
        code: str | None = None,
        details: dict[str, object] | None = None,
    ) -> None:
        errors = list(errors or [])
        super().__init__(
            message,
            code=code,
            details=details,
            original_error=errors[0] if errors else None,
        )
        self.errors = errors
