"""Structured error information attached to failure events."""

import traceback as tb

from pydantic import BaseModel, ConfigDict, Field


class ErrorInfo(BaseModel):
    """Serialisable description of an exception."""

    model_config = ConfigDict(frozen=True)

    exc_type: str = Field(description="Fully qualified exception class name")
    message: str = Field(description="Exception message")
    traceback: str | None = Field(default=None, description="Formatted traceback")

    @classmethod
    def from_exception(
        cls, exc: BaseException, include_traceback: bool = False
    ) -> "ErrorInfo":
        """Build ErrorInfo from an exception instance.

        Args:
            exc: The exception to describe.
            include_traceback: Whether to capture the formatted traceback.
        """
        exc_cls = type(exc)
        return cls(
            exc_type=f"{exc_cls.__module__}.{exc_cls.__qualname__}",
            message=str(exc),
            traceback="".join(tb.format_exception(exc)) if include_traceback else None,
        )
