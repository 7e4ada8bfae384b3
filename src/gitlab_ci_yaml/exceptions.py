"""CI configuration exceptions."""

from __future__ import annotations


class GitLabCiError(Exception):
    """Base exception for CI configuration processing."""


class ValidationError(GitLabCiError):
    """Raised when the CI configuration does not satisfy the schema."""

    def __init__(self, message: str, *, field: str | None = None, job: str | None = None) -> None:
        self.field = field
        self.job = job
        super().__init__(message)


class MalformedDocumentError(ValidationError):
    """Raised when the parsed document is not a mapping."""

    def __init__(self, message: str = "YAML should be a hash") -> None:
        super().__init__(message)


class UnknownParameterError(ValidationError):
    """Raised on a top-level key that is neither a global setting nor a job."""

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(f"Unknown parameter: {key}", field=str(key))


class NoJobsDefinedError(ValidationError):
    """Raised when the document defines no jobs."""

    def __init__(self) -> None:
        super().__init__("Please define at least one job")


class PatternError(ValidationError):
    """Raised when an only/except regex pattern cannot be compiled."""

    def __init__(
        self, pattern: str, reason: str, *, job: str | None = None, field: str | None = None
    ) -> None:
        self.pattern = pattern
        self.reason = reason
        prefix = f"{job} job: " if job else ""
        super().__init__(f"{prefix}invalid pattern {pattern}: {reason}", field=field, job=job)
