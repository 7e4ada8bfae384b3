"""Validate GitLab CI configuration and select the jobs a ref runs."""

from dotenv import load_dotenv

from .exceptions import (
    GitLabCiError,
    MalformedDocumentError,
    NoJobsDefinedError,
    PatternError,
    UnknownParameterError,
    ValidationError,
)
from .models.document import CiDocument
from .models.job import Job, JobOptions
from .processor.construct import construct
from .processor.selection import match_ref, should_run

__all__ = [
    "CiDocument",
    "GitLabCiError",
    "Job",
    "JobOptions",
    "MalformedDocumentError",
    "NoJobsDefinedError",
    "PatternError",
    "UnknownParameterError",
    "ValidationError",
    "construct",
    "main",
    "match_ref",
    "should_run",
]


def main() -> None:
    """Run the gitlab-ci-yaml command line."""
    load_dotenv()

    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
