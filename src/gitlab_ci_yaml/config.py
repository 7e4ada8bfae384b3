"""CI configuration processor settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ProcessorConfig:
    """Settings for loading and processing CI files, loaded from environment variables."""

    ci_file: str = ".gitlab-ci.yml"
    validate_patterns: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> ProcessorConfig:
        ci_file = os.getenv("GITLAB_CI_FILE", ".gitlab-ci.yml")
        validate_patterns = os.getenv("GITLAB_CI_VALIDATE_PATTERNS", "false").lower() in (
            "true",
            "1",
            "yes",
        )
        log_level = os.getenv("GITLAB_CI_LOG_LEVEL", "WARNING").upper()

        return cls(
            ci_file=ci_file,
            validate_patterns=validate_patterns,
            log_level=log_level,
        )

    def validate(self) -> None:
        if not self.ci_file:
            msg = "GITLAB_CI_FILE must not be empty"
            raise ValueError(msg)
        if self.log_level.upper() not in LOG_LEVELS:
            msg = f"GITLAB_CI_LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}"
            raise ValueError(msg)
