"""Command line for linting CI files and listing the jobs a ref would run."""

from __future__ import annotations

import json
import logging
from typing import Any

import click

from .config import ProcessorConfig
from .exceptions import (
    GitLabCiError,
    MalformedDocumentError,
    NoJobsDefinedError,
    PatternError,
    UnknownParameterError,
    ValidationError,
)
from .loader import load_file


def _ok(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _err(error: Exception) -> str:
    detail: dict[str, Any] = {"error": str(error)}
    if isinstance(error, ValidationError):
        if error.field is not None:
            detail["field"] = error.field
        if error.job is not None:
            detail["job"] = error.job

    if isinstance(error, MalformedDocumentError):
        detail["hint"] = "The file must contain a YAML mapping of settings and jobs."
    elif isinstance(error, UnknownParameterError):
        detail["hint"] = "Top-level keys must be global settings or jobs with a script."
    elif isinstance(error, NoJobsDefinedError):
        detail["hint"] = "Add at least one job with a script."
    elif isinstance(error, PatternError):
        detail["pattern"] = error.pattern
        detail["hint"] = "Regex patterns in only/except must be valid regular expressions."
    elif isinstance(error, OSError):
        detail["hint"] = "Check the CI file path (GITLAB_CI_FILE)."
    return json.dumps(detail, indent=2, ensure_ascii=False)


def _settings(ctx: click.Context) -> ProcessorConfig:
    return ctx.obj


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Logging level (default: GITLAB_CI_LOG_LEVEL or WARNING)",
)
@click.option(
    "--validate-patterns",
    is_flag=True,
    help="Compile only/except regex patterns while validating",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, validate_patterns: bool) -> None:
    """Validate GitLab CI files and select jobs for a ref."""
    config = ProcessorConfig.from_env()
    if log_level:
        config.log_level = log_level.upper()
    if validate_patterns:
        config.validate_patterns = True
    try:
        config.validate()
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


@cli.command()
@click.argument("path", required=False)
@click.pass_context
def lint(ctx: click.Context, path: str | None) -> None:
    """Check that a CI file is valid."""
    config = _settings(ctx)
    try:
        document = load_file(path or config.ci_file, config)
    except (GitLabCiError, OSError) as e:
        click.echo(_err(e))
        ctx.exit(1)
    click.echo(
        _ok(
            {
                "valid": True,
                "stages": list(document.stages),
                "jobs": [job.name for job in document.jobs],
            }
        )
    )


@cli.command()
@click.argument("path", required=False)
@click.option("--stage", required=True, help="Stage to select jobs from")
@click.option("--ref", required=True, help="Branch or tag name")
@click.option("--tag", is_flag=True, help="Treat the ref as a tag")
@click.pass_context
def jobs(ctx: click.Context, path: str | None, stage: str, ref: str, tag: bool) -> None:
    """List the jobs of a stage that run for a ref."""
    config = _settings(ctx)
    try:
        document = load_file(path or config.ci_file, config)
        selected = document.jobs_for(stage, ref, tag)
    except (GitLabCiError, OSError) as e:
        click.echo(_err(e))
        ctx.exit(1)
    click.echo(_ok([job.to_dict() for job in selected]))
