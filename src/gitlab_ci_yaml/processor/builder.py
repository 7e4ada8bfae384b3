"""Build immutable job descriptors from validated job definitions."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..models.job import Job, JobOptions
from .normalizer import JobDefinition

logger = logging.getLogger(__name__)


def normalize_script(script: str | Sequence[str]) -> str:
    if isinstance(script, str):
        return script
    return "\n".join(script)


def stage_index(stages: Sequence[str], stage: str) -> int | None:
    """Position of *stage* in *stages*, or None when it is not declared."""
    try:
        return list(stages).index(stage)
    except ValueError:
        return None


def _optional_tuple(values: Sequence[str] | None) -> tuple[str, ...] | None:
    return None if values is None else tuple(values)


def build_job(
    definition: JobDefinition,
    *,
    stages: Sequence[str],
    before_script: Sequence[str] = (),
    image: str | None = None,
    services: Sequence[str] | None = None,
) -> Job:
    """Turn a validated job definition into a Job.

    Job-level ``image``/``services`` override the document defaults; options
    resolving to null are left out.
    """
    attrs = definition.attributes
    index = stage_index(stages, definition.stage)
    if index is None:
        logger.debug("Job %s: stage %r is not in %s", definition.name, definition.stage, stages)

    job_image = attrs.get("image")
    job_services = attrs.get("services")
    options = JobOptions(
        image=job_image if job_image is not None else image,
        services=_optional_tuple(job_services if job_services is not None else services),
    )

    allow_failure = attrs.get("allow_failure")
    when = attrs.get("when")
    return Job(
        name=definition.name,
        stage=definition.stage,
        stage_index=index,
        commands="\n".join(before_script) + "\n" + normalize_script(attrs["script"]),
        tag_list=tuple(attrs.get("tags") or ()),
        only=_optional_tuple(attrs.get("only")),
        except_=_optional_tuple(attrs.get("except")),
        allow_failure=bool(allow_failure),
        when=when if when is not None else "on_success",
        options=options,
    )
