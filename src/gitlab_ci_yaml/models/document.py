"""CI document model."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import Field, field_serializer, field_validator

from ..exceptions import PatternError
from ..processor.selection import should_run
from .base import CiModel
from .job import Job


class CiDocument(CiModel):
    """A validated CI configuration: global settings plus its jobs in document order."""

    before_script: tuple[str, ...] = ()
    image: str | None = None
    services: tuple[str, ...] | None = None
    stages: tuple[str, ...]
    variables: Mapping[str, str] = MappingProxyType({})
    jobs: tuple[Job, ...] = Field(min_length=1)

    @field_validator("variables", mode="after")
    @classmethod
    def _read_only_variables(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("variables")
    def _dump_variables(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    def jobs_for(self, stage: str, ref: str, tag: bool = False) -> list[Job]:
        """Jobs of *stage* that run for *ref*.

        A malformed regex raises PatternError naming the job and the filter it came from.
        """
        selected = []
        for job in self.jobs:
            if job.stage != stage:
                continue
            try:
                runs = should_run(job.only, job.except_, ref, tag)
            except PatternError as e:
                field = "only" if job.only is not None else "except"
                raise PatternError(e.pattern, e.reason, job=job.name, field=field) from e
            if runs:
                selected.append(job)
        return selected

    def job(self, name: str) -> Job | None:
        return next((job for job in self.jobs if job.name == name), None)
