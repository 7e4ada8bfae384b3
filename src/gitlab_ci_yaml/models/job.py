"""Job models."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import CiModel

When = Literal["on_success", "on_failure", "always"]


class JobOptions(CiModel):
    image: str | None = None
    services: tuple[str, ...] | None = None


class Job(CiModel):
    name: str = Field(min_length=1)
    stage: str
    stage_index: int | None = None
    commands: str
    tag_list: tuple[str, ...] = ()
    only: tuple[str, ...] | None = None
    except_: tuple[str, ...] | None = Field(default=None, alias="except")
    allow_failure: bool = False
    when: When = "on_success"
    options: JobOptions = JobOptions()
