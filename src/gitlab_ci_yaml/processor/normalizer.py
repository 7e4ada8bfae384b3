"""Split a raw CI mapping into global settings and job definitions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..exceptions import MalformedDocumentError, NoJobsDefinedError, UnknownParameterError

logger = logging.getLogger(__name__)

DEFAULT_STAGES = ("build", "test", "deploy")
DEFAULT_STAGE = "test"
GLOBAL_KEYS = frozenset({"before_script", "image", "services", "types", "stages", "variables"})


@dataclass
class JobDefinition:
    """A raw job mapping together with its effective stage.

    ``explicit_stage`` is False when the stage fell back to ``DEFAULT_STAGE``.
    """

    name: Any
    stage: Any
    attributes: dict[str, Any]
    explicit_stage: bool = True


@dataclass
class NormalizedDocument:
    """Unvalidated global settings and jobs of a CI document."""

    before_script: Any = field(default_factory=list)
    image: Any = None
    services: Any = None
    declared_stages: Any = None
    variables: Any = field(default_factory=dict)
    jobs: list[JobDefinition] = field(default_factory=list)

    @property
    def stages(self) -> tuple[str, ...]:
        if self.declared_stages is None:
            return DEFAULT_STAGES
        return tuple(self.declared_stages)


def normalize(raw: Any) -> NormalizedDocument:
    """Extract global settings and job definitions from a parsed document."""
    if not isinstance(raw, Mapping):
        raise MalformedDocumentError

    declared_stages = raw.get("stages")
    if declared_stages is None:
        declared_stages = raw.get("types")

    before_script = raw.get("before_script")
    variables = raw.get("variables")
    doc = NormalizedDocument(
        before_script=[] if before_script is None else before_script,
        image=raw.get("image"),
        services=raw.get("services"),
        declared_stages=declared_stages,
        variables={} if variables is None else variables,
    )

    entries = {key: value for key, value in raw.items() if key not in GLOBAL_KEYS}
    # anything that doesn't have a script is not a job
    for name, params in entries.items():
        if not (isinstance(params, Mapping) and "script" in params):
            raise UnknownParameterError(name)

    if not entries:
        raise NoJobsDefinedError

    for name, params in entries.items():
        stage = params.get("stage")
        if stage is None:
            stage = params.get("type")
        explicit = stage is not None
        doc.jobs.append(
            JobDefinition(
                name=name,
                stage=stage if explicit else DEFAULT_STAGE,
                attributes=dict(params),
                explicit_stage=explicit,
            )
        )

    logger.debug("Normalized %d job(s)", len(doc.jobs))
    return doc
