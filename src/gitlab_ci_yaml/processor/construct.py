"""Construct a CiDocument from a parsed CI mapping."""

from __future__ import annotations

import logging
from typing import Any

from ..config import ProcessorConfig
from ..models.document import CiDocument
from .builder import build_job
from .normalizer import normalize
from .validator import validate

logger = logging.getLogger(__name__)


def construct(raw: Any, config: ProcessorConfig | None = None) -> CiDocument:
    """Normalize, validate and build a CI document.

    Raises a :class:`~gitlab_ci_yaml.exceptions.ValidationError` subclass on
    the first problem found; nothing is built in that case.
    """
    config = config or ProcessorConfig()
    doc = normalize(raw)
    validate(doc, validate_patterns=config.validate_patterns)

    stages = doc.stages
    logger.debug("Resolved stages: %s", ", ".join(stages))
    jobs = tuple(
        build_job(
            definition,
            stages=stages,
            before_script=doc.before_script,
            image=doc.image,
            services=doc.services,
        )
        for definition in doc.jobs
    )
    logger.debug("Built %d job(s)", len(jobs))

    return CiDocument(
        before_script=tuple(doc.before_script),
        image=doc.image,
        services=None if doc.services is None else tuple(doc.services),
        stages=stages,
        variables=dict(doc.variables),
        jobs=jobs,
    )
