"""Schema validation for normalized CI documents.

Checks run in a fixed order and the first violation raises
:class:`~gitlab_ci_yaml.exceptions.ValidationError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NoReturn

from ..exceptions import PatternError, ValidationError
from .normalizer import JobDefinition, NormalizedDocument
from .selection import RegexPattern, parse_pattern

ALLOWED_JOB_KEYS = frozenset(
    {
        "tags",
        "script",
        "only",
        "except",
        "type",
        "image",
        "services",
        "allow_failure",
        "stage",
        "when",
    }
)
WHEN_VALUES = ("on_success", "on_failure", "always")
ARRAY_FIELDS = {
    "services": "services",
    "tags": "tags parameter",
    "only": "only parameter",
    "except": "except parameter",
}


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_array_of_strings(values: Any) -> bool:
    return isinstance(values, (list, tuple)) and all(_is_string(value) for value in values)


def _is_variables(variables: Any) -> bool:
    return isinstance(variables, Mapping) and all(
        _is_string(key) and _is_string(value) for key, value in variables.items()
    )


def validate(doc: NormalizedDocument, *, validate_patterns: bool = False) -> None:
    """Validate global settings then every job, in document order."""
    if not _is_array_of_strings(doc.before_script):
        raise ValidationError("before_script should be an array of strings", field="before_script")

    if doc.image is not None and not _is_string(doc.image):
        raise ValidationError("image should be a string", field="image")

    if doc.services is not None and not _is_array_of_strings(doc.services):
        raise ValidationError("services should be an array of strings", field="services")

    if doc.declared_stages is not None and not _is_array_of_strings(doc.declared_stages):
        raise ValidationError("stages should be an array of strings", field="stages")

    if not _is_variables(doc.variables):
        raise ValidationError("variables should be a map of key-valued strings", field="variables")

    stages = doc.stages
    for job in doc.jobs:
        validate_job(job, stages)
        if validate_patterns:
            _check_job_patterns(job)


def validate_job(job: JobDefinition, stages: tuple[str, ...]) -> None:
    name = job.name
    if not _is_string(name) or not name.strip():
        raise ValidationError("job name should be non-empty string", job=str(name))

    def fail(field: str, message: str) -> NoReturn:
        raise ValidationError(f"{name} job: {message}", field=field, job=name)

    attrs = job.attributes
    for key in attrs:
        if key not in ALLOWED_JOB_KEYS:
            fail(str(key), f"unknown parameter {key}")

    script = attrs["script"]
    if not _is_string(script) and not _is_array_of_strings(script):
        fail("script", "script should be a string or an array of a strings")

    if job.explicit_stage and not (_is_string(job.stage) and job.stage in stages):
        fail("stage", f"stage parameter should be {', '.join(stages)}")

    if attrs.get("image") is not None and not _is_string(attrs["image"]):
        fail("image", "image should be a string")

    for key, label in ARRAY_FIELDS.items():
        if attrs.get(key) is not None and not _is_array_of_strings(attrs[key]):
            fail(key, f"{label} should be an array of strings")

    if attrs.get("allow_failure") is not None and not isinstance(attrs["allow_failure"], bool):
        fail("allow_failure", "allow_failure parameter should be an boolean")

    if attrs.get("when") is not None and attrs["when"] not in WHEN_VALUES:
        fail("when", "when parameter should be on_success, on_failure or always")


def _check_job_patterns(job: JobDefinition) -> None:
    for key in ("only", "except"):
        for pattern in job.attributes.get(key) or ():
            parsed = parse_pattern(pattern)
            if not isinstance(parsed, RegexPattern):
                continue
            try:
                parsed.compile()
            except PatternError as e:
                raise PatternError(pattern, e.reason, job=job.name, field=key) from e
