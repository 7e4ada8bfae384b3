"""Tests for exceptions."""

from gitlab_ci_yaml.exceptions import (
    GitLabCiError,
    MalformedDocumentError,
    NoJobsDefinedError,
    PatternError,
    UnknownParameterError,
    ValidationError,
)


def test_validation_error():
    e = ValidationError("rspec job: image should be a string", field="image", job="rspec")
    assert isinstance(e, GitLabCiError)
    assert e.field == "image"
    assert e.job == "rspec"
    assert "rspec" in str(e)


def test_malformed_document():
    e = MalformedDocumentError()
    assert isinstance(e, ValidationError)
    assert str(e) == "YAML should be a hash"


def test_unknown_parameter():
    e = UnknownParameterError("extra")
    assert isinstance(e, ValidationError)
    assert e.key == "extra"
    assert str(e) == "Unknown parameter: extra"


def test_no_jobs_defined():
    e = NoJobsDefinedError()
    assert isinstance(e, ValidationError)
    assert "at least one job" in str(e)


def test_pattern_error():
    e = PatternError("/(/", "missing ), unterminated subpattern", job="rspec", field="only")
    assert isinstance(e, ValidationError)
    assert e.pattern == "/(/"
    assert e.job == "rspec"
    assert e.field == "only"
    assert str(e).startswith("rspec job: invalid pattern /(/")


def test_pattern_error_without_job():
    e = PatternError("/(/", "bad")
    assert str(e) == "invalid pattern /(/: bad"
