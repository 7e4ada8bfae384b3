"""Tests for splitting a raw document into settings and jobs."""

from __future__ import annotations

import pytest

from gitlab_ci_yaml.exceptions import (
    MalformedDocumentError,
    NoJobsDefinedError,
    UnknownParameterError,
)
from gitlab_ci_yaml.processor.normalizer import DEFAULT_STAGES, normalize


@pytest.mark.parametrize("raw", [None, "just a string", ["a", "b"], 42])
def test_root_must_be_mapping(raw):
    with pytest.raises(MalformedDocumentError, match="YAML should be a hash"):
        normalize(raw)


def test_globals_extracted(raw_config):
    doc = normalize({**raw_config, "image": "ruby:2.1", "services": ["mysql"]})
    assert doc.before_script == ["pwd"]
    assert doc.image == "ruby:2.1"
    assert doc.services == ["mysql"]
    assert doc.variables == {}
    assert [job.name for job in doc.jobs] == ["rspec"]


def test_null_globals_get_defaults():
    doc = normalize({"before_script": None, "variables": None, "rspec": {"script": "rspec"}})
    assert doc.before_script == []
    assert doc.variables == {}


def test_default_stages(raw_config):
    doc = normalize(raw_config)
    assert doc.declared_stages is None
    assert doc.stages == DEFAULT_STAGES


def test_types_alias():
    doc = normalize({"types": ["lint", "test"], "rspec": {"script": "rspec"}})
    assert doc.stages == ("lint", "test")


def test_stages_win_over_types():
    doc = normalize({"stages": ["a"], "types": ["b"], "rspec": {"script": "rspec"}})
    assert doc.stages == ("a",)


def test_unknown_parameter():
    with pytest.raises(UnknownParameterError) as exc_info:
        normalize({"rspec": {"script": "rspec"}, "extra": {"commands": "ls"}})
    assert exc_info.value.key == "extra"
    assert str(exc_info.value) == "Unknown parameter: extra"


def test_scalar_entry_is_unknown_parameter():
    with pytest.raises(UnknownParameterError):
        normalize({"rspec": {"script": "rspec"}, "cache": "vendor"})


def test_keys_are_case_sensitive():
    with pytest.raises(UnknownParameterError, match="Image"):
        normalize({"Image": "ruby", "rspec": {"script": "rspec"}})


def test_no_jobs():
    with pytest.raises(NoJobsDefinedError):
        normalize({"before_script": ["pwd"], "image": "ruby"})


def test_empty_mapping_has_no_jobs():
    with pytest.raises(NoJobsDefinedError):
        normalize({})


class TestEffectiveStage:
    def test_stage(self):
        doc = normalize({"rspec": {"script": "rspec", "stage": "deploy", "type": "build"}})
        assert doc.jobs[0].stage == "deploy"
        assert doc.jobs[0].explicit_stage is True

    def test_type(self):
        doc = normalize({"rspec": {"script": "rspec", "type": "build"}})
        assert doc.jobs[0].stage == "build"

    def test_default(self):
        doc = normalize({"stages": ["build"], "rspec": {"script": "rspec"}})
        assert doc.jobs[0].stage == "test"
        assert doc.jobs[0].explicit_stage is False

    def test_null_stage_falls_back_to_type(self):
        doc = normalize({"rspec": {"script": "rspec", "stage": None, "type": "deploy"}})
        assert doc.jobs[0].stage == "deploy"


def test_raw_attributes_are_copied():
    job = {"script": "rspec"}
    doc = normalize({"rspec": job})
    doc.jobs[0].attributes["when"] = "always"
    assert "when" not in job
