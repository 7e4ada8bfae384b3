"""Shared test fixtures for gitlab-ci-yaml."""

from __future__ import annotations

from typing import Any

import pytest

SAMPLE_CI = """\
image: ruby:2.1
services:
  - postgres
before_script:
  - bundle install
stages:
  - build
  - test
  - deploy
variables:
  DB_NAME: postgres

rspec:
  script:
    - rake spec
    - rake coverage
  tags:
    - ruby

release:
  stage: deploy
  script: cap deploy
  only:
    - tags
    - /^release-.*$/

docs:
  stage: build
  image: python:3.12
  script: make docs
  except:
    - master
  allow_failure: true
  when: always
"""


@pytest.fixture
def raw_config() -> dict[str, Any]:
    return {
        "before_script": ["pwd"],
        "rspec": {"script": "rspec"},
    }


@pytest.fixture
def sample_ci() -> str:
    return SAMPLE_CI
