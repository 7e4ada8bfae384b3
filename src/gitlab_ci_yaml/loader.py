"""Load CI documents from YAML text or files."""

from __future__ import annotations

from pathlib import Path

import yaml

from .config import ProcessorConfig
from .exceptions import MalformedDocumentError
from .models.document import CiDocument
from .processor.construct import construct


def load_text(text: str, config: ProcessorConfig | None = None) -> CiDocument:
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML: {e}"
        raise MalformedDocumentError(msg) from e
    return construct(raw, config)


def load_file(path: str | Path, config: ProcessorConfig | None = None) -> CiDocument:
    """Read and construct a CI file.

    OSError from reading propagates unchanged; undecodable bytes are a malformed document.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        msg = f"Invalid YAML: {e}"
        raise MalformedDocumentError(msg) from e
    return load_text(text, config)
