# SARIF serialization: render a ReportDocument as indented JSON text and write it out.

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic_core import PydanticSerializationError

if TYPE_CHECKING:
    from sarifgen.sarif.document import ReportDocument

logger = logging.getLogger(__name__)


def serialize(document: ReportDocument, indent: int = 2) -> str:
    """
    Render the document as indented SARIF JSON.

    Absent (None) properties are dropped; empty lists are kept and written as
    []. If the document cannot be encoded the error is logged and "" is
    returned. The document itself is never modified, so the call can be
    retried.
    """
    try:
        return document.to_sarif().model_dump_json(
            indent=indent,
            by_alias=True,
            exclude_none=True,
        )
    except (PydanticSerializationError, ValueError, TypeError) as e:
        logger.error("Could not serialize sarif: %s", e)
        return ""


def write_output(document: ReportDocument, path: Path) -> str:
    """
    Overwrite path with the serialized document, creating parent directories.

    Returns the text written (which is "" when serialization failed).
    """
    logger.info("Writing sarif output to %s", path)
    text = serialize(document, indent=document.config.indent)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return text
