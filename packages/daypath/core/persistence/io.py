"""CurveDocument serialization.

Documents round-trip through plain data (dicts of JSON-safe values) and are
stored as JSON or YAML, chosen by file extension.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from daypath.core.config.loader import detect_format, load_config
from daypath.core.persistence.models import CurveDocument
from daypath.core.utils.json import write_json

logger = logging.getLogger(__name__)


def to_plain(document: CurveDocument) -> dict[str, Any]:
    """Convert a document to JSON-safe plain data."""
    return document.model_dump(mode="json")


def from_plain(data: dict[str, Any]) -> CurveDocument:
    """Validate plain data into a document.

    Raises:
        ValidationError: If the data does not match the schema
    """
    return CurveDocument.model_validate(data)


def save_document(path: str | Path, document: CurveDocument) -> Path:
    """Write a document as JSON or YAML.

    Args:
        path: Destination (.json, .yaml or .yml); parent dirs are created.
        document: Document to save.

    Returns:
        The written path

    Raises:
        ValueError: If the extension is not supported
    """
    path = Path(path)
    fmt = detect_format(path)
    data = to_plain(document)

    if fmt == "json":
        write_json(path, data)
    else:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False)

    logger.debug("Saved document with %d nodes to %s", len(document.nodes), path)
    return path


def load_document(path: str | Path) -> CurveDocument:
    """Load and validate a document from JSON or YAML.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the format is unsupported or the content unparsable
        ValidationError: If the content does not match the schema
    """
    return from_plain(load_config(path))
