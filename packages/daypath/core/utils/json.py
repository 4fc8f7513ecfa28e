"""JSON helpers that understand numpy values and paths.

Lookup tables hold numpy arrays and scalars; these helpers let them be dumped
without converting by hand.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)


def json_default(obj: Any) -> Any:
    """``default=`` hook for json.dumps.

    Arrays become lists, numpy scalars become Python numbers, paths become
    strings; anything else falls back to ``str``.
    """
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, Path):
        return obj.as_posix()
    return str(obj)


def dumps_json(obj: Any) -> str:
    return json.dumps(obj, indent=2, ensure_ascii=False, default=json_default)


def write_json(path: str | Path, obj: Any) -> None:
    """Write ``obj`` as indented UTF-8 JSON, creating parent directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(dumps_json(obj) + "\n", encoding="utf-8")
    logger.debug("Wrote JSON to %s", target)


def read_json(path: str | Path) -> dict[str, Any]:
    """Read a JSON file whose top level is an object.

    Raises:
        ValueError: If the content is not valid JSON or not an object
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object, got {type(data).__name__}")
    return data
