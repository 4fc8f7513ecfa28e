"""Persisted curve documents."""

from daypath.core.persistence.io import from_plain, load_document, save_document, to_plain
from daypath.core.persistence.models import CurveDocument, NodeRecord

__all__ = [
    "CurveDocument",
    "NodeRecord",
    "from_plain",
    "load_document",
    "save_document",
    "to_plain",
]
