"""Tests for JSON utilities."""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pytest

from daypath.core.utils.json import dumps_json, read_json, write_json


class TestJsonUtils:
    """Tests for dumps_json, write_json and read_json."""

    def test_numpy_and_path_values(self) -> None:
        data = json.loads(
            dumps_json(
                {
                    "arr": np.array([1.5, 2.5]),
                    "i": np.int64(3),
                    "f": np.float32(0.5),
                    "p": Path("a/b.json"),
                }
            )
        )
        assert data == {"arr": [1.5, 2.5], "i": 3, "f": 0.5, "p": "a/b.json"}

    def test_write_creates_parents_and_reads_back(self, tmp_path: Path) -> None:
        path = tmp_path / "deep" / "dir" / "out.json"
        write_json(path, {"name": "curve", "values": [1, 2, 3]})
        assert read_json(path) == {"name": "curve", "values": [1, 2, 3]}

    def test_read_rejects_non_object(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError, match="Expected JSON object"):
            read_json(path)
