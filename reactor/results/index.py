# reactor/results/index.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from reactor.results.schema import RunRecordError
from reactor.results.writer import read_json, write_json


def ensure_index(path: Path) -> None:
    if not path.exists():
        write_json([], path)
        return
    txt = path.read_text(encoding="utf-8").strip()
    if txt == "":
        write_json([], path)


def load_index(index_path: Path) -> List[Dict[str, Any]]:
    ensure_index(index_path)
    data = read_json(index_path)
    if not isinstance(data, list):
        raise RunRecordError(f"Expected a JSON list in {index_path}")
    return data


def append_run(index_path: Path, entry: Dict[str, Any]) -> None:
    data = load_index(index_path)
    data.append(entry)
    write_json(data, index_path)
