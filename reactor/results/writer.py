# reactor/results/writer.py
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

from reactor.results.schema import RunRecordError


def _json_dump(obj: Any) -> str:
    return json.dumps(obj, indent=2, sort_keys=True, ensure_ascii=False) + "\n"


def _write_text_atomic(path: Path, text: str) -> None:
    # readers only ever see a complete file
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    tmp.write_text(text, encoding="utf-8")
    os.replace(tmp, path)


def write_run(run: Dict[str, Any], out_path: Path) -> None:
    _write_text_atomic(out_path, _json_dump(run))


def read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise RunRecordError(f"Invalid JSON: {path} ({e})") from e


def write_json(obj: Any, path: Path) -> None:
    _write_text_atomic(path, _json_dump(obj))
