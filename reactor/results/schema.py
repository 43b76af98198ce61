# reactor/results/schema.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from reactor import configurations as cfg


SCHEMA_VERSION = cfg.SCHEMA_VERSION


class RunRecordError(RuntimeError):
    pass


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def make_run_id(timestamp_utc: str, source: str, region: Optional[Tuple[int, int]]) -> str:
    # timestamp_utc like "2026-10-19T17:04:55.123456Z"
    ts = timestamp_utc.split(".")[0]
    ts = ts.replace("-", "").replace(":", "").replace("T", "_").replace("Z", "")
    if source == "-":
        stem = "stdin"
    else:
        stem = source.replace("\\", "/").rsplit("/", 1)[-1].rsplit(".", 1)[0] or "input"
    scope = f"region{region[0]}_{region[1]}" if region is not None else "full"
    return f"{ts}_{stem}_{scope}"


def run_skeleton(
    *,
    source: str,
    instruction_count: int,
    coalesce: bool,
    region: Optional[Tuple[int, int]],
) -> Dict[str, Any]:
    """Return an empty-but-valid run dict you will populate later."""
    ts = utc_now_iso()
    run_id = make_run_id(ts, source, region)

    return {
        "schema_version": SCHEMA_VERSION,
        "run_id": run_id,
        "timestamp_utc": ts,
        "input": {
            "source": source,                 # file path or "-" for stdin
            "instruction_count": instruction_count,
        },
        "engine": {
            "coalesce": coalesce,
            "region": list(region) if region is not None else None,   # [lo, hi] inclusive, or whole lattice
        },
        "result": {
            "lit_count": None,
            "cuboid_count": None,
        },
        "progress": {"per_step": []},       # list[ {index, turn_on, cuboid_count, volume} ]
        "diagnostics": {
            "elapsed_sec": None,
            "peak_cuboid_count": None,
            "notes": "",
        },
    }


def index_entry(run: Dict[str, Any], record_path: Optional[str] = None) -> Dict[str, Any]:
    """Flat summary row of one run, as kept in the run index."""
    try:
        return {
            "run_id": run["run_id"],
            "timestamp_utc": run["timestamp_utc"],
            "source": run["input"]["source"],
            "instruction_count": run["input"]["instruction_count"],
            "coalesce": run["engine"]["coalesce"],
            "region": run["engine"]["region"],
            "lit_count": run["result"]["lit_count"],
            "cuboid_count": run["result"]["cuboid_count"],
            "peak_cuboid_count": run["diagnostics"]["peak_cuboid_count"],
            "elapsed_sec": run["diagnostics"]["elapsed_sec"],
            "record_path": record_path,
        }
    except (KeyError, TypeError) as e:
        raise RunRecordError(f"Run record is missing {e}") from e


def per_step_rows(run: Dict[str, Any]) -> List[Dict[str, Any]]:
    try:
        rows = run["progress"]["per_step"]
    except (KeyError, TypeError) as e:
        raise RunRecordError(f"Run record is missing {e}") from e
    if not isinstance(rows, list):
        raise RunRecordError("progress.per_step must be a list")
    return rows
