from __future__ import annotations

import argparse
import csv
import logging
from pathlib import Path
from statistics import mean
from typing import Any, Dict, List, Optional, Sequence

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from reactor import configurations as cfg
from reactor.results.index import load_index
from reactor.results.schema import RunRecordError, index_entry
from reactor.results.writer import read_json


logger = logging.getLogger(__name__)

FIELDS = [
    "run_id",
    "timestamp_utc",
    "source",
    "instruction_count",
    "coalesce",
    "region",
    "lit_count",
    "cuboid_count",
    "peak_cuboid_count",
    "elapsed_sec",
    "record_path",
]


def read_case(path: Path) -> Optional[Dict[str, Any]]:
    """
    Read one run record and flatten it to an index row.
    Returns None (and logs why) if the file is not a usable run record.
    """
    try:
        return index_entry(read_json(path), str(path))
    except RunRecordError as e:
        logger.warning("[read_case] Skipping %s: %s", path, e)
    except OSError as e:
        logger.warning("[read_case] Cannot read %s: %s", path, e)
    return None


def collect_rows(source: Path) -> List[Dict[str, Any]]:
    """Rows from a run index file, or from every *.json run record under a directory."""
    if source.is_dir():
        rows = []
        for p in sorted(source.rglob("*.json")):
            if p.name == cfg.RUN_INDEX_NAME:
                continue
            row = read_case(p)
            if row is not None:
                rows.append(row)
        return rows
    return load_index(source)


def _cell(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return "..".join(str(v) for v in value)
    if value is None:
        return ""
    return value


def write_csv(path: Path, rows: List[Dict[str, Any]], fieldnames: List[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        for r in rows:
            w.writerow({k: _cell(r.get(k)) for k in fieldnames})


def write_xlsx(path: Path, rows: List[Dict[str, Any]], fieldnames: List[str], sheet_name: str = "runs") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name

    ws.append(fieldnames)
    for r in rows:
        ws.append([_cell(r.get(h)) for h in fieldnames])

    for i, name in enumerate(fieldnames, start=1):
        width = max([len(name)] + [len(str(_cell(r.get(name)))) for r in rows])
        ws.column_dimensions[get_column_letter(i)].width = min(width + 2, 60)

    summary = wb.create_sheet("summary")
    for key, value in summarize(rows).items():
        summary.append([key, value])

    wb.save(path)


def summarize(rows: List[Dict[str, Any]]) -> Dict[str, Any]:
    elapsed = [float(r["elapsed_sec"]) for r in rows if r.get("elapsed_sec") is not None]
    peaks = [int(r["peak_cuboid_count"]) for r in rows if r.get("peak_cuboid_count") is not None]
    return {
        "runs": len(rows),
        "elapsed_sec_mean": round(mean(elapsed), 6) if elapsed else 0.0,
        "elapsed_sec_max": round(max(elapsed), 6) if elapsed else 0.0,
        "peak_cuboid_count_max": max(peaks) if peaks else 0,
    }


def aggregate_results(source: Path, out_dir: Path, name: str = cfg.SUMMARY_NAME) -> Dict[str, Path]:
    rows = collect_rows(source)
    csv_path = out_dir / f"{name}.csv"
    xlsx_path = out_dir / f"{name}.xlsx"
    write_csv(csv_path, rows, FIELDS)
    write_xlsx(xlsx_path, rows, FIELDS)
    logger.info("Aggregated %d runs into %s and %s", len(rows), csv_path, xlsx_path)
    return {"csv": csv_path, "xlsx": xlsx_path}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Summarize reactor run records into CSV and XLSX")
    parser.add_argument("source", help="Run index JSON file, or a directory of run records")
    parser.add_argument("--out-dir", default=".", help="Where to write the summary files")
    parser.add_argument("--name", default=cfg.SUMMARY_NAME, help="Base name of the summary files")
    args = parser.parse_args(argv)

    aggregate_results(Path(args.source), Path(args.out_dir), args.name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
