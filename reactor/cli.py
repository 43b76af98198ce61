#!/usr/bin/env python3
"""
reactor: count lit lattice points after a list of on/off cuboid instructions.
"""

import argparse
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional, Sequence, Tuple

from reactor import configurations as cfg
from reactor.data.reboot_input import ParseError, load_instructions
from reactor.engine.driver import apply_instructions, region_cube
from reactor.logging_config import setup_logging
from reactor.models.instructions import StepStats, clip_instructions
from reactor.results.index import append_run
from reactor.results.schema import index_entry, run_skeleton
from reactor.results.writer import write_run


logger = logging.getLogger("reactor.cli")


def parse_region(text: str) -> Tuple[int, int]:
    """argparse type for LO..HI (inclusive)."""
    try:
        lo_txt, hi_txt = text.split("..")
        lo, hi = int(lo_txt), int(hi_txt)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected LO..HI, got {text!r}") from None
    if hi < lo:
        raise argparse.ArgumentTypeError(f"region {text!r} runs backwards")
    return lo, hi


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reactor",
        description="Count lit points after applying on/off cuboid instructions"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Instruction file, one '<on|off> x=..,y=..,z=..' per line (default: stdin)"
    )
    parser.add_argument(
        "--region",
        type=parse_region,
        metavar="LO..HI",
        help="Only count points inside LO..HI on every axis (e.g. --region=-50..50)"
    )
    parser.add_argument(
        "--init",
        action="store_true",
        help="Shortcut for --region %d..%d" % cfg.INIT_REGION_BOUNDS
    )
    parser.add_argument(
        "--no-coalesce",
        action="store_true",
        help="Keep fragments as produced (diagnostics only, grows quickly)"
    )
    parser.add_argument(
        "--report",
        help="Write a JSON run record to this path"
    )
    parser.add_argument(
        "--index",
        help="Append a summary of this run to a JSON run index"
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Open a 3D view of the final cuboid set (needs vedo)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every instruction"
    )
    parser.add_argument(
        "--log-file",
        help="Also write log output to this file"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for reactor."""
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if (args.verbose or cfg.DEBUG) else logging.INFO
    setup_logging(level, args.log_file)

    try:
        instructions = load_instructions(args.input)
    except ParseError as e:
        logger.error("Invalid instruction in %s: %s", args.input, e)
        return 2
    except OSError as e:
        logger.error("Cannot read %s: %s", args.input, e)
        return 2

    region = cfg.INIT_REGION_BOUNDS if args.init else args.region
    coalesce = cfg.COALESCE and not args.no_coalesce

    if region is not None:
        instructions = clip_instructions(instructions, region_cube(*region))

    want_trace = bool(args.report or args.index)
    trace: Optional[List[StepStats]] = [] if want_trace else None

    t0 = perf_counter()
    lit_set = apply_instructions(instructions, coalesce=coalesce, trace=trace)
    lit = lit_set.volume()
    elapsed = perf_counter() - t0

    logger.info(
        "%d instructions -> %d lit points in %d cuboids (%.3fs)",
        len(instructions), lit, len(lit_set), elapsed,
    )
    print(lit)

    if want_trace:
        run = run_skeleton(
            source=str(args.input),
            instruction_count=len(instructions),
            coalesce=coalesce,
            region=region,
        )
        run["result"]["lit_count"] = lit
        run["result"]["cuboid_count"] = len(lit_set)
        run["progress"]["per_step"] = [s.to_dict() for s in trace]
        run["diagnostics"]["elapsed_sec"] = round(elapsed, 6)
        run["diagnostics"]["peak_cuboid_count"] = max((s.cuboid_count for s in trace), default=0)

        if args.report:
            write_run(run, Path(args.report))
            logger.info("Run record written to %s", args.report)
        if args.index:
            append_run(Path(args.index), index_entry(run, args.report))
            logger.info("Run appended to index %s", args.index)

    if args.show:
        from reactor.viz.debug_viz import plot_cuboid_set
        plot_cuboid_set(list(lit_set), title=f"reactor: {args.input}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
