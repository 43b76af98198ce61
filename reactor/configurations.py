# ============================================================
# Engine
# ============================================================

COALESCE = True                     # merge adjacent pieces after every union/subtract

# initialization procedure region: -50..50 (inclusive) on every axis
INIT_REGION_BOUNDS = (-50, 50)

# ============================================================
# Brute-force reference counter
# ============================================================
BRUTE_FORCE_MAX_POINTS = 2_000_000  # refuse regions with more lattice points

# ============================================================
# Results
# ============================================================
SCHEMA_VERSION = "1.0"
RESULTS_DIR_NAME = "results"
RUN_INDEX_NAME = "run_index.json"
SUMMARY_NAME = "summary"            # <name>.csv / <name>.xlsx from aggregate_results

# ============================================================
# Debug / Logging
# ============================================================
DEBUG = False                       # verbose per-instruction logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%H:%M:%S"
