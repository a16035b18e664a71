#!/usr/bin/env python3
"""
===============================================================================
PRIMITIVE TIMING - MAIN ENTRY POINT
===============================================================================
Measures the running time of array construction, array access, arithmetic
and logic over array sizes 10,000 .. 1,000,000 and writes one CSV per
operation.

USAGE:
    python -m primitive_timing.main                      # All four routines
    python -m primitive_timing.main --routine access     # One routine only
    python -m primitive_timing.main --output-dir results --plot
    python -m primitive_timing.main --config config/timing_config.yaml

OUTPUTS (in the output directory):
    array-building-times.csv
    array-access-times.csv
    arithmetic-times.csv
    logic-times.csv
    *.png                  - Raw scatter plots when --plot is given

DEPENDENCIES:
    numpy, pandas, matplotlib, pyyaml
===============================================================================
"""

import argparse
import logging
import os
import sys
import time
from typing import Any, Dict, List, Optional

import yaml

from primitive_timing.performance.results import plot_results
from primitive_timing.performance.timing import ROUTINES, run_all

logger = logging.getLogger("primitive_timing")

DEFAULT_CONFIG: Dict[str, Any] = {
    "output_dir": ".",
    "log_level": "INFO",
    "seed": None,
    "routines": list(ROUTINES),
    "plot": False,
}

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the run configuration from a YAML file, merged over the defaults.

    Args:
        config_path: Path to a YAML mapping.  ``None`` returns the defaults.

    Returns:
        Dictionary with keys output_dir, log_level, seed, routines, plot.

    Raises:
        FileNotFoundError: if *config_path* does not exist.
        ValueError: on unknown keys or values of the wrong type.
    """
    config = dict(DEFAULT_CONFIG)
    if config_path is None:
        return config

    if not os.path.exists(config_path):
        raise FileNotFoundError(f"config file not found: {config_path}")
    with open(config_path, "r") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"{config_path}: expected a mapping at top level")

    unknown = sorted(set(loaded) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"{config_path}: unknown key(s): {', '.join(unknown)}")
    config.update(loaded)

    if not isinstance(config["output_dir"], str):
        raise ValueError("output_dir must be a string")
    if config["seed"] is not None and (
        isinstance(config["seed"], bool) or not isinstance(config["seed"], int)
    ):
        raise ValueError("seed must be an integer or null")
    if not isinstance(config["plot"], bool):
        raise ValueError("plot must be true or false")
    if not isinstance(config["routines"], list) or not config["routines"]:
        raise ValueError("routines must be a non-empty list")
    bad = [r for r in config["routines"] if r not in ROUTINES]
    if bad:
        raise ValueError(f"unknown routine(s): {', '.join(map(str, bad))}")
    if not isinstance(logging.getLevelName(str(config["log_level"]).upper()), int):
        raise ValueError(f"unknown log level: {config['log_level']}")

    logger.info("Loaded configuration from: %s", config_path)
    return config


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Measure running times of primitive array operations.",
    )
    parser.add_argument("--config", default=None, help="YAML run configuration")
    parser.add_argument("--output-dir", default=None, help="directory for the CSV files")
    parser.add_argument(
        "--routine",
        action="append",
        choices=list(ROUTINES),
        dest="routines",
        help="routine to run (repeatable; default: all)",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--plot", action="store_true", help="save a PNG per CSV")
    parser.add_argument("--verbose", "-v", action="store_true", help="log every size")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as exc:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, stream=sys.stdout)
        logger.error("Invalid configuration: %s", exc)
        return 1

    if args.output_dir is not None:
        config["output_dir"] = args.output_dir
    if args.routines:
        config["routines"] = args.routines
    if args.seed is not None:
        config["seed"] = args.seed
    if args.plot:
        config["plot"] = True

    level = logging.DEBUG if args.verbose else str(config["log_level"]).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stdout)

    t_start = time.time()
    try:
        written = run_all(
            config["output_dir"],
            seed=config["seed"],
            routines=config["routines"],
        )
        if config["plot"]:
            for path in written.values():
                plot_results(path)
    except OSError as exc:
        logger.error("Timing run aborted: %s", exc)
        return 1

    logger.info(
        "Wrote %d file(s) to %s in %.1f s",
        len(written), os.path.abspath(config["output_dir"]), time.time() - t_start,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
