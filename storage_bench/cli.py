"""
CLI to render storage root benchmark tables.

Reads pre-computed rows from a JSON or YAML file, fills the ratio and step
tables, prints the ratio table and optionally writes reports and charts.

Input layout:
    {
        "ratios": [{"pallet": ..., "extrinsic": ..., "avg_extrinsic_time": ...,
                    "avg_storage_root_time": ..., "ratio": ..., "percentage": ...}],
        "steps": [{"pallet": ..., "extrinsic": ...,
                   "steps": [{"input_vars": [...], "avg_extrinsic_time": ...,
                              "avg_storage_root_time": ...,
                              "extrinsic_percentage": ...,
                              "storage_root_percentage": ...}]}]
    }

Example usage:
    storage-bench results.json
    storage-bench results.json --sort --output output/ --format markdown csv
    python -m storage_bench results.yaml --charts --output output/
"""

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .config import Settings
from .reporting import ReportGenerator
from .tables import RatioTable, StepIncrTable, StepRepeatIncr

logger = logging.getLogger(__name__)

FORMATS = ("markdown", "json", "csv")


def load_rows(path: Path) -> Dict[str, List[Dict[str, Any]]]:
    """Load the input document from JSON or YAML."""
    with open(path, "r") as f:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping with 'ratios' and/or 'steps'")
    return data


def _check_row(row: Any) -> None:
    if not isinstance(row, dict):
        raise ValueError(f"Expected a mapping per row, got {type(row).__name__}")


def build_ratio_table(rows: List[Dict[str, Any]]) -> RatioTable:
    table = RatioTable()
    for row in rows:
        _check_row(row)
        table.push(
            row["pallet"],
            row["extrinsic"],
            float(row["avg_extrinsic_time"]),
            float(row["avg_storage_root_time"]),
            float(row["ratio"]),
            float(row["percentage"]),
        )
    return table


def build_step_table(rows: List[Dict[str, Any]]) -> StepIncrTable:
    table = StepIncrTable()
    for row in rows:
        _check_row(row)
        steps = [
            StepRepeatIncr(
                input_vars=tuple(int(v) for v in step["input_vars"]),
                avg_extrinsic_time=float(step["avg_extrinsic_time"]),
                avg_storage_root_time=float(step["avg_storage_root_time"]),
                extrinsic_percentage=float(step["extrinsic_percentage"]),
                storage_root_percentage=float(step["storage_root_percentage"]),
            )
            for step in row.get("steps") or []
        ]
        table.push(row["pallet"], row["extrinsic"], steps)
    return table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storage-bench",
        description="Render extrinsic vs storage root benchmark tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("input", type=Path, help="JSON or YAML file with pre-computed rows")
    parser.add_argument("--sort", action="store_true", help="Sort ratios ascending and steps by extrinsic increase")
    parser.add_argument("--output", "-o", type=Path, help="Output directory for reports")
    parser.add_argument("--format", nargs="+", choices=FORMATS, help="Report formats (default: markdown)")
    parser.add_argument("--charts", action="store_true", help="Write PNG charts to the output directory")
    parser.add_argument("--config", type=Path, help="YAML settings file (default: environment)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--quiet", "-q", action="store_true", help="Do not print the ratio table")
    return parser


def write_outputs(
    settings: Settings,
    output_dir: Path,
    formats: List[str],
    ratio_table: RatioTable,
    step_table: StepIncrTable,
) -> List[Path]:
    generator = ReportGenerator(output_dir)
    written: List[Path] = []

    if "markdown" in formats:
        written.append(generator.generate_markdown(ratio_table, step_table))
    if "json" in formats:
        written.append(generator.save_json(ratio_table, step_table))
    if "csv" in formats:
        written.extend(generator.save_csv(ratio_table, step_table))

    if settings.charts:
        from .charts import ChartGenerator

        charts = ChartGenerator(dpi=settings.chart_dpi)
        for name, chart in (
            ("ratios.png", charts.plot_ratios(ratio_table)),
            ("steps.png", charts.plot_step_increase(step_table)),
        ):
            if chart is None:
                logger.debug(f"Skipping {name}: no rows")
                continue
            written.append(charts.save_png(chart, output_dir / name))

    return written


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_yaml(args.config) if args.config else Settings.from_env()
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
        logger.error(f"Could not load settings: {e}")
        return 1

    if args.charts:
        settings.charts = True

    log_level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    try:
        data = load_rows(args.input)
        ratio_table = build_ratio_table(data.get("ratios") or [])
        step_table = build_step_table(data.get("steps") or [])
    except (OSError, ValueError, KeyError, TypeError, yaml.YAMLError) as e:
        # json.JSONDecodeError is a ValueError
        logger.error(f"Could not load {args.input}: {e!r}")
        return 1

    logger.info(f"Loaded {len(ratio_table)} ratio rows and {len(step_table)} step entries")

    if args.sort:
        ratio_table.sort_by_ratio()
        step_table.sort_by_extrinsic_percentage()

    if not args.quiet:
        ratio_table.print_entries()

    if args.output or args.format or settings.charts:
        output_dir = args.output or settings.output_dir
        formats = args.format or (["markdown"] if args.output else [])
        for path in write_outputs(settings, output_dir, formats, ratio_table, step_table):
            logger.info(f"Wrote {path}")

    return 0
