"""
Report Generation

Writes populated storage root tables to JSON, Markdown and CSV. Only the
tables' exported rows are consumed, so every report follows the current sort
order of its table.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from .tables import RATIO_FIELDS, STEP_FIELDS, RatioTable, StepIncrTable, format_float


def format_input_vars(input_vars) -> str:
    return "[" + ", ".join(str(v) for v in input_vars) + "]"


def ratio_dataframe(table: RatioTable) -> pd.DataFrame:
    """Ratio rows as a DataFrame with one column per exported field."""
    return pd.DataFrame(table.raw_list(), columns=list(RATIO_FIELDS))


def step_dataframe(table: StepIncrTable) -> pd.DataFrame:
    """Step rows as a DataFrame with one column per exported field."""
    return pd.DataFrame(table.raw_list(), columns=list(STEP_FIELDS))


class ReportGenerator:
    """Generates reports from storage root tables."""
    
    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)
        self.logger = logging.getLogger(__name__)

    def _target(self, name: str) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir / name

    def to_dict(
        self,
        ratio_table: Optional[RatioTable] = None,
        step_table: Optional[StepIncrTable] = None,
    ) -> Dict[str, List[Dict[str, Any]]]:
        """Rows of both tables keyed by field name."""
        data: Dict[str, List[Dict[str, Any]]] = {"ratios": [], "steps": []}
        if ratio_table is not None:
            data["ratios"] = [dict(zip(RATIO_FIELDS, row)) for row in ratio_table.raw_list()]
        if step_table is not None:
            for row in step_table.raw_list():
                item = dict(zip(STEP_FIELDS, row))
                item["input_vars"] = list(item["input_vars"])
                data["steps"].append(item)
        return data

    def save_json(
        self,
        ratio_table: Optional[RatioTable] = None,
        step_table: Optional[StepIncrTable] = None,
    ) -> Path:
        """Save all rows to JSON."""
        output_path = self._target("storage_root_report.json")
        
        with open(output_path, "w") as f:
            json.dump(self.to_dict(ratio_table, step_table), f, indent=2)

        self.logger.info(f"JSON report written to {output_path}")
        return output_path

    def generate_markdown(
        self,
        ratio_table: Optional[RatioTable] = None,
        step_table: Optional[StepIncrTable] = None,
    ) -> Path:
        """Generate a Markdown summary report."""
        output_path = self._target("storage_root_report.md")

        lines = ["# Storage Root Benchmark Report", ""]

        if ratio_table is not None:
            lines.extend([
                "## Storage Root to Extrinsic Time Ratio",
                "",
                "| Pallet | Extrinsic | Avg Extrinsic Time | Avg Storage Root Time | Ratio | Increase |",
                "|--------|-----------|--------------------|-----------------------|-------|----------|",
            ])
            for pallet, extrinsic, ext_time, root_time, ratio, pct in ratio_table.raw_list():
                lines.append(
                    f"| {pallet} | {extrinsic} | {format_float(ext_time)} | "
                    f"{format_float(root_time)} | {format_float(ratio)} | {format_float(pct)} % |"
                )
            lines.extend(["", "```text", *ratio_table.format_entries(), "```", ""])

        if step_table is not None:
            lines.extend([
                "## Increase per Step",
                "",
                "| Pallet | Extrinsic | Input Vars | Avg Extrinsic Time | Avg Storage Root Time | Extrinsic Increase | Storage Root Increase |",
                "|--------|-----------|------------|--------------------|-----------------------|--------------------|-----------------------|",
            ])
            for pallet, extrinsic, input_vars, ext_time, root_time, ext_pct, root_pct in step_table.raw_list():
                lines.append(
                    f"| {pallet} | {extrinsic} | {format_input_vars(input_vars)} | "
                    f"{format_float(ext_time)} | {format_float(root_time)} | "
                    f"{format_float(ext_pct)} % | {format_float(root_pct)} % |"
                )
            lines.append("")

        with open(output_path, "w") as f:
            f.write("\n".join(lines))

        self.logger.info(f"Markdown report written to {output_path}")
        return output_path

    def save_csv(
        self,
        ratio_table: Optional[RatioTable] = None,
        step_table: Optional[StepIncrTable] = None,
    ) -> List[Path]:
        """Save each given table to its own CSV file."""
        written = []

        if ratio_table is not None:
            path = self._target("ratios.csv")
            ratio_dataframe(ratio_table).to_csv(path, index=False)
            written.append(path)

        if step_table is not None:
            path = self._target("steps.csv")
            df = step_dataframe(step_table)
            df["input_vars"] = df["input_vars"].map(lambda v: ";".join(str(x) for x in v))
            df.to_csv(path, index=False)
            written.append(path)

        for path in written:
            self.logger.info(f"CSV written to {path}")
        return written
