"""
Benchmark Charts

Static PNG charts (Base64 encoded) built from the exported table rows.
"""

import io
import math
import base64
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import matplotlib
matplotlib.use('Agg') # Non-interactive backend
import matplotlib.pyplot as plt
import numpy as np

from .reporting import format_input_vars
from .tables import RatioTable, StepIncrTable

COLORS = {
    "EXTRINSIC": "#3498db",    # Blue
    "STORAGE_ROOT": "#e67e22", # Orange
    "RATIO": "#34495e",        # Dark Blue
}


@dataclass
class ChartOutput:
    title: str
    png_base64: str
    description: str = ""


def _short(label: str, limit: int = 28) -> str:
    return label if len(label) <= limit else label[:limit - 2] + ".."


class ChartGenerator:
    def __init__(self, dpi: int = 100):
        self.dpi = dpi
        self.logger = logging.getLogger(__name__)
        plt.style.use('ggplot')
        plt.rc('font', size=10)
        plt.rc('axes', titlesize=12)
        plt.rc('axes', labelsize=10)

    def _fig_to_base64(self, fig) -> str:
        """Convert matplotlib figure to base64 string."""
        buf = io.BytesIO()
        fig.savefig(buf, format='png', bbox_inches='tight', dpi=self.dpi)
        buf.seek(0)
        img_str = base64.b64encode(buf.read()).decode('utf-8')
        plt.close(fig)
        return img_str

    def plot_ratios(self, table: RatioTable, title: str = "Storage Root / Extrinsic Time") -> Optional[ChartOutput]:
        """Bar chart of the ratio of every extrinsic, in table order."""
        rows = table.raw_list()
        if not rows:
            return None

        labels = [_short(f"{pallet}::{extrinsic}") for pallet, extrinsic, *_ in rows]
        values = [row[4] for row in rows]

        x = np.arange(len(labels))

        fig, ax = plt.subplots(figsize=(max(6, len(rows) * 0.6), 4))
        bars = ax.bar(x, values, color=COLORS["RATIO"], width=0.5)

        ax.set_title(title)
        ax.set_ylabel("Ratio")
        ax.set_xticks(x)
        ax.set_xticklabels(labels, rotation=30, ha='right')
        ax.grid(axis='y', linestyle='--', alpha=0.5)

        for bar, value in zip(bars, values):
            if not math.isfinite(value):
                continue
            ax.text(bar.get_x() + bar.get_width()/2., value,
                    f'{value:.2f}', ha='center', va='bottom', fontsize=8)

        return ChartOutput(title, self._fig_to_base64(fig), "Storage root computation time relative to extrinsic execution time.")

    def plot_step_increase(self, table: StepIncrTable, title: str = "Increase per Step") -> Optional[ChartOutput]:
        """Grouped bar chart of extrinsic vs storage root increase for each step."""
        rows = table.raw_list()
        if not rows:
            return None

        labels = [
            _short(f"{extrinsic} {format_input_vars(input_vars)}", 36)
            for _, extrinsic, input_vars, *_ in rows
        ]
        ext_pct = [row[5] for row in rows]
        root_pct = [row[6] for row in rows]

        x = np.arange(len(labels))
        width = 0.35

        fig, ax = plt.subplots(figsize=(max(7, len(rows) * 0.7), 5))
        ax.bar(x - width/2, ext_pct, width, label='Extrinsic', color=COLORS["EXTRINSIC"])
        ax.bar(x + width/2, root_pct, width, label='Storage root', color=COLORS["STORAGE_ROOT"])

        ax.set_ylabel('Increase (%)')
        ax.set_title(title)
        ax.set_xticks(x)
        ax.set_xticklabels(labels, rotation=30, ha='right')
        ax.legend()
        ax.grid(axis='y', linestyle='--', alpha=0.3)

        return ChartOutput(title, self._fig_to_base64(fig), "Growth of extrinsic and storage root time across input sizes.")

    def save_png(self, chart: ChartOutput, path: Path) -> Path:
        """Write a chart's decoded PNG to disk."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(base64.b64decode(chart.png_base64))
        self.logger.info(f"Chart '{chart.title}' written to {path}")
        return path
