"""
Application Settings

Environment and file configuration for report generation.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

_TRUE_VALUES = ("1", "true", "yes", "on")


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


@dataclass
class Settings:
    """Application settings."""
    
    # Report output
    output_dir: Path = field(default_factory=lambda: Path("output"))
    log_level: str = "WARNING"
    
    # Charts
    charts: bool = False
    chart_dpi: int = 100
    
    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            output_dir=Path(os.getenv("STORAGE_BENCH_OUTPUT_DIR", "output")),
            log_level=os.getenv("STORAGE_BENCH_LOG_LEVEL", "WARNING").upper(),
            charts=_as_bool(os.getenv("STORAGE_BENCH_CHARTS", "false")),
            chart_dpi=int(os.getenv("STORAGE_BENCH_CHART_DPI", "100")),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Build settings from a mapping, ignoring unknown keys."""
        defaults = cls()
        return cls(
            output_dir=Path(data.get("output_dir", defaults.output_dir)),
            log_level=str(data.get("log_level", defaults.log_level)).upper(),
            charts=_as_bool(data.get("charts", defaults.charts)),
            chart_dpi=int(data.get("chart_dpi", defaults.chart_dpi)),
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from a YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must contain a mapping")
        return cls.from_dict(data)
