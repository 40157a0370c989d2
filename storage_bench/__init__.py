"""
storage-bench

Tables comparing extrinsic execution time with storage root computation
time, plus the reports and charts built from them.
"""

from .tables import RatioTable, StepIncrTable, StepRepeatIncr, format_float
from .reporting import ReportGenerator
from .config import Settings

__version__ = "0.1.0"

__all__ = [
    "RatioTable",
    "StepIncrTable",
    "StepRepeatIncr",
    "format_float",
    "ReportGenerator",
    "Settings",
]
