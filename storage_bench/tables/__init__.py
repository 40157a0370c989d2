"""
Storage Root Tables

Containers for extrinsic vs storage root benchmark comparisons.
"""

from .formatting import COLUMN_WIDTH, PERCENT_WIDTH, format_float
from .ordering import partial_cmp
from .ratio_table import RATIO_FIELDS, RatioTable
from .step_incr_table import STEP_FIELDS, StepIncrTable, StepRepeatIncr

__all__ = [
    "COLUMN_WIDTH",
    "PERCENT_WIDTH",
    "format_float",
    "partial_cmp",
    "RATIO_FIELDS",
    "RatioTable",
    "STEP_FIELDS",
    "StepIncrTable",
    "StepRepeatIncr",
]
