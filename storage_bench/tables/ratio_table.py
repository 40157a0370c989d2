"""
Ratio Table

One row per (pallet, extrinsic) pair comparing average extrinsic execution
time with average storage root computation time. Ratios and percentages are
supplied by the caller and only stored, sorted and displayed here.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Iterator, List, Optional, TextIO, Tuple

from .formatting import COLUMN_WIDTH, PERCENT_WIDTH, format_float
from .ordering import ascending_key

logger = logging.getLogger(__name__)

# Field order of every tuple returned by RatioTable.raw_list()
RATIO_FIELDS = (
    "pallet",
    "extrinsic",
    "avg_extrinsic_time",
    "avg_storage_root_time",
    "ratio",
    "percentage",
)

RatioRow = Tuple[str, str, float, float, float, float]


@dataclass(frozen=True)
class RatioTableEntry:
    """Timing comparison for a single extrinsic."""
    pallet: str
    extrinsic: str
    avg_extrinsic_time: float
    avg_storage_root_time: float
    ratio: float
    percentage: float

    def as_tuple(self) -> RatioRow:
        return (
            self.pallet,
            self.extrinsic,
            self.avg_extrinsic_time,
            self.avg_storage_root_time,
            self.ratio,
            self.percentage,
        )


class RatioTable:
    """
    Ordered collection of storage root / extrinsic time ratios.

    Rows are appended in measurement order and can be sorted ascending by
    ratio. ``raw_list()`` and ``print_entries()`` always reflect the current
    order.
    """

    def __init__(self) -> None:
        self._entries: List[RatioTableEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RatioTableEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"RatioTable(entries={len(self._entries)})"

    def _push_entry(self, entry: RatioTableEntry) -> None:
        self._entries.append(entry)

    def push(
        self,
        pallet: str,
        extrinsic: str,
        avg_extrinsic_time: float,
        avg_storage_root_time: float,
        ratio: float,
        percentage: float,
    ) -> None:
        """Append one row. Values are stored as given, without validation."""
        self._push_entry(RatioTableEntry(
            pallet=pallet,
            extrinsic=extrinsic,
            avg_extrinsic_time=avg_extrinsic_time,
            avg_storage_root_time=avg_storage_root_time,
            ratio=ratio,
            percentage=percentage,
        ))

    def sort_by_ratio(self) -> None:
        """Sort rows ascending by ratio. Unordered (NaN) pairs compare equal."""
        self._entries.sort(key=ascending_key("ratio"))
        logger.debug("Sorted %d ratio rows", len(self._entries))

    def raw_list(self) -> List[RatioRow]:
        """
        Return the rows as plain tuples in current order.

        Data ordered as: pallet, extrinsic, average extrinsic time, average
        storage root time, ratio, percentage. For example::

            [
                ("identity", "add_registrar", 1.0, 0.0, 1.0, 0.0),
                ("treasury", "tip_new", 1.8363, 0.0, 1.8363, 83.6271),
            ]
        """
        return [entry.as_tuple() for entry in self._entries]

    def format_entries(self) -> List[str]:
        """Render the table as lines of fixed-width text."""
        width = COLUMN_WIDTH

        header = "|{:^{w}}|{:^{w}}|{:^{w}}|{:^{w}}|".format(
            "Pallet", "Extrinsic", "Ratio", "Increase", w=width
        )
        separator = ("|" + "-" * width) * 4 + "|"

        lines = [header, separator]
        for entry in self._entries:
            lines.append("|{:<{w}}|{:<{w}}|{:<{w}}|{:>{wp}} %|".format(
                str(entry.pallet),
                str(entry.extrinsic),
                format_float(entry.ratio),
                format_float(entry.percentage),
                w=width,
                wp=PERCENT_WIDTH,
            ))
        return lines

    def print_entries(self, file: Optional[TextIO] = None) -> None:
        """Write the formatted table to ``file`` (standard output by default)."""
        out = file if file is not None else sys.stdout
        for line in self.format_entries():
            print(line, file=out)
