"""
Step Increase Table

Per-extrinsic breakdown of how timings grow across benchmark steps. Each
step is one combination of input-size variables, carrying the percentage
increase of extrinsic and storage root time over the caller's baseline.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

from .ordering import descending_key

logger = logging.getLogger(__name__)

# Field order of every tuple returned by StepIncrTable.raw_list()
STEP_FIELDS = (
    "pallet",
    "extrinsic",
    "input_vars",
    "avg_extrinsic_time",
    "avg_storage_root_time",
    "extrinsic_percentage",
    "storage_root_percentage",
)

StepRow = Tuple[str, str, Tuple[int, ...], float, float, float, float]


@dataclass(frozen=True)
class StepRepeatIncr:
    """Averaged timings for one combination of input variables."""
    input_vars: Tuple[int, ...]
    avg_extrinsic_time: float
    avg_storage_root_time: float
    extrinsic_percentage: float
    storage_root_percentage: float

    def __post_init__(self):
        # Detach from the caller's list
        object.__setattr__(self, "input_vars", tuple(self.input_vars))


@dataclass
class StepIncrTableEntry:
    """All measured steps of a single extrinsic."""
    pallet: str = ""
    extrinsic: str = ""
    steps: List[StepRepeatIncr] = field(default_factory=list)


class StepIncrTable:
    """
    Ordered collection of per-step timing increases, grouped by extrinsic.

    Sorting reorders the steps inside each entry; the entries themselves stay
    in append order.
    """

    def __init__(self) -> None:
        self._entries: List[StepIncrTableEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[StepIncrTableEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"StepIncrTable(entries={len(self._entries)})"

    def _push_entry(self, entry: StepIncrTableEntry) -> None:
        self._entries.append(entry)

    def push(self, pallet: str, extrinsic: str, steps: Iterable[StepRepeatIncr] = ()) -> None:
        """Append an extrinsic together with all of its measured steps."""
        self._push_entry(StepIncrTableEntry(
            pallet=pallet,
            extrinsic=extrinsic,
            steps=list(steps),
        ))

    def sort_by_extrinsic_percentage(self) -> None:
        """Sort the steps of every entry descending by extrinsic percentage."""
        key = descending_key("extrinsic_percentage")
        for entry in self._entries:
            entry.steps.sort(key=key)
        logger.debug("Sorted steps of %d extrinsics", len(self._entries))

    def raw_list(self) -> List[StepRow]:
        """
        Return one tuple per step, flattened in entry order.

        Data ordered as: pallet, extrinsic, input variables, average extrinsic
        time, average storage root time, percentage increase of extrinsic time
        compared to the lowest, percentage increase of storage root time
        compared to the lowest. For example::

            [
                ("balances", "transfer", (892, 1000), 194126.4, 90757.4, 8.4298, 29.2032),
                ("balances", "transfer", (298, 1000), 190419.6, 87388.7, 6.3594, 24.4075),
            ]
        """
        return [
            (
                entry.pallet,
                entry.extrinsic,
                step.input_vars,
                step.avg_extrinsic_time,
                step.avg_storage_root_time,
                step.extrinsic_percentage,
                step.storage_root_percentage,
            )
            for entry in self._entries
            for step in entry.steps
        ]
