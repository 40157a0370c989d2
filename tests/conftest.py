"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for the storage root tables.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -v                 # Verbose output
    pytest tests/ -k "ratio"         # Run only ratio table tests
"""

import pytest

from storage_bench.tables import RatioTable, StepIncrTable, StepRepeatIncr


# =============================================================================
# Ratio Table Fixtures
# =============================================================================

RATIO_ROWS = [
    ("balances", "transfer", 194126.4, 475618.1, 2.4501, 145.0108),
    ("identity", "add_registrar", 1.0, 0.0, 1.0, 0.0),
    ("treasury", "tip_new", 1.8363, 0.0, 1.8363, 83.6271),
]


@pytest.fixture
def ratio_rows():
    return list(RATIO_ROWS)


@pytest.fixture
def ratio_table(ratio_rows) -> RatioTable:
    """Ratio table filled in measurement (unsorted) order"""
    table = RatioTable()
    for row in ratio_rows:
        table.push(*row)
    return table


# =============================================================================
# Step Table Fixtures
# =============================================================================

def _make_step(input_vars, ext_pct, root_pct=0.0, ext_time=100.0, root_time=50.0):
    return StepRepeatIncr(
        input_vars=input_vars,
        avg_extrinsic_time=ext_time,
        avg_storage_root_time=root_time,
        extrinsic_percentage=ext_pct,
        storage_root_percentage=root_pct,
    )


@pytest.fixture
def make_step():
    """Factory for StepRepeatIncr with default timings"""
    return _make_step


@pytest.fixture
def step_table(make_step) -> StepIncrTable:
    """Three extrinsics with 2, 0 and 3 steps"""
    table = StepIncrTable()
    table.push("balances", "transfer", [
        make_step([397, 1000], 4.7014, 13.6412, 187451.3, 79826.0),
        make_step([892, 1000], 8.4298, 29.2032, 194126.4, 90757.4),
    ])
    table.push("system", "remark", [])
    table.push("staking", "bond", [
        make_step([1], 0.0),
        make_step([50], 12.5, 3.0),
        make_step([100], 25.0, 6.0),
    ])
    return table
