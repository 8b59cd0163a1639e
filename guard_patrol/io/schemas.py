"""Parquet schema definitions for patrol artifacts.

All Arrow schemas used for persisting the baseline path and per-trial
obstruction results are centralised here.
"""

from __future__ import annotations

import pyarrow as pa

SUMMARY_SCHEMA_VERSION = 1

PATH_SCHEMA = pa.schema(
    [
        ("step", pa.int64()),
        ("row", pa.int64()),
        ("col", pa.int64()),
        ("facing", pa.string()),
    ]
)

TRIAL_SCHEMA = pa.schema(
    [
        ("row", pa.int64()),
        ("col", pa.int64()),
        ("outcome", pa.string()),
        ("looped", pa.bool_()),
        ("steps", pa.int64()),
    ]
)
