from __future__ import annotations

import re

"""SUMMARY line format contract."""

SUMMARY_PATTERN = re.compile(
    r"^SUMMARY\s+files=([0-9]+)/(\1)\s+success=([0-9]+)\s+failed=([0-9]+)\s+"
    r"records=([0-9]+)\s+dropped_rows=([0-9]+)\s+elapsed_sec=([0-9]+\.?[0-9]*)\s+"
    r"throughput_rps=([0-9]+\.?[0-9]*)$"
)


def test_summary_pattern_example_line():
    line = (
        "SUMMARY files=2/2 success=1 failed=1 records=4 dropped_rows=1 "
        "elapsed_sec=0.84 throughput_rps=4.762"
    )
    assert SUMMARY_PATTERN.match(line)


def test_summary_pattern_rejects_mismatched_totals():
    line = (
        "SUMMARY files=2/3 success=1 failed=1 records=4 dropped_rows=1 "
        "elapsed_sec=0.84 throughput_rps=4.762"
    )
    assert not SUMMARY_PATTERN.match(line)
