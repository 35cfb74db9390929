"""
csv_io.py
Persistence utilities for writing match summaries from simulations to CSV files.
"""

import os
import csv
from typing import Dict, List, Any

SUMMARY_HEADER = [
    "match_id", "match_index", "timestamp", "agent0", "agent1", "winner",
    "rounds_played", "bids", "calls", "bluffs_called", "final_dice", "error",
]


def append_row_to_csv(row: Dict[str, Any], csv_path: str, header: List[str]):
    append_rows_to_csv([row], csv_path, header)


def append_rows_to_csv(rows: List[Dict[str, Any]], csv_path: str, header: List[str]):
    write_header = not os.path.exists(csv_path)
    with open(csv_path, "a", newline='', encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=header)
        if write_header:
            writer.writeheader()
        for row in rows:
            writer.writerow(row)


def get_summary_header():
    return SUMMARY_HEADER.copy()
