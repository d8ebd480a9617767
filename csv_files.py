"""
CSV file access: one entity collection per file.

Layout: first line is the header (column names), then one quoted record per
line. There is no trailing newline; appends add "\\n" + row.
"""

import csv
import logging
import os

from csv_codec import header_line, parse_row, serialize_row

logger = logging.getLogger(__name__)

# any value the API accepts must read back; the csv default caps fields at 128 KiB
csv.field_size_limit(2**31 - 1)


def ensure_data_dir(path):
    """Create the data directory if it does not exist; failures are only logged"""
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        logger.exception("Error creating data directory %s", path)


def _fieldnames_for(records, fieldnames):
    if fieldnames:
        return list(fieldnames)
    return list(records[0].keys())


def read_all(path, schema=None):
    """Read every record in the file; an absent or empty file gives []"""
    try:
        with open(path, 'r', encoding='utf-8-sig', newline='') as f:
            rows = [row for row in csv.reader(f) if row]
    except FileNotFoundError:
        return []

    if not rows:
        return []

    fieldnames = [name.strip() for name in rows[0]]
    return [parse_row(fieldnames, values, schema) for values in rows[1:]]


def write_all(path, records, fieldnames=None):
    """Replace the file with header + all records; no records truncates it"""
    ensure_data_dir(os.path.dirname(path))

    if not records:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write('')
        return

    names = _fieldnames_for(records, fieldnames)
    lines = [header_line(names)] + [serialize_row(r, names) for r in records]
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write('\n'.join(lines))


def append_one(path, record, fieldnames=None):
    """Append a single record, writing the header first if the file is new"""
    ensure_data_dir(os.path.dirname(path))
    names = _fieldnames_for([record], fieldnames)

    try:
        empty = os.stat(path).st_size == 0
    except FileNotFoundError:
        empty = True

    if empty:
        row = serialize_row(record, names)
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(f"{header_line(names)}\n{row}")
        return

    # rows must follow the header already on disk
    existing = read_header(path)
    if existing:
        names = existing
    row = serialize_row(record, names)
    with open(path, 'a', encoding='utf-8', newline='') as f:
        f.write(f"\n{row}")


def read_header(path):
    """Column names from the first line of the file, or [] if there is none"""
    try:
        with open(path, 'r', encoding='utf-8-sig', newline='') as f:
            first = next(csv.reader(f), [])
    except FileNotFoundError:
        return []
    return [name.strip() for name in first]
