"""
CSV record codec.

Turns a flat record (column name -> scalar) into one CSV line and back.
Every field is written quoted. On the way back values are typed from the
column schema when one is given; columns the schema does not know fall back
to inference from the text itself.
"""

import csv
import io
import math
import re
from datetime import date, datetime

from models import BOOL, DATE, INT, STR

DATE_PREFIX = re.compile(r'^\d{4}-\d{2}-\d{2}')


def _to_text(value):
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def header_line(fieldnames):
    return ','.join(fieldnames)


def serialize_row(record, fieldnames):
    """Serialize record to a single quoted CSV line (no line terminator)"""
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator='')
    writer.writerow([_to_text(record.get(name)) for name in fieldnames])
    return buf.getvalue()


def split_line(line):
    """Tokenize one CSV line, honouring quoted commas and doubled quotes"""
    rows = list(csv.reader([line]))
    return rows[0] if rows else []


def is_date_string(text):
    if not DATE_PREFIX.match(text):
        return False
    try:
        date.fromisoformat(text[:10])
    except ValueError:
        return False
    return True


def _to_number(text):
    try:
        return int(text)
    except ValueError:
        pass
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(text)
    return number


def infer_value(text):
    """Guess the type of an untyped column: None, bool, number or text (dates stay text)"""
    if text == '':
        return None
    if text in ('true', 'false'):
        return text == 'true'
    if text.strip():
        try:
            return _to_number(text)
        except ValueError:
            pass
    return text


def coerce_value(text, type_tag):
    """Convert text according to a schema type tag.

    Text that does not fit its declared type is returned unchanged so a
    damaged row still loads.
    """
    if text == '':
        return None
    if type_tag == STR:
        return text
    if type_tag == BOOL:
        if text in ('true', 'false'):
            return text == 'true'
        return text
    if type_tag == INT:
        try:
            return _to_number(text)
        except ValueError:
            return text
    if type_tag == DATE:
        # dates stay as ISO strings
        return text
    return infer_value(text)


def parse_row(fieldnames, values, schema=None):
    """Map tokenized values onto the header.

    Missing trailing values become None; surplus values are dropped.
    """
    schema = schema or {}
    record = {}
    for index, name in enumerate(fieldnames):
        text = values[index] if index < len(values) else ''
        if name in schema:
            record[name] = coerce_value(text, schema[name])
        else:
            record[name] = infer_value(text)
    return record


def parse_line(fieldnames, line, schema=None):
    return parse_row(fieldnames, split_line(line), schema)
