"""
Part of marcdump
Copyright (c) 2026 marcdump contributors
MIT License https://opensource.org/licenses/mit-license.php
Code policy PEP8 https://www.python.org/dev/peps/pep-0008/
"""

""" Text view of records, one line per field occurrence

Leader   01028nam a2200277   4500
001      ocm12345
245      10$aThe title$cAuthor.
"""
from marcdump.projection import project

LEADER_TAG = 'Leader'
# column layout, like a tabwriter with space padding
PADDING = 3


def data_value(field):
    value = field.indicator1 + field.indicator2
    for subfield in field.subfields:
        value += f"${subfield.code}{subfield.value}"
    return value


def record_rows(record, projection=None):
    """List of (tag, value) lines for a record. The leader comes first,
    only when all fields are shown."""
    rows = []
    if not projection:
        rows.append((LEADER_TAG, str(record.leader)))
    for tag, control, field in project(record, projection):
        if control:
            rows.append((tag, field.data))
        else:
            rows.append((tag, data_value(field)))
    return rows


def format_rows(rows, align=True):
    """Join cells with tabs, or pad all cells but the last to a shared column
    width (widest cell + PADDING)."""
    if not rows:
        return []
    if not align:
        return ["\t".join(row) for row in rows]
    columns = max(len(row) for row in rows) - 1
    widths = []
    for col in range(columns):
        width = max((len(row[col]) for row in rows if len(row) > col + 1), default=0)
        widths.append(width + PADDING)
    lines = []
    for row in rows:
        cells = []
        for col, cell in enumerate(row):
            if col < len(row) - 1:
                cell = cell.ljust(widths[col])
            cells.append(cell)
        lines.append(''.join(cells))
    return lines


def render_record(record, out, projection=None, align=True):
    """Write a record, return the number of lines written"""
    lines = format_rows(record_rows(record, projection), align)
    for line in lines:
        out.write(line + "\n")
    out.flush()
    return len(lines)
