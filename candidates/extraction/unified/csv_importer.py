# extraction/unified/csv_importer.py
from dataclasses import dataclass, field
from typing import Dict, List

from candidates.exceptions import NoRowsFound, NoDataRows, NoValidRows
from config.logger import logger
from config.settings import LARGE_IMPORT_THRESHOLD


UNQUOTED = "unquoted"
QUOTED = "quoted"

# Data rows with fewer non-empty cells are treated as partial/garbage
MIN_FILLED_CELLS = 2


@dataclass
class ParsedTable:
    headers: List[str]
    rows: List[Dict[str, str]]
    skipped_rows: int = 0
    large_file_threshold: int = LARGE_IMPORT_THRESHOLD
    warnings: List[str] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def is_large(self) -> bool:
        return self.row_count > self.large_file_threshold


def scan_records(text: str) -> List[List[str]]:
    """
    Split delimited text into raw records.

    Two states: UNQUOTED and QUOTED. Outside quotes a comma ends a field
    and CR, LF or CRLF ends a record. Inside quotes everything is literal
    except a doubled quote (an escaped quote) and a single quote (closes
    the quoted section).
    """
    records = []
    record = []
    current = []
    state = UNQUOTED
    has_content = False

    i = 0
    length = len(text)
    while i < length:
        char = text[i]

        if state == QUOTED:
            if char == '"':
                if i + 1 < length and text[i + 1] == '"':
                    current.append('"')
                    i += 2
                    continue
                state = UNQUOTED
            else:
                current.append(char)
            i += 1
            continue

        if char == '"':
            state = QUOTED
            has_content = True
        elif char == ",":
            record.append("".join(current))
            current = []
            has_content = True
        elif char in "\r\n":
            record.append("".join(current))
            records.append(record)
            record = []
            current = []
            has_content = False
            if char == "\r" and i + 1 < length and text[i + 1] == "\n":
                i += 1
        else:
            current.append(char)
            has_content = True
        i += 1

    if has_content or current:
        record.append("".join(current))
        records.append(record)

    return records


def is_blank(record) -> bool:
    return all(not cell.strip() for cell in record)


def clean_header(cell: str) -> str:
    cell = cell.strip()
    if len(cell) >= 2 and cell[0] == cell[-1] and cell[0] in "\"'":
        cell = cell[1:-1]
    return cell.strip()


def make_unique_headers(headers):
    """Blank headers become Column_<n>; repeats get a _<k> suffix."""
    headers = [
        h if h else f"Column_{i + 1}"
        for i, h in enumerate(headers)
    ]

    seen = {}
    used = set()
    unique = []
    for h in headers:
        name = h
        while name in used:
            seen[h] = seen.get(h, 0) + 1
            name = f"{h}_{seen[h]}"
        used.add(name)
        unique.append(name)
    return unique


class CSVImporter:

    def __init__(self, large_file_threshold=LARGE_IMPORT_THRESHOLD):
        self.large_file_threshold = large_file_threshold

    def parse_text(self, text: str) -> ParsedTable:
        """
        Parse CSV text into headers plus one dict per data row.

        Raises NoRowsFound, NoDataRows or NoValidRows when nothing usable
        is left.
        """
        if text.startswith("\ufeff"):
            text = text[1:]

        records = [r for r in scan_records(text) if not is_blank(r)]

        if not records:
            raise NoRowsFound()

        headers = make_unique_headers([clean_header(h) for h in records[0]])
        data_records = records[1:]

        if not data_records:
            raise NoDataRows()

        rows = []
        skipped = 0
        for record in data_records:
            values = [cell.strip() for cell in record]
            if sum(1 for v in values if v) < MIN_FILLED_CELLS:
                skipped += 1
                continue

            rows.append({
                h: values[i] if i < len(values) else ""
                for i, h in enumerate(headers)
            })

        if not rows:
            raise NoValidRows(skipped_rows=skipped)

        table = ParsedTable(
            headers=headers,
            rows=rows,
            skipped_rows=skipped,
            large_file_threshold=self.large_file_threshold,
        )

        if skipped:
            table.warnings.append(f"{skipped} incomplete row(s) ignored")

        if table.is_large:
            table.warnings.append(
                f"{table.row_count} rows exceed the {self.large_file_threshold} row "
                "threshold; confirm before importing"
            )

        logger.info(
            f"Parsed CSV: {len(headers)} columns, {table.row_count} rows, "
            f"{skipped} skipped"
        )
        return table
