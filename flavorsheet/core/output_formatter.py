"""
Output Formatter
===============

Lays creature records out as translator spreadsheet rows and writes them
as an Excel workbook or a CSV file.

Columns: id, name, name_JP, the five localized flavor columns, then the
five native (``_JP``) flavor columns. Several texts for one flavor go into
one cell, separated by line breaks.
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import IllegalCharacterError

from .exceptions import OutputError
from .models import FLAVOR_FIELDS, CreatureRecord, TextPair

# name holds the localized name and name_JP the native one, like the flavor columns
HEADERS = [
    # 1       2          3
    "id", "name", "name_JP",
    #   4      5        6       7       8
    "calm", "fov", "aggro", "dead", "kill",
    #      9        10          11         12         13
    "calm_JP", "fov_JP", "aggro_JP", "dead_JP", "kill_JP",
]

TEXT_SEPARATOR = "\n"

# Row 2 stays empty in the workbook
FIRST_DATA_ROW = 3


def join_texts(pairs: Sequence[TextPair], index: int) -> str:
    return TEXT_SEPARATOR.join(pair[index] for pair in pairs)


def filter_records(records: Iterable[CreatureRecord], only_with_texts: bool = False) -> List[CreatureRecord]:
    if not only_with_texts:
        return list(records)
    return [r for r in records if r.has_flavor_texts()]


class SheetFormatter:
    """Formats creature records into spreadsheet rows."""

    def __init__(self, min_column_width: float = 5.0, max_column_width: float = 50.0,
                 sheet_title: str = "CharaText"):
        self.logger = logging.getLogger(__name__)
        self.min_column_width = min_column_width
        self.max_column_width = max_column_width
        self.sheet_title = sheet_title

    @classmethod
    def from_settings(cls, output_settings) -> "SheetFormatter":
        return cls(
            min_column_width=output_settings.min_column_width,
            max_column_width=output_settings.max_column_width,
            sheet_title=output_settings.sheet_title,
        )

    def build_row(self, record: CreatureRecord) -> List[str]:
        row = [""] * len(HEADERS)
        row[0] = record.id
        row[1] = record.localized_name
        row[2] = record.native_name

        for flavor in FLAVOR_FIELDS:
            pairs = record.flavor_texts.get(flavor.name)
            if not pairs:
                continue
            row[flavor.localized_column - 1] = join_texts(pairs, 1)
            row[flavor.native_column - 1] = join_texts(pairs, 0)

        return row

    def build_rows(self, records: Iterable[CreatureRecord]) -> List[List[str]]:
        return [self.build_row(record) for record in records]

    def column_width(self, values: Iterable[str]) -> float:
        longest = 0
        for value in values:
            for line in str(value).split(TEXT_SEPARATOR):
                longest = max(longest, len(line))
        return float(min(max(longest, self.min_column_width), self.max_column_width))

    def write_workbook(self, records: Iterable[CreatureRecord], output_path: Union[str, Path]) -> Path:
        output_path = Path(output_path)
        rows = self.build_rows(records)

        workbook = Workbook()
        worksheet = workbook.active
        worksheet.title = self.sheet_title

        for col, header in enumerate(HEADERS, start=1):
            worksheet.cell(row=1, column=col, value=header)
        worksheet.freeze_panes = "A2"

        try:
            for row_index, row in enumerate(rows, start=FIRST_DATA_ROW):
                for col, value in enumerate(row, start=1):
                    if value:
                        worksheet.cell(row=row_index, column=col, value=value)
        except IllegalCharacterError as e:
            raise OutputError(f"Text cannot be stored in {output_path}: {e!r}") from e

        for col, header in enumerate(HEADERS, start=1):
            values = [header] + [row[col - 1] for row in rows]
            worksheet.column_dimensions[get_column_letter(col)].width = self.column_width(values)

        try:
            workbook.save(output_path)
        except OSError as e:
            raise OutputError(f"Could not save {output_path}: {e}") from e

        self.logger.info("Wrote %s rows to %s", len(rows), output_path)
        return output_path

    def write_csv(self, records: Iterable[CreatureRecord], output_path: Union[str, Path]) -> Path:
        output_path = Path(output_path)
        rows = self.build_rows(records)

        try:
            with open(output_path, 'w', encoding='utf-8-sig', newline='') as f:
                writer = csv.writer(f, quoting=csv.QUOTE_ALL, lineterminator='\n')
                writer.writerow(HEADERS)
                writer.writerows(rows)
        except OSError as e:
            raise OutputError(f"Could not save {output_path}: {e}") from e

        self.logger.info("Wrote %s rows to %s", len(rows), output_path)
        return output_path

    def write(self, records: Iterable[CreatureRecord], output_path: Union[str, Path],
              output_format: str = "xlsx") -> Path:
        if output_format == "xlsx":
            return self.write_workbook(records, output_path)
        if output_format == "csv":
            return self.write_csv(records, output_path)
        raise OutputError(f"Unsupported output format: {output_format}")
