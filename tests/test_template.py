import io
from datetime import date

import openpyxl
import pytest

from candidates.extraction.router import UnifiedImporter
from candidates.extraction.unified.csv_importer import CSVImporter
from candidates.services.column_mapper import ColumnMapping
from candidates.services.reconciler import reconcile
from candidates.services.template import (
    build_template,
    build_template_csv,
    build_template_xlsx,
    template_filename,
    template_headers,
)


def test_csv_template_parses_back_to_three_rows():
    table = CSVImporter().parse_text(build_template_csv().decode("utf-8-sig"))

    assert table.headers == template_headers()
    assert table.row_count == 3
    assert table.skipped_rows == 0


def test_csv_template_imports_cleanly(import_time):
    table = UnifiedImporter().parse_bytes("modelo.csv", build_template_csv())
    mapping = ColumnMapping.infer(table.headers)

    assert mapping.missing_required() == []

    result = reconcile(table.rows, mapping, "skip", now=import_time)
    assert len(result.records) == 3
    assert result.rejected_count == 0
    assert result.records[0].fields["references"] == "Referência 1, Referência 2"


def test_xlsx_template():
    workbook = openpyxl.load_workbook(io.BytesIO(build_template_xlsx()))
    sheet = workbook.active

    rows = list(sheet.iter_rows(values_only=True))
    assert list(rows[0]) == template_headers()
    assert len(rows) == 4
    assert rows[1][0] == "João Silva"


def test_unknown_format():
    with pytest.raises(ValueError):
        build_template("ods")


def test_template_filename():
    assert template_filename("csv", date(2024, 12, 4)) == "modelo_importacao_2024-12-04.csv"
    assert template_filename("xlsx", date(2024, 12, 4)) == "modelo_importacao_2024-12-04.xlsx"
