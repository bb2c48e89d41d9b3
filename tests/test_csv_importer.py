import pytest

from candidates.exceptions import NoDataRows, NoRowsFound, NoValidRows, UnsupportedFileType
from candidates.extraction.router import UnifiedImporter, decode_bytes
from candidates.extraction.unified.csv_importer import (
    CSVImporter,
    make_unique_headers,
    scan_records,
)


def parse(text, **kwargs):
    return CSVImporter(**kwargs).parse_text(text)


def test_quoted_fields_with_commas_quotes_and_newlines():
    text = 'Nome,Email,Obs\r\n"Silva, Ana",ana@x.com,"disse ""oi""\nlinha 2"\r\n'
    table = parse(text)

    assert table.headers == ["Nome", "Email", "Obs"]
    assert table.rows == [
        {"Nome": "Silva, Ana", "Email": "ana@x.com", "Obs": 'disse "oi"\nlinha 2'},
    ]


def test_crlf_is_one_terminator():
    records = scan_records("a,b\r\n1,2\r\n3,4")
    assert records == [["a", "b"], ["1", "2"], ["3", "4"]]


def test_lone_cr_ends_a_record():
    assert scan_records("a,b\r1,2") == [["a", "b"], ["1", "2"]]


def test_blank_lines_are_skipped():
    table = parse("a,b\n\n , \n1,2\n\n")
    assert table.row_count == 1
    assert table.skipped_rows == 0


def test_rows_with_less_than_two_values_are_skipped():
    table = parse("a,b,c\n1,,\n1,2,\n")

    assert table.rows == [{"a": "1", "b": "2", "c": ""}]
    assert table.skipped_rows == 1
    assert table.warnings


def test_short_rows_are_padded_and_extra_cells_ignored():
    table = parse("a,b,c\n1,2\n4,5,6,7\n")

    assert table.rows[0] == {"a": "1", "b": "2", "c": ""}
    assert table.rows[1] == {"a": "4", "b": "5", "c": "6"}


def test_header_cells_are_unquoted_and_trimmed():
    table = parse("'Nome' , \"Email\" \nAna,a@x.com\n")
    assert table.headers == ["Nome", "Email"]


def test_blank_and_duplicate_headers_stay_addressable():
    table = parse("Nome,Nome,,x\n1,2,3,4\n")

    assert table.headers == ["Nome", "Nome_1", "Column_3", "x"]
    assert table.rows[0]["Column_3"] == "3"


def test_suffixed_header_never_collides_with_an_existing_one():
    assert make_unique_headers(["a", "a", "a_1"]) == ["a", "a_1", "a_1_1"]
    assert make_unique_headers(["a_1", "a", "a"]) == ["a_1", "a", "a_2"]

    table = parse("a,a,a_1\n1,2,3\n")
    assert table.rows == [{"a": "1", "a_1": "2", "a_1_1": "3"}]


def test_byte_order_mark_is_dropped():
    table = parse("\ufeffNome,Email\nAna,a@x.com\n")
    assert table.headers[0] == "Nome"


@pytest.mark.parametrize("text", ["", "\n\n", " , \r\n"])
def test_no_rows(text):
    with pytest.raises(NoRowsFound) as exc:
        parse(text)
    assert exc.value.code == "no_rows"


def test_header_only():
    with pytest.raises(NoDataRows):
        parse("a,b\n")


def test_no_valid_rows():
    with pytest.raises(NoValidRows) as exc:
        parse("a,b\n1,\n,2\n")
    assert exc.value.context == {"skipped_rows": 2}


def test_large_file_flag():
    table = parse("a,b\n1,2\n3,4\n5,6\n", large_file_threshold=2)

    assert table.is_large
    assert any("threshold" in w for w in table.warnings)


def test_not_large_at_threshold():
    table = parse("a,b\n1,2\n3,4\n", large_file_threshold=2)
    assert not table.is_large


@pytest.mark.parametrize("name", ["candidatos.xlsx", "candidatos.XLS", "candidatos.pdf"])
def test_router_refuses_other_formats(name):
    with pytest.raises(UnsupportedFileType):
        UnifiedImporter().parse_bytes(name, b"a,b\n1,2\n")


def test_router_explains_spreadsheet_conversion():
    with pytest.raises(UnsupportedFileType) as exc:
        UnifiedImporter().parse_bytes("candidatos.xlsx", b"")
    assert "CSV" in str(exc.value)


def test_router_decodes_windows_1252():
    data = "Nome,Cidade\nJoão,Bagé\n".encode("cp1252")
    table = UnifiedImporter().parse_bytes("candidatos.csv", data)
    assert table.rows == [{"Nome": "João", "Cidade": "Bagé"}]


def test_decode_bytes_strips_utf8_bom():
    assert decode_bytes("\ufeffNome".encode("utf-8")) == "Nome"


def test_router_parses_file_from_disk(tmp_path):
    path = tmp_path / "candidatos.csv"
    path.write_text("Nome,Email\nAna,ana@x.com\n", encoding="utf-8")

    table = UnifiedImporter().parse(path)
    assert table.rows == [{"Nome": "Ana", "Email": "ana@x.com"}]


def test_single_value_row_among_many_columns_is_dropped():
    headers = ",".join(f"c{i}" for i in range(10))
    table = parse(f"{headers}\nonly,,,,,,,,,\n\"Doe, John\nSecond line\",x,,,,,,,,\n")

    assert table.row_count == 1
    assert table.rows[0]["c0"] == "Doe, John\nSecond line"
    assert table.skipped_rows == 1
