from pathlib import Path
from config.logger import logger

from candidates.exceptions import UnsupportedFileType
from candidates.extraction.unified.csv_importer import CSVImporter, ParsedTable
from config.settings import LARGE_IMPORT_THRESHOLD


SPREADSHEET_EXTENSIONS = (".xlsx", ".xls")
TEXT_EXTENSIONS = (".csv", ".txt")

XLSX_MESSAGE = (
    "Excel files (.xlsx/.xls) must be converted to CSV first. "
    "Use 'Save as CSV' in Excel or download the sheet as .csv."
)


def decode_bytes(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.warning("File is not valid UTF-8, decoding as cp1252")
        return data.decode("cp1252", errors="replace")


class UnifiedImporter:
    """
    Routes an uploaded file to the right parser.

    Every route returns a ParsedTable; spreadsheets are refused with an
    instruction to export them as CSV.
    """

    def __init__(self, large_file_threshold=LARGE_IMPORT_THRESHOLD):
        self.large_file_threshold = large_file_threshold

    def parse(self, file_path) -> ParsedTable:
        file_path = Path(file_path)
        self._check_extension(file_path.name)

        logger.info(f"Routing file: {file_path}")
        return self.parse_bytes(file_path.name, file_path.read_bytes())

    def parse_bytes(self, file_name: str, data: bytes) -> ParsedTable:
        ext = self._check_extension(file_name)
        logger.info(f"Parsing upload: {file_name} (ext={ext or 'none'})")

        return self.parse_text(file_name, decode_bytes(data))

    def parse_text(self, file_name: str, text: str) -> ParsedTable:
        self._check_extension(file_name)
        return CSVImporter(self.large_file_threshold).parse_text(text)

    @staticmethod
    def _check_extension(file_name: str) -> str:
        ext = Path(file_name).suffix.lower()

        if ext in SPREADSHEET_EXTENSIONS:
            raise UnsupportedFileType(XLSX_MESSAGE, extension=ext)

        if ext and ext not in TEXT_EXTENSIONS:
            raise UnsupportedFileType(f"Unsupported extension: {ext}", extension=ext)

        return ext
