from pathlib import Path
import datetime

from candidates.exceptions import CandidateImportError
from candidates.extraction.router import UnifiedImporter
from candidates.fields import get_field_display_name
from candidates.services.column_mapper import ColumnMapping
from candidates.services.reconciler import reconcile
from config.logger import logger
from config.settings import DEFAULT_IMPORT_POLICY
from storage.file_saver import FileSaver


def test_importer():
    """
    Manual local testing utility.
    Parses and reconciles a CSV without touching the database.
    """

    importer = UnifiedImporter()

    file_path = input("Enter path of CSV to import: ").strip()
    logger.info(f"Parsing: {file_path}")

    try:
        table = importer.parse(file_path)
        mapping = ColumnMapping.infer(table.headers)
        result = reconcile(
            table.rows,
            mapping,
            DEFAULT_IMPORT_POLICY,
            source_file_name=Path(file_path).name,
        )
    except CandidateImportError as e:
        logger.error(f"[{e.code}] {e}")
        print(f"\n❌ Import failed: {e}\n")
        return

    filename = Path(file_path).stem
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    base = f"{filename}_{timestamp}"

    records = [r.as_dict() for r in result.records]
    columns = list(dict.fromkeys(mapping.mapped_fields() + ["status", "importTag"]))

    report = {
        "title": f"Import preview: {Path(file_path).name}",
        "summary": {
            "Import tag": result.import_tag,
            "Rows": table.row_count,
            "Skipped (incomplete)": table.skipped_rows,
            "Accepted": len(result.records),
            "Rejected": result.rejected_count,
        },
        "mapping": {
            header: get_field_display_name(key) if key else None
            for header, key in mapping.items()
        },
        "warnings": table.warnings + mapping.warnings + result.warnings,
        "sections": [
            {"title": "Candidates", "columns": columns, "rows": records},
        ],
    }

    json_path = FileSaver.save_json(report, f"{base}.json")
    logger.info(f"Saved JSON report to: {json_path}")

    html_path = FileSaver.save_html(report, f"{base}.html")
    logger.info(f"Saved HTML report to: {html_path}")

    csv_path = FileSaver.save_csv(records, f"{base}_candidates.csv", headers=columns)
    logger.info(f"Saved CSV output to: {csv_path}")

    print("\n" + "=" * 60)
    print("IMPORT PREVIEW COMPLETE")
    print("=" * 60)
    print(f"🏷️  Tag:      {result.import_tag}")
    print(f"📄 JSON:     {json_path}")
    print(f"📊 HTML:     {html_path}")
    print(f"📋 CSV:      {csv_path}")
    print(f"✅ Accepted: {len(result.records)}   ❌ Rejected: {result.rejected_count}")
    print("=" * 60 + "\n")

    logger.info("Manual import preview complete.")


if __name__ == "__main__":
    # main.py is ONLY for local/manual testing.
    # Real imports go through the admin, the API or
    # `manage.py import_candidates`.

    test_importer()
