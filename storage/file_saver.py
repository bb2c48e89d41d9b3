import csv
import datetime
import html
import json

from config.settings import OUTPUT_DIR


class FileSaver:
    """
    Writes import reports under OUTPUT_DIR (json/, csv/, html/).

    Reports are dicts with a "sections" list; each section has a title,
    columns and rows (dicts keyed by column).
    """

    @staticmethod
    def _json_serializer(obj):
        if isinstance(obj, (datetime.datetime, datetime.date)):
            return obj.isoformat()
        raise TypeError(f"Type {type(obj)} not serializable")

    @staticmethod
    def _cell(value):
        if isinstance(value, (datetime.datetime, datetime.date)):
            return value.isoformat()
        if value is None:
            return ""
        return value

    @staticmethod
    def save_json(data, filename):
        path = OUTPUT_DIR / "json" / filename
        with open(path, "w", encoding="utf-8") as f:
            json.dump(
                data, f, indent=4, ensure_ascii=False, default=FileSaver._json_serializer
            )
        return path

    @staticmethod
    def save_csv(rows, filename, headers=None):
        path = OUTPUT_DIR / "csv" / filename
        fieldnames = headers or (list(rows[0].keys()) if rows else [])

        with open(path, "w", newline="", encoding="utf-8-sig") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
            writer.writeheader()
            for row in rows:
                writer.writerow({k: FileSaver._cell(row.get(k)) for k in fieldnames})
        return path

    @staticmethod
    def save_html(report, filename):
        path = OUTPUT_DIR / "html" / filename
        with open(path, "w", encoding="utf-8") as f:
            f.write(FileSaver._generate_html(report))
        return path

    @staticmethod
    def _generate_html(report):
        title = html.escape(report.get("title", "Import report"))
        generated = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        parts = [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            "  <meta charset='UTF-8'>",
            f"  <title>{title}</title>",
            "  <style>",
            "    body { font-family: Arial, sans-serif; margin: 20px; background: #f5f5f5; }",
            "    .container { margin: 0 auto; background: white; padding: 20px; border-radius: 8px; }",
            "    h1 { color: #333; border-bottom: 2px solid #007bff; padding-bottom: 10px; }",
            "    h2 { color: #555; margin-top: 30px; border-left: 4px solid #007bff; padding-left: 10px; }",
            "    table { width: 100%; border-collapse: collapse; margin-bottom: 20px; font-size: 13px; }",
            "    th { background: #007bff; color: white; padding: 8px; text-align: left; }",
            "    td { padding: 6px 8px; border-bottom: 1px solid #ddd; }",
            "    .empty { color: #999; font-style: italic; }",
            "    .metadata { background: #f0f0f0; padding: 10px; border-radius: 4px; color: #666; }",
            "  </style>",
            "</head>",
            "<body>",
            "  <div class='container'>",
            f"    <h1>{title}</h1>",
            f"    <div class='metadata'>Generated on: {generated}</div>",
        ]

        summary = report.get("summary") or {}
        if summary:
            parts.append("    <ul>")
            for key, value in summary.items():
                parts.append(f"      <li><b>{html.escape(str(key))}</b>: {html.escape(str(value))}</li>")
            parts.append("    </ul>")

        for section in report.get("sections", []):
            parts.append(f"    <h2>{html.escape(section.get('title', ''))}</h2>")

            rows = section.get("rows") or []
            if not rows:
                parts.append("    <p class='empty'>No rows</p>")
                continue

            columns = section.get("columns") or list(rows[0].keys())
            parts.append("    <table>")
            parts.append("      <tr>" + "".join(f"<th>{html.escape(str(c))}</th>" for c in columns) + "</tr>")

            for row in rows:
                cells = []
                for col in columns:
                    val = FileSaver._cell(row.get(col))
                    if val == "":
                        cells.append("<td class='empty'>&mdash;</td>")
                    else:
                        cells.append(f"<td>{html.escape(str(val))}</td>")
                parts.append("      <tr>" + "".join(cells) + "</tr>")

            parts.append("    </table>")

        parts.extend(["  </div>", "</body>", "</html>"])
        return "\n".join(parts)
