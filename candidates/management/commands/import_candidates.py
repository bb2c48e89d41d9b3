from pathlib import Path

from django.core.files import File
from django.core.management.base import BaseCommand, CommandError

from candidates.exceptions import CandidateImportError
from candidates.models import ImportBatch
from candidates.services.process_file import ImportSession, process_import
from candidates.services.reconciler import ImportPolicy
from config.settings import DEFAULT_IMPORT_POLICY


class Command(BaseCommand):
    help = "Import candidates from a CSV file"

    def add_arguments(self, parser):
        parser.add_argument("path", help="CSV file to import")
        parser.add_argument(
            "--policy",
            default=DEFAULT_IMPORT_POLICY,
            choices=[p.value for p in ImportPolicy],
            help="What to do when the email already exists",
        )
        parser.add_argument("--tag", default="", help="Custom import tag")
        parser.add_argument(
            "--map",
            action="append",
            default=[],
            metavar="HEADER=FIELD",
            help="Override the mapping of one column (empty FIELD ignores it)",
        )
        parser.add_argument(
            "--yes",
            action="store_true",
            help="Confirm imports above the large-file threshold",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Parse and reconcile without writing candidates",
        )

    def handle(self, *args, **options):
        path = Path(options["path"])
        if not path.is_file():
            raise CommandError(f"File not found: {path}")

        mapping = self._parse_map(options["map"])

        try:
            if options["dry_run"]:
                result = self._dry_run(path, mapping, options)
            else:
                result = self._import(path, mapping, options)
        except CandidateImportError as e:
            raise CommandError(f"[{e.code}] {e}")

        for warning in result.warnings:
            self.stdout.write(self.style.WARNING(warning))

        self.stdout.write(self.style.SUCCESS(
            f"{'Dry run' if options['dry_run'] else 'Import'} '{result.import_tag}': "
            f"rows={result.total_rows}, accepted={result.accepted}, created={result.created}, "
            f"updated={result.updated}, skipped={result.skipped}, "
            f"rejected={result.rejected}"
        ))

    def _parse_map(self, pairs):
        mapping = {}
        for pair in pairs:
            if "=" not in pair:
                raise CommandError(f"Invalid --map value (expected HEADER=FIELD): {pair}")
            header, field_key = pair.split("=", 1)
            mapping[header.strip()] = field_key.strip() or None
        return mapping

    def _dry_run(self, path, mapping, options):
        session = ImportSession()
        table = session.upload(path.name, path.read_bytes())

        if session.needs_confirmation:
            if not options["yes"]:
                raise CommandError(
                    f"{table.row_count} rows exceed the large-file threshold; "
                    "re-run with --yes to continue"
                )
            session.confirm_large_file()

        for header, field_key in mapping.items():
            session.set_mapping(header, field_key)

        self.stdout.write(f"Mapping: {session.mapping.as_dict()}")

        session.configure(options["policy"], options["tag"] or None)
        return session.commit()

    def _import(self, path, mapping, options):
        with path.open("rb") as fh:
            batch = ImportBatch(
                file_name=path.name,
                policy=options["policy"],
                import_tag=options["tag"],
            )
            batch.source_file.save(path.name, File(fh), save=True)

        return process_import(batch, mapping=mapping, confirm_large=options["yes"])
