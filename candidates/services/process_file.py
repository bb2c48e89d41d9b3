from dataclasses import dataclass, asdict, field
from enum import Enum
from functools import partial
from typing import List, Optional

from django.utils import timezone

from candidates.exceptions import (
    CandidateImportError,
    InvalidImportStep,
    LargeImportNotConfirmed,
)
from candidates.extraction.router import UnifiedImporter
from candidates.models import ImportBatch, ImportLog
from candidates.services.column_mapper import ColumnMapping
from candidates.services.persistence import persist_candidates
from candidates.services.reconciler import ImportPolicy, reconcile
from config.logger import logger
from config.settings import DEFAULT_IMPORT_POLICY, LARGE_IMPORT_THRESHOLD


# Only the first warnings are kept in the log context
MAX_LOGGED_WARNINGS = 50


class ImportStep(str, Enum):
    UPLOAD = "upload"
    MAP = "map"
    CONFIGURE = "configure"
    COMMIT = "commit"


@dataclass
class ImportResult:
    import_tag: str
    policy: str
    total_rows: int
    rejected: int
    created: int = 0
    updated: int = 0
    skipped: int = 0
    warnings: List[str] = field(default_factory=list)

    @property
    def accepted(self) -> int:
        return self.total_rows - self.rejected

    def as_dict(self):
        data = asdict(self)
        data["accepted"] = self.accepted
        return data


class ImportSession:
    """
    One operator's import, walked through Upload -> Map -> Configure -> Commit.

    Each step only opens after the previous one succeeded; a failed step
    leaves the session where it was so the operator can retry it. State
    lives on the instance only: concurrent imports use separate sessions.

    ``persist`` receives (records, policy) and returns an object with
    created/updated/skipped counts. Without it, commit is a dry run.
    """

    def __init__(self, persist=None, importer=None, large_file_threshold=None):
        if large_file_threshold is None:
            large_file_threshold = LARGE_IMPORT_THRESHOLD
        self.persist = persist
        self.importer = importer or UnifiedImporter(large_file_threshold)
        self.reset()

    def reset(self):
        self.step = ImportStep.UPLOAD
        self.file_name = None
        self.table = None
        self.mapping = None
        self.policy = None
        self.import_tag = None
        self.large_file_confirmed = False
        self.records = []
        self.result = None

    # ─────────────────────────────
    # Upload
    # ─────────────────────────────
    def upload(self, file_name, data):
        self._require(ImportStep.UPLOAD)

        if isinstance(data, bytes):
            table = self.importer.parse_bytes(file_name, data)
        else:
            table = self.importer.parse_text(file_name, data)

        self.file_name = file_name
        self.table = table
        self.mapping = ColumnMapping.infer(table.headers)

        if not self.needs_confirmation:
            self.step = ImportStep.MAP
        else:
            logger.warning(
                f"{file_name}: {table.row_count} rows, waiting for confirmation"
            )
        return table

    @property
    def needs_confirmation(self) -> bool:
        return bool(
            self.table is not None
            and self.table.is_large
            and not self.large_file_confirmed
        )

    def confirm_large_file(self):
        self._require(ImportStep.UPLOAD)
        if self.table is None:
            raise InvalidImportStep("Nothing uploaded yet")

        self.large_file_confirmed = True
        self.step = ImportStep.MAP

    # ─────────────────────────────
    # Map
    # ─────────────────────────────
    def set_mapping(self, header, field_key):
        self._require(ImportStep.MAP, ImportStep.CONFIGURE)
        self.mapping.set(header, field_key)

    # ─────────────────────────────
    # Configure
    # ─────────────────────────────
    def configure(self, policy=DEFAULT_IMPORT_POLICY, import_tag=None):
        self._require(ImportStep.MAP, ImportStep.CONFIGURE)
        self.policy = ImportPolicy.coerce(policy)
        self.import_tag = import_tag
        self.step = ImportStep.CONFIGURE

    # ─────────────────────────────
    # Commit
    # ─────────────────────────────
    def commit(self, now=None) -> ImportResult:
        self._require(ImportStep.CONFIGURE)

        reconciled = reconcile(
            self.table.rows,
            self.mapping,
            self.policy,
            import_tag=self.import_tag,
            source_file_name=self.file_name,
            now=now,
        )

        result = ImportResult(
            import_tag=reconciled.import_tag,
            policy=reconciled.policy.value,
            total_rows=self.table.row_count,
            rejected=reconciled.rejected_count,
            warnings=(
                list(self.table.warnings)
                + list(self.mapping.warnings)
                + reconciled.warnings
            ),
        )

        if self.persist is not None:
            persisted = self.persist(reconciled.records, reconciled.policy)
            result.created = persisted.created
            result.updated = persisted.updated
            result.skipped = persisted.skipped

        self.records = reconciled.records
        self.result = result
        self.step = ImportStep.COMMIT
        return result

    def _require(self, *steps):
        if self.step not in steps:
            allowed = ", ".join(s.value for s in steps)
            raise InvalidImportStep(
                f"Import is at '{self.step.value}', expected {allowed}",
                step=self.step.value,
            )


# ---------------------------------------------------------
# MAIN PROCESSOR
# ---------------------------------------------------------
def _log(batch, level, message, context=None):
    ImportLog.objects.create(
        batch=batch,
        level=level,
        message=message,
        context=context,
    )


def process_import(
    batch: ImportBatch,
    mapping: Optional[dict] = None,
    policy=None,
    import_tag=None,
    confirm_large=False,
) -> ImportResult:
    """
    Main orchestration:
    ImportBatch file -> parsed rows -> mapping -> candidates

    ``mapping`` overrides the inferred mapping column by column. Failures
    are logged on the batch and re-raised for the caller to report.
    """
    _log(batch, "INFO", "Import started")

    session = ImportSession(persist=partial(persist_candidates, batch=batch))

    try:
        with batch.source_file.open("rb") as fh:
            data = fh.read()

        table = session.upload(batch.file_name or batch.source_file.name, data)
        batch.total_rows = table.row_count

        if session.needs_confirmation:
            if not confirm_large:
                raise LargeImportNotConfirmed(
                    f"{table.row_count} rows exceed the {table.large_file_threshold} "
                    "row threshold; confirm to import",
                    rows=table.row_count,
                )
            session.confirm_large_file()

        for header, field_key in (mapping or {}).items():
            session.set_mapping(header, field_key)

        session.configure(
            policy or batch.policy or DEFAULT_IMPORT_POLICY,
            import_tag or batch.import_tag or None,
        )
        result = session.commit(now=timezone.now())

    except CandidateImportError as e:
        batch.status = ImportBatch.STATUS_FAILED
        if session.mapping is not None:
            batch.mapping = session.mapping.as_dict()
        batch.save()

        _log(batch, "ERROR", "Import failed", {"code": e.code, "error": str(e), **e.context})
        logger.error(f"Import of {batch.file_name} failed: {e}")
        raise

    except Exception as e:
        batch.status = ImportBatch.STATUS_FAILED
        batch.save()

        _log(batch, "ERROR", "Import failed", {"error": str(e)})
        logger.exception(f"Unexpected error importing {batch.file_name}")
        raise

    if result.warnings:
        _log(
            batch,
            "WARNING",
            f"{len(result.warnings)} warning(s) during import",
            {"warnings": result.warnings[:MAX_LOGGED_WARNINGS]},
        )

    batch.status = ImportBatch.STATUS_COMMITTED
    batch.policy = result.policy
    batch.import_tag = result.import_tag
    batch.mapping = session.mapping.as_dict()
    batch.created_count = result.created
    batch.updated_count = result.updated
    batch.skipped_count = result.skipped
    batch.rejected_count = result.rejected
    batch.save()

    _log(
        batch,
        "SUCCESS",
        "Import completed",
        {
            "rows": result.total_rows,
            "created": result.created,
            "updated": result.updated,
            "skipped": result.skipped,
            "rejected": result.rejected,
        },
    )
    return result
