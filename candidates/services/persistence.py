from dataclasses import dataclass, asdict

from django.db import transaction

from candidates.models import Candidate
from candidates.services.reconciler import ImportPolicy
from config.logger import logger


@dataclass
class PersistResult:
    created: int = 0
    updated: int = 0
    skipped: int = 0

    def as_dict(self):
        return asdict(self)


def find_existing(email):
    """Oldest live candidate with this email (case-insensitive), or None."""
    if not email:
        return None
    return (
        Candidate.objects
        .filter(email__iexact=email.strip(), deleted_at__isnull=True)
        .order_by("created_at", "id")
        .first()
    )


def _apply_record(candidate, record, keep_pipeline=False):
    for key, value in record.fields.items():
        if key == "status":
            continue
        candidate.set_field(key, value)

    candidate.imported = record.imported
    candidate.import_tag = record.import_tag
    candidate.import_date = record.import_date

    # An overwritten candidate keeps its place in the selection pipeline
    if not keep_pipeline:
        candidate.status = record.status
        candidate.created_at = record.created_at


def persist_candidates(records, policy, batch=None) -> PersistResult:
    """
    Write reconciled records, resolving email collisions with ``policy``:

    - skip: an existing candidate is left untouched, the record is dropped
    - overwrite: the existing candidate takes the imported field values
    - duplicate: the record is always inserted

    Records are applied in order inside one transaction, so a repeated
    email within the same batch collides with the row written before it.
    """
    policy = ImportPolicy.coerce(policy)
    result = PersistResult()

    with transaction.atomic():
        for record in records:
            existing = None
            if policy != ImportPolicy.DUPLICATE:
                existing = find_existing(record.email)

            if existing is None:
                candidate = Candidate(import_batch=batch)
                _apply_record(candidate, record)
                candidate.save()
                result.created += 1
                continue

            if policy == ImportPolicy.SKIP:
                result.skipped += 1
                continue

            _apply_record(existing, record, keep_pipeline=True)
            if batch is not None:
                existing.import_batch = batch
            existing.save()
            result.updated += 1

    logger.info(
        f"Persisted import ({policy.value}): created={result.created}, "
        f"updated={result.updated}, skipped={result.skipped}"
    )
    return result
