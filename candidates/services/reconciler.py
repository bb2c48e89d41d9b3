from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from candidates.exceptions import (
    InvalidPolicy,
    MissingRequiredMapping,
    NoValidCandidates,
)
from candidates.fields import (
    DEFAULT_STATUS,
    LIST_FIELDS,
    NORMALIZED_FIELDS,
    REQUIRED_IMPORT_FIELDS,
)
from candidates.normalization.normalizer import normalize, normalize_list
from candidates.validation import import_row_warnings
from config.logger import logger


DEFAULT_TAG_BASE = "importacao"


class ImportPolicy(str, Enum):
    """What to do with an imported record whose email already exists."""

    SKIP = "skip"
    OVERWRITE = "overwrite"
    DUPLICATE = "duplicate"

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidPolicy(f"Unknown import policy: {value}", policy=value) from None


@dataclass
class ImportedCandidateRecord:
    fields: Dict[str, str]
    created_at: datetime
    import_tag: str
    import_date: datetime
    row_number: int = 0
    status: str = DEFAULT_STATUS
    imported: bool = True

    @property
    def email(self) -> str:
        return self.fields.get("email", "")

    def as_dict(self) -> dict:
        data = dict(self.fields)
        data.update({
            "status": self.status,
            "createdAt": self.created_at,
            "imported": self.imported,
            "importTag": self.import_tag,
            "importDate": self.import_date,
        })
        return data


@dataclass
class ReconcileResult:
    records: List[ImportedCandidateRecord]
    rejected_count: int
    policy: ImportPolicy
    import_tag: str
    warnings: List[str] = field(default_factory=list)


def format_import_timestamp(moment: datetime) -> str:
    """Sortable and filesystem safe: 2024-12-04T10-30-00"""
    return moment.strftime("%Y-%m-%dT%H-%M-%S")


def build_import_tag(source_file_name=None, custom_tag=None, now=None) -> str:
    if custom_tag and str(custom_tag).strip():
        return str(custom_tag).strip()

    now = now or datetime.now(timezone.utc)
    base = Path(source_file_name).stem if source_file_name else ""
    return f"{base or DEFAULT_TAG_BASE}_{format_import_timestamp(now)}"


def normalize_field(key, value):
    catalog = NORMALIZED_FIELDS.get(key)
    if catalog is None:
        return value
    if key in LIST_FIELDS:
        return normalize_list(catalog, value)
    return normalize(catalog, value)


def apply_mapping(row, mapping) -> Dict[str, str]:
    """
    Build the candidate fields of one row; empty cells are left out.
    When two columns feed the same field, the first non-empty one wins.
    """
    fields = {}
    for header, key in mapping.items():
        if not key or key in fields:
            continue

        value = row.get(header)
        if value is None:
            continue

        value = str(value).strip()
        if not value:
            continue

        fields[key] = normalize_field(key, value)
    return fields


def check_required_mapping(mapping):
    mapped = {key for _, key in mapping.items() if key}
    missing = [f for f in REQUIRED_IMPORT_FIELDS if f not in mapped]
    if missing:
        raise MissingRequiredMapping(missing)


def reconcile(
    rows,
    mapping,
    policy,
    import_tag: Optional[str] = None,
    source_file_name: Optional[str] = None,
    now: Optional[datetime] = None,
) -> ReconcileResult:
    """
    Turn parsed rows into candidate records ready for persistence.

    Rows keep their file order. Rows without full name or email after
    mapping are dropped and counted in ``rejected_count``.
    """
    policy = ImportPolicy.coerce(policy)
    check_required_mapping(mapping)

    now = now or datetime.now(timezone.utc)
    tag = build_import_tag(source_file_name, import_tag, now)

    records = []
    warnings = []
    rejected = 0
    first_row_by_email = {}

    for row_number, row in enumerate(rows, start=1):
        fields = apply_mapping(row, mapping)

        if not fields.get("fullName") or not fields.get("email"):
            rejected += 1
            continue

        warnings.extend(import_row_warnings(fields, row_number))

        email_key = fields["email"].lower()
        if email_key in first_row_by_email:
            warnings.append(
                f"Row {row_number}: email {fields['email']} repeated within this import "
                f"(first seen on row {first_row_by_email[email_key]})"
            )
        else:
            first_row_by_email[email_key] = row_number

        records.append(
            ImportedCandidateRecord(
                fields=fields,
                created_at=now,
                import_tag=tag,
                import_date=now,
                row_number=row_number,
            )
        )

    logger.info(
        f"Reconciled import '{tag}': {len(records)} records, "
        f"{rejected} rejected, policy={policy.value}"
    )

    if not records:
        raise NoValidCandidates(rejected_count=rejected)

    return ReconcileResult(
        records=records,
        rejected_count=rejected,
        policy=policy,
        import_tag=tag,
        warnings=warnings,
    )
