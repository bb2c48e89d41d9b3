import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.db import DataError

from candidates.exceptions import (
    InvalidImportStep,
    LargeImportNotConfirmed,
    MissingRequiredMapping,
    NoDataRows,
    UnsupportedFileType,
)
from candidates.models import Candidate, ImportBatch
from candidates.services import process_file
from candidates.services.persistence import PersistResult
from candidates.services.process_file import ImportSession, ImportStep, process_import


def fake_persist(records, policy):
    fake_persist.calls.append((records, policy))
    return PersistResult(created=len(records))


@pytest.fixture(autouse=True)
def reset_fake_persist():
    fake_persist.calls = []


# ─────────────────────────────
# ImportSession
# ─────────────────────────────
def test_session_walks_every_step(candidates_csv, import_time):
    session = ImportSession(persist=fake_persist)

    table = session.upload("candidatos.csv", candidates_csv)
    assert table.row_count == 2
    assert session.step is ImportStep.MAP
    assert session.mapping.get("Nome completo") == "fullName"
    assert session.mapping.get("Onde nos encontrou") == "source"

    session.configure("overwrite", "feira")
    assert session.step is ImportStep.CONFIGURE

    result = session.commit(now=import_time)

    assert session.step is ImportStep.COMMIT
    assert result.created == 2
    assert result.accepted == 2
    assert result.import_tag == "feira"
    assert result.policy == "overwrite"

    [(records, policy)] = fake_persist.calls
    assert policy.value == "overwrite"
    assert [r.fields["city"] for r in records] == ["Porto Alegre/RS", "Canoas/RS"]
    assert [r.fields["source"] for r in records] == ["Facebook", "LinkedIn"]


def test_without_persist_commit_is_a_dry_run(candidates_csv, import_time):
    session = ImportSession()
    session.upload("candidatos.csv", candidates_csv.encode("utf-8"))
    session.configure()

    result = session.commit(now=import_time)

    assert (result.created, result.updated, result.skipped) == (0, 0, 0)
    assert len(session.records) == 2
    assert result.import_tag == "candidatos_2024-12-04T10-30-00"


def test_steps_cannot_be_skipped(candidates_csv):
    session = ImportSession()

    with pytest.raises(InvalidImportStep):
        session.configure("skip")

    session.upload("candidatos.csv", candidates_csv)
    with pytest.raises(InvalidImportStep):
        session.commit()

    with pytest.raises(InvalidImportStep):
        session.upload("candidatos.csv", candidates_csv)


def test_failed_upload_stays_on_upload():
    session = ImportSession()

    with pytest.raises(UnsupportedFileType):
        session.upload("candidatos.xlsx", b"PK")
    with pytest.raises(NoDataRows):
        session.upload("candidatos.csv", "Nome,Email\n")

    assert session.step is ImportStep.UPLOAD
    assert session.table is None


def test_missing_required_mapping_blocks_commit(candidates_csv):
    session = ImportSession(persist=fake_persist)
    session.upload("candidatos.csv", candidates_csv)
    session.set_mapping("E-mail principal", None)
    session.configure("skip")

    with pytest.raises(MissingRequiredMapping):
        session.commit()

    assert session.step is ImportStep.CONFIGURE
    assert fake_persist.calls == []


def test_mapping_can_change_while_configuring(candidates_csv, import_time):
    session = ImportSession()
    session.upload("candidatos.csv", candidates_csv)
    session.configure("skip")
    session.set_mapping("Cidade", None)

    session.commit(now=import_time)
    assert all("city" not in r.fields for r in session.records)


def test_large_file_needs_confirmation(candidates_csv):
    session = ImportSession(large_file_threshold=1)
    session.upload("candidatos.csv", candidates_csv)

    assert session.needs_confirmation
    assert session.step is ImportStep.UPLOAD
    with pytest.raises(InvalidImportStep):
        session.set_mapping("Cidade", None)

    session.confirm_large_file()
    assert session.step is ImportStep.MAP
    assert not session.needs_confirmation


def test_reset_discards_everything(candidates_csv):
    session = ImportSession()
    session.upload("candidatos.csv", candidates_csv)
    session.reset()

    assert session.step is ImportStep.UPLOAD
    assert session.table is None
    assert session.mapping is None


# ─────────────────────────────
# process_import
# ─────────────────────────────
def make_batch(content, name="candidatos.csv", **kwargs):
    return ImportBatch.objects.create(
        source_file=SimpleUploadedFile(name, content.encode("utf-8")),
        file_name=name,
        **kwargs,
    )


@pytest.mark.django_db
def test_process_import_commits_batch(candidates_csv):
    batch = make_batch(candidates_csv, import_tag="feira")

    result = process_import(batch)

    batch.refresh_from_db()
    assert result.created == 2
    assert batch.status == ImportBatch.STATUS_COMMITTED
    assert batch.import_tag == "feira"
    assert batch.total_rows == 2
    assert batch.created_count == 2
    assert batch.mapping["Nome completo"] == "fullName"
    assert list(batch.logs.values_list("level", flat=True).order_by("id")) == ["INFO", "SUCCESS"]
    assert set(Candidate.objects.values_list("import_batch", flat=True)) == {batch.id}


@pytest.mark.django_db
def test_process_import_applies_policy_and_overrides(candidates_csv):
    Candidate.objects.create(full_name="Ana Antiga", email="ana@example.com")
    batch = make_batch(candidates_csv, policy="overwrite")

    result = process_import(batch, mapping={"Cidade": None})

    assert (result.created, result.updated) == (1, 1)
    ana = Candidate.objects.get(email__iexact="ana@example.com")
    assert ana.full_name == "Ana Silva"
    assert ana.city == ""


@pytest.mark.django_db
def test_process_import_logs_failures():
    batch = make_batch("Nome,Email\n")

    with pytest.raises(NoDataRows):
        process_import(batch)

    batch.refresh_from_db()
    assert batch.status == ImportBatch.STATUS_FAILED
    error = batch.logs.get(level="ERROR")
    assert error.context["code"] == "no_data_rows"
    assert Candidate.objects.count() == 0


@pytest.mark.django_db
def test_process_import_large_file(monkeypatch, candidates_csv):
    monkeypatch.setattr(process_file, "LARGE_IMPORT_THRESHOLD", 1)

    batch = make_batch(candidates_csv)
    with pytest.raises(LargeImportNotConfirmed):
        process_import(batch)
    assert Candidate.objects.count() == 0

    batch = make_batch(candidates_csv)
    result = process_import(batch, confirm_large=True)
    assert result.created == 2


@pytest.mark.django_db
def test_process_import_logs_warnings():
    batch = make_batch("Nome completo,E-mail principal\nAna,ana-at-example\n")

    process_import(batch)

    warning = batch.logs.get(level="WARNING")
    assert warning.context["warnings"] == ["Row 1: Invalid email format"]


@pytest.mark.django_db
def test_unexpected_error_marks_batch_failed(candidates_csv, monkeypatch):
    batch = make_batch(candidates_csv)

    def broken_save(self, *args, **kwargs):
        raise DataError("value too long for type character varying(255)")

    monkeypatch.setattr(Candidate, "save", broken_save)

    with pytest.raises(DataError):
        process_import(batch)

    batch.refresh_from_db()
    assert batch.status == ImportBatch.STATUS_FAILED
    assert list(batch.logs.values_list("level", flat=True).order_by("id")) == ["INFO", "ERROR"]
    error = batch.logs.get(level="ERROR")
    assert error.context == {"error": "value too long for type character varying(255)"}
    assert Candidate.objects.count() == 0
