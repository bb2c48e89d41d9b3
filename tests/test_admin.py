import csv
import io

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from candidates.fields import CANDIDATE_FIELDS
from candidates.models import Candidate, ImportBatch


pytestmark = pytest.mark.django_db

CHANGELIST = "/admin/candidates/candidate/"


def read_csv(response):
    return list(csv.reader(io.StringIO(response.content.decode("utf-8"))))


@pytest.fixture
def people():
    return [
        Candidate.objects.create(full_name="Ana Silva", email="ana@example.com", city="Porto Alegre/RS"),
        Candidate.objects.create(full_name="Bruno Souza", email="bruno@example.com", status="Testes"),
    ]


# ─────────────────────────────
# Candidate CSV export
# ─────────────────────────────
def test_export_csv_uses_template_labels(admin_client, people):
    response = admin_client.get(CHANGELIST + "export-csv/")

    assert response.status_code == 200
    assert response["Content-Type"] == "text/csv"
    assert 'filename="candidatos.csv"' in response["Content-Disposition"]

    header, *rows = read_csv(response)
    assert header == [f.csv_label for f in CANDIDATE_FIELDS]
    assert sorted(r[0] for r in rows) == ["Ana Silva", "Bruno Souza"]


def test_export_csv_follows_changelist_filters(admin_client, people):
    response = admin_client.get(CHANGELIST + "export-csv/", {"status__exact": "Testes"})

    _, *rows = read_csv(response)
    assert [r[0] for r in rows] == ["Bruno Souza"]


def test_download_selected_candidates(admin_client, people):
    ana = people[0]
    response = admin_client.post(
        CHANGELIST,
        {"action": "download_csv", "_selected_action": [ana.pk]},
    )

    assert response.status_code == 200
    _, *rows = read_csv(response)
    assert len(rows) == 1
    email_column = [f.key for f in CANDIDATE_FIELDS].index("email")
    assert rows[0][email_column] == "ana@example.com"


def test_export_requires_staff(client):
    response = client.get(CHANGELIST + "export-csv/")
    assert response.status_code == 302


# ─────────────────────────────
# ImportBatch upload
# ─────────────────────────────
def post_batch(admin_client, content, **extra):
    upload = SimpleUploadedFile("feira.csv", content.encode("utf-8"), content_type="text/csv")
    return admin_client.post(
        "/admin/candidates/importbatch/add/",
        {"source_file": upload, "policy": "skip", "import_tag": "feira", **extra},
    )


def test_uploading_a_batch_runs_the_import(
    admin_client, candidates_csv, django_capture_on_commit_callbacks
):
    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        response = post_batch(admin_client, candidates_csv)

    assert response.status_code == 302
    assert len(callbacks) == 1

    batch = ImportBatch.objects.get()
    assert batch.status == ImportBatch.STATUS_COMMITTED
    assert batch.created_count == 2
    assert set(Candidate.objects.values_list("import_tag", flat=True)) == {"feira"}


def test_failed_batch_upload_is_kept_as_failed(admin_client, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        post_batch(admin_client, "Nome completo,Cidade\nAna,poa\n")

    batch = ImportBatch.objects.get()
    assert batch.status == ImportBatch.STATUS_FAILED
    assert batch.logs.filter(level="ERROR").exists()
    assert Candidate.objects.count() == 0


def test_editing_a_batch_does_not_import_again(
    admin_client, candidates_csv, django_capture_on_commit_callbacks
):
    with django_capture_on_commit_callbacks(execute=True):
        post_batch(admin_client, candidates_csv)
    batch = ImportBatch.objects.get()

    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        admin_client.post(
            f"/admin/candidates/importbatch/{batch.pk}/change/",
            {"policy": "overwrite", "import_tag": "feira"},
        )

    assert callbacks == []
    assert Candidate.objects.count() == 2
