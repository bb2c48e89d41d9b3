import json

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from rest_framework.test import APIClient

from candidates.models import Candidate, ImportBatch


pytestmark = pytest.mark.django_db


@pytest.fixture
def client():
    return APIClient()


def csv_upload(content, name="candidatos.csv"):
    return SimpleUploadedFile(name, content.encode("utf-8"), content_type="text/csv")


# ─────────────────────────────
# Imports
# ─────────────────────────────
def test_preview(client, candidates_csv):
    response = client.post(
        "/api/imports/preview/", {"file": csv_upload(candidates_csv)}, format="multipart"
    )

    assert response.status_code == 200
    assert response.data["headers"][0] == "Nome completo"
    assert response.data["mapping"]["E-mail principal"] == "email"
    assert response.data["missing_required"] == []
    assert response.data["row_count"] == 2
    assert response.data["is_large"] is False
    assert response.data["sample_rows"][0]["Nome completo"] == "Ana Silva"
    assert Candidate.objects.count() == 0


def test_preview_reports_second_column_for_same_field(client):
    content = "Nome completo,E-mail principal,NOME COMPLETO:\nAna Silva,ana@example.com,Ana S.\n"
    response = client.post(
        "/api/imports/preview/", {"file": csv_upload(content)}, format="multipart"
    )

    assert response.status_code == 200
    assert response.data["mapping"]["Nome completo"] == "fullName"
    assert response.data["mapping"]["NOME COMPLETO:"] is None
    assert any("NOME COMPLETO:" in w for w in response.data["warnings"])


def test_preview_refuses_spreadsheets(client):
    upload = SimpleUploadedFile("candidatos.xlsx", b"PK\x03\x04")
    response = client.post("/api/imports/preview/", {"file": upload}, format="multipart")

    assert response.status_code == 400
    assert response.data["code"] == "unsupported_file"


def test_commit(client, candidates_csv):
    response = client.post(
        "/api/imports/commit/",
        {"file": csv_upload(candidates_csv), "policy": "skip", "import_tag": "feira"},
        format="multipart",
    )

    assert response.status_code == 201
    assert response.data["result"]["created"] == 2
    assert response.data["batch"]["status"] == "committed"
    assert response.data["batch"]["import_tag"] == "feira"
    assert set(Candidate.objects.values_list("import_tag", flat=True)) == {"feira"}


def test_commit_with_mapping_override(client, candidates_csv):
    response = client.post(
        "/api/imports/commit/",
        {
            "file": csv_upload(candidates_csv),
            "mapping": json.dumps({"E-mail principal": None}),
        },
        format="multipart",
    )

    assert response.status_code == 400
    assert response.data["code"] == "missing_required_mapping"
    batch = ImportBatch.objects.get(pk=response.data["batch_id"])
    assert batch.status == ImportBatch.STATUS_FAILED
    assert Candidate.objects.count() == 0


def test_commit_rejects_unknown_policy(client, candidates_csv):
    response = client.post(
        "/api/imports/commit/",
        {"file": csv_upload(candidates_csv), "policy": "merge"},
        format="multipart",
    )

    assert response.status_code == 400
    assert response.data["code"] == "invalid_policy"
    assert ImportBatch.objects.count() == 0


# ─────────────────────────────
# Template
# ─────────────────────────────
@pytest.mark.parametrize("fmt", ["csv", "xlsx"])
def test_template_download(client, fmt):
    response = client.get("/api/imports/template/", {"format": fmt})

    assert response.status_code == 200
    assert "modelo_importacao_" in response["Content-Disposition"]
    assert response["Content-Disposition"].endswith(f'.{fmt}"')


def test_template_unknown_format(client):
    response = client.get("/api/imports/template/", {"format": "pdf"})
    assert response.status_code == 400


# ─────────────────────────────
# Catalogs
# ─────────────────────────────
def test_catalog_options(client):
    response = client.get("/api/catalogs/city/")

    assert response.status_code == 200
    assert response.data["options"][0] == {"id": 0, "name": "Porto Alegre/RS"}


def test_unknown_catalog(client):
    assert client.get("/api/catalogs/planets/").status_code == 404


def test_catalog_normalize(client):
    response = client.get("/api/catalogs/city/normalize/", {"value": "poa"})

    assert response.data["normalized"] == "Porto Alegre/RS"
    assert response.data["is_main"] is True


# ─────────────────────────────
# Public application form
# ─────────────────────────────
APPLICATION = {
    "fullName": "Ana Silva",
    "email": "ana@example.com",
    "phone": "51999999999",
    "city": "poa",
    "interestAreas": "mkt, TI",
}


def test_public_application(client):
    response = client.post("/api/applications/", APPLICATION, format="json")

    assert response.status_code == 201
    candidate = Candidate.objects.get(pk=response.data["id"])
    assert candidate.status == "Inscrito"
    assert candidate.origin == "public_form"
    assert candidate.source == "Formulário Público"
    assert candidate.city == "Porto Alegre/RS"
    assert candidate.phone == "(51) 99999-9999"
    assert candidate.interest_areas == "Marketing, Tecnologia"
    assert candidate.imported is False


def test_public_application_rejects_duplicate_email(client):
    Candidate.objects.create(full_name="Ana", email="ANA@example.com")

    response = client.post("/api/applications/", APPLICATION, format="json")

    assert response.status_code == 400
    assert "email" in response.data


@pytest.mark.parametrize("missing", ["fullName", "email", "phone"])
def test_public_application_required_fields(client, missing):
    data = {k: v for k, v in APPLICATION.items() if k != missing}
    response = client.post("/api/applications/", data, format="json")

    assert response.status_code == 400
    assert missing in response.data


def test_public_application_checks_phone(client):
    response = client.post("/api/applications/", {**APPLICATION, "phone": "123"}, format="json")
    assert response.status_code == 400
    assert "phone" in response.data


@pytest.mark.parametrize("email", ["a@b..c", ".a@-b.c", "ana@example"])
def test_public_application_rejects_malformed_email(client, email):
    response = client.post("/api/applications/", {**APPLICATION, "email": email}, format="json")

    assert response.status_code == 400
    assert "email" in response.data
    assert not Candidate.objects.exists()


@pytest.mark.parametrize("url", ["http://x", "http://-.-", "ftp://exemplo.com/cv.pdf", "cv.pdf"])
def test_public_application_rejects_malformed_cv_url(client, url):
    response = client.post("/api/applications/", {**APPLICATION, "cvUrl": url}, format="json")

    assert response.status_code == 400
    assert "cvUrl" in response.data


def test_public_application_accepts_blank_optional_url(client):
    response = client.post("/api/applications/", {**APPLICATION, "portfolioUrl": ""}, format="json")
    assert response.status_code == 201
