from django.http import Http404, HttpResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from candidates.exceptions import CandidateImportError
from candidates.fields import DEFAULT_STATUS, FIELDS_BY_KEY
from candidates.models import Candidate, ImportBatch
from candidates.normalization.normalizer import (
    get_normalizer,
    normalize_city,
    normalize_interest_areas,
    normalize_source,
)
from candidates.serializers import (
    ImportBatchSerializer,
    ImportCommitSerializer,
    ImportPreviewSerializer,
    PublicApplicationSerializer,
)
from candidates.services.process_file import ImportSession, process_import
from candidates.services.reconciler import ImportPolicy
from candidates.services.template import (
    CONTENT_TYPES,
    TEMPLATE_FORMATS,
    build_template,
    template_filename,
)
from candidates.validation import format_phone
from config.logger import logger


PREVIEW_SAMPLE_ROWS = 5
PUBLIC_FORM_SOURCE = "Formulário Público"
PUBLIC_FORM_ORIGIN = "public_form"


def error_response(error: CandidateImportError):
    return Response(
        {"error": str(error), "code": error.code},
        status=status.HTTP_400_BAD_REQUEST,
    )


class ImportPreviewView(APIView):
    """Parse an upload and propose a column mapping. Nothing is stored."""

    def post(self, request):
        serializer = ImportPreviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        upload = serializer.validated_data["file"]

        session = ImportSession()
        try:
            table = session.upload(upload.name, upload.read())
        except CandidateImportError as e:
            return error_response(e)

        return Response({
            "file_name": upload.name,
            "headers": table.headers,
            "mapping": session.mapping.as_dict(),
            "missing_required": session.mapping.missing_required(),
            "row_count": table.row_count,
            "skipped_rows": table.skipped_rows,
            "is_large": table.is_large,
            "warnings": table.warnings + session.mapping.warnings,
            "sample_rows": table.rows[:PREVIEW_SAMPLE_ROWS],
        })


class ImportCommitView(APIView):
    def post(self, request):
        serializer = ImportCommitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        upload = data["file"]

        try:
            policy = ImportPolicy.coerce(data["policy"])
        except CandidateImportError as e:
            return error_response(e)

        batch = ImportBatch.objects.create(
            source_file=upload,
            file_name=upload.name,
            policy=policy.value,
            import_tag=data["import_tag"].strip(),
        )

        try:
            result = process_import(
                batch,
                mapping=data.get("mapping") or {},
                policy=policy,
                confirm_large=data["confirm_large"],
            )
        except CandidateImportError as e:
            response = error_response(e)
            response.data["batch_id"] = batch.id
            return response

        batch.refresh_from_db()
        return Response(
            {
                "message": "Import committed",
                "batch": ImportBatchSerializer(batch).data,
                "result": result.as_dict(),
            },
            status=status.HTTP_201_CREATED,
        )


class ImportTemplateView(APIView):
    def get(self, request):
        fmt = request.query_params.get("format", "csv").lower()
        if fmt not in TEMPLATE_FORMATS:
            return Response(
                {"error": f"Unknown template format: {fmt}", "code": "invalid_format"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        response = HttpResponse(build_template(fmt), content_type=CONTENT_TYPES[fmt])
        response["Content-Disposition"] = f'attachment; filename="{template_filename(fmt)}"'
        return response


class CatalogOptionsView(APIView):
    def get(self, request, catalog):
        try:
            normalizer = get_normalizer(catalog)
        except ValueError:
            raise Http404(f"Unknown catalog: {catalog}")

        return Response({"catalog": catalog, "options": normalizer.options()})


class CatalogNormalizeView(APIView):
    def get(self, request, catalog):
        try:
            normalizer = get_normalizer(catalog)
        except ValueError:
            raise Http404(f"Unknown catalog: {catalog}")

        value = request.query_params.get("value", "")
        return Response({
            "catalog": catalog,
            "value": value,
            "normalized": normalizer.normalize(value),
            "is_main": normalizer.is_main(value),
        })


class PublicApplicationView(APIView):
    def post(self, request):
        serializer = PublicApplicationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        candidate = Candidate(status=DEFAULT_STATUS, origin=PUBLIC_FORM_ORIGIN)
        for key, value in data.items():
            if key in FIELDS_BY_KEY and value:
                candidate.set_field(key, value)

        candidate.phone = format_phone(data["phone"])
        candidate.city = normalize_city(data.get("city", ""))
        candidate.source = normalize_source(data.get("source", "")) or PUBLIC_FORM_SOURCE
        candidate.interest_areas = normalize_interest_areas(data.get("interestAreas", ""))
        candidate.save()

        logger.info(f"Public application received: {candidate.email}")

        return Response(
            {"message": "Application received", "id": candidate.id},
            status=status.HTTP_201_CREATED,
        )
