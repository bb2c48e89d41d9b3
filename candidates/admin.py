import csv

from django import forms
from django.contrib import admin, messages
from django.db import transaction
from django.http import HttpResponse
from django.urls import path

from rangefilter.filters import DateRangeFilter

from candidates.exceptions import CandidateImportError
from candidates.fields import CANDIDATE_FIELDS
from candidates.models import Candidate, ImportBatch, ImportLog
from candidates.normalization.normalizer import (
    normalize_city,
    normalize_interest_areas,
    normalize_source,
)
from candidates.services.process_file import process_import


# ─────────────────────────────────────────────
# Admin branding
# ─────────────────────────────────────────────
admin.site.site_header = "Candidate Portal"
admin.site.site_title = "Candidate Portal"
admin.site.index_title = "Candidate Portal"


# ─────────────────────────────────────────────
# Candidate Admin
# ─────────────────────────────────────────────
@admin.register(Candidate)
class CandidateAdmin(admin.ModelAdmin):
    list_display = (
        "full_name",
        "email",
        "city",
        "source",
        "status",
        "imported",
        "import_tag",
        "created_at",
    )

    list_filter = (
        "status",
        "imported",
        "source",
        ("created_at", DateRangeFilter),
        "import_tag",
    )

    search_fields = ("full_name", "email", "city", "import_tag")
    readonly_fields = ("imported", "import_tag", "import_date", "import_batch", "updated_at")
    actions = ["download_csv"]

    def save_model(self, request, obj, form, change):
        obj.city = normalize_city(obj.city)
        obj.source = normalize_source(obj.source)
        obj.interest_areas = normalize_interest_areas(obj.interest_areas)
        super().save_model(request, obj, form, change)

    def get_urls(self):
        urls = super().get_urls()
        return [
            path(
                "export-csv/",
                self.admin_site.admin_view(self.export_csv),
                name="candidate_export_csv",
            )
        ] + urls

    def export_csv(self, request):
        changelist = self.get_changelist_instance(request)
        queryset = changelist.get_queryset(request)
        return self._build_csv_response(queryset)

    def download_csv(self, request, queryset):
        return self._build_csv_response(queryset)

    download_csv.short_description = "⬇️ Download selected candidates as CSV"

    def _build_csv_response(self, queryset):
        response = HttpResponse(content_type="text/csv")
        response["Content-Disposition"] = 'attachment; filename="candidatos.csv"'
        writer = csv.writer(response)

        # Same labels as the import template, so an export can be re-imported
        writer.writerow([f.csv_label for f in CANDIDATE_FIELDS])

        for obj in queryset:
            writer.writerow([obj.get_field(f.key) for f in CANDIDATE_FIELDS])

        return response


# ─────────────────────────────────────────────
# ImportBatch Admin
# ─────────────────────────────────────────────
class ImportBatchForm(forms.ModelForm):
    confirm_large = forms.BooleanField(
        required=False,
        label="Confirm large file",
        help_text="Required for files above the large-import threshold.",
    )

    class Meta:
        model = ImportBatch
        fields = ("source_file", "policy", "import_tag")


@admin.register(ImportBatch)
class ImportBatchAdmin(admin.ModelAdmin):
    form = ImportBatchForm
    list_display = (
        "file_name",
        "import_tag",
        "policy",
        "status",
        "total_rows",
        "created_count",
        "updated_count",
        "skipped_count",
        "rejected_count",
        "uploaded_at",
    )
    list_filter = ("status", "policy", ("uploaded_at", DateRangeFilter))
    search_fields = ("file_name", "import_tag")

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        if change:
            return

        confirm_large = form.cleaned_data.get("confirm_large", False)
        transaction.on_commit(lambda: self._run_import(request, obj, confirm_large))

    def _run_import(self, request, batch, confirm_large):
        try:
            result = process_import(batch, confirm_large=confirm_large)
        except CandidateImportError as e:
            messages.error(request, f"Import failed: {e}")
            return

        messages.success(
            request,
            f"Import '{result.import_tag}' complete → created: {result.created}, "
            f"updated: {result.updated}, skipped: {result.skipped}, "
            f"rejected: {result.rejected}",
        )


# ─────────────────────────────────────────────
# ImportLog Admin
# ─────────────────────────────────────────────
@admin.register(ImportLog)
class ImportLogAdmin(admin.ModelAdmin):
    list_display = ("batch", "level", "message", "created_at")
    list_filter = ("level",)
    search_fields = ("message",)
