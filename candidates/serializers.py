from rest_framework import serializers

from candidates.fields import CANDIDATE_FIELDS
from candidates.models import Candidate, ImportBatch
from candidates import validation
from config.settings import DEFAULT_IMPORT_POLICY


# -----------------------------
# IMPORT
# -----------------------------
class ImportPreviewSerializer(serializers.Serializer):
    file = serializers.FileField()


class ImportCommitSerializer(serializers.Serializer):
    file = serializers.FileField()
    # Multipart forms send the mapping as a JSON string
    mapping = serializers.JSONField(required=False, binary=True)
    policy = serializers.CharField(required=False, default=DEFAULT_IMPORT_POLICY)
    import_tag = serializers.CharField(required=False, allow_blank=True, default="")
    confirm_large = serializers.BooleanField(required=False, default=False)

    def validate_mapping(self, value):
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise serializers.ValidationError("Mapping must be an object of header -> field")
        return value


class ImportBatchSerializer(serializers.ModelSerializer):
    class Meta:
        model = ImportBatch
        fields = (
            "id",
            "file_name",
            "uploaded_at",
            "policy",
            "import_tag",
            "status",
            "mapping",
            "total_rows",
            "created_count",
            "updated_count",
            "skipped_count",
            "rejected_count",
        )


# -----------------------------
# PUBLIC APPLICATION FORM
# -----------------------------
PUBLIC_FORM_REQUIRED = ("fullName", "email", "phone")
PUBLIC_FORM_EXCLUDED = ("status", "original_timestamp", "external_id")


class PublicApplicationSerializer(serializers.Serializer):
    """
    Public application form. Keys are the camelCase field keys used by
    the import pipeline; unknown keys are ignored.
    """

    def get_fields(self):
        fields = {}
        for field in CANDIDATE_FIELDS:
            if field.key in PUBLIC_FORM_EXCLUDED:
                continue
            required = field.key in PUBLIC_FORM_REQUIRED
            options = {"required": required, "allow_blank": not required}

            if field.type == "email":
                fields[field.key] = serializers.EmailField(**options)
            elif field.type == "url":
                # http(s) only
                fields[field.key] = serializers.URLField(
                    validators=[validation.url_validator], **options
                )
            else:
                fields[field.key] = serializers.CharField(trim_whitespace=True, **options)
        return fields

    def validate_email(self, value):
        exists = Candidate.objects.filter(
            email__iexact=value, deleted_at__isnull=True
        ).exists()
        if exists:
            raise serializers.ValidationError("An application with this email already exists")
        return value

    def validate_phone(self, value):
        ok, message = validation.validate_phone(value)
        if not ok:
            raise serializers.ValidationError(message)
        return value

    def validate_birthDate(self, value):
        ok, message = validation.validate_birth_date(value)
        if not ok:
            raise serializers.ValidationError(message)
        return value

