from django.db import models
from django.utils import timezone
import os

from candidates.fields import ALL_STATUSES, DEFAULT_STATUS, FIELDS_BY_KEY
from candidates.services.reconciler import ImportPolicy


# -----------------------------
# CANDIDATE
# -----------------------------
class Candidate(models.Model):
    STATUS_CHOICES = [(s, s) for s in ALL_STATUSES]

    # -------- Identification / contact --------
    full_name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255, db_index=True)
    email_secondary = models.CharField(max_length=255, blank=True, default="")
    phone = models.CharField(max_length=50, blank=True, default="")
    city = models.CharField(max_length=255, blank=True, default="")

    # -------- Personal --------
    birth_date = models.CharField(max_length=50, blank=True, default="")
    age = models.CharField(max_length=20, blank=True, default="")
    marital_status = models.CharField(max_length=100, blank=True, default="")
    children_count = models.CharField(max_length=20, blank=True, default="")
    photo_url = models.TextField(blank=True, default="")
    has_license = models.CharField(max_length=50, blank=True, default="")

    # -------- Professional / academic --------
    education = models.TextField(blank=True, default="")
    schooling_level = models.CharField(max_length=255, blank=True, default="")
    institution = models.CharField(max_length=255, blank=True, default="")
    graduation_date = models.CharField(max_length=50, blank=True, default="")
    is_studying = models.CharField(max_length=50, blank=True, default="")
    experience = models.TextField(blank=True, default="")
    courses = models.TextField(blank=True, default="")
    certifications = models.TextField(blank=True, default="")
    interest_areas = models.TextField(blank=True, default="")

    # -------- Links --------
    cv_url = models.TextField(blank=True, default="")
    portfolio_url = models.TextField(blank=True, default="")

    # -------- Selection process --------
    source = models.CharField(max_length=255, blank=True, default="")
    referral = models.CharField(max_length=255, blank=True, default="")
    salary_expectation = models.CharField(max_length=255, blank=True, default="")
    can_relocate = models.CharField(max_length=50, blank=True, default="")
    references = models.TextField(blank=True, default="")
    type_of_app = models.CharField(max_length=255, blank=True, default="")
    free_field = models.TextField(blank=True, default="")

    # -------- Metadata --------
    original_timestamp = models.CharField(max_length=100, blank=True, default="")
    external_id = models.CharField(max_length=100, blank=True, default="")
    status = models.CharField(
        max_length=50, choices=STATUS_CHOICES, default=DEFAULT_STATUS
    )
    origin = models.CharField(max_length=50, blank=True, default="")

    # -------- Import provenance --------
    imported = models.BooleanField(default=False)
    import_tag = models.CharField(max_length=255, blank=True, default="", db_index=True)
    import_date = models.DateTimeField(null=True, blank=True)
    import_batch = models.ForeignKey(
        "ImportBatch",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="candidates",
    )

    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)
    deleted_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ("-created_at",)

    def set_field(self, key, value):
        setattr(self, FIELDS_BY_KEY[key].attr, value)

    def get_field(self, key):
        return getattr(self, FIELDS_BY_KEY[key].attr)

    def __str__(self):
        return f"{self.full_name} <{self.email}>"


# -----------------------------
# IMPORT BATCH (ONE UPLOADED FILE)
# -----------------------------
class ImportBatch(models.Model):
    POLICY_CHOICES = [(p.value, p.name.title()) for p in ImportPolicy]

    STATUS_PENDING = "pending"
    STATUS_COMMITTED = "committed"
    STATUS_FAILED = "failed"
    STATUS_CHOICES = (
        (STATUS_PENDING, "Pending"),
        (STATUS_COMMITTED, "Committed"),
        (STATUS_FAILED, "Failed"),
    )

    source_file = models.FileField(
        upload_to="imports/",
        verbose_name="Upload File",
    )

    class Meta:
        verbose_name = "Candidate Import"
        verbose_name_plural = "Candidate Imports"
        ordering = ("-uploaded_at",)

    file_name = models.CharField(max_length=255, blank=True)
    uploaded_at = models.DateTimeField(auto_now_add=True)

    policy = models.CharField(
        max_length=20, choices=POLICY_CHOICES, default=ImportPolicy.SKIP.value
    )
    import_tag = models.CharField(max_length=255, blank=True)
    status = models.CharField(
        max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING
    )
    mapping = models.JSONField(null=True, blank=True)

    total_rows = models.IntegerField(default=0)
    created_count = models.IntegerField(default=0)
    updated_count = models.IntegerField(default=0)
    skipped_count = models.IntegerField(default=0)
    rejected_count = models.IntegerField(default=0)

    def save(self, *args, **kwargs):
        if self.source_file and not self.file_name:
            self.file_name = os.path.basename(self.source_file.name)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.import_tag or self.file_name


# -----------------------------
# IMPORT LOGGING
# -----------------------------
class ImportLog(models.Model):
    LEVEL_CHOICES = (
        ("INFO", "Info"),
        ("SUCCESS", "Success"),
        ("WARNING", "Warning"),
        ("ERROR", "Error"),
    )

    batch = models.ForeignKey(
        ImportBatch,
        on_delete=models.CASCADE,
        related_name="logs"
    )

    level = models.CharField(max_length=10, choices=LEVEL_CHOICES)
    message = models.TextField()
    context = models.JSONField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.level} | {self.batch.file_name}"
