import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ImportBatch",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("source_file", models.FileField(upload_to="imports/", verbose_name="Upload File")),
                ("file_name", models.CharField(blank=True, max_length=255)),
                ("uploaded_at", models.DateTimeField(auto_now_add=True)),
                ("policy", models.CharField(
                    choices=[("skip", "Skip"), ("overwrite", "Overwrite"), ("duplicate", "Duplicate")],
                    default="skip",
                    max_length=20,
                )),
                ("import_tag", models.CharField(blank=True, max_length=255)),
                ("status", models.CharField(
                    choices=[("pending", "Pending"), ("committed", "Committed"), ("failed", "Failed")],
                    default="pending",
                    max_length=20,
                )),
                ("mapping", models.JSONField(blank=True, null=True)),
                ("total_rows", models.IntegerField(default=0)),
                ("created_count", models.IntegerField(default=0)),
                ("updated_count", models.IntegerField(default=0)),
                ("skipped_count", models.IntegerField(default=0)),
                ("rejected_count", models.IntegerField(default=0)),
            ],
            options={
                "verbose_name": "Candidate Import",
                "verbose_name_plural": "Candidate Imports",
                "ordering": ("-uploaded_at",),
            },
        ),
        migrations.CreateModel(
            name="ImportLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("level", models.CharField(
                    choices=[("INFO", "Info"), ("SUCCESS", "Success"), ("WARNING", "Warning"), ("ERROR", "Error")],
                    max_length=10,
                )),
                ("message", models.TextField()),
                ("context", models.JSONField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("batch", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="logs",
                    to="candidates.importbatch",
                )),
            ],
        ),
        migrations.CreateModel(
            name="Candidate",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("full_name", models.CharField(max_length=255)),
                ("email", models.EmailField(db_index=True, max_length=255)),
                ("email_secondary", models.CharField(blank=True, default="", max_length=255)),
                ("phone", models.CharField(blank=True, default="", max_length=50)),
                ("city", models.CharField(blank=True, default="", max_length=255)),
                ("birth_date", models.CharField(blank=True, default="", max_length=50)),
                ("age", models.CharField(blank=True, default="", max_length=20)),
                ("marital_status", models.CharField(blank=True, default="", max_length=100)),
                ("children_count", models.CharField(blank=True, default="", max_length=20)),
                ("photo_url", models.TextField(blank=True, default="")),
                ("has_license", models.CharField(blank=True, default="", max_length=50)),
                ("education", models.TextField(blank=True, default="")),
                ("schooling_level", models.CharField(blank=True, default="", max_length=255)),
                ("institution", models.CharField(blank=True, default="", max_length=255)),
                ("graduation_date", models.CharField(blank=True, default="", max_length=50)),
                ("is_studying", models.CharField(blank=True, default="", max_length=50)),
                ("experience", models.TextField(blank=True, default="")),
                ("courses", models.TextField(blank=True, default="")),
                ("certifications", models.TextField(blank=True, default="")),
                ("interest_areas", models.TextField(blank=True, default="")),
                ("cv_url", models.TextField(blank=True, default="")),
                ("portfolio_url", models.TextField(blank=True, default="")),
                ("source", models.CharField(blank=True, default="", max_length=255)),
                ("referral", models.CharField(blank=True, default="", max_length=255)),
                ("salary_expectation", models.CharField(blank=True, default="", max_length=255)),
                ("can_relocate", models.CharField(blank=True, default="", max_length=50)),
                ("references", models.TextField(blank=True, default="")),
                ("type_of_app", models.CharField(blank=True, default="", max_length=255)),
                ("free_field", models.TextField(blank=True, default="")),
                ("original_timestamp", models.CharField(blank=True, default="", max_length=100)),
                ("external_id", models.CharField(blank=True, default="", max_length=100)),
                ("status", models.CharField(
                    choices=[
                        ("Inscrito", "Inscrito"),
                        ("Considerado", "Considerado"),
                        ("Entrevista I", "Entrevista I"),
                        ("Testes", "Testes"),
                        ("Entrevista II", "Entrevista II"),
                        ("Seleção", "Seleção"),
                        ("Contratado", "Contratado"),
                        ("Reprovado", "Reprovado"),
                        ("Desistiu da vaga", "Desistiu da vaga"),
                    ],
                    default="Inscrito",
                    max_length=50,
                )),
                ("origin", models.CharField(blank=True, default="", max_length=50)),
                ("imported", models.BooleanField(default=False)),
                ("import_tag", models.CharField(blank=True, db_index=True, default="", max_length=255)),
                ("import_date", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("deleted_at", models.DateTimeField(blank=True, null=True)),
                ("import_batch", models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="candidates",
                    to="candidates.importbatch",
                )),
            ],
            options={
                "ordering": ("-created_at",),
            },
        ),
    ]
