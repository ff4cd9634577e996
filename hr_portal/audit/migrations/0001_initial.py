import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="AuditLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("action", models.CharField(choices=[("employee_created", "Employee created")], max_length=100, verbose_name="Action")),
                ("message", models.TextField(blank=True, verbose_name="Message")),
                ("model_name", models.CharField(blank=True, max_length=150, verbose_name="Model")),
                ("record_id", models.BigIntegerField(blank=True, null=True, verbose_name="Record id")),
                ("after", models.JSONField(blank=True, null=True, verbose_name="Snapshot")),
                ("ip_address", models.CharField(blank=True, max_length=64, verbose_name="IP address")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("actor", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="audit_entries", to=settings.AUTH_USER_MODEL, verbose_name="Actor")),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["model_name", "record_id"], name="audit_target_idx")],
            },
        ),
    ]
