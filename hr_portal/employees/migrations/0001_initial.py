import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import hr_portal.employees.models
import hr_portal.employees.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("org", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Employee",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(max_length=20, unique=True, verbose_name="Employee code")),
                ("name", models.CharField(max_length=255, verbose_name="Full name")),
                ("identity_card", models.CharField(max_length=12, unique=True, validators=[hr_portal.employees.validators.validate_identity_card], verbose_name="Identity card number")),
                ("gender", models.CharField(choices=[("male", "Male"), ("female", "Female"), ("other", "Other")], max_length=10, verbose_name="Gender")),
                ("date_of_birth", models.DateField(blank=True, null=True, validators=[hr_portal.employees.validators.validate_not_in_future], verbose_name="Date of birth")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="Email")),
                ("phone", models.CharField(blank=True, max_length=10, validators=[hr_portal.employees.validators.validate_phone], verbose_name="Phone number")),
                ("address", models.CharField(blank=True, max_length=255, verbose_name="Address")),
                ("position", models.CharField(blank=True, choices=[("employee", "Employee"), ("manager", "Manager")], max_length=20, verbose_name="Position")),
                ("status", models.CharField(choices=[("active", "Active"), ("inactive", "Inactive")], default="active", max_length=20, verbose_name="Status")),
                ("contract_start_date", models.DateField(blank=True, null=True, verbose_name="Contract start date")),
                ("contract_end_date", models.DateField(blank=True, null=True, verbose_name="Contract end date")),
                ("basic_salary", models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True, validators=[django.core.validators.MinValueValidator(0)], verbose_name="Basic salary")),
                ("performance_salary", models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True, validators=[django.core.validators.MinValueValidator(0)], verbose_name="Performance salary")),
                ("product_salary", models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True, validators=[django.core.validators.MinValueValidator(0)], verbose_name="Product salary")),
                ("bank_account", models.CharField(blank=True, max_length=50, verbose_name="Bank account number")),
                ("bank_name", models.CharField(blank=True, max_length=150, verbose_name="Bank name")),
                ("tax_code", models.CharField(blank=True, max_length=20, verbose_name="Tax code")),
                ("insurance_number", models.CharField(blank=True, max_length=20, verbose_name="Social insurance number")),
                ("notes", models.TextField(blank=True, verbose_name="Notes")),
                ("profile_image", models.ImageField(blank=True, upload_to=hr_portal.employees.models.employee_photo_upload_to, validators=[hr_portal.employees.validators.validate_jpeg_upload], verbose_name="Portrait photo")),
                ("identity_card_front", models.ImageField(blank=True, upload_to=hr_portal.employees.models.employee_identity_upload_to, validators=[hr_portal.employees.validators.validate_jpeg_upload], verbose_name="Identity card (front)")),
                ("identity_card_back", models.ImageField(blank=True, upload_to=hr_portal.employees.models.employee_identity_upload_to, validators=[hr_portal.employees.validators.validate_jpeg_upload], verbose_name="Identity card (back)")),
                ("contract_file", models.FileField(blank=True, upload_to=hr_portal.employees.models.employee_contract_upload_to, validators=[hr_portal.employees.validators.validate_pdf_upload], verbose_name="Contract file")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="created_employees", to=settings.AUTH_USER_MODEL)),
                ("department", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="employees", to="org.department", verbose_name="Department")),
            ],
            options={"ordering": ["code"]},
        ),
    ]
