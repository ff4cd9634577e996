from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from hr_portal.employees.validators import validate_contract_period
from hr_portal.employees.validators import validate_identity_card
from hr_portal.employees.validators import validate_jpeg_upload
from hr_portal.employees.validators import validate_not_in_future
from hr_portal.employees.validators import validate_pdf_upload
from hr_portal.employees.validators import validate_phone


def employee_photo_upload_to(instance, filename):  # pragma: no cover - trivial
    return f"employees/{instance.code}/photos/{filename}"


def employee_identity_upload_to(instance, filename):  # pragma: no cover - trivial
    return f"employees/{instance.code}/identity/{filename}"


def employee_contract_upload_to(instance, filename):  # pragma: no cover - trivial
    return f"employees/{instance.code}/contracts/{filename}"


class Employee(models.Model):
    class Gender(models.TextChoices):
        MALE = "male", _("Male")
        FEMALE = "female", _("Female")
        OTHER = "other", _("Other")

    class Position(models.TextChoices):
        EMPLOYEE = "employee", _("Employee")
        MANAGER = "manager", _("Manager")

    class Status(models.TextChoices):
        ACTIVE = "active", _("Active")
        INACTIVE = "inactive", _("Inactive")

    # Assigned by services.register_employee, never by the client
    code = models.CharField(_("Employee code"), max_length=20, unique=True)

    # Basic information
    name = models.CharField(_("Full name"), max_length=255)
    identity_card = models.CharField(
        _("Identity card number"),
        max_length=12,
        unique=True,
        validators=[validate_identity_card],
    )
    gender = models.CharField(_("Gender"), max_length=10, choices=Gender.choices)
    date_of_birth = models.DateField(
        _("Date of birth"),
        null=True,
        blank=True,
        validators=[validate_not_in_future],
    )
    email = models.EmailField(_("Email"), blank=True)
    phone = models.CharField(
        _("Phone number"), max_length=10, blank=True, validators=[validate_phone]
    )
    address = models.CharField(_("Address"), max_length=255, blank=True)

    # Employment
    department = models.ForeignKey(
        "org.Department",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="employees",
        verbose_name=_("Department"),
    )
    position = models.CharField(
        _("Position"), max_length=20, choices=Position.choices, blank=True
    )
    status = models.CharField(
        _("Status"), max_length=20, choices=Status.choices, default=Status.ACTIVE
    )
    contract_start_date = models.DateField(
        _("Contract start date"), null=True, blank=True
    )
    contract_end_date = models.DateField(_("Contract end date"), null=True, blank=True)

    # Compensation
    basic_salary = models.DecimalField(
        _("Basic salary"),
        max_digits=14,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
    )
    performance_salary = models.DecimalField(
        _("Performance salary"),
        max_digits=14,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
    )
    product_salary = models.DecimalField(
        _("Product salary"),
        max_digits=14,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
    )

    # Financial
    bank_account = models.CharField(_("Bank account number"), max_length=50, blank=True)
    bank_name = models.CharField(_("Bank name"), max_length=150, blank=True)
    tax_code = models.CharField(_("Tax code"), max_length=20, blank=True)
    insurance_number = models.CharField(
        _("Social insurance number"), max_length=20, blank=True
    )
    notes = models.TextField(_("Notes"), blank=True)

    # Personal documents
    profile_image = models.ImageField(
        _("Portrait photo"),
        upload_to=employee_photo_upload_to,
        blank=True,
        validators=[validate_jpeg_upload],
    )
    identity_card_front = models.ImageField(
        _("Identity card (front)"),
        upload_to=employee_identity_upload_to,
        blank=True,
        validators=[validate_jpeg_upload],
    )
    identity_card_back = models.ImageField(
        _("Identity card (back)"),
        upload_to=employee_identity_upload_to,
        blank=True,
        validators=[validate_jpeg_upload],
    )
    contract_file = models.FileField(
        _("Contract file"),
        upload_to=employee_contract_upload_to,
        blank=True,
        validators=[validate_pdf_upload],
    )

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_employees",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["code"]

    def __str__(self):  # pragma: no cover - trivial
        return f"Employee({self.code}: {self.name})"

    def clean(self):
        super().clean()
        validate_contract_period(self.contract_start_date, self.contract_end_date)
