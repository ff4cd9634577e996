"""Serializers for Employees API.

Field names follow the wire format of the employee form (camelCase); each
maps onto the snake_case model attribute through ``source``.
"""

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers
from rest_framework.validators import UniqueValidator

from hr_portal.audit.utils import client_ip
from hr_portal.employees.models import Employee
from hr_portal.employees.services import register_employee
from hr_portal.employees.validators import validate_contract_period
from hr_portal.employees.validators import validate_identity_card
from hr_portal.employees.validators import validate_jpeg_upload
from hr_portal.employees.validators import validate_not_in_future
from hr_portal.employees.validators import validate_pdf_upload
from hr_portal.employees.validators import validate_phone
from hr_portal.org.models import Department

from .fields import BlankAsNullDecimalField
from .fields import BlankAsNullPrimaryKeyRelatedField
from .fields import LooseDateField

SALARY_KWARGS = {
    "max_digits": 14,
    "decimal_places": 2,
    "min_value": 0,
    "required": False,
    "allow_null": True,
}


class EmployeeCreateSerializer(serializers.Serializer):
    # Basic information
    name = serializers.CharField(max_length=255)
    identityCard = serializers.CharField(  # noqa: N815
        source="identity_card",
        max_length=12,
        validators=[
            validate_identity_card,
            UniqueValidator(
                queryset=Employee.objects.all(),
                message="An employee with this identity card number already exists.",
            ),
        ],
    )
    gender = serializers.ChoiceField(choices=Employee.Gender.choices)
    dateOfBirth = LooseDateField(  # noqa: N815
        source="date_of_birth",
        required=False,
        allow_null=True,
        validators=[validate_not_in_future],
    )
    email = serializers.EmailField(required=False, allow_blank=True)
    phone = serializers.CharField(
        required=False, allow_blank=True, max_length=10, validators=[validate_phone]
    )
    address = serializers.CharField(required=False, allow_blank=True, max_length=255)

    # Employment
    departmentId = BlankAsNullPrimaryKeyRelatedField(  # noqa: N815
        source="department",
        queryset=Department.objects.filter(is_active=True),
        required=False,
        allow_null=True,
    )
    position = serializers.ChoiceField(
        choices=Employee.Position.choices, required=False, allow_blank=True
    )
    status = serializers.ChoiceField(
        choices=Employee.Status.choices, default=Employee.Status.ACTIVE
    )
    contractStartDate = LooseDateField(  # noqa: N815
        source="contract_start_date", required=False, allow_null=True
    )
    contractEndDate = LooseDateField(  # noqa: N815
        source="contract_end_date", required=False, allow_null=True
    )

    # Compensation
    basicSalary = BlankAsNullDecimalField(source="basic_salary", **SALARY_KWARGS)  # noqa: N815
    performanceSalary = BlankAsNullDecimalField(  # noqa: N815
        source="performance_salary", **SALARY_KWARGS
    )
    productSalary = BlankAsNullDecimalField(source="product_salary", **SALARY_KWARGS)  # noqa: N815

    # Financial
    bankAccount = serializers.CharField(  # noqa: N815
        source="bank_account", required=False, allow_blank=True, max_length=50
    )
    bankName = serializers.CharField(  # noqa: N815
        source="bank_name", required=False, allow_blank=True, max_length=150
    )
    taxCode = serializers.CharField(  # noqa: N815
        source="tax_code", required=False, allow_blank=True, max_length=20
    )
    insuranceNumber = serializers.CharField(  # noqa: N815
        source="insurance_number", required=False, allow_blank=True, max_length=20
    )
    notes = serializers.CharField(required=False, allow_blank=True)

    # Personal documents
    profileImage = serializers.ImageField(  # noqa: N815
        source="profile_image",
        required=False,
        allow_null=True,
        validators=[validate_jpeg_upload],
        help_text="JPEG only (.jpg, .jpeg). Max 5MB",
    )
    identityCardFront = serializers.ImageField(  # noqa: N815
        source="identity_card_front",
        required=False,
        allow_null=True,
        validators=[validate_jpeg_upload],
        help_text="JPEG only (.jpg, .jpeg). Max 5MB",
    )
    identityCardBack = serializers.ImageField(  # noqa: N815
        source="identity_card_back",
        required=False,
        allow_null=True,
        validators=[validate_jpeg_upload],
        help_text="JPEG only (.jpg, .jpeg). Max 5MB",
    )
    contractFile = serializers.FileField(  # noqa: N815
        source="contract_file",
        required=False,
        allow_null=True,
        validators=[validate_pdf_upload],
        help_text="PDF only. Max 15MB",
    )

    def validate(self, attrs):
        try:
            validate_contract_period(
                attrs.get("contract_start_date"), attrs.get("contract_end_date")
            )
        except DjangoValidationError as exc:
            raise serializers.ValidationError(
                {"contractEndDate": exc.message_dict["contract_end_date"]}
            ) from exc
        return attrs

    def create(self, validated_data):
        request = self.context.get("request")
        employee = Employee(**validated_data)
        return register_employee(
            employee,
            actor=getattr(request, "user", None),
            ip_address=client_ip(request),
        )


class EmployeeReadSerializer(serializers.ModelSerializer):
    identityCard = serializers.CharField(source="identity_card", read_only=True)  # noqa: N815
    dateOfBirth = serializers.DateField(source="date_of_birth", read_only=True)  # noqa: N815
    departmentId = serializers.PrimaryKeyRelatedField(  # noqa: N815
        source="department", read_only=True
    )
    departmentName = serializers.SerializerMethodField()  # noqa: N815
    contractStartDate = serializers.DateField(  # noqa: N815
        source="contract_start_date", read_only=True
    )
    contractEndDate = serializers.DateField(  # noqa: N815
        source="contract_end_date", read_only=True
    )
    basicSalary = serializers.DecimalField(  # noqa: N815
        source="basic_salary", max_digits=14, decimal_places=2, read_only=True
    )
    performanceSalary = serializers.DecimalField(  # noqa: N815
        source="performance_salary", max_digits=14, decimal_places=2, read_only=True
    )
    productSalary = serializers.DecimalField(  # noqa: N815
        source="product_salary", max_digits=14, decimal_places=2, read_only=True
    )
    bankAccount = serializers.CharField(source="bank_account", read_only=True)  # noqa: N815
    bankName = serializers.CharField(source="bank_name", read_only=True)  # noqa: N815
    taxCode = serializers.CharField(source="tax_code", read_only=True)  # noqa: N815
    insuranceNumber = serializers.CharField(  # noqa: N815
        source="insurance_number", read_only=True
    )
    profileImage = serializers.ImageField(source="profile_image", read_only=True)  # noqa: N815
    identityCardFront = serializers.ImageField(  # noqa: N815
        source="identity_card_front", read_only=True
    )
    identityCardBack = serializers.ImageField(  # noqa: N815
        source="identity_card_back", read_only=True
    )
    contractFile = serializers.FileField(source="contract_file", read_only=True)  # noqa: N815
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)  # noqa: N815

    class Meta:
        model = Employee
        fields = [
            "id",
            "code",
            "name",
            "identityCard",
            "gender",
            "dateOfBirth",
            "email",
            "phone",
            "address",
            "departmentId",
            "departmentName",
            "position",
            "status",
            "contractStartDate",
            "contractEndDate",
            "basicSalary",
            "performanceSalary",
            "productSalary",
            "bankAccount",
            "bankName",
            "taxCode",
            "insuranceNumber",
            "notes",
            "profileImage",
            "identityCardFront",
            "identityCardBack",
            "contractFile",
            "createdAt",
        ]

    def get_departmentName(self, obj) -> str | None:  # noqa: N802
        return obj.department.name if obj.department else None


class NextCodeSerializer(serializers.Serializer):
    code = serializers.CharField(read_only=True)
