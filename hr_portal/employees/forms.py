from django import forms
from django.utils.translation import gettext_lazy as _

from hr_portal.employees.models import Employee
from hr_portal.org.models import Department

BASIC_FIELDS = (
    "name",
    "identity_card",
    "gender",
    "date_of_birth",
    "email",
    "phone",
    "address",
)
EMPLOYMENT_FIELDS = (
    "department",
    "position",
    "contract_start_date",
    "contract_end_date",
)
DOCUMENT_FIELDS = (
    "profile_image",
    "identity_card_front",
    "identity_card_back",
    "contract_file",
)
FINANCIAL_FIELDS = (
    "basic_salary",
    "performance_salary",
    "product_salary",
    "bank_account",
    "bank_name",
    "tax_code",
    "insurance_number",
    "notes",
)

FORM_SECTIONS = (
    (_("Basic information"), BASIC_FIELDS),
    (_("Employment"), EMPLOYMENT_FIELDS),
    (_("Personal documents"), DOCUMENT_FIELDS),
    (_("Financial information"), FINANCIAL_FIELDS),
)

JPEG_ACCEPT = ".jpg,.jpeg"
PDF_ACCEPT = "application/pdf"


class DateInput(forms.DateInput):
    input_type = "date"

    def __init__(self, attrs=None):
        super().__init__(attrs=attrs, format="%Y-%m-%d")


class EmployeeCreateForm(forms.ModelForm):
    """Data-entry form for a new employee.

    The employee code is not a field: it is shown as a preview and assigned
    on save by ``services.register_employee``.
    """

    department = forms.ModelChoiceField(
        queryset=Department.objects.filter(is_active=True),
        required=False,
        empty_label=_("Select a department"),
        label=_("Department"),
    )

    class Meta:
        model = Employee
        fields = [*BASIC_FIELDS, *EMPLOYMENT_FIELDS, *DOCUMENT_FIELDS, *FINANCIAL_FIELDS]
        widgets = {
            "date_of_birth": DateInput(),
            "contract_start_date": DateInput(),
            "contract_end_date": DateInput(),
            "phone": forms.TextInput(attrs={"maxlength": 10, "inputmode": "tel"}),
            "profile_image": forms.ClearableFileInput(attrs={"accept": JPEG_ACCEPT}),
            "identity_card_front": forms.ClearableFileInput(
                attrs={"accept": JPEG_ACCEPT}
            ),
            "identity_card_back": forms.ClearableFileInput(
                attrs={"accept": JPEG_ACCEPT}
            ),
            "contract_file": forms.ClearableFileInput(attrs={"accept": PDF_ACCEPT}),
            "notes": forms.Textarea(attrs={"rows": 3}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["gender"].choices = [
            ("", _("Select gender")),
            *Employee.Gender.choices,
        ]
        self.fields["position"].choices = [
            ("", _("Select position")),
            *Employee.Position.choices,
        ]

    def clean_name(self):
        name = (self.cleaned_data.get("name") or "").strip()
        if not name:
            raise forms.ValidationError(_("Full name is required."))
        return name

    def clean_identity_card(self):
        return (self.cleaned_data.get("identity_card") or "").strip()

    def sections(self):
        """Yield ``(title, [bound fields])`` in display order."""
        for title, names in FORM_SECTIONS:
            yield title, [self[name] for name in names]
