from django.contrib import admin

from hr_portal.audit.utils import client_ip
from hr_portal.employees import models
from hr_portal.employees.services import register_employee


@admin.register(models.Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ["id", "code", "name", "department", "position", "status"]
    search_fields = [
        "code",
        "name",
        "identity_card",
        "email",
        "phone",
        "tax_code",
        "insurance_number",
    ]
    list_filter = [
        "status",
        "position",
        "gender",
        "department",
        "contract_start_date",
        "created_at",
    ]
    readonly_fields = ["code", "created_by", "created_at", "updated_at"]

    def save_model(self, request, obj, form, change):
        if change:
            super().save_model(request, obj, form, change)
            return
        # New records get their code the same way as the data-entry form
        register_employee(obj, actor=request.user, ip_address=client_ip(request))
