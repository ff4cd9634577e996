from django.contrib import admin

from hr_portal.audit.models import AuditLog


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ["created_at", "action", "actor", "model_name", "record_id", "ip_address"]
    search_fields = ["message", "model_name", "ip_address", "actor__username"]
    list_filter = ["action", "created_at"]
    list_select_related = ["actor"]
    readonly_fields = [f.name for f in AuditLog._meta.fields]  # noqa: SLF001

    # Entries are written by the application only
    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
