from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import extend_schema_view
from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated

from hr_portal.employees.api.permissions import IsAdminOrHRCanWrite
from hr_portal.org.models import Department

from .serializers import DepartmentSerializer


@extend_schema_view(
    list=extend_schema(tags=["Departments"]),
    retrieve=extend_schema(tags=["Departments"]),
    create=extend_schema(tags=["Departments"]),
    update=extend_schema(tags=["Departments"]),
    partial_update=extend_schema(tags=["Departments"]),
)
class DepartmentViewSet(viewsets.ModelViewSet):
    """Departments offered as choices on the employee form.

    Only active departments are listed unless ``?include_inactive=true``.
    """

    queryset = Department.objects.all()
    serializer_class = DepartmentSerializer
    permission_classes = [IsAuthenticated, IsAdminOrHRCanWrite]
    http_method_names = ["get", "post", "put", "patch", "head", "options"]

    def get_queryset(self):
        qs = super().get_queryset()
        flag = (self.request.query_params.get("include_inactive") or "").lower()
        if self.action == "list" and flag not in {"1", "true", "yes"}:
            qs = qs.filter(is_active=True)
        return qs
