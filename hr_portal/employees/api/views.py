"""Views for Employees API."""

import logging

from django.db import DatabaseError
from django.db import transaction
from django.utils.cache import add_never_cache_headers
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import OpenApiExample
from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import extend_schema_view
from rest_framework import mixins
from rest_framework import status
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import APIException
from rest_framework.filters import SearchFilter
from rest_framework.parsers import FormParser
from rest_framework.parsers import JSONParser
from rest_framework.parsers import MultiPartParser
from rest_framework.response import Response

from hr_portal.employees.codes import next_employee_code
from hr_portal.employees.models import Employee
from hr_portal.employees.services import EmployeeCodeConflict

from .filters import EmployeeFilter
from .permissions import IsEmployeeWriterOrReadOnly
from .serializers import EmployeeCreateSerializer
from .serializers import EmployeeReadSerializer
from .serializers import NextCodeSerializer

logger = logging.getLogger(__name__)

UPLOAD_FIELDS = ("profileImage", "identityCardFront", "identityCardBack", "contractFile")


class EmployeeCodeUnavailable(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Could not allocate an employee code, please retry."
    default_code = "employee_code_conflict"


class NextCodeUnavailable(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Could not generate the next employee code"
    default_code = "next_code_unavailable"


def _log_file_upload(request):
    """Log which form fields and attachments arrived, never their content."""
    logger.info("Create Request Data Keys: %s", sorted(request.data.keys()))
    for field in UPLOAD_FIELDS:
        upload = request.FILES.get(field)
        if upload is not None:
            logger.info("%s received: %s, size: %s", field, upload.name, upload.size)


@extend_schema_view(
    list=extend_schema(tags=["Employees"]),
    retrieve=extend_schema(tags=["Employees"]),
)
class EmployeeViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    queryset = Employee.objects.all().select_related("department")
    serializer_class = EmployeeReadSerializer
    permission_classes = [IsEmployeeWriterOrReadOnly]
    parser_classes = (JSONParser, MultiPartParser, FormParser)
    filter_backends = [DjangoFilterBackend, SearchFilter]
    filterset_class = EmployeeFilter
    search_fields = ["name", "code", "identity_card", "email", "phone"]

    def get_serializer_class(self):
        if getattr(self, "action", None) == "create":
            return EmployeeCreateSerializer
        return EmployeeReadSerializer

    @extend_schema(
        tags=["Employees"],
        request=EmployeeCreateSerializer,
        responses={201: EmployeeReadSerializer},
        examples=[
            OpenApiExample(
                name="Create",
                value={
                    "name": "Nguyen Van An",
                    "identityCard": "012345678901",
                    "gender": "male",
                    "dateOfBirth": "1992-04-18",
                    "email": "an.nguyen@example.com",
                    "phone": "0912345678",
                    "address": "12 Le Loi, District 1, Ho Chi Minh City",
                    "departmentId": 1,
                    "position": "employee",
                    "contractStartDate": "2025-01-01",
                    "contractEndDate": "2026-01-01",
                    "basicSalary": "12000000.00",
                    "performanceSalary": "2000000.00",
                    "productSalary": "1500000.00",
                    "bankAccount": "0071000123456",
                    "bankName": "Vietcombank",
                    "taxCode": "8301234567",
                    "insuranceNumber": "7912345678",
                    "profileImage": "<binary>",
                    "contractFile": "<binary>",
                },
                request_only=True,
            )
        ],
    )
    def create(self, request, *args, **kwargs):
        _log_file_upload(request)

        ser = EmployeeCreateSerializer(data=request.data, context={"request": request})
        ser.is_valid(raise_exception=True)
        try:
            with transaction.atomic():
                emp = ser.save()
        except EmployeeCodeConflict as exc:
            logger.exception("Employee code allocation failed")
            raise EmployeeCodeUnavailable from exc

        read = EmployeeReadSerializer(emp, context={"request": request})
        return Response(read.data, status=status.HTTP_201_CREATED)

    @extend_schema(tags=["Employees"], responses={200: NextCodeSerializer})
    @action(detail=False, methods=["get"], url_path="next-code")
    def next_code(self, request):
        """Preview the code the next created employee will receive."""
        try:
            code = next_employee_code()
        except DatabaseError as exc:
            logger.exception("Could not compute the next employee code")
            raise NextCodeUnavailable from exc
        response = Response({"code": code})
        # Recomputed on every request
        add_never_cache_headers(response)
        return response
