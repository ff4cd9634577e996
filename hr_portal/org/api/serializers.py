from rest_framework import serializers

from hr_portal.org.models import Department


class DepartmentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Department
        fields = ["id", "name", "description", "is_active"]
        read_only_fields = ["id"]
