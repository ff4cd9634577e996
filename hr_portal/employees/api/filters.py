import django_filters

from hr_portal.employees.models import Employee


class EmployeeFilter(django_filters.FilterSet):
    gender = django_filters.ChoiceFilter(choices=Employee.Gender.choices)
    position = django_filters.ChoiceFilter(choices=Employee.Position.choices)
    status = django_filters.ChoiceFilter(choices=Employee.Status.choices)
    department = django_filters.NumberFilter(field_name="department__id")

    class Meta:
        model = Employee
        fields = ["gender", "position", "status", "department"]
