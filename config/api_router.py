from django.conf import settings
from rest_framework.routers import DefaultRouter
from rest_framework.routers import SimpleRouter

from hr_portal.employees.api.views import EmployeeViewSet
from hr_portal.org.api.views import DepartmentViewSet

router = DefaultRouter() if settings.DEBUG else SimpleRouter()

router.register("departments", DepartmentViewSet)
router.register("employees", EmployeeViewSet, basename="employees")


app_name = "api"
urlpatterns = router.urls
