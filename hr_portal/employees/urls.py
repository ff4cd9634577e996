from django.urls import path

from .views import employee_create_view

app_name = "employees"
urlpatterns = [
    path("new/", view=employee_create_view, name="create"),
]
