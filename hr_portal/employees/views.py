import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.contrib.auth.mixins import UserPassesTestMixin
from django.db import DatabaseError
from django.db import transaction
from django.http import HttpResponseRedirect
from django.urls import reverse
from django.utils.translation import gettext_lazy as _
from django.views.generic import FormView

from hr_portal.audit.utils import client_ip
from hr_portal.employees.api.permissions import can_register_employees
from hr_portal.employees.codes import next_employee_code
from hr_portal.employees.forms import EmployeeCreateForm
from hr_portal.employees.services import EmployeeCodeConflict
from hr_portal.employees.services import register_employee

logger = logging.getLogger(__name__)


class EmployeeCreateView(LoginRequiredMixin, UserPassesTestMixin, FormView):
    form_class = EmployeeCreateForm
    template_name = "employees/employee_form.html"

    def test_func(self):
        return can_register_employees(self.request.user)

    def get_success_url(self):
        return reverse("employees:create")

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        try:
            context["next_code"] = next_employee_code()
        except DatabaseError:
            logger.exception("Could not compute the next employee code")
            context["next_code"] = None
        return context

    def form_valid(self, form):
        employee = form.save(commit=False)
        try:
            with transaction.atomic():
                register_employee(
                    employee,
                    actor=self.request.user,
                    ip_address=client_ip(self.request),
                )
        except EmployeeCodeConflict:
            logger.exception("Employee code allocation failed")
            form.add_error(None, _("Could not create the employee, please retry."))
            return self.form_invalid(form)
        messages.success(
            self.request,
            _("Employee %(code)s (%(name)s) has been added.")
            % {"code": employee.code, "name": employee.name},
        )
        # Redirect to a fresh, empty form
        return HttpResponseRedirect(self.get_success_url())

    def form_invalid(self, form):
        logger.info(
            "Employee form rejected: fields=%s files=%s errors=%s",
            sorted(self.request.POST.keys()),
            sorted(self.request.FILES.keys()),
            sorted(form.errors.keys()),
        )
        messages.error(self.request, _("Please correct the errors below."))
        return super().form_invalid(form)


employee_create_view = EmployeeCreateView.as_view()
