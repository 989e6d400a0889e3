"""Permission classes for attendance and payroll endpoints."""

from collections.abc import Iterable

from django.conf import settings
from rest_framework.permissions import BasePermission

ROLE_PAYROLL = "Payroll"


def _user_in_groups(user, names: Iterable[str]) -> bool:
    groups = getattr(user, "groups", None)
    names_list = list(names)
    if not groups or not names_list:
        return False
    return groups.filter(name__in=names_list).exists()


class IsAdminOrPayrollOnly(BasePermission):
    """Staff, the Payroll group and the payroll override group."""

    def has_permission(self, request, view) -> bool:
        user = getattr(request, "user", None)
        if not (user and getattr(user, "is_authenticated", False)):
            return False
        if getattr(user, "is_staff", False):
            return True
        return _user_in_groups(user, [ROLE_PAYROLL, settings.PAYROLL_OVERRIDE_ROLE])
