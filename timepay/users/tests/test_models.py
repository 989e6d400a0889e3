import pytest
from django.contrib.auth.models import Group

from timepay.users.models import User


@pytest.mark.django_db
def test_name_defaults_to_first_and_last_name():
    user = User.objects.create_user(
        username="ana", email="ana@example.com", first_name="Ana", last_name="Reyes"
    )
    assert user.name == "Ana Reyes"


@pytest.mark.django_db
def test_payroll_override_role(settings):
    settings.PAYROLL_OVERRIDE_ROLE = "Finance Controller"
    user = User.objects.create_user(username="fc", email="fc@example.com")
    assert not user.has_payroll_override()

    user.groups.add(Group.objects.create(name="Finance Controller"))
    assert user.has_payroll_override()


@pytest.mark.django_db
def test_superuser_always_overrides():
    admin = User.objects.create_superuser(
        username="root", email="root@example.com", password="x-1"
    )
    assert admin.has_payroll_override()
