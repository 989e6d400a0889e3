from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.db.models import CharField
from django.db.models import EmailField
from django.utils.translation import gettext_lazy as _


class User(AbstractUser):
    """
    Default custom user model for timepay.
    Payroll runs record which user created and approved them.
    """

    # First and last name do not cover name patterns around the globe
    name = CharField(_("Full Name"), blank=True, max_length=255)
    email = EmailField(_("email address"), unique=True)

    def save(self, *args, **kwargs):
        if not self.name:
            self.name = f"{self.first_name} {self.last_name}".strip()
        super().save(*args, **kwargs)

    def has_payroll_override(self) -> bool:
        """Return True when this user may approve a run they created."""
        if self.is_superuser:
            return True
        return self.groups.filter(name=settings.PAYROLL_OVERRIDE_ROLE).exists()
