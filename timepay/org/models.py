from django.db import models
from django.utils.translation import gettext_lazy as _


class OrganizationPolicy(models.Model):
    """Organization-wide policy document.

    Stores overrides for the default policy document (overtime multipliers,
    weekly off days, statutory rates, tax brackets). Missing keys fall back to
    `timepay.policies.defaults`.
    """

    org_id = models.PositiveIntegerField(unique=True, default=1)
    document = models.JSONField(
        default=dict,
        blank=True,
        help_text=_("Partial policy document deep-merged over the defaults"),
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["org_id"]
        verbose_name = "Organization Policy"
        verbose_name_plural = "Organization Policies"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"OrgPolicy(org_id={self.org_id})"
