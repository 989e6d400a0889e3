from __future__ import annotations

from django.conf import settings

from .service import get_policy_document
from .structures import PayrollPolicy


def get_payroll_policy(org_id: int | None = None) -> PayrollPolicy:
    """Build the payroll policy for an organization.

    Source of truth is the policy document (defaults merged with the stored
    `OrganizationPolicy` row). Without an explicit org the `PAYROLL_ORG_ID`
    setting applies.
    """

    if org_id is None:
        org_id = int(getattr(settings, "PAYROLL_ORG_ID", 1))
    return PayrollPolicy.from_document(get_policy_document(org_id=org_id))
