"""Standalone policy module.

This package centralizes org-wide policy defaults and helper accessors.
Attendance and payroll code should import policy values from here instead of
embedding constants locally.
"""

from .accessors import get_payroll_policy
from .defaults import get_default_policy_document
from .service import get_policy_document
from .structures import ContributionRule
from .structures import PayrollPolicy
from .structures import TaxBracket

__all__ = [
    "ContributionRule",
    "PayrollPolicy",
    "TaxBracket",
    "get_default_policy_document",
    "get_payroll_policy",
    "get_policy_document",
]
