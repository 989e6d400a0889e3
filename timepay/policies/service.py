"""Loads an organization's policy document.

The stored `OrganizationPolicy.document` only holds overrides; every lookup
starts from the defaults and overlays those overrides section by section.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from timepay.org.models import OrganizationPolicy
from timepay.policies.defaults import get_default_policy_document

logger = logging.getLogger(__name__)


def merge_policy(defaults: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Overlay `overrides` on `defaults` without modifying either.

    Nested sections merge key by key; any other value (including lists such
    as tax brackets) replaces the default outright.
    """

    merged = dict(defaults)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_policy(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def get_policy_document(org_id: int = 1) -> dict[str, Any]:
    stored = (
        OrganizationPolicy.objects.filter(org_id=org_id)
        .values_list("document", flat=True)
        .first()
    )
    document = get_default_policy_document()
    if not isinstance(stored, dict) or not stored:
        return document
    logger.debug("Applying stored policy overrides for org %s", org_id)
    return merge_policy(document, stored)
