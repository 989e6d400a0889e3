"""OpenAPI schema hooks for drf-spectacular."""

from __future__ import annotations

from typing import Any

CURATED_TAG_MARK = "•"

PATTERN_TAGS = [
    ("/api/v1/schema/", "Meta"),
    ("/api/v1/attendance/", "Attendance"),
    ("/api/v1/payroll/", "Payroll"),
]


def tag_by_path(result: dict[str, Any], generator, request, public) -> dict[str, Any]:
    """Replace auto-generated tags with a feature tag chosen by path prefix.

    Operations whose view already declares a curated "Area • Topic" tag are
    left alone.
    """
    for path, operations in result.get("paths", {}).items():
        tag = next((name for prefix, name in PATTERN_TAGS if path.startswith(prefix)), None)
        if tag is None:
            continue
        for op in operations.values():
            if any(CURATED_TAG_MARK in t for t in op.get("tags", [])):
                continue
            op["tags"] = [tag]
    return result
