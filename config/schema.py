"""drf-spectacular post-processing hook that groups operations by feature.

Without it every ViewSet contributes its own auto-generated tag, and the
``/api/`` compatibility prefix duplicates them in the Swagger sidebar.
"""

from __future__ import annotations

from typing import Any

_HTTP_METHODS = {"get", "post", "put", "patch", "delete", "options", "head"}

# (path prefix, tag name, tag description); first match wins
TAG_GROUPS = [
    ("/api/v1/employees", "Employees", "Employee records and the next-code lookup"),
    ("/api/v1/departments", "Departments", "Departments offered on the employee form"),
    ("/api/v1/auth/jwt", "JWT Authentication", "Obtain and refresh bearer tokens"),
]


def tag_for_path(path: str) -> str | None:
    return next((tag for prefix, tag, _ in TAG_GROUPS if path.startswith(prefix)), None)


def group_tags(result: dict[str, Any], **kwargs: Any) -> dict[str, Any]:
    for path, path_item in result.get("paths", {}).items():
        tag = tag_for_path(path)
        if tag is None:
            continue
        for method, operation in path_item.items():
            if method.lower() in _HTTP_METHODS and isinstance(operation, dict):
                operation["tags"] = [tag]

    declared = {entry.get("name") for entry in result.get("tags", [])}
    tags = result.setdefault("tags", [])
    tags.extend(
        {"name": name, "description": description}
        for _, name, description in TAG_GROUPS
        if name not in declared
    )
    return result
