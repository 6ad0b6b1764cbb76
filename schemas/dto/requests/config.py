"""
Per-request transport configuration.

RequestConfig is a plain mapping of httpx request options (headers, params,
timeout, auth, cookies, follow_redirects, extensions).
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

RequestConfig = dict[str, Any]


def merge_config(
    default: Mapping[str, Any], override: Optional[Mapping[str, Any]]
) -> RequestConfig:
    """Overlay a per-call config on the default one.

    Per-call keys replace default keys, except headers, which are merged
    name by name with the per-call value winning. Neither input is mutated.
    """
    merged: RequestConfig = dict(default)
    if not override:
        return merged

    for key, value in override.items():
        if key == "headers" and isinstance(merged.get("headers"), Mapping):
            merged["headers"] = {**merged["headers"], **(value or {})}
        else:
            merged[key] = value
    return merged
