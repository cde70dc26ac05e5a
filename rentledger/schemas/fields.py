from typing import Any


def blank_to_none(v: Any) -> Any:
    """Optional text: an empty or whitespace-only string means "not set"."""
    if isinstance(v, str) and not v.strip():
        return None
    return v
