"""
FastAPI dependencies shared by the admin endpoints.
"""

from typing import Optional

from fastapi import Query


def get_active_filter(
    is_active: Optional[str] = Query(None, description="active, inactive, true or false")
) -> Optional[bool]:
    """
    Map ?is_active=active|inactive|true|false to a bool.

    Any other value (or none) means "no filter" rather than a validation error,
    matching how the admin UI sends its dropdown values.
    """
    if not is_active:
        return None
    normalized = is_active.strip().lower()
    if normalized in ("active", "true"):
        return True
    if normalized in ("inactive", "false"):
        return False
    return None
