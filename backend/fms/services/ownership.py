"""Ownership filter: may this principal see this record?"""

from __future__ import annotations


def owns(principal_login: str | None, record_owner: str | None) -> bool:
    """
    True iff both values are present and exactly equal (case-sensitive).

    A missing principal never owns anything; callers surface that as
    "not found", not as an authentication failure.
    """
    if not principal_login or not record_owner:
        return False
    return principal_login == record_owner
