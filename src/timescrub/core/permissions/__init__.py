"""Role and tenant access control.

The guard predicates live in ``timescrub.core.permissions.guard``.
"""

from timescrub.core.permissions.roles import Role


__all__ = ["Role"]
