"""
Admin gate shared by every Warden operation.
"""

from ..errors import PermissionDeniedError
from ..profiles.models import role_of
from ..profiles.store import ProfileStore


async def assert_admin(
    profiles: ProfileStore,
    caller_uid: str,
    admin_role: str = "admin",
) -> None:
    """
    Require the caller's own profile to carry the admin role.

    Reads the profile on every call. A missing profile or role counts as
    the empty role and is denied.

    Raises:
        PermissionDeniedError: If the caller is not an admin
    """
    profile = await profiles.get_profile(caller_uid)
    if role_of(profile) != admin_role:
        raise PermissionDeniedError("Admins only.")
