"""
Basic Warden usage example.

Invites a user as an existing admin, prints the credential-setup link, then
deletes the user again.

Requires WARDEN_SUPABASE_URL and WARDEN_SUPABASE_KEY (service role) and the
tables from `warden schema`. The admin's own row in `profiles` must have
role 'admin'.

Run with:
    python examples/basic_usage.py <admin-uid>
"""

import asyncio
import sys

from warden import Caller, Warden, WardenError


async def main(admin_uid: str):
    # Create Warden client (loads config from .env)
    warden = await Warden.create()
    admin = Caller(uid=admin_uid)

    try:
        # =================================================================
        # 1. Invite a user
        # =================================================================
        print("Inviting user...")

        invited = await warden.users.invite(
            admin,
            {"email": "Jane@Example.com", "firstName": "Jane", "lastName": "Doe"},
        )
        print(f"  Invited: {invited.email} as {invited.role} (ID: {invited.uid})")
        print(f"  Setup link: {invited.reset_link}")

        # =================================================================
        # 2. Re-invite (same identity, rows updated)
        # =================================================================
        print("\nRe-inviting with a new role...")

        again = await warden.users.invite(
            admin,
            {"email": "jane@example.com", "firstName": "Jane", "lastName": "Doe", "role": "manager"},
        )
        print(f"  Same identity: {again.uid == invited.uid}, role now {again.role}")

        # =================================================================
        # 3. Errors carry a kind
        # =================================================================
        print("\nTrying to delete ourselves...")

        try:
            await warden.users.delete(admin, {"uid": admin_uid})
        except WardenError as e:
            print(f"  Refused ({e.kind.value}): {e.message}")

        # =================================================================
        # 4. Delete the user
        # =================================================================
        print("\nDeleting user...")

        deleted = await warden.users.delete(
            admin, {"uid": invited.uid, "email": invited.email}
        )
        print(f"  Deleted: {deleted.uid} ({deleted.email})")

    finally:
        await warden.close()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit("usage: python examples/basic_usage.py <admin-uid>")
    asyncio.run(main(sys.argv[1]))
