"""
PATH: users/management/commands/ensure_admin.py

Admin bootstrap.

Registration is admin-only, so the very first admin has to come from here.

- Reads AUTO_ADMIN_EMAIL + AUTO_ADMIN_PASSWORD (+ optional AUTO_ADMIN_NAME) from env.
- Idempotent: creates the admin if missing; otherwise restores it
  (undeletes, reactivates, resets the password).
- Does NOT print the password.
"""

from __future__ import annotations

import os

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction


class Command(BaseCommand):
    help = "Create/update the initial admin user from env vars (idempotent)."

    def handle(self, *args, **options):
        email = (os.environ.get("AUTO_ADMIN_EMAIL") or "").strip()
        password = (os.environ.get("AUTO_ADMIN_PASSWORD") or "").strip()
        name = (os.environ.get("AUTO_ADMIN_NAME") or "Administrator").strip()

        if not email or not password:
            self.stdout.write(self.style.WARNING("AUTO_ADMIN_* env vars not set. Skipping."))
            return

        User = get_user_model()

        with transaction.atomic():
            user = User.objects.filter(email__iexact=email).first()

            if user:
                user.role = User.ROLE_ADMIN
                user.deleted_at = None
                user.is_active = True
                user.is_staff = True
                user.is_superuser = True
                user.set_password(password)
                user.save()
                self.stdout.write(self.style.SUCCESS(f"Admin ensured: {email} (updated)"))
                return

            User.objects.create_superuser(email=email, password=password, name=name)

        self.stdout.write(self.style.SUCCESS(f"Admin ensured: {email} (created)"))
