"""
PATH: users/models.py

CUSTOM USER MODEL

- Email is the login identity (USERNAME_FIELD).
- One job role per user: admin | cashier. Tokens expose it as a `roles` list.
- Users are soft-deleted (deleted_at); deleted users cannot log in or authenticate.
- created_by records which admin registered the account.
"""

from __future__ import annotations

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models

from backend.db import SoftDeleteModel, SoftDeleteQuerySet


# ---------------- USER MANAGER ----------------
class UserManager(BaseUserManager.from_queryset(SoftDeleteQuerySet)):
    def create_user(self, email=None, password=None, **extra_fields):
        """
        Rules:
        - email is required and normalized.
        - password is hashed with the configured hasher (bcrypt in base settings).
        - role defaults to cashier.
        """
        email = (email or "").strip()
        if not email:
            raise ValueError("An email address is required")

        email = self.normalize_email(email)
        extra_fields.setdefault("is_active", True)
        extra_fields.setdefault("role", User.ROLE_CASHIER)

        user = self.model(email=email, **extra_fields)

        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        if not password:
            raise ValueError("Superuser must have a password")

        extra_fields.setdefault("role", User.ROLE_ADMIN)
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("is_active", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True")

        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True")

        return self.create_user(email=email, password=password, **extra_fields)


# ---------------- USER MODEL ----------------
class User(AbstractBaseUser, PermissionsMixin, SoftDeleteModel):
    ROLE_ADMIN = "admin"
    ROLE_CASHIER = "cashier"

    ROLE_CHOICES = [
        (ROLE_ADMIN, "Admin"),
        (ROLE_CASHIER, "Cashier"),
    ]

    name = models.CharField(max_length=150, blank=True, default="")
    email = models.EmailField(unique=True)

    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=ROLE_CASHIER,
    )

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    created_by = models.ForeignKey(
        "self",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_users",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    class Meta:
        ordering = ["-created_at"]

    @property
    def roles(self) -> list[str]:
        return [self.role] if self.role else []

    def __str__(self):
        return f"{self.email} ({self.role})"
