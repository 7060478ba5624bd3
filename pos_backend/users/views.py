# users/views.py
"""
USER AUTH VIEWS

- Login:    email + password -> single JWT (roles claim) + user block
- Register: admin-only; creates a staff account with one role
- Me:       current user profile

Security hardening:
- Targeted throttling for login (anon) and me (user)
- Login never reveals whether the email or the password was wrong
"""

from __future__ import annotations

import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from drf_spectacular.utils import extend_schema
from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle, UserRateThrottle
from rest_framework.views import APIView

from backend.responses import error_response, success_response
from permissions.roles import IsAdmin, IsStaff

from .serializers import (
    LoginSerializer,
    RegisterSerializer,
    TokenUserSerializer,
    UserSerializer,
)
from .tokens import issue_access_token

User = get_user_model()

logger = logging.getLogger(__name__)


# ---------------- THROTTLES (TARGETED) ----------------
class LoginAnonThrottle(AnonRateThrottle):
    """
    Anonymous login throttling.
    Uses REST_FRAMEWORK['DEFAULT_THROTTLE_RATES']['anon'].
    """
    scope = "anon"


class MeUserThrottle(UserRateThrottle):
    scope = "user"


# ---------------- LOGIN (JWT + EMAIL) ----------------
class LoginView(generics.GenericAPIView):
    serializer_class = LoginSerializer
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [LoginAnonThrottle]

    @extend_schema(
        request=LoginSerializer,
        description="Authenticate with email + password and receive a bearer token",
    )
    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)

        email = serializer.validated_data["email"].strip()
        password = serializer.validated_data["password"]

        user = User.objects.alive().filter(email__iexact=email).first()
        if user is None:
            return Response(
                {"error": "invalid email or password"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        if not user.is_active:
            return Response(
                {"error": "user is inactive"},
                status=status.HTTP_403_FORBIDDEN,
            )

        if not user.check_password(password):
            logger.info("Rejected login", extra={"user_id": user.id})
            return Response(
                {"error": "invalid email or password"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        return Response(
            {
                "token": issue_access_token(user),
                "user": TokenUserSerializer(user).data,
            },
            status=status.HTTP_200_OK,
        )


# ---------------- REGISTER (ADMIN ONLY) ----------------
class RegisterView(generics.GenericAPIView):
    serializer_class = RegisterSerializer
    permission_classes = [IsAuthenticated, IsAdmin]

    @extend_schema(
        request=RegisterSerializer,
        responses={201: dict},
        description="Create a staff account (admin only)",
    )
    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        role = (data["role"] or "").strip().lower()
        if role not in dict(User.ROLE_CHOICES):
            return error_response("invalid role", status.HTTP_400_BAD_REQUEST)

        with transaction.atomic():
            user = User.objects.create_user(
                email=data["email"],
                password=data["password"],
                name=data.get("name", ""),
                role=role,
                created_by=request.user,
            )

        logger.info(
            "User registered",
            extra={"user_id": user.id, "role": role, "created_by": request.user.id},
        )

        return Response(
            {"message": "user created", "user_id": user.id},
            status=status.HTTP_201_CREATED,
        )


# ---------------- CURRENT USER ----------------
class MeView(APIView):
    permission_classes = [IsAuthenticated, IsStaff]
    throttle_classes = [MeUserThrottle]

    @extend_schema(
        responses={200: UserSerializer},
        description="Get current authenticated user profile",
    )
    def get(self, request):
        return success_response(
            UserSerializer(request.user).data,
            "Profile fetched successfully",
        )
