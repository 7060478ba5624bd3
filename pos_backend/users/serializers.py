from rest_framework import serializers
from django.contrib.auth import get_user_model

User = get_user_model()


# ---------------- REGISTER ----------------
class RegisterSerializer(serializers.Serializer):
    """
    Input validation only.
    Role validity is checked in the view so it can answer "invalid role".
    """
    name = serializers.CharField(allow_blank=True, default="")
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        style={"input_type": "password"},
    )
    role = serializers.CharField()

    def validate_email(self, value):
        value = User.objects.normalize_email(value.strip())
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("email already registered")
        return value


# ---------------- LOGIN (INPUT ONLY) ----------------
class LoginSerializer(serializers.Serializer):
    """
    Input validation only.
    Authentication is handled in the view.
    """
    email = serializers.CharField()
    password = serializers.CharField(
        write_only=True,
        style={"input_type": "password"},
    )


# ---------------- USER OUTPUT ----------------
class TokenUserSerializer(serializers.ModelSerializer):
    """
    User block returned next to a freshly issued token.
    """
    roles = serializers.ListField(child=serializers.CharField(), read_only=True)

    class Meta:
        model = User
        fields = ["id", "email", "roles"]


class UserSerializer(serializers.ModelSerializer):
    roles = serializers.ListField(child=serializers.CharField(), read_only=True)

    class Meta:
        model = User
        fields = ["id", "name", "email", "roles", "is_active", "created_at"]
