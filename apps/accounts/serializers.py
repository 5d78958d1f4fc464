from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'display_name',
            'role',
            'family',
            'created_at',
            'last_login',
        ]
        read_only_fields = ['id', 'username', 'role', 'created_at', 'last_login']


class ProfileUpdateSerializer(serializers.Serializer):
    """Editable profile fields."""

    display_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    family = serializers.ListField(
        child=serializers.CharField(max_length=100),
        required=False
    )


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for user registration."""

    username = serializers.CharField(max_length=150)
    email = serializers.EmailField(required=False, allow_blank=True)
    display_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )

    def validate_username(self, value):
        return value.strip()

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    username = serializers.CharField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class SetupInitSerializer(serializers.Serializer):
    """Credentials for the first admin account."""

    username = serializers.CharField(max_length=150)
    password = serializers.CharField(
        min_length=6,
        write_only=True,
        style={'input_type': 'password'}
    )


class RoleUpdateSerializer(serializers.Serializer):
    role = serializers.CharField()


class AdminUserSerializer(serializers.ModelSerializer):
    """User row in the back-office user table."""

    class Meta:
        model = User
        fields = ['id', 'username', 'email', 'display_name', 'role', 'is_active', 'created_at']
        read_only_fields = fields


class UserPublicSerializer(serializers.ModelSerializer):
    """Public user info (for displaying next to reviews)."""

    display_name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'display_name']
        read_only_fields = fields

    def get_display_name(self, obj):
        return obj.get_display_name()
