import logging

from django.conf import settings
from django.utils import timezone
from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema

from .models import User
from .permissions import IsStoreAdmin, IsAccountOwnerOrAdmin
from .serializers import (
    UserRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
    ProfileUpdateSerializer,
    SetupInitSerializer,
    RoleUpdateSerializer,
    AdminUserSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    needs_setup,
    initialize_store_admin,
    update_user_role,
    update_profile,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    SetupAlreadyCompletedError,
    InvalidRoleError,
    UserNotFoundError,
    LastAdminError,
)

logger = logging.getLogger(__name__)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class SetupStatusResponseSerializer(serializers.Serializer):
    needs_setup = serializers.BooleanField()


class LogoutRequestSerializer(serializers.Serializer):
    refresh = serializers.CharField(help_text="Refresh token to blacklist")


def _auth_response(user, message, status_code=status.HTTP_200_OK):
    """Build the user + JWT pair payload returned by every login flow."""
    refresh = RefreshToken.for_user(user)
    return Response({
        'message': message,
        'user': UserSerializer(user).data,
        'tokens': {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
        }
    }, status=status_code)


# =============================================================================
# Setup
# =============================================================================

@extend_schema(
    responses={200: SetupStatusResponseSerializer},
    description="Check whether the store still needs its first admin account.",
    tags=['setup'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def setup_status(request):
    """Report whether first-run setup is pending."""
    return Response({'needs_setup': needs_setup()})


@extend_schema(
    request=SetupInitSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Create the initial admin account. Only allowed while no users exist.",
    tags=['setup'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def setup_init(request):
    """Create the initial admin."""
    serializer = SetupInitSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = initialize_store_admin(**serializer.validated_data)
    except SetupAlreadyCompletedError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return _auth_response(user, 'Setup completed', status.HTTP_201_CREATED)


# =============================================================================
# Authentication
# =============================================================================

@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a new shopper account and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new user account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data.copy()
    data.pop('password_confirm', None)

    try:
        user = register_user(**data)
    except UserRegistrationError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return _auth_response(user, 'Registration successful', status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with username and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with username and password."""
    serializer = UserLoginSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        user = authenticate_user(**serializer.validated_data)
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return _auth_response(user, 'Login successful')


@extend_schema(
    request=LogoutRequestSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Logout and blacklist the refresh token.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    """Logout and blacklist refresh token."""
    refresh_token = request.data.get('refresh')
    if refresh_token:
        try:
            RefreshToken(refresh_token).blacklist()
        except TokenError:
            return Response({
                'error': 'Invalid token'
            }, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'message': 'Logout successful'
    })


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user profile."""
    return Response(UserSerializer(request.user).data)


# =============================================================================
# Profiles
# =============================================================================

@extend_schema(
    request=ProfileUpdateSerializer,
    responses={
        200: UserSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Read or update a user profile (display_name, email, family).",
    tags=['users'],
)
@api_view(['GET', 'PATCH'])
@permission_classes([IsAccountOwnerOrAdmin])
def user_profile(request, pk):
    """Get or update a user profile."""
    if request.method == 'GET':
        try:
            user = User.objects.get(id=pk)
        except User.DoesNotExist:
            return Response({'error': 'User not found'}, status=status.HTTP_404_NOT_FOUND)
        return Response(UserSerializer(user).data)

    serializer = ProfileUpdateSerializer(data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)

    try:
        user = update_profile(user_id=pk, data=serializer.validated_data)
    except UserNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except UserRegistrationError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(UserSerializer(user).data)


# =============================================================================
# Back-office user administration
# =============================================================================

@extend_schema(
    responses={200: AdminUserSerializer(many=True)},
    description="List all users, newest first (admin only).",
    tags=['admin'],
)
@api_view(['GET'])
@permission_classes([IsStoreAdmin])
def admin_users(request):
    """List every account."""
    users = User.objects.order_by('-created_at')
    return Response(AdminUserSerializer(users, many=True).data)


@extend_schema(
    request=RoleUpdateSerializer,
    responses={
        200: AdminUserSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Change a user's store role (admin only).",
    tags=['admin'],
)
@api_view(['PATCH'])
@permission_classes([IsStoreAdmin])
def admin_update_role(request, pk):
    """Update a user's role."""
    serializer = RoleUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = update_user_role(
            user_id=pk,
            new_role=serializer.validated_data['role'],
            updated_by=request.user,
        )
    except UserNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except (InvalidRoleError, LastAdminError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(AdminUserSerializer(user).data)


@extend_schema(
    description="Database connection details for backups. The password is masked.",
    tags=['admin'],
)
@api_view(['GET'])
@permission_classes([IsStoreAdmin])
def admin_credentials(request):
    """Return non-sensitive connection info for backup purposes."""
    database = settings.DATABASES['default']
    password = str(database.get('PASSWORD') or '')

    logger.info("Database credentials viewed by %s", request.user.username)

    return Response({
        'database': {
            'engine': database.get('ENGINE', ''),
            'host': database.get('HOST') or 'localhost',
            'port': str(database.get('PORT') or ''),
            'user': database.get('USER') or '',
            'name': str(database.get('NAME') or ''),
            'password_hint': password[:4] + '****',
        },
        'note': 'Full credentials are stored in the .env file on your server. Keep that file backed up securely.',
        'created_at': timezone.now().isoformat(),
    })
