import uuid
import pytest
from apps.accounts.models import User, Role
from apps.accounts.services import (
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


@pytest.mark.django_db
class TestStoreSetup:

    def test_fresh_store_needs_setup(self):
        assert needs_setup() is True

    def test_initialize_creates_admin(self):
        admin = initialize_store_admin(username='owner', password='secret1')

        assert admin.role == Role.ADMIN
        assert admin.is_store_admin
        assert needs_setup() is False

    def test_initialize_only_once(self, user):
        with pytest.raises(SetupAlreadyCompletedError):
            initialize_store_admin(username='owner', password='secret1')


@pytest.mark.django_db
class TestRegistrationAndLogin:

    def test_register(self):
        user = register_user(username='newbie', password='TestPass123!', email='New@Example.com')

        assert user.role == Role.USER
        assert user.email == 'New@example.com'
        assert user.check_password('TestPass123!')

    def test_register_duplicate_username_case_insensitive(self, user):
        with pytest.raises(UserRegistrationError):
            register_user(username='SHOPPER', password='TestPass123!')

    def test_register_duplicate_email(self):
        register_user(username='a', password='TestPass123!', email='same@example.com')

        with pytest.raises(UserRegistrationError):
            register_user(username='b', password='TestPass123!', email='same@example.com')

    def test_blank_emails_do_not_clash(self):
        register_user(username='a', password='TestPass123!', email='')
        register_user(username='b', password='TestPass123!', email='')

        assert User.objects.filter(email__isnull=True).count() == 2

    def test_authenticate_sets_last_login(self, user):
        authenticated = authenticate_user(username='shopper', password='TestPass123!')

        assert authenticated.last_login is not None

    def test_authenticate_wrong_password(self, user):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(username='shopper', password='wrong')

    def test_authenticate_inactive(self, user_inactive):
        with pytest.raises(InactiveAccountError):
            authenticate_user(username='inactive', password='TestPass123!')


@pytest.mark.django_db
class TestRoleManagement:

    def test_promote(self, user, admin_user):
        updated = update_user_role(user_id=user.id, new_role='manager', updated_by=admin_user)

        assert updated.role == Role.MANAGER
        assert updated.is_store_staff
        assert not updated.is_store_admin

    def test_invalid_role(self, user, admin_user):
        with pytest.raises(InvalidRoleError):
            update_user_role(user_id=user.id, new_role='owner', updated_by=admin_user)

    def test_unknown_user(self, admin_user):
        with pytest.raises(UserNotFoundError):
            update_user_role(user_id=uuid.uuid4(), new_role='user', updated_by=admin_user)

    def test_last_admin_cannot_be_demoted(self, admin_user):
        with pytest.raises(LastAdminError):
            update_user_role(user_id=admin_user.id, new_role='user', updated_by=admin_user)

    def test_admin_demoted_when_another_exists(self, admin_user, user):
        update_user_role(user_id=user.id, new_role='admin', updated_by=admin_user)

        demoted = update_user_role(user_id=admin_user.id, new_role='manager', updated_by=user)

        assert demoted.role == Role.MANAGER


@pytest.mark.django_db
class TestProfile:

    def test_update_profile(self, user):
        updated = update_profile(user_id=user.id, data={
            'display_name': 'Sam',
            'family': ['Alex', 'Robin'],
        })

        assert updated.display_name == 'Sam'
        assert updated.family == ['Alex', 'Robin']

    def test_email_taken(self, user, other_user):
        other_user.email = 'taken@example.com'
        other_user.save()

        with pytest.raises(UserRegistrationError):
            update_profile(user_id=user.id, data={'email': 'taken@example.com'})
