import pytest

from users.factories import DEFAULT_TEST_USER_PASSWORD, UserFactory
from users.models import User


@pytest.mark.django_db
def test_create_user():
    """Test creating a regular user"""
    user = User.objects.create_user(email="test@example.com", password="testpassword123")
    assert user.email == "test@example.com"
    assert user.check_password("testpassword123")
    assert not user.is_superuser
    assert not user.is_staff
    assert user.is_active


@pytest.mark.django_db
def test_create_user_with_additional_fields():
    """Test creating a user with additional fields"""
    user = User.objects.create_user(
        email="test@example.com", password="testpassword123", first_name="Ada", last_name="Lovelace"
    )
    assert user.email == "test@example.com"
    assert user.get_full_name() == "Ada Lovelace"
    assert str(user) == "Ada Lovelace <test@example.com>"
    assert not user.is_superuser


@pytest.mark.django_db
def test_create_user_without_email():
    with pytest.raises(ValueError, match="email must be set"):
        User.objects.create_user(email="", password="testpassword123")


@pytest.mark.django_db
def test_create_superuser():
    """Test creating a superuser"""
    admin_user = User.objects.create_superuser(
        email="admin@example.com", password="adminpassword123"
    )
    assert admin_user.email == "admin@example.com"
    assert admin_user.check_password("adminpassword123")
    assert admin_user.is_superuser
    assert admin_user.is_staff
    assert admin_user.is_active


@pytest.mark.django_db
def test_create_superuser_requires_staff_flag():
    with pytest.raises(ValueError, match="is_staff=True"):
        User.objects.create_superuser(
            email="admin@example.com", password="adminpassword123", is_staff=False
        )


@pytest.mark.django_db
def test_email_normalization():
    """Test email normalization during user creation"""
    user = User.objects.create_user(email="Test@EXAMPLE.com", password="testpassword123")
    # BaseUserManager.normalize_email() typically only normalizes the domain part
    assert user.email == "Test@example.com"


@pytest.mark.django_db
def test_user_factory_reuses_existing_email():
    factory = UserFactory()
    user = factory.create_user(email="same@example.com")

    assert factory.create_user(email="same@example.com") == user
    assert user.check_password(DEFAULT_TEST_USER_PASSWORD)
    assert factory.create_user(is_seed_data=True).meta == {"is_seed_data": True}
