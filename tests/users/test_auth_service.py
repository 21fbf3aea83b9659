import pytest

from punchpro.core.enums import Role
from punchpro.core.exceptions import AuthenticationError, ValidationError
from punchpro.users.memory_user_repository import InMemoryUserRepository
from punchpro.users.service import AuthService


@pytest.fixture
def auth():
    return AuthService(InMemoryUserRepository())


def test_register_then_login(auth):
    user = auth.register(name="Ada", email="ada@example.com", password="secret1")

    assert user.role == Role.EMPLOYEE
    assert auth.login("ada@example.com", "secret1").user_id == user.user_id
    # email lookup ignores case
    assert auth.login("ADA@example.com", "secret1").user_id == user.user_id


def test_register_admin(auth):
    user = auth.register(name="Root", email="root@example.com", password="secret1", role="admin")
    assert user.role == Role.ADMIN


def test_wrong_password_and_unknown_email_share_message(auth):
    auth.register(name="Ada", email="ada@example.com", password="secret1")

    with pytest.raises(AuthenticationError, match="Invalid email or password"):
        auth.login("ada@example.com", "nope")
    with pytest.raises(AuthenticationError, match="Invalid email or password"):
        auth.login("ghost@example.com", "secret1")


def test_duplicate_email_rejected(auth):
    auth.register(name="Ada", email="ada@example.com", password="secret1")

    with pytest.raises(ValidationError, match="User with this email already exists"):
        auth.register(name="Ada 2", email="Ada@Example.com", password="secret2")


@pytest.mark.parametrize(
    "name,email,password",
    [
        ("", "a@example.com", "secret1"),
        ("Ada", "not-an-email", "secret1"),
        ("Ada", "a@example.com", "short"),
    ],
)
def test_register_validation(auth, name, email, password):
    with pytest.raises(ValidationError):
        auth.register(name=name, email=email, password=password)


def test_update_profile_changes_name(auth):
    user = auth.register(name="Ada", email="ada@example.com", password="secret1")

    updated = auth.update_profile(user.user_id, name="  Ada Lovelace ")

    assert updated.name == "Ada Lovelace"
    assert auth.login("ada@example.com", "secret1").name == "Ada Lovelace"
    with pytest.raises(ValidationError):
        auth.update_profile(user.user_id, name=" ")


def test_change_password(auth):
    user = auth.register(name="Ada", email="ada@example.com", password="secret1")

    auth.change_password(user.user_id, current_password="secret1", new_password="secret2", confirm_password="secret2")

    assert auth.login("ada@example.com", "secret2").user_id == user.user_id
    with pytest.raises(AuthenticationError):
        auth.login("ada@example.com", "secret1")


def test_change_password_checks_current_and_new(auth):
    user = auth.register(name="Ada", email="ada@example.com", password="secret1")

    with pytest.raises(AuthenticationError, match="Current password is incorrect"):
        auth.change_password(user.user_id, current_password="wrong1", new_password="secret2")
    with pytest.raises(ValidationError, match="at least 6"):
        auth.change_password(user.user_id, current_password="secret1", new_password="abc")
    with pytest.raises(ValidationError, match="do not match"):
        auth.change_password(user.user_id, current_password="secret1", new_password="secret2", confirm_password="secret3")

    # still the original password
    assert auth.login("ada@example.com", "secret1").user_id == user.user_id
