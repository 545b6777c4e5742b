import pytest
from werkzeug.security import check_password_hash

from class_attendance.accounts.service import AccountService
from class_attendance.core.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)

PROFILE = {
    "name": "Ms. Rao",
    "phone": "9000000001",
    "email": "rao@school.test",
    "password": "secret1",
    "institutionType": "school",
    "school": "Green Valley",
    "class": "7",
    "section": "A",
    "role": "teacher",
}


@pytest.fixture
def accounts(users_repo):
    return AccountService(users_repo)


def test_register_stores_hashed_password(accounts, users_repo):
    user_id = accounts.register(PROFILE)

    user = users_repo.get_by_id(user_id)
    assert user.password_hash != "secret1"
    assert check_password_hash(user.password_hash, "secret1")
    assert user.class_name == "7"
    assert user.institution_type == "school"


def test_duplicate_email_conflicts_and_keeps_first_account(accounts, users_repo):
    first_id = accounts.register(PROFILE)

    with pytest.raises(ConflictError):
        accounts.register(dict(PROFILE, name="Impostor", password="other"))

    assert len(users_repo.users) == 1
    assert users_repo.get_by_id(first_id).name == "Ms. Rao"
    assert accounts.login(PROFILE["email"], "secret1").user_id == first_id


@pytest.mark.parametrize("missing", ["email", "password"])
def test_register_requires_credentials(accounts, missing):
    with pytest.raises(ValidationError):
        accounts.register({k: v for k, v in PROFILE.items() if k != missing})


def test_login_returns_user_and_institution_type(accounts):
    user_id = accounts.register(PROFILE)
    result = accounts.login(PROFILE["email"], "secret1")
    assert result.user_id == user_id
    assert result.institution_type == "school"


def test_login_wrong_password_is_unauthorized(accounts):
    accounts.register(PROFILE)
    with pytest.raises(AuthenticationError):
        accounts.login(PROFILE["email"], "wrong")


def test_login_unknown_email_gives_same_error(accounts):
    accounts.register(PROFILE)
    with pytest.raises(AuthenticationError) as unknown:
        accounts.login("nobody@school.test", "secret1")
    with pytest.raises(AuthenticationError) as wrong:
        accounts.login(PROFILE["email"], "nope")
    assert str(unknown.value) == str(wrong.value)


@pytest.mark.parametrize("key", ["rao@school.test", "9000000001"])
def test_reset_password_by_email_or_phone(accounts, key):
    accounts.register(PROFILE)
    accounts.reset_password(key, "new-pass")

    assert accounts.login(PROFILE["email"], "new-pass").user_id == 1
    with pytest.raises(AuthenticationError):
        accounts.login(PROFILE["email"], "secret1")


def test_reset_password_unknown_contact_is_not_found(accounts):
    with pytest.raises(NotFoundError):
        accounts.reset_password("ghost@school.test", "x")


def test_get_profile_missing_user(accounts):
    with pytest.raises(NotFoundError):
        accounts.get_profile(42)


def test_update_profile_changes_only_mutable_fields(accounts, users_repo):
    user_id = accounts.register(PROFILE)
    before = users_repo.get_by_id(user_id)

    accounts.update_profile(
        user_id,
        {"name": "Mrs. Rao", "section": "B", "email": "hijack@x.test", "password": "pwned"},
    )

    after = users_repo.get_by_id(user_id)
    assert after.name == "Mrs. Rao"
    assert after.section == "B"
    assert after.school == "Green Valley"
    assert after.email == before.email
    assert after.password_hash == before.password_hash


def test_update_profile_unknown_user(accounts):
    with pytest.raises(NotFoundError):
        accounts.update_profile(99, {"name": "x"})


def test_update_profile_without_mutable_fields(accounts):
    user_id = accounts.register(PROFILE)
    with pytest.raises(ValidationError):
        accounts.update_profile(user_id, {"email": "new@x.test"})


def test_login_normalises_inputs_like_register(accounts):
    user_id = accounts.register(dict(PROFILE, email="  rao@school.test ", password=4242))

    assert accounts.login(" rao@school.test", 4242).user_id == user_id
    assert accounts.login("rao@school.test", "4242").user_id == user_id
    with pytest.raises(AuthenticationError):
        accounts.login("rao@school.test", 4243)


@pytest.mark.parametrize("email, password", [(None, "secret1"), ("rao@school.test", None), ("", ""), ("rao@school.test", "  ")])
def test_login_missing_credentials_is_unauthorized(accounts, email, password):
    accounts.register(PROFILE)
    with pytest.raises(AuthenticationError):
        accounts.login(email, password)
