"""
Unit tests for the User entity and its value objects

Author: TM3
Date: 2026-10-17
"""
import pytest
from pydantic import ValidationError

from storefront.common.option import Nothing, Some
from storefront.domain.user import (
    Email,
    EmailExceptions,
    FirstName,
    FirstNameExceptions,
    LastNameExceptions,
    Password,
    PasswordExceptions,
    StoredUserProps,
    User,
    UserRole,
    UserRoleExceptions,
    UserRoles,
)


class TestEmail:
    """Test Email validation"""

    @pytest.mark.parametrize("value", ["john@doe.com", "jane.doe+shop@mail.example.org", '"odd name"@doe.io'])
    def test_valid(self, value):
        assert Email.create(value).value.props.value == value

    @pytest.mark.parametrize("value", ["john", "john@", "john@doe", "@doe.com", "john doe@doe.com", "john@doe.com\n"])
    def test_invalid(self, value):
        """Test malformed emails fail with INCORRECT_FORMAT"""
        result = Email.create(value)

        assert result.is_failure
        assert result.error == EmailExceptions.INCORRECT_FORMAT

    def test_validate_returns_option(self):
        assert Email.validate("john@doe.com") == Some("john@doe.com")
        assert Email.validate("john") == Nothing()

    def test_not_equal_to_other_string_value_objects(self):
        """Test an Email and a FirstName holding the same text stay distinct"""
        email = Email.create("john@doe.com").value
        first_name = FirstName.create("john@doe.com").value

        assert email != first_name
        assert len({email, first_name}) == 2


class TestPassword:
    """Test the password policy and its rule order"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("Pa1!", PasswordExceptions.TOO_SHORT),
            ("Password!", PasswordExceptions.MUST_HAVE_AT_LEAST_ONE_NUMBER),
            ("password1!", PasswordExceptions.MUST_HAVE_AT_LEAST_ONE_UPPER_CASE_LETTER),
            ("PASSWORD1!", PasswordExceptions.MUST_HAVE_AT_LEAST_ONE_LOWER_CASE_LETTER),
            ("Password1", PasswordExceptions.MUST_HAVE_AT_LEAST_ONE_SPECIAL_CHARACTER),
        ],
    )
    def test_rule_failures(self, value, expected):
        assert Password.create(value).error == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("short", PasswordExceptions.TOO_SHORT),
            ("alllowercase123!", PasswordExceptions.MUST_HAVE_AT_LEAST_ONE_UPPER_CASE_LETTER),
        ],
    )
    def test_documented_examples(self, value, expected):
        assert Password.create(value).error == expected
        assert Password.create("ValidPass123!").is_success

    def test_first_failing_rule_wins(self):
        """Test a password breaking every rule reports the length rule"""
        assert Password.create("a").error == PasswordExceptions.TOO_SHORT

    def test_valid_password(self):
        password = Password.create("Password1!").value

        assert password.matches("Password1!")
        assert not password.matches("password1!")

    def test_plaintext_is_not_kept(self):
        """Test a valid password is held as a bcrypt hash"""
        password = Password.create("Password1!").value

        assert password.props.value != "Password1!"
        assert password.props.value.startswith("$2b$")
        assert "Password1!" not in str(password)

    def test_same_password_hashes_differently(self):
        first = Password.create("Password1!").value
        second = Password.create("Password1!").value

        assert first != second
        assert first.matches("Password1!") and second.matches("Password1!")

    def test_from_hash_keeps_the_hash(self):
        """Test a stored hash is rebuilt without the policy and still verifies"""
        # Arrange
        hashed = Password.create("Password1!").value.props.value

        # Act
        restored = Password.from_hash(hashed)

        # Assert
        assert restored.props.value == hashed
        assert restored.matches("Password1!")
        assert not restored.matches(hashed)

    def test_unrecognised_hash_never_matches(self):
        assert not Password.from_hash("Password1!").matches("Password1!")


class TestUserRole:
    def test_create_from_string(self):
        assert UserRole.create("admin").value == UserRole.admin()
        assert UserRole.create(UserRoles.USER).value.is_admin is False

    def test_invalid_role(self):
        assert UserRole.create("root").error == UserRoleExceptions.INVALID_ROLE


class TestUser:
    """Test User.create and the log-in state"""

    def test_create_valid_user(self, user_props):
        """Test valid props build a user with a default role"""
        result = User.create(user_props)

        assert result.is_success
        user = result.value
        assert user.email == "john@doe.com"
        assert user.props.first_name.props.value == "John"
        assert user.props.role == UserRole.user()
        assert user.refresh_token == Nothing()

    def test_invalid_email(self, user_props):
        user_props["email"] = "invalid-email"

        assert User.create(user_props).error == EmailExceptions.INCORRECT_FORMAT

    def test_first_failing_field_wins(self, user_props):
        """Test fields are validated in declaration order"""
        user_props.update(first_name="J", last_name="D", email="bad", password="weak")

        assert User.create(user_props).error == FirstNameExceptions.TOO_SHORT

    def test_last_name_too_short(self, user_props):
        user_props["last_name"] = "D"

        assert User.create(user_props).error.value == LastNameExceptions.TOO_SHORT.value

    def test_weak_password(self, user_props):
        user_props["password"] = "password"

        assert User.create(user_props).error == PasswordExceptions.MUST_HAVE_AT_LEAST_ONE_NUMBER

    def test_admin_role(self, user_props):
        user_props["role"] = "admin"

        assert User.create(user_props).value.props.role.is_admin

    def test_wrong_input_shape_raises(self):
        """Test a missing field is a transport error, not a domain failure"""
        with pytest.raises(ValidationError):
            User.create({"first_name": "John"})

    def test_log_in_and_log_out(self, user):
        user.log_in("refresh-token")
        assert user.refresh_token == Some("refresh-token")

        user.log_out()
        assert user.refresh_token.is_none()

    def test_str_renders_props(self, user):
        assert str(user).startswith("User (first_name: ")

    def test_invalid_role(self, user_props):
        """Test an unknown role is a domain failure, not a transport error"""
        user_props["role"] = "root"

        assert User.create(user_props).error == UserRoleExceptions.INVALID_ROLE

    def test_restore_reuses_the_stored_hash(self, user):
        """Test a persisted user is rebuilt with its hash untouched"""
        # Arrange
        stored = StoredUserProps(
            first_name="John",
            last_name="Doe",
            email="john@doe.com",
            password_hash=user.props.password.props.value,
        )

        # Act
        restored = User.restore(stored, user.id).value

        # Assert
        assert restored == user
        assert restored.props == user.props
        assert restored.props.password.matches("Password1!")

    def test_restore_still_validates_other_fields(self):
        result = User.restore(
            {"first_name": "John", "last_name": "Doe", "email": "bad", "password_hash": "x"}
        )

        assert result.error == EmailExceptions.INCORRECT_FORMAT
