"""
Unit tests for UserService

Author: TM3
Date: 2026-10-17
"""
import pytest

from storefront.domain.user import EmailExceptions, PasswordExceptions
from storefront.services.user_service import (
    GetUserByEmailExceptions,
    LogInRequest,
    LogUserInExceptions,
    LogUserOutExceptions,
    SignUpRequest,
    SignUserUpExceptions,
    UserService,
)


@pytest.fixture
def user_service(user_repository, token_issuer):
    """
    Provides a UserService over an empty repository
    """
    return UserService(user_repository, token_issuer)


@pytest.fixture
def sign_up_request():
    return SignUpRequest(email="john@doe.com", password="Password1!", first_name="John", last_name="Doe")


class TestSignUp:
    """Test UserService.sign_up"""

    def test_sign_up_stores_logged_in_user(self, user_service, user_repository, sign_up_request):
        """Test a new user is stored with a refresh token"""
        # Act
        result = user_service.sign_up(sign_up_request)

        # Assert
        assert result.is_success
        stored = user_repository.find_by_email("john@doe.com").value.unwrap()
        assert stored == result.value
        assert stored.refresh_token.unwrap() == "token-john@doe.com-1"

    def test_sign_up_does_not_store_plaintext_password(self, user_service, user_repository, sign_up_request):
        user = user_service.sign_up(sign_up_request).value

        row = user_repository._rows[str(user.id)]
        assert "Password1!" not in row.values()
        assert user.props.password.matches("Password1!")

    def test_duplicate_email(self, user_service, sign_up_request):
        user_service.sign_up(sign_up_request)

        result = user_service.sign_up(sign_up_request)

        assert result.error == SignUserUpExceptions.USER_ALREADY_EXISTS

    def test_invalid_email(self, user_service, sign_up_request):
        request = sign_up_request.model_copy(update={"email": "john"})

        assert user_service.sign_up(request).error == EmailExceptions.INCORRECT_FORMAT

    def test_weak_password(self, user_service, user_repository, sign_up_request):
        request = sign_up_request.model_copy(update={"password": "Password1"})

        result = user_service.sign_up(request)

        assert result.error == PasswordExceptions.MUST_HAVE_AT_LEAST_ONE_SPECIAL_CHARACTER
        assert user_repository.find_all() == []


class TestLogInAndOut:
    """Test UserService.log_in and log_out"""

    def test_log_in(self, user_service, user_repository, sign_up_request):
        """Test valid credentials return a fresh refresh token"""
        # Arrange
        user_service.sign_up(sign_up_request)

        # Act
        result = user_service.log_in(LogInRequest(email="john@doe.com", password="Password1!"))

        # Assert
        assert result.value == "token-john@doe.com-2"
        stored = user_repository.find_by_email("john@doe.com").value.unwrap()
        assert stored.refresh_token.unwrap() == "token-john@doe.com-2"

    def test_log_in_wrong_password(self, user_service, sign_up_request):
        user_service.sign_up(sign_up_request)

        result = user_service.log_in(LogInRequest(email="john@doe.com", password="Password2!"))

        assert result.error == LogUserInExceptions.INVALID_PASSWORD

    @pytest.mark.parametrize("email", ["jane@doe.com", "not-an-email"])
    def test_log_in_unknown_user(self, user_service, email):
        result = user_service.log_in(LogInRequest(email=email, password="Password1!"))

        assert result.error == LogUserInExceptions.USER_NOT_FOUND

    def test_log_out(self, user_service, user_repository, sign_up_request):
        user = user_service.sign_up(sign_up_request).value

        result = user_service.log_out(user.id)

        assert result.is_success
        assert user_repository.find_by_id(user.id).unwrap().refresh_token.is_none()

    def test_log_out_unknown_user(self, user_service):
        result = user_service.log_out("00000000-0000-0000-0000-000000000000")

        assert result.error == LogUserOutExceptions.USER_NOT_FOUND


class TestUserLookups:
    def test_get_user_by_email(self, user_service, sign_up_request):
        user = user_service.sign_up(sign_up_request).value

        assert user_service.get_user_by_email("john@doe.com").value == user
        assert user_service.get_user_by_email("jane@doe.com").error == GetUserByEmailExceptions.USER_NOT_FOUND
        assert user_service.get_user_by_email("jane").error == EmailExceptions.INCORRECT_FORMAT

    def test_get_all_users(self, user_service, sign_up_request):
        assert user_service.get_all_users().value == []

        user_service.sign_up(sign_up_request)

        assert len(user_service.get_all_users().value) == 1
