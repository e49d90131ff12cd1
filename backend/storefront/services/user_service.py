"""
User Service
Sign-up, log-in and log-out flows on top of the user repository

Token generation is not this service's concern: a `token_issuer` callable
turns a User into the refresh token stored on it.

Author: TM3
Date: 2026-10-16
"""
import logging
from enum import Enum
from typing import Callable, List, Union

from pydantic import BaseModel

from storefront.common.option import Nothing
from storefront.common.result import Err, Ok, Result
from storefront.domain.base import UniqueEntityId
from storefront.domain.user import CreateUserProps, EmailExceptions, User, UserExceptions
from storefront.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

TokenIssuer = Callable[[User], str]


# ============================================================================
# Requests and exceptions
# ============================================================================

class SignUpRequest(BaseModel):
    email: str
    password: str
    first_name: str
    last_name: str


class LogInRequest(BaseModel):
    email: str
    password: str


class SignUserUpExceptions(str, Enum):
    USER_ALREADY_EXISTS = "UserAlreadyExists"


class LogUserInExceptions(str, Enum):
    USER_NOT_FOUND = "UserNotFound"
    INVALID_PASSWORD = "InvalidPassword"


class LogUserOutExceptions(str, Enum):
    USER_NOT_FOUND = "LogUserOutUserNotFound"


class GetUserByEmailExceptions(str, Enum):
    USER_NOT_FOUND = "GetUserByEmailUserNotFound"


# ============================================================================
# Service
# ============================================================================

class UserService:
    """
    Service for user accounts

    Handles:
    - Sign-up (duplicate check, validation, first refresh token)
    - Log-in / log-out (refresh token lifecycle)
    - User lookups
    """

    def __init__(self, user_repository: UserRepository, token_issuer: TokenIssuer):
        self.user_repository = user_repository
        self.token_issuer = token_issuer

    def sign_up(
        self, request: SignUpRequest
    ) -> Result[User, Union[SignUserUpExceptions, EmailExceptions, UserExceptions]]:
        """
        Register a new user

        Args:
            request: Email, password and names of the new user

        Returns:
            Ok(User) already logged in, or the first failure among email
            format, duplicate email and user validation
        """
        exists = self.user_repository.exists(request.email)
        if exists.is_failure:
            return exists
        if exists.value:
            logger.info(f"Sign-up refused, email already registered: {request.email}")
            return Err(SignUserUpExceptions.USER_ALREADY_EXISTS)

        user_result = User.create(
            CreateUserProps(
                first_name=request.first_name,
                last_name=request.last_name,
                email=request.email,
                password=request.password,
            )
        )
        if user_result.is_failure:
            logger.info(f"Sign-up refused: {user_result.error.value}")
            return user_result

        user = user_result.value
        user.log_in(self.token_issuer(user))

        return self.user_repository.create(user).map_err(
            lambda _: SignUserUpExceptions.USER_ALREADY_EXISTS
        )

    def log_in(self, request: LogInRequest) -> Result[str, LogUserInExceptions]:
        """
        Check credentials and issue a refresh token

        Returns:
            Ok(refresh_token), Err(USER_NOT_FOUND) for an unknown or
            malformed email, Err(INVALID_PASSWORD) otherwise
        """
        found = self.user_repository.find_by_email(request.email).unwrap_or(Nothing())

        return found.match(
            lambda user: self._log_user_in(user, request.password),
            lambda: Err(LogUserInExceptions.USER_NOT_FOUND),
        )

    def _log_user_in(self, user: User, password: str) -> Result[str, LogUserInExceptions]:
        if not user.props.password.matches(password):
            logger.warning(f"Invalid password for user {user.id}")
            return Err(LogUserInExceptions.INVALID_PASSWORD)

        refresh_token = self.token_issuer(user)
        user.log_in(refresh_token)
        self.user_repository.update(user)

        logger.info(f"User logged in: {user.id}")
        return Ok(refresh_token)

    def log_out(self, user_id: Union[UniqueEntityId, str]) -> Result[None, LogUserOutExceptions]:
        """Forget the user's refresh token"""
        found = self.user_repository.find_by_id(user_id)
        if found.is_none():
            return Err(LogUserOutExceptions.USER_NOT_FOUND)

        user = found.unwrap()
        user.log_out()
        self.user_repository.update(user)

        logger.info(f"User logged out: {user.id}")
        return Ok(None)

    def get_user_by_email(
        self, email: str
    ) -> Result[User, Union[GetUserByEmailExceptions, EmailExceptions]]:
        return self.user_repository.find_by_email(email).and_then(
            lambda found: found.ok_or(GetUserByEmailExceptions.USER_NOT_FOUND)
        )

    def get_all_users(self) -> Result[List[User], None]:
        return Ok(self.user_repository.find_all())
