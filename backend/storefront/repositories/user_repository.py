"""
User Repository - Data Access Layer for Users

Keeps users as plain rows (dicts of primitives) keyed by id and returns User
domain models rebuilt through `User.restore`. Passwords are stored as their
bcrypt hash.

Author: TM3
Date: 2026-10-16
"""
import logging
from enum import Enum
from typing import Dict, List, Union

from storefront.common.option import Option
from storefront.common.result import Err, Ok, Result
from storefront.domain.base import UniqueEntityId
from storefront.domain.user import Email, EmailExceptions, StoredUserProps, User

logger = logging.getLogger(__name__)


class UserRepositoryExceptions(str, Enum):
    USER_ALREADY_EXISTS = "UserAlreadyExists"
    USER_NOT_FOUND = "UserNotFound"


class UserRepository:
    """
    In-memory repository for User data access

    Returns User domain models, not raw dictionaries. Every read builds a
    fresh User, so callers persist changes with `update`.
    """

    def __init__(self):
        self._rows: Dict[str, dict] = {}

    @staticmethod
    def _map_user_to_row(user: User) -> dict:
        props = user.props
        return {
            'id': str(user.id),
            'first_name': props.first_name.props.value,
            'last_name': props.last_name.props.value,
            'email': props.email.props.value,
            'password_hash': props.password.props.value,
            'role': props.role.props.value.value,
            'refresh_token': props.refresh_token,
        }

    @staticmethod
    def _map_row_to_user(row: dict) -> User:
        """
        Helper method to map a stored row to a User domain model.

        Rows are only written from valid users, so a failure here is a bug
        and raises.
        """
        user_id = UniqueEntityId.create(row['id']).unwrap()
        props = StoredUserProps(
            first_name=row['first_name'],
            last_name=row['last_name'],
            email=row['email'],
            password_hash=row['password_hash'],
            role=row['role'],
            refresh_token=row.get('refresh_token'),
        )
        return User.restore(props, user_id).unwrap()

    def _find_row_by_email(self, email: Email) -> Option[dict]:
        return Option.from_nullable(
            next((row for row in self._rows.values() if row['email'] == email.props.value), None)
        )

    def exists(self, email: str) -> Result[bool, EmailExceptions]:
        """
        Check whether a user with this email is stored

        Args:
            email: Raw email, validated first

        Returns:
            Ok(True/False), or Err(EmailExceptions.INCORRECT_FORMAT)
        """
        return Email.create(email).map(lambda valid: self._find_row_by_email(valid).is_some())

    def find_by_email(self, email: str) -> Result[Option[User], EmailExceptions]:
        return Email.create(email).map(
            lambda valid: self._find_row_by_email(valid).map(self._map_row_to_user)
        )

    def find_by_id(self, user_id: Union[UniqueEntityId, str]) -> Option[User]:
        return Option.from_nullable(self._rows.get(str(user_id))).map(self._map_row_to_user)

    def find_all(self) -> List[User]:
        return [self._map_row_to_user(row) for row in self._rows.values()]

    def create(self, user: User) -> Result[User, UserRepositoryExceptions]:
        """
        Store a new user

        Returns:
            Ok(user), or Err(USER_ALREADY_EXISTS) when the email is taken
        """
        if self._find_row_by_email(user.props.email).is_some():
            logger.warning(f"User with email {user.email} already exists")
            return Err(UserRepositoryExceptions.USER_ALREADY_EXISTS)

        self._rows[str(user.id)] = self._map_user_to_row(user)
        logger.info(f"User created: {user.id}")
        return Ok(user)

    def update(self, user: User) -> Result[User, UserRepositoryExceptions]:
        if str(user.id) not in self._rows:
            logger.warning(f"Cannot update unknown user {user.id}")
            return Err(UserRepositoryExceptions.USER_NOT_FOUND)

        self._rows[str(user.id)] = self._map_user_to_row(user)
        logger.debug(f"User updated: {user.id}")
        return Ok(user)
