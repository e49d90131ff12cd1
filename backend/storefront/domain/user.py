"""
User Domain Model

A user is built from validated value objects: first and last names, email,
password and role. Invalid input never raises; `User.create` returns the
first failing field's exception as `Err`.

Author: TM3
Date: 2026-10-14
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel

from storefront.common.option import Nothing, Option, Some
from storefront.common.result import Err, Ok, Result
from storefront.core.config import settings
from storefront.core.security import hash_password, verify_password
from storefront.domain.base import Entity, UniqueEntityId, ValueObject

EMAIL_PATTERN = re.compile(
    r'^(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r"@((\[\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$"
)
SPECIAL_CHARACTERS = re.compile(r'[!@#$%^&*(),.?":{}|<>]')


@dataclass(frozen=True)
class StringProps:
    value: str


# ============================================================================
# Value objects
# ============================================================================

class EmailExceptions(str, Enum):
    INCORRECT_FORMAT = "EmailIncorrectFormat"


class Email(ValueObject[StringProps]):
    @classmethod
    def create(cls, value: str) -> Result["Email", EmailExceptions]:
        return cls.validate(value).match(
            lambda valid: Ok(cls(StringProps(value=valid))),
            lambda: Err(EmailExceptions.INCORRECT_FORMAT),
        )

    @staticmethod
    def validate(value: str) -> Option[str]:
        if EMAIL_PATTERN.fullmatch(value):
            return Some(value)
        return Nothing()


class FirstNameExceptions(str, Enum):
    TOO_SHORT = "FirstNameTooShort"


class FirstName(ValueObject[StringProps]):
    @classmethod
    def create(cls, value: str) -> Result["FirstName", FirstNameExceptions]:
        if len(value) < settings.NAME_MIN_LENGTH:
            return Err(FirstNameExceptions.TOO_SHORT)
        return Ok(cls(StringProps(value=value)))


class LastNameExceptions(str, Enum):
    TOO_SHORT = "LastNameTooShort"


class LastName(ValueObject[StringProps]):
    @classmethod
    def create(cls, value: str) -> Result["LastName", LastNameExceptions]:
        if len(value) < settings.NAME_MIN_LENGTH:
            return Err(LastNameExceptions.TOO_SHORT)
        return Ok(cls(StringProps(value=value)))


class PasswordExceptions(str, Enum):
    TOO_SHORT = "PasswordTooShort"
    MUST_HAVE_AT_LEAST_ONE_NUMBER = "PasswordMustHaveAtLeastOneNumber"
    MUST_HAVE_AT_LEAST_ONE_UPPER_CASE_LETTER = "PasswordMustHaveAtLeastOneUpperCaseLetter"
    MUST_HAVE_AT_LEAST_ONE_LOWER_CASE_LETTER = "PasswordMustHaveAtLeastOneLowerCaseLetter"
    MUST_HAVE_AT_LEAST_ONE_SPECIAL_CHARACTER = "PasswordMustHaveAtLeastOneSpecialCharacter"


class Password(ValueObject[StringProps]):
    """
    Password policy

    Every rule is evaluated; the reported failure is the first rule in
    declaration order: length, digit, upper case, lower case, special
    character. A valid password is kept only as its bcrypt hash.
    """

    @classmethod
    def create(cls, value: str) -> Result["Password", PasswordExceptions]:
        checks = Result.combine(
            cls.validate_length(value),
            cls.validate_has_at_least_one_number(value),
            cls.validate_has_at_least_one_upper_case_letter(value),
            cls.validate_has_at_least_one_lower_case_letter(value),
            cls.validate_has_at_least_one_special_character(value),
        )
        return checks.map(lambda _: cls(StringProps(value=hash_password(value))))

    @classmethod
    def from_hash(cls, hashed: str) -> "Password":
        """Rebuild a stored password; the policy was enforced when it was hashed"""
        return cls(StringProps(value=hashed))

    @staticmethod
    def validate_length(value: str) -> Result[str, PasswordExceptions]:
        if len(value) < settings.PASSWORD_MIN_LENGTH:
            return Err(PasswordExceptions.TOO_SHORT)
        return Ok(value)

    @staticmethod
    def validate_has_at_least_one_number(value: str) -> Result[str, PasswordExceptions]:
        if not re.search(r"\d", value):
            return Err(PasswordExceptions.MUST_HAVE_AT_LEAST_ONE_NUMBER)
        return Ok(value)

    @staticmethod
    def validate_has_at_least_one_upper_case_letter(value: str) -> Result[str, PasswordExceptions]:
        if not re.search(r"[A-Z]", value):
            return Err(PasswordExceptions.MUST_HAVE_AT_LEAST_ONE_UPPER_CASE_LETTER)
        return Ok(value)

    @staticmethod
    def validate_has_at_least_one_lower_case_letter(value: str) -> Result[str, PasswordExceptions]:
        if not re.search(r"[a-z]", value):
            return Err(PasswordExceptions.MUST_HAVE_AT_LEAST_ONE_LOWER_CASE_LETTER)
        return Ok(value)

    @staticmethod
    def validate_has_at_least_one_special_character(value: str) -> Result[str, PasswordExceptions]:
        if not SPECIAL_CHARACTERS.search(value):
            return Err(PasswordExceptions.MUST_HAVE_AT_LEAST_ONE_SPECIAL_CHARACTER)
        return Ok(value)

    def matches(self, candidate: str) -> bool:
        return verify_password(candidate, self.props.value)


class UserRoles(str, Enum):
    ADMIN = "admin"
    USER = "user"


class UserRoleExceptions(str, Enum):
    INVALID_ROLE = "UserRoleInvalid"


@dataclass(frozen=True)
class UserRoleProps:
    value: UserRoles


class UserRole(ValueObject[UserRoleProps]):
    @classmethod
    def create(cls, role: Union[UserRoles, str]) -> Result["UserRole", UserRoleExceptions]:
        try:
            return Ok(cls(UserRoleProps(value=UserRoles(role))))
        except ValueError:
            return Err(UserRoleExceptions.INVALID_ROLE)

    @classmethod
    def admin(cls) -> "UserRole":
        return cls(UserRoleProps(value=UserRoles.ADMIN))

    @classmethod
    def user(cls) -> "UserRole":
        return cls(UserRoleProps(value=UserRoles.USER))

    @property
    def is_admin(self) -> bool:
        return self.props.value is UserRoles.ADMIN


# ============================================================================
# Entity
# ============================================================================

@dataclass
class UserProps:
    first_name: FirstName
    last_name: LastName
    email: Email
    password: Password
    role: UserRole
    refresh_token: Optional[str] = None


class CreateUserProps(BaseModel):
    """Raw input for User.create"""
    first_name: str
    last_name: str
    email: str
    password: str
    role: str = UserRoles.USER.value
    refresh_token: Optional[str] = None


class StoredUserProps(BaseModel):
    """Persisted user fields; the password is already a hash"""
    first_name: str
    last_name: str
    email: str
    password_hash: str
    role: str = UserRoles.USER.value
    refresh_token: Optional[str] = None


UserExceptions = Union[
    FirstNameExceptions, LastNameExceptions, EmailExceptions, PasswordExceptions, UserRoleExceptions
]


class User(Entity[UserProps]):
    """
    User entity

    Fields are validated independently and combined in declaration order
    (first name, last name, email, password, role) so a single, deterministic
    failure is reported per invalid input.
    """

    @classmethod
    def create(
        cls,
        props: Union[CreateUserProps, Dict[str, Any]],
        id: Optional[UniqueEntityId] = None,
    ) -> Result["User", UserExceptions]:
        if not isinstance(props, CreateUserProps):
            props = CreateUserProps(**props)

        return cls._build(props, Password.create(props.password), id)

    @classmethod
    def restore(
        cls,
        props: Union[StoredUserProps, Dict[str, Any]],
        id: Optional[UniqueEntityId] = None,
    ) -> Result["User", UserExceptions]:
        """Rebuild a persisted user without hashing the password again"""
        if not isinstance(props, StoredUserProps):
            props = StoredUserProps(**props)

        return cls._build(props, Ok(Password.from_hash(props.password_hash)), id)

    @classmethod
    def _build(
        cls,
        props: Union[CreateUserProps, StoredUserProps],
        password: Result[Password, PasswordExceptions],
        id: Optional[UniqueEntityId],
    ) -> Result["User", UserExceptions]:
        combined = Result.combine(
            FirstName.create(props.first_name),
            LastName.create(props.last_name),
            Email.create(props.email),
            password,
            UserRole.create(props.role),
        )

        return combined.map(
            lambda values: cls(
                UserProps(
                    first_name=values[0],
                    last_name=values[1],
                    email=values[2],
                    password=values[3],
                    role=values[4],
                    refresh_token=props.refresh_token,
                ),
                id,
            )
        )

    @property
    def email(self) -> str:
        return self.props.email.props.value

    @property
    def refresh_token(self) -> Option[str]:
        return Option.from_nullable(self.props.refresh_token)

    def log_in(self, refresh_token: str) -> None:
        self.props.refresh_token = refresh_token

    def log_out(self) -> None:
        self.props.refresh_token = None
