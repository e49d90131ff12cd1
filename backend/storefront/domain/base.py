"""
Domain building blocks: identity, value objects, entities and aggregate roots

Being able to build domain objects without any storage configuration keeps
unit tests fast and separates creating objects from persisting them: an
entity is created through its `create` factory, receives a UUID, and is then
handed to a repository that maps it to plain rows.

Author: TM3
Date: 2026-10-14
"""
import re
import uuid
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, Generic, Mapping, Optional, TypeVar, Union

from storefront.common.formatting import to_string_debug
from storefront.common.result import Err, Ok, Result

T = TypeVar("T")
P = TypeVar("P")

# Canonical 8-4-4-4-12 form, RFC 4122 versions 1 to 8, plus the nil and max UUIDs
UUID_PATTERN = re.compile(
    r"^(?:[0-9a-f]{8}-[0-9a-f]{4}-[1-8][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
    r"|00000000-0000-0000-0000-000000000000"
    r"|ffffffff-ffff-ffff-ffff-ffffffffffff)$",
    re.IGNORECASE,
)


def is_valid_uuid(value: Any) -> bool:
    return isinstance(value, str) and UUID_PATTERN.match(value) is not None


# ============================================================================
# Identity
# ============================================================================

class Identifier(Generic[T]):
    """Identity wrapper compared by value, not by reference"""

    def __init__(self, value: T):
        self._value = value

    def equals(self, other: Optional["Identifier[T]"]) -> bool:
        if other is None:
            return False
        if type(other) is not type(self):
            return False
        return other.to_value() == self._value

    def to_value(self) -> T:
        """Raw value of this identifier, as given"""
        return self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Identifier) and self.equals(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class UniqueEntityIdExceptions(str, Enum):
    NOT_VALID_UUID = "UniqueEntityIdNotValidUUID"


class UniqueEntityId(Identifier[str]):
    """
    UUID identity of an entity.

    Always obtained through `UniqueEntityId.create`:
        - no input             -> a fresh UUIDv4
        - a UniqueEntityId     -> the same instance
        - a valid UUID string  -> wrapped
        - anything else        -> Err(NOT_VALID_UUID)
    """

    @classmethod
    def create(
        cls, id: Optional[Union[str, "UniqueEntityId"]] = None
    ) -> Result["UniqueEntityId", UniqueEntityIdExceptions]:
        if id is None or id == "":
            return Ok(cls(str(uuid.uuid4())))
        if isinstance(id, UniqueEntityId):
            return Ok(id)
        if is_valid_uuid(id):
            return Ok(cls(id))
        return Err(UniqueEntityIdExceptions.NOT_VALID_UUID)


# ============================================================================
# Value objects
# ============================================================================

class ValueObject(Generic[P]):
    """
    Immutable value without identity.

    Props are a frozen dataclass (or None for valueless markers); two value
    objects with equal props are interchangeable. Subclasses expose a
    `create` factory returning a Result and never build instances that fail
    their own validation.
    """

    def __init__(self, props: Optional[P]):
        self._props = props

    @property
    def props(self) -> Optional[P]:
        return self._props

    def equals(self, other: Optional["ValueObject[P]"]) -> bool:
        if other is None:
            return False
        if type(other) is not type(self):
            return False
        if other.props is None:
            return False
        return self._props == other.props

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._props))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._props!r})"


# ============================================================================
# Entities
# ============================================================================

class Entity(Generic[P]):
    """
    Domain object with a persistent identity.

    Entities are the first place to put domain logic: what a model can do,
    when it can do it, and which conditions govern it. Two entities are the
    same entity when their ids match, whatever their props say ("same row,
    different snapshot").

    Props may change over the entity's life, but only through the entity's
    own methods.
    """

    def __init__(self, props: P, id: Optional[UniqueEntityId] = None):
        self._id = id if id is not None else UniqueEntityId.create().value
        self._props = props

    @property
    def id(self) -> UniqueEntityId:
        return self._id

    @property
    def props(self) -> P:
        return self._props

    def equals(self, other: Optional["Entity[Any]"]) -> bool:
        if other is None:
            return False
        if self is other:
            return True
        if not isinstance(other, Entity):
            return False
        return self._id.equals(other._id)

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        name = type(self).__name__
        if is_dataclass(self._props) and not isinstance(self._props, type):
            items = [(f.name, getattr(self._props, f.name)) for f in fields(self._props)]
        elif isinstance(self._props, Mapping):
            items = list(self._props.items())
        else:
            return name
        joined = ", ".join(f"{key}: {to_string_debug(value)}" for key, value in items)
        return f"{name} ({joined})"


class AggregateRoot(Entity[P]):
    """
    Entity guarding a cluster of sub-entities.

    Outside code never mutates the sub-entities directly; every change goes
    through a method of the root, which keeps the cluster's invariants in one
    place and maps to a single transactional unit.
    """
