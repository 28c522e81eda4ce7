"""String enumerations."""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, field_serializer
from typing_extensions import Self


class Name(str, Enum):
    """Name."""

    __slots__ = ()

    @classmethod
    def values(cls) -> list[str]:
        """All admissible values."""
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value: "str | Self") -> Self:
        """Parse a value, accepting either a member or its string value.

        Args:
            value (str | Self): Value to parse.

        Raises:
            ValueError: If the value is not a member value.

        Returns:
            Self: Member.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            msg = (
                f"Unrecognized {cls.__name__} value: {value!r}. "
                f"Expected one of {', '.join(cls.values())}."
            )
            raise ValueError(msg) from None


T = TypeVar("T", bound=Enum)


class NamedObject(Generic[T]):
    """Object identified by a name enumeration member."""

    _type: T

    @classmethod
    def get_type(cls) -> T:
        """Get the object name type.

        Returns:
            T: Name Enum.
        """
        return cls._type


class NamedObjectConfig(BaseModel, Generic[T]):
    """Named object config."""

    type: T

    @field_serializer("type")
    def serialize_type_as_str(self, t: T) -> str:
        """Serialize type as str.

        Args:
            t (T): Type.

        Returns:
            str: Type value.
        """
        return t.value
