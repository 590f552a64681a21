from typing import Any, ClassVar
from ..types.color_types import ColorSpace
from .encoding_base import EncodingBase


class Name(EncodingBase):
    """
    A key into the named-color table.

    Membership is not checked here; converting an unknown name raises
    ``UnknownNameError``.
    """

    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.NAME

    @classmethod
    def _validate(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise TypeError(f"name expects a string, got {value!r}")
        if not value:
            raise ValueError("name must not be empty")
        return value

    def __str__(self) -> str:
        return self._value
