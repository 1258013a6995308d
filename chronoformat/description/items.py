"""Items that make up a format description."""

from typing import Any, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

from .component import Component


class _Item(BaseModel):
    model_config = ConfigDict(frozen=True)


class Literal(_Item):
    """Bytes that are written verbatim and must appear verbatim when parsing."""

    value: bytes

    def __init__(self, value: bytes, **kwargs: Any):
        super().__init__(value=value, **kwargs)


class StringLiteral(_Item):
    """Text that is written verbatim and must appear verbatim when parsing."""

    value: str

    def __init__(self, value: str, **kwargs: Any):
        super().__init__(value=value, **kwargs)


def _check_item(value: Any) -> Any:
    if isinstance(value, ITEM_TYPES):
        return value
    if isinstance(value, (list, tuple)):
        return Compound(value)
    raise ValueError(f"{value!r} is not a format description item")


class Optional(_Item):
    """An item that is parsed if possible and otherwise consumes nothing."""

    item: Any

    def __init__(self, item: Any, **kwargs: Any):
        super().__init__(item=item, **kwargs)

    @field_validator("item")
    @classmethod
    def validate_item(cls, v: Any) -> Any:
        """Accept a single item, or a sequence of items as a compound."""
        return _check_item(v)


class First(_Item):
    """Alternatives tried in order; the first one that parses is kept."""

    items: Tuple[Any, ...]

    def __init__(self, items: Sequence[Any], **kwargs: Any):
        super().__init__(items=tuple(items), **kwargs)

    @field_validator("items")
    @classmethod
    def validate_items(cls, v: Tuple[Any, ...]) -> Tuple[Any, ...]:
        """Validate each alternative."""
        return tuple(_check_item(item) for item in v)


class Compound(_Item):
    """A sequence of items treated as one."""

    items: Tuple[Any, ...]

    def __init__(self, items: Sequence[Any], **kwargs: Any):
        super().__init__(items=tuple(items), **kwargs)

    @field_validator("items")
    @classmethod
    def validate_items(cls, v: Tuple[Any, ...]) -> Tuple[Any, ...]:
        """Validate each item of the sequence."""
        return tuple(_check_item(item) for item in v)


ITEM_TYPES = (Literal, StringLiteral, Component, Optional, First, Compound)

FormatItem = Union[Literal, StringLiteral, Component, Optional, First, Compound]
