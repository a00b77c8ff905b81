from typing import Dict, Any, Union, Mapping, Sequence, TypeVar, Type, Protocol, runtime_checkable

# mypy does not support recursive type definitions
# See discussion here: https://github.com/python/typing/issues/182
Json = Dict[str, Any]
JsonElement = Union[str, int, float, bool, None, Mapping[str, Any], Sequence[Any]]

TextT = TypeVar("TextT", bound="TextSerializable")


@runtime_checkable
class TextSerializable(Protocol):
    """
    A value that can be written as text and read back from text.
    Structured formats (json, yaml, config sections) store such values as string fields.
    """

    def to_text(self) -> str:
        ...

    @classmethod
    def from_text(cls: Type[TextT], text: str) -> TextT:
        ...
