from typing import Any, Dict, List, Optional, Union

import attrs
from attrs import field

from fixbytes.size import Size
from fixbytes.types import Json


def size_field(
    default: Union[None, str, int] = None,
    description: Optional[str] = None,
    **kwargs: Any,
) -> Any:
    """
    Define an attrs field that holds a size.
    The field accepts a size string ("4MiB"), a number of bytes or a Size and always stores a Size.

    @define
    class CacheConfig:
        kind: ClassVar[str] = "cache"
        size: Size = size_field("512MiB", "Maximum size of the cache")

    :param default: the default value of the field. None defines a mandatory field.
    :param description: the description of the field, stored in the field metadata.
    :param kwargs: passed to attrs.field.
    """
    metadata: Dict[str, Any] = dict(kwargs.pop("metadata", None) or {})
    metadata["size"] = True
    if description is not None:
        metadata["description"] = description
    if default is not None:
        # fail early on invalid defaults
        kwargs["default"] = Size.parse(default)
    return field(converter=Size.parse, metadata=metadata, **kwargs)


def size_fields(clazz: type) -> List[Json]:
    """
    Describe all size fields of the given attrs class.
    Every element has the name of the field, the default as text (if there is one)
    and the description (if there is one).
    """
    result: List[Json] = []
    for attr in attrs.fields(clazz):
        if attr.metadata.get("size"):
            description: Json = {"name": attr.name}
            if attr.default is not attrs.NOTHING:
                description["default"] = Size.parse(attr.default).to_text()
            if "description" in attr.metadata:
                description["description"] = attr.metadata["description"]
            result.append(description)
    return result
