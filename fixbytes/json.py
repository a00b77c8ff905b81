import json
from typing import TypeVar, Any, Type, Optional, Union, Callable, Iterable

import attrs
import cattrs
from cattrs import override
from cattrs.gen import make_dict_unstructure_fn

from fixbytes.logger import log
from fixbytes.size import Size
from fixbytes.types import Json, JsonElement, TextSerializable

AnyT = TypeVar("AnyT")

# the global converter instance
# errors are not collected, so parse errors surface unchanged
__converter = cattrs.Converter(detailed_validation=False)

# ignore all private attributes
__converter.register_unstructure_hook_factory(
    attrs.has,
    lambda cls: make_dict_unstructure_fn(
        cls,
        __converter,
        _cattrs_omit_if_default=False,
        _cattrs_use_linecache=True,
        _cattrs_use_alias=False,
        _cattrs_include_init_false=False,
        **{a.name: override(omit=True) for a in attrs.fields(cls) if a.name.startswith("_")},
    ),
)


# allow sizes either as number of bytes or as size string
def size_from_json(js: Any) -> Size:
    if isinstance(js, str):
        return Size.from_text(js)
    elif isinstance(js, int) and not isinstance(js, bool):
        return Size(js)
    else:
        raise ValueError(f"Cannot convert {js} to Size")


def register_json(
    cls: Type[AnyT],
    to_json_fn: Optional[Callable[[AnyT], JsonElement]] = None,
    from_json_fn: Optional[Callable[[Any], AnyT]] = None,
) -> None:
    """
    Register a json marshaller/unmarshaller for the given class.
    :param cls: the class to register
    :param to_json_fn: the function to convert the class to json
    :param from_json_fn: the function to convert json to the class
    """
    log.trace("Register json structure hooks for class %s", cls.__name__)
    if from_json_fn is not None:
        __converter.register_structure_hook(cls, lambda obj, _: from_json_fn(obj))
    if to_json_fn is not None:
        __converter.register_unstructure_hook(cls, to_json_fn)


def register_text(cls: Type[TextSerializable]) -> None:
    """
    Register a class that is written as text and read from text.
    The class has to provide to_text and the class method from_text.
    """
    if not issubclass(cls, TextSerializable):
        raise TypeError(f"{cls.__name__} does not provide to_text and from_text")
    register_json(cls, lambda obj: obj.to_text(), cls.from_text)


register_json(Size, Size.to_text, size_from_json)


def to_json_str(node: Any, strip_attr: Union[None, str, Iterable[str]] = None, strip_nulls: bool = False) -> str:
    try:
        return json.dumps(to_json(node, strip_attr, strip_nulls))
    except Exception as e:
        log.debug(f"Can not serialize object {node} to json. Error: {e}")
        raise


def to_json(
    node: Any,
    strip_attr: Union[None, str, Iterable[str]] = None,
    strip_nulls: bool = False,
) -> Json:
    """
    Use this method, if the given node is known as complex object,
    so the result will be a json object.
    """

    def walk_js_object(js: Json, filter_fn: Optional[Callable[[str, Any], bool]] = None) -> Json:
        result: Json = {}
        for k, v in js.items():
            if filter_fn and not filter_fn(k, v):
                continue
            if isinstance(v, dict):
                v = walk_js_object(v, filter_fn)
            elif isinstance(v, (list, tuple)):
                v = [walk_js_object(e, filter_fn) if isinstance(e, dict) else e for e in v]
            result[k] = v
        return result

    unstructured: Json = __converter.unstructure(node)
    if strip_attr:
        remove_keys = {strip_attr} if isinstance(strip_attr, str) else set(strip_attr)
        unstructured = walk_js_object(unstructured, lambda k, v: k not in remove_keys)

    if strip_nulls:
        unstructured = walk_js_object(unstructured, lambda k, v: v is not None)

    return unstructured


def from_json(js: JsonElement, clazz: Type[AnyT]) -> AnyT:
    """
    Loads a json object into a python object.
    :param js: the json object to load.
    :param clazz: the type of the python object.
    :return: the loaded python object.
    """
    try:
        return __converter.structure(js, clazz)
    except Exception as e:
        log.debug(f"Can not deserialize json into class {clazz.__name__}: {js}. Error: {e}")
        raise


def from_json_str(js: str, clazz: Type[AnyT]) -> AnyT:
    return from_json(json.loads(js), clazz)
