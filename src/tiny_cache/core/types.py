"""
Type checks for typed lookups.
Why: a stored value of the wrong type must read back as absent, explicitly.
"""

from functools import lru_cache
from typing import Any, Dict, Tuple, get_origin

from pydantic import ConfigDict, TypeAdapter, ValidationError

# int may stand in for float, int/float for complex; bool never does.
_PROMOTIONS: Dict[type, Tuple[type, ...]] = {
    float: (int,),
    complex: (int, float),
}
_NUMBERS = (int, float, complex)


@lru_cache(maxsize=256)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_, config=ConfigDict(arbitrary_types_allowed=True))


def matches_type(value: Any, type_: Any) -> bool:
    """Return True when ``value`` can be handed back as ``type_``.

    Plain classes use ``isinstance`` plus the numeric promotions pydantic's
    strict mode also applies (an ``int`` reads back as ``float``). ``bool`` is
    kept apart from the numeric types so a flag never reads back as a number
    or the reverse. Parametrised generics and unions are checked with a strict
    pydantic ``TypeAdapter``; item classes pydantic has no schema for are
    checked with ``isinstance``.
    """
    if type_ is Any or type_ is object:
        return True
    if isinstance(type_, type) and get_origin(type_) is None:
        if isinstance(value, bool):
            return type_ is bool or (not issubclass(type_, _NUMBERS) and isinstance(value, type_))
        if isinstance(value, _PROMOTIONS.get(type_, ())):
            return True
        return isinstance(value, type_)
    try:
        _adapter(type_).validate_python(value, strict=True)
    except ValidationError:
        return False
    return True
