"""
:mod:`jsonobj` holds a plain data object and a JSON round trip that
keeps the type of deserialized objects.

.. doctest::

   >>> from jsonobj import Rectangle, get_json, from_json
   >>> r = Rectangle(10, 20)
   >>> r.area
   200
   >>> get_json(r)
   '{"width":10,"height":20}'
   >>> from_json(Rectangle, '{"width":3,"height":4}').area
   12
"""

import json
import logging
from typing import Any, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JSONObjectError(Exception):
    """
    Exception raised when :func:`from_json` is given JSON that does not
    encode an object.

    Attributes:
        value: The decoded value.
    """

    def __init__(self, value: Any) -> None:
        self.value = value

    def __str__(self) -> str:
        return "expecting a JSON object, got %s" % type(self.value).__name__


class Rectangle:
    """
    A rectangle with a computed area.

    Attributes:
        width  (:class:`float`)
        height (:class:`float`)
    """

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def __repr__(self) -> str:
        return "<Rectangle %sx%s>" % (self.width, self.height)

    @property
    def area(self) -> float:
        return self.width * self.height


def _default(obj: Any) -> Any:
    try:
        return vars(obj)
    except TypeError:
        raise TypeError(
            "object of type %s is not JSON serializable" % type(obj).__name__
        ) from None


def get_json(obj: Any) -> str:
    """
    Serializes `obj` into compact JSON.

    Plain objects are serialized through their instance attributes, so
    computed properties are left out.
    """
    return json.dumps(obj, separators=(",", ":"), default=_default)


def from_json(cls: Type[T], s: str) -> T:
    """
    Deserializes a JSON object into an instance of `cls`.

    The instance is created without calling ``cls.__init__``; the keys
    of the JSON object become its attributes, so methods and properties
    of `cls` are available on the result.

    :class:`JSONObjectError` is raised if `s` does not encode an object.

    Args:
        cls: class of the returned object
        s:   input JSON string

    Returns:
        The populated instance.
    """
    data = json.loads(s)
    if not isinstance(data, dict):
        raise JSONObjectError(data)
    obj = cls.__new__(cls)  # type: ignore
    obj.__dict__.update(data)
    logger.debug("deserialized %s with keys %s", cls.__name__, list(data))
    return obj
