"""Attribute matchers backing :meth:`SquareSet.where`.

A query value is coerced into one of four matcher variants::

    Nested     {"player_number": 1}   every sub-attribute must match
    OneOf      [1, 2]                 value must be one of these
    Predicate  lambda v: v > 3        value must satisfy the callable
    Equals     2                      value must equal this

The order above is the coercion precedence used by :func:`to_matcher`.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

_COLLECTION_TYPES = (list, tuple, set, frozenset)


def read_attribute(obj: Any, name: str) -> Any:
    """Read *name* from a record (mapping) or from an object attribute."""
    if isinstance(obj, Mapping):
        return obj[name]
    return getattr(obj, name)


@dataclass(frozen=True, slots=True)
class Equals:
    value: Any

    def matches(self, candidate: Any) -> bool:
        return bool(candidate == self.value)


@dataclass(frozen=True, slots=True)
class OneOf:
    values: Collection[Any]

    def matches(self, candidate: Any) -> bool:
        # A collection-valued attribute is compared as a whole.
        if isinstance(candidate, _COLLECTION_TYPES):
            return bool(candidate == self.values)
        return candidate in self.values


@dataclass(frozen=True, slots=True)
class Predicate:
    fn: Callable[[Any], Any]

    def matches(self, candidate: Any) -> bool:
        return bool(self.fn(candidate))


@dataclass(frozen=True, slots=True)
class Nested:
    """Match several attributes of the candidate at once."""

    fields: Mapping[str, Matcher] = field(default_factory=dict)

    def matches(self, candidate: Any) -> bool:
        if candidate is None:
            return False
        return all(
            matcher.matches(read_attribute(candidate, name))
            for name, matcher in self.fields.items()
        )


Matcher: TypeAlias = Equals | OneOf | Predicate | Nested

_MATCHER_TYPES = (Equals, OneOf, Predicate, Nested)


def to_matcher(value: Any) -> Matcher:
    """Coerce a plain query value into a matcher."""
    if isinstance(value, _MATCHER_TYPES):
        return value
    if isinstance(value, Mapping):
        return nested(value)
    if isinstance(value, _COLLECTION_TYPES):
        return OneOf(value)
    if callable(value):
        return Predicate(value)
    return Equals(value)


def nested(attributes: Mapping[str, Any]) -> Nested:
    """Build one :class:`Nested` matcher from an attribute → query mapping."""
    return Nested({name: to_matcher(query) for name, query in attributes.items()})
