"""Representation derivation for values that reached an unreachable branch.

Turns an arbitrary object into the most actionable text available, in order:

1. its own ``str()``, when its type customizes ``__str__`` or ``__repr__``
2. a JSON encoding via msgspec, for ``None``, plain dicts and objects that only
   have the generic ``<pkg.Cls object at 0x...>`` representation
3. a composite of whatever text was available plus the encoding error

None of these steps lets an exception escape.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

import msgspec

__all__ = [
    'Representation',
    'Strategy',
    'derive_representation',
    'describe',
]


class Strategy(Enum):
    """Which derivation step produced a representation."""

    NATURAL = 'natural'
    SERIALIZED = 'serialized'
    COMPOSITE = 'composite'


class Representation(msgspec.Struct, frozen=True, gc=False):
    """Text describing an offending value.

    Attributes:
        text: The representation to embed in the error message.
        strategy: The derivation step that produced ``text``.
        type_name: Fully qualified name of the value's type.
    """

    text: str
    strategy: Strategy
    type_name: str


def _type_name(value: object) -> str:
    cls = type(value)
    if cls.__module__ == 'builtins':
        return cls.__qualname__
    return f'{cls.__module__}.{cls.__qualname__}'


def _has_generic_repr(value: object) -> bool:
    """Return True when str(value) would be the default object repr."""
    cls = type(value)
    return cls.__str__ is object.__str__ and cls.__repr__ is object.__repr__


def _natural(value: object) -> tuple[str | None, Exception | None]:
    """Step 1: the value's own text, or None when absent or uninformative."""
    if value is None or _has_generic_repr(value):
        return None, None
    try:
        text = str(value)
    except Exception as exc:  # noqa: BLE001
        return None, exc
    if not text:
        return None, None
    return text, None


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = getattr(klass, '__slots__', ())
        names.extend([slots] if isinstance(slots, str) else slots)
    return [name for name in names if name not in ('__dict__', '__weakref__')]


def _plain_fields(obj: object) -> dict[str, Any] | None:
    """Instance fields of an object that only has the generic repr."""
    if isinstance(obj, type) or not _has_generic_repr(obj):
        return None
    fields = getattr(obj, '__dict__', None)
    if fields is not None:
        return dict(fields)
    names = _slot_names(type(obj))
    if names:
        return {name: getattr(obj, name) for name in names if hasattr(obj, name)}
    return None


def _children(obj: object) -> list[Any]:
    if isinstance(obj, dict):
        return [*obj.keys(), *obj.values()]
    if isinstance(obj, (list, tuple, set, frozenset)):
        return list(obj)
    if isinstance(obj, msgspec.Struct):
        return [getattr(obj, name) for name in obj.__struct_fields__]
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return [getattr(obj, field.name) for field in dataclasses.fields(obj)]
    fields = _plain_fields(obj)
    return list(fields.values()) if fields is not None else []


def _check_acyclic(obj: object, ancestors: set[int] | None = None) -> None:
    """Raise msgspec.EncodeError if ``obj`` contains itself."""
    ancestors = set() if ancestors is None else ancestors
    children = _children(obj)
    if not children:
        return
    key = id(obj)
    if key in ancestors:
        msg = f'Circular reference detected in {_type_name(obj)}'
        raise msgspec.EncodeError(msg)
    ancestors.add(key)
    try:
        for child in children:
            _check_acyclic(child, ancestors)
    finally:
        ancestors.discard(key)


def _enc_hook(obj: Any) -> Any:
    """Expose plain instance fields msgspec does not know how to encode."""
    fields = _plain_fields(obj)
    if fields is not None:
        return fields
    msg = f'Encoding objects of type {_type_name(obj)} is unsupported'
    raise NotImplementedError(msg)


def _serialize(value: object, *, pretty: bool) -> str:
    """Step 2: JSON via msgspec. Raises whatever msgspec raises."""
    _check_acyclic(value)
    encoded = msgspec.json.encode(value, enc_hook=_enc_hook)
    if pretty:
        encoded = msgspec.json.format(encoded, indent=2)
    return encoded.decode()


def _composite(
    value: object,
    natural: str | None,
    natural_error: Exception | None,
    serialize_error: Exception,
) -> str:
    """Step 3: fold the secondary errors into the text."""
    if natural is not None:
        partial = natural
    elif natural_error is not None:
        partial = f'<{_type_name(value)} object; str() failed: {type(natural_error).__name__}: {natural_error}>'
    else:
        partial = f'<{_type_name(value)} object>'
    return f'{partial} (serialization failed: {type(serialize_error).__name__}: {serialize_error})'


def derive_representation(value: object, *, pretty: bool = False) -> Representation:
    """Derive the most informative text for ``value`` without raising.

    The text is deterministic for a given value. JSON keys keep the dict's
    insertion order, so two equal dicts built in different orders produce
    different (but equally decodable) text.

    Args:
        value: Any object, typically one that slipped past a type checker.
        pretty: Indent the JSON fallback by two spaces.

    Returns:
        A Representation recording the text and the step that produced it.

    Example:
        ```python
        derive_representation({"kind": "Stopped", "signal": 11})
        # Representation(text='{"kind":"Stopped","signal":11}', strategy=<Strategy.SERIALIZED: 'serialized'>, type_name='dict')

        derive_representation(ProcessStatus.STOPPED)
        # Representation(text='Stopped', strategy=<Strategy.NATURAL: 'natural'>, ...)
        ```
    """
    type_name = _type_name(value)
    natural, natural_error = _natural(value)

    if natural is not None and type(value) is not dict:
        return Representation(natural, Strategy.NATURAL, type_name)

    try:
        serialized = _serialize(value, pretty=pretty)
    except Exception as exc:  # noqa: BLE001
        text = _composite(value, natural, natural_error, exc)
        return Representation(text, Strategy.COMPOSITE, type_name)

    return Representation(serialized, Strategy.SERIALIZED, type_name)


def describe(value: object, *, pretty: bool = False) -> str:
    """Return only the text of :func:`derive_representation`."""
    return derive_representation(value, pretty=pretty).text
