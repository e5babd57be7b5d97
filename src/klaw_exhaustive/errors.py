"""Unreachable-variant error: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

from klaw_exhaustive.describe import Representation, Strategy

__all__ = [
    'NARROWING_DOCS_URL',
    'UnreachableVariant',
    'UnreachableVariantReached',
    'compose_message',
]

NARROWING_DOCS_URL = 'https://typing.readthedocs.io/en/latest/guides/unreachable.html'


def compose_message(text: str) -> str:
    """Build the full error message around a value's representation."""
    return (
        'Static type-checking should have made it impossible to end up on this code path at runtime '
        f'(see {NARROWING_DOCS_URL} for an explanation). '
        f'The value that has somehow slipped through is: {text}'
    )


class UnreachableVariant(msgspec.Struct, frozen=True, gc=False):
    """A value reached an unreachable branch - struct variant for Result[T, UnreachableVariant]."""

    representation: str
    strategy: Strategy = Strategy.NATURAL
    type_name: str = ''

    def to_exception(self) -> UnreachableVariantReached:
        """Convert to exception for raise-based code."""
        return UnreachableVariantReached(Representation(self.representation, self.strategy, self.type_name))


class UnreachableVariantReached(AssertionError):
    """A value reached an unreachable branch - exception variant.

    Subclasses AssertionError so pytest and existing ``except AssertionError``
    boundaries report it as a failed assertion.

    Attributes:
        representation: Text derived from the offending value.
        strategy: How ``representation`` was derived.
        type_name: Fully qualified type name of the offending value.
        value: The offending value itself, or None when rebuilt from a struct.
    """

    def __init__(self, representation: Representation, value: object = None) -> None:
        self.representation = representation.text
        self.strategy = representation.strategy
        self.type_name = representation.type_name
        self.value = value
        super().__init__(compose_message(representation.text))

    def __reduce__(self) -> tuple[type[UnreachableVariantReached], tuple[Representation, object]]:
        # pickle and copy rebuild from __init__ arguments, not from self.args
        return self.__class__, (Representation(self.representation, self.strategy, self.type_name), self.value)

    def to_struct(self) -> UnreachableVariant:
        """Convert to struct for Result-based code."""
        return UnreachableVariant(self.representation, self.strategy, self.type_name)
