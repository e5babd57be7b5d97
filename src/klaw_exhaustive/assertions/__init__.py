"""Assertion utilities: assert_unreachable and its aliases."""

from klaw_exhaustive.assertions.never import assert_never, assert_unreachable, exhaustive

__all__ = [
    'assert_never',
    'assert_unreachable',
    'exhaustive',
]
