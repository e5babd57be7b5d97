"""assert_unreachable: runtime backstop for static exhaustiveness checks.

Provides the helper to call in the fallback arm of a ``match`` or ``if``
chain over a closed set of variants:
- Type checkers flag the call when a variant is left unhandled
- At runtime it always raises UnreachableVariantReached
"""

from __future__ import annotations

from typing import Never

from klaw_exhaustive._config import get_config
from klaw_exhaustive._logging import get_logger
from klaw_exhaustive.describe import Representation, Strategy, derive_representation
from klaw_exhaustive.errors import UnreachableVariantReached

__all__ = ['assert_never', 'assert_unreachable', 'exhaustive']


def _log_reached(representation: Representation) -> None:
    logger = get_logger(__name__)
    fields = {'type_name': representation.type_name, 'strategy': representation.strategy.value}
    match representation.strategy:
        case Strategy.NATURAL | Strategy.SERIALIZED:
            logger.debug('unreachable_variant_reached', **fields)
        case Strategy.COMPOSITE:
            logger.warning('unreachable_variant_reached', **fields)
        case _:
            assert_unreachable(representation.strategy)


def assert_unreachable(value: Never) -> Never:
    """Fail loudly when a value reaches a branch the type checker proved unreachable.

    Call it in the ``case _`` arm of a ``match`` (or the final ``else``) that
    handles every variant of a closed type. mypy and pyright narrow the
    subject to ``Never`` once every variant is handled, so adding a variant
    without handling it becomes a type error at this call. Code that is not
    type-checked gets no static guarantee; the call is then only a runtime
    guard.

    The helper is a ``raise``, not an ``assert``, so it still fires under
    ``python -O``.

    Args:
        value: The narrowed subject. Statically ``Never``; at runtime anything
            that slipped through (casts, untyped input, ``# type: ignore``).

    Raises:
        UnreachableVariantReached: Always, with the best available
            representation of ``value`` at the end of the message.

    Example:
        ```python
        class Exited(msgspec.Struct, tag=True):
            code: int

        class Signaled(msgspec.Struct, tag=True):
            signal: int

        type ProcessStatus = Exited | Signaled

        def succeeded(status: ProcessStatus) -> bool:
            match status:
                case Exited(code=code):
                    return code == 0
                case Signaled():
                    return False
                case _:
                    assert_unreachable(status)
        ```
    """
    config = get_config()
    representation = derive_representation(value, pretty=config.pretty)

    if config.log_level is not None:
        _log_reached(representation)

    raise UnreachableVariantReached(representation, value)


# Drop-in name for code written against typing.assert_never
assert_never = assert_unreachable

exhaustive = assert_unreachable
