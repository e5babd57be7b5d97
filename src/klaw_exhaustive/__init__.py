"""klaw-exhaustive: runtime backstop for static exhaustiveness checks.

Flat imports (preferred):
    from klaw_exhaustive import assert_unreachable, UnreachableVariantReached

Submodule imports (for organization):
    from klaw_exhaustive.assertions import assert_unreachable, exhaustive
    from klaw_exhaustive.describe import describe, derive_representation
    from klaw_exhaustive.errors import UnreachableVariant, UnreachableVariantReached
"""

# Configuration
from klaw_exhaustive._config import ExhaustiveConfig, configure, get_config, reset_config

# Assertions
from klaw_exhaustive.assertions import assert_never, assert_unreachable, exhaustive

# Representation
from klaw_exhaustive.describe import Representation, Strategy, derive_representation, describe

# Errors
from klaw_exhaustive.errors import UnreachableVariant, UnreachableVariantReached, compose_message

__all__ = [
    'ExhaustiveConfig',
    'Representation',
    'Strategy',
    'UnreachableVariant',
    'UnreachableVariantReached',
    'assert_never',
    'assert_unreachable',
    'compose_message',
    'configure',
    'derive_representation',
    'describe',
    'exhaustive',
    'get_config',
    'reset_config',
]
