"""
Exception hierarchy for the SIMM core package.

Each error also derives from the builtin exception callers would
naturally catch for the same condition.
"""


class SimmCoreError(Exception):
    """Base class for all errors raised by simm_core."""


class ConfigurationError(SimmCoreError, ValueError):
    """Malformed construction input: bad tenor, unknown enum name, currency mismatch."""


class CapabilityError(SimmCoreError, TypeError):
    """A product lacks an optional capability the caller requires."""


class ValuationError(SimmCoreError, RuntimeError):
    """Failure while pricing a product or reading the simulation model."""
