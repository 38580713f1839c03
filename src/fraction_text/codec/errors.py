"""Error taxonomy for the fraction codec.

User-facing failures derive from ``FractionError`` and are converted to a
``None`` result by ``FractionFormatter``. ``FractionDefect`` marks an
internal precondition violation and is never swallowed.
"""


class FractionError(ValueError):
    """Base class for recoverable parse/format failures."""


class MalformedInput(FractionError):
    """Empty text, unsupported characters or too many components."""


class InvalidFraction(FractionError):
    """Slash expression without two parts, zero denominator or non-finite quotient."""


class InvalidConfiguration(FractionError):
    """Configuration value the codec cannot work with."""


class Unrepresentable(FractionError):
    """Value has no rendering in the requested Unicode style."""


class FractionDefect(RuntimeError):
    """Internal precondition violated by a caller inside the codec."""
