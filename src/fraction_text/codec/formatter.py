"""
FractionFormatter: the owning instance of the fraction codec.

The formatter holds a ``FractionConfig`` and exposes the public operations.
Every failure surfaces as ``None``; the reason is logged at debug level.

Usage:
    >>> from fraction_text import FractionFormatter, FractionType
    >>> formatter = FractionFormatter()
    >>> formatter.format_number(1.5)
    '1½'
    >>> formatter.format_number(1.5, FractionType.BUILT_UP)
    '1 1/2'
    >>> formatter.parse_to_number("-1 1/2")
    -1.5

Instances are not thread-safe. Confine one to a single thread/task, or hand
out ``copy()`` clones to concurrent users.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from fraction_text.codec import parser, renderer
from fraction_text.codec.config import CaseFractionStyle, FractionConfig, FractionType
from fraction_text.codec.constants import SLASH
from fraction_text.codec.errors import FractionError, MalformedInput
from fraction_text.codec.normalizer import normalize_division_separators
from fraction_text.codec.renderer import FractionValue
from fraction_text.config import Settings, get_settings
from fraction_text.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class StyledFraction:
    """Case-fraction text plus the typography hint a rich-text renderer applies."""

    text: str
    style: CaseFractionStyle

    @property
    def opentype_feature(self) -> str:
        return self.style.opentype_feature


class FractionFormatter:
    """Bidirectional converter between numbers and fraction text."""

    def __init__(self, config: Optional[FractionConfig] = None, **overrides: Any) -> None:
        """
        Args:
            config: Configuration to own (defaults to ``FractionConfig()``)
            **overrides: Field overrides applied on top of ``config``
        """
        if config is None:
            config = FractionConfig(**overrides)
        elif overrides:
            config = FractionConfig(**{**dict(config), **overrides})
        self.config = config

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "FractionFormatter":
        """Create a formatter configured from application settings."""
        if settings is None:
            settings = get_settings()
        return cls(FractionConfig.from_settings(settings))

    def copy(self) -> "FractionFormatter":
        return FractionFormatter(self.config.model_copy(deep=True))

    # --- Parsing ---------------------------------------------------------------
    def parse_to_number(self, text: str) -> Optional[float]:
        """Parse fraction-like text (``"1 1/2"``, ``"1½"``, ``"¹⁄₂"``) into a float."""
        try:
            return parser.parse(text, self.config)
        except FractionError as exc:
            logger.debug(
                "fraction.parse_failed",
                text=text,
                reason=type(exc).__name__,
                error=str(exc),
            )
            return None

    # --- Formatting ------------------------------------------------------------
    def format_number(
        self, value: float, style: FractionType = FractionType.UNICODE
    ) -> Optional[str]:
        """Format ``value`` as fraction text in the requested notation."""
        try:
            return renderer.render(value, style, self.config)
        except FractionError as exc:
            logger.debug(
                "fraction.format_failed",
                value=value,
                style=FractionType(style).value,
                reason=type(exc).__name__,
                error=str(exc),
            )
            return None

    def decompose(self, value: float) -> Optional[FractionValue]:
        try:
            return renderer.decompose(value, self.config)
        except FractionError as exc:
            logger.debug("fraction.decompose_failed", value=value, error=str(exc))
            return None

    def format_text(
        self, text: str, style: FractionType = FractionType.UNICODE
    ) -> Optional[str]:
        """
        Re-format fraction-like text.

        Unicode and case-fraction output go through ``parse_to_number``.
        Built-up output converts the text directly, so ``"1¹²³⁄₁₀₀₀"``
        becomes ``"1 123/1000"`` without a float round trip.
        """
        if FractionType(style) is FractionType.BUILT_UP:
            return self.to_built_up_text(text)
        value = self.parse_to_number(text)
        if value is None:
            return None
        return self.format_number(value, style)

    def to_built_up_text(self, text: str) -> Optional[str]:
        """Convert any accepted fraction notation to built-up text."""
        try:
            return self._built_up_from_text(text)
        except FractionError as exc:
            logger.debug(
                "fraction.built_up_failed",
                text=text,
                reason=type(exc).__name__,
                error=str(exc),
            )
            return None

    def _built_up_from_text(self, text: str) -> str:
        trimmed = text.strip()
        if not trimmed:
            raise MalformedInput("Empty input")

        value = parser.strict_number(trimmed, self.config)
        if value is None:
            value = parser.parse_vulgar_fraction(trimmed, self.config)
        if value is not None:
            return renderer.render(value, FractionType.BUILT_UP, self.config)

        # Reject anything the parser would not accept
        value = parser.parse(trimmed, self.config)

        normalized = normalize_division_separators(trimmed, self.config)
        if parser.has_scripted_fraction(normalized):
            integer, fraction = parser.decode_scripted_fraction(normalized, self.config)
            return parser.join_decoded_parts(
                integer, fraction, self.config.built_up_whole_fraction_separator
            )

        parts = normalized.split()
        if len(parts) == 2 and SLASH in parts[1]:
            return self.config.built_up_whole_fraction_separator.join(parts)
        if len(parts) == 1 and SLASH in parts[0]:
            return parts[0]
        return renderer.render(value, FractionType.BUILT_UP, self.config)

    # --- Collaborator hooks ----------------------------------------------------
    @property
    def typography_hint(self) -> CaseFractionStyle:
        """Fraction style a rich-text renderer should request for case fractions."""
        return self.config.case_fraction_style

    def styled(self, value: float) -> Optional[StyledFraction]:
        """Case-fraction text paired with the configured typography hint."""
        text = self.format_number(value, FractionType.CASE_FRACTION)
        if text is None:
            return None
        return StyledFraction(text=text, style=self.config.case_fraction_style)

    def measurement_hook(
        self, style: FractionType = FractionType.UNICODE
    ) -> Callable[[str], str]:
        """
        Number renderer for a unit formatter's composition pipeline.

        The returned callable takes the numeric text a unit formatter produced
        and returns the fraction rendering, or the input unchanged when it
        cannot be converted.
        """

        def render_numeric_text(numeric_text: str) -> str:
            formatted = self.format_text(numeric_text, style)
            return numeric_text if formatted is None else formatted

        return render_numeric_text

    def __repr__(self) -> str:
        return f"FractionFormatter(policy={self.config.reduction_policy!r})"


__all__ = ["FractionFormatter", "StyledFraction"]
