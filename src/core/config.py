"""Runtime configuration model for Pareto analysis.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os
from pathlib import Path

from core.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_TARGET_SHARES,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import ParetoConfigError


@dataclass(frozen=True)
class ParetoConfig:
    """Validated runtime configuration.

    Attributes:
        output_dir: Directory where exported reports are written.
        default_target_shares: Target shares used when a caller gives none.
        log_level: Minimum structured log level.
    """

    output_dir: Path
    default_target_shares: tuple[Decimal, ...]
    log_level: str

    @classmethod
    def from_env(cls) -> "ParetoConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ParetoConfigError: If environment values are invalid.
        """
        output_dir_value = os.getenv("PARETO_OUTPUT_DIR", str(DEFAULT_OUTPUT_DIR))
        target_shares_value = os.getenv("PARETO_TARGET_SHARES", ",".join(DEFAULT_TARGET_SHARES))
        log_level_value = os.getenv("PARETO_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(
            output_dir=Path(output_dir_value).expanduser().resolve(),
            default_target_shares=_parse_target_shares(target_shares_value),
            log_level=_parse_log_level(log_level_value),
        )


def _parse_target_shares(raw_value: str) -> tuple[Decimal, ...]:
    """Parse the comma-separated default target shares.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed shares in declaration order.

    Raises:
        ParetoConfigError: If any share is not a decimal in (0, 1].
    """
    shares: list[Decimal] = []
    for token in raw_value.split(","):
        stripped = token.strip()
        if not stripped:
            continue
        try:
            share = Decimal(stripped)
        except InvalidOperation as error:
            raise ParetoConfigError(
                "Invalid PARETO_TARGET_SHARES value: "
                f"expected decimals, got '{stripped}'. "
                "Use a comma-separated list such as '0.80,0.60'."
            ) from error
        if not share.is_finite() or share <= 0 or share > 1:
            raise ParetoConfigError(
                f"Invalid PARETO_TARGET_SHARES entry '{stripped}': "
                "each share must be greater than 0 and at most 1."
            )
        shares.append(share)
    if not shares:
        raise ParetoConfigError(
            "PARETO_TARGET_SHARES is empty. Provide at least one share such as '0.80'."
        )
    return tuple(shares)


def _parse_log_level(raw_value: str) -> str:
    normalized = raw_value.strip().upper()
    if normalized not in SUPPORTED_LOG_LEVELS:
        supported = ", ".join(SUPPORTED_LOG_LEVELS)
        raise ParetoConfigError(
            f"Invalid PARETO_LOG_LEVEL value '{raw_value}'. Choose one of: {supported}."
        )
    return normalized
