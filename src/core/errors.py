"""Pareto exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class ParetoError(Exception):
    """Base exception for all Pareto analysis failures."""


class ParetoConfigError(ParetoError):
    """Raised for invalid runtime configuration."""


class InvalidInputError(ParetoError):
    """Raised for malformed transactions such as negative quantity or price."""


class InvalidArgumentError(ParetoError):
    """Raised when a target share falls outside (0, 1]."""


class NoThresholdReachedError(ParetoError):
    """Raised when no ranked prefix can reach the target share."""


class ParetoIngestError(ParetoError):
    """Raised for transaction source parsing failures."""


class ParetoExportError(ParetoError):
    """Raised when report files cannot be written."""


class ParetoRunSpecError(ParetoError):
    """Raised for invalid or unsupported run-spec configuration."""


class ParetoDependencyError(ParetoError):
    """Raised when an optional runtime dependency is missing."""
