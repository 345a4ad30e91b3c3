from __future__ import annotations


class ComplianceError(ValueError):
    """Base error for the compliance core. Always deterministic, never retryable."""


class InvalidInputError(ComplianceError):
    pass


class ConfigurationError(ComplianceError):
    pass
