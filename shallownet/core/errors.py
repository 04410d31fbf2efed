"""Exceptions raised by the shallownet engine."""

from __future__ import annotations


class NetworkError(Exception):
    """Base class for engine failures."""


class ConfigurationMismatch(NetworkError, ValueError):
    """Batch dimensions disagree with the network configuration."""


class UninitializedParameters(NetworkError, RuntimeError):
    """The network was asked to predict before it was trained."""


class InvalidAxis(NetworkError, ValueError):
    """A reduction was requested along an unknown axis."""


__all__ = [
    "NetworkError",
    "ConfigurationMismatch",
    "UninitializedParameters",
    "InvalidAxis",
]
