# src/isokit/errors.py
from __future__ import annotations


class IsokitError(Exception):
    """Base class for every error raised by isokit."""


class ConfigurationError(IsokitError, ValueError):
    """
    Invalid caller-supplied input: a bad ``k``, an empty point set,
    ``n_components`` outside ``[1, d]``, mismatched shapes, unknown method names.
    """


class GraphConnectivityError(IsokitError, RuntimeError):
    """No finite bridge exists between the remaining components of a graph."""


class ImplementationError(IsokitError, AssertionError):
    """An internal invariant was violated (e.g. unreachable geodesic distances after bridging)."""


class NumericInstabilityWarning(RuntimeWarning):
    """Power iteration exhausted ``max_iter`` without meeting its tolerance."""
