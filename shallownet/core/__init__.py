"""Core numerical primitives for shallownet."""

from . import activations, errors, matrix, params, propagation, types

__all__ = ["activations", "errors", "matrix", "params", "propagation", "types"]
