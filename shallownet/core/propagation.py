"""Forward and backward passes of the single-hidden-layer network."""

from __future__ import annotations

from . import matrix
from .activations import sigmoid, sigmoid_prime
from .types import Array, ForwardState, Gradients, ParameterSet


def _apply_sigmoid(_, __, v: Array) -> Array:
    return sigmoid(v)


def forward_pass(x: Array, params: ParameterSet) -> ForwardState:
    """Propagate ``x`` through both layers without touching ``params``."""

    hidden_input = matrix.add_row_bias(matrix.mul(x, params.hidden_weights), params.hidden_biases)
    hidden_activations = matrix.apply(_apply_sigmoid, hidden_input)

    output_input = matrix.add_row_bias(
        matrix.mul(hidden_activations, params.output_weights), params.output_biases
    )
    output = matrix.apply(_apply_sigmoid, output_input)

    return ForwardState(
        hidden_input=hidden_input,
        hidden_activations=hidden_activations,
        output_input=output_input,
        output=output,
    )


def backward_pass(
    x: Array,
    y: Array,
    params: ParameterSet,
    state: ForwardState,
    learning_rate: float,
) -> Gradients:
    """Return learning-rate scaled updates for every parameter.

    The error is taken as ``y - output``, so the returned tensors are added
    to the parameters rather than subtracted.
    """

    network_error = matrix.sub(y, state.output)
    output_slope = sigmoid_prime(state.output)
    hidden_slope = sigmoid_prime(state.hidden_activations)

    d_output = matrix.mul_elem(network_error, output_slope)
    error_at_hidden = matrix.mul(d_output, matrix.transpose(params.output_weights))
    d_hidden = matrix.mul_elem(error_at_hidden, hidden_slope)

    output_weights = matrix.mul(matrix.transpose(state.hidden_activations), d_output)
    output_biases = matrix.sum_along_axis(matrix.AXIS_COLUMNS, d_output)
    hidden_weights = matrix.mul(matrix.transpose(x), d_hidden)
    hidden_biases = matrix.sum_along_axis(matrix.AXIS_COLUMNS, d_hidden)

    return {
        "hidden_weights": matrix.scale(learning_rate, hidden_weights),
        "hidden_biases": matrix.scale(learning_rate, hidden_biases),
        "output_weights": matrix.scale(learning_rate, output_weights),
        "output_biases": matrix.scale(learning_rate, output_biases),
    }


__all__ = ["forward_pass", "backward_pass"]
