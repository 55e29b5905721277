import math
from enum import Enum


class _NamedVariant(Enum):
    """Enum whose members can be looked up by their lowercase name."""

    @classmethod
    def from_name(cls, name):
        if isinstance(name, cls):
            return name
        try:
            return cls[name.upper()]
        except KeyError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown {cls.__name__} '{name}', expected one of: {choices}") from None


class Activation(_NamedVariant):
    """A node's activation function and its derivative."""
    LINEAR = "linear"
    RELU = "relu"
    SIGMOID = "sigmoid"
    TANH = "tanh"

    def output(self, x: float) -> float:
        if self is Activation.LINEAR:
            return x
        if self is Activation.RELU:
            return max(0.0, x)
        if self is Activation.SIGMOID:
            # Split on sign so exp() never overflows
            if x >= 0:
                return 1.0 / (1.0 + math.exp(-x))
            e = math.exp(x)
            return e / (1.0 + e)
        if x == math.inf:
            return 1.0
        if x == -math.inf:
            return -1.0
        return math.tanh(x)

    def der(self, x: float) -> float:
        if self is Activation.LINEAR:
            return 1.0
        if self is Activation.RELU:
            return 1.0 if x > 0 else 0.0
        out = self.output(x)
        if self is Activation.SIGMOID:
            return out * (1.0 - out)
        return 1.0 - out * out


class ErrorFunction(_NamedVariant):
    """An error function and its derivative."""
    SQUARE = "square"

    def error(self, output: float, target: float) -> float:
        return 0.5 * (output - target) ** 2

    def der(self, output: float, target: float) -> float:
        return output - target


class Regularization(_NamedVariant):
    """Penalty cost for a given weight in the network."""
    L1 = "l1"
    L2 = "l2"

    def output(self, weight: float) -> float:
        if self is Regularization.L1:
            return abs(weight)
        return 0.5 * weight * weight

    def der(self, weight: float) -> float:
        if self is Regularization.L1:
            if weight < 0:
                return -1.0
            return 1.0 if weight > 0 else 0.0
        return weight
