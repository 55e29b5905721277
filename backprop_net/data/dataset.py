import math
import random
from typing import List, Optional

from .example import Example2D


class ScaleLinear:
    """Maps the domain [d1, d2] linearly onto the range [r1, r2]."""
    def __init__(self, d1: float, d2: float, r1: float, r2: float):
        self.d1 = d1
        self.d2 = d2
        self.r1 = r1
        self.r2 = r2

    def scale(self, x: float) -> float:
        step = (self.r2 - self.r1) / (self.d2 - self.d1)
        return self.r1 + (x - self.d1) * step


def normal_random(rng: random.Random, mean: float = 0.0, variance: float = 1.0) -> float:
    """
    Samples a normal distribution with the polar form of the Box-Muller
    transform.
    """
    while True:
        v1 = 2 * rng.random() - 1
        v2 = 2 * rng.random() - 1
        s = v1 * v1 + v2 * v2
        if 0 < s <= 1:
            break

    result = math.sqrt(-2 * math.log(s) / s) * v1
    return mean + math.sqrt(variance) * result


def classify_two_gauss_data(num_samples: int, noise: float, rng: Optional[random.Random] = None) -> List[Example2D]:
    """
    Two Gaussian clusters: positive examples around (2, 2) and negative
    examples around (-2, -2). `noise` in [0, 0.5] sets the variance of
    both clusters between 0.5 and 4.
    """
    rng = rng if rng is not None else random.Random()
    variance = ScaleLinear(0.0, 0.5, 0.5, 4.0).scale(noise)
    points: List[Example2D] = []

    def gen_gauss(cx: float, cy: float, label: float):
        for _ in range(math.ceil(num_samples / 2)):
            x = normal_random(rng, mean=cx, variance=variance)
            y = normal_random(rng, mean=cy, variance=variance)
            points.append(Example2D(x, y, label))

    gen_gauss(2.0, 2.0, 1.0)
    gen_gauss(-2.0, -2.0, -1.0)
    return points


def construct_input(example: Example2D) -> List[float]:
    return [example.x, example.y]
