from .dataset import ScaleLinear, classify_two_gauss_data, construct_input, normal_random
from .example import Example2D

__all__ = ["Example2D", "ScaleLinear", "classify_two_gauss_data", "construct_input", "normal_random"]
