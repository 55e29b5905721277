from dataclasses import dataclass


@dataclass
class Example2D:
    """A labeled point in the plane."""
    x: float
    y: float
    label: float

    def __str__(self):
        return f"{self.label},{self.x},{self.y}"
