import math


def calculate_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """
    Euclidean distance between (x1, y1) and (x2, y2) on the shared plane,
    sqrt((x2 - x1)^2 + (y2 - y1)^2).
    Unit-less; symmetric and zero only when the points coincide.
    """
    # hypot does not overflow on the intermediate squares
    return math.hypot(float(x2) - float(x1), float(y2) - float(y1))
