from dataclasses import dataclass


@dataclass(frozen=True)
class SelectionRequest:
    """
    Target point of a load and the radius within which battery level
    takes priority over proximity.
    """
    x: float
    y: float
    within_distance: float
