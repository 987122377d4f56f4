class RobotDispatchError(Exception):
    """Base class for robot dispatch errors."""
    pass

class SourceUnavailableError(RobotDispatchError):
    """Robot source could not be reached or returned malformed data."""
    pass

class InvalidInputError(RobotDispatchError):
    """Robot record or target point is missing required numeric fields."""
    pass
