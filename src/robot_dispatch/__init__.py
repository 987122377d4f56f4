"""
Robot dispatch: picks the best available robot for a load request
based on proximity and battery level.
"""

__version__ = "1.0.0"
