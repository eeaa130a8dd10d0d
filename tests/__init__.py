"""
Expose common test utilities so tests can import directly:
    from tests import SCENARIOS, make_calculation
"""

from .utils import SCENARIOS, make_app_inputs, make_calculation

__all__ = ["SCENARIOS", "make_calculation", "make_app_inputs"]
