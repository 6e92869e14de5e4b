"""
Modules - Static content for the three instructional modules.

Each module is a set of scenarios with fixed choice options. Scenarios are
data: choosing an option only builds an ActionRequest for the scoring
service. No correctness is evaluated locally.
"""

from .scenario import Scenario, ChoiceOption
from .catalog import (
    ALL_SCENARIOS,
    PREBUNK_CHOCOLATE,
    ETHICAL_ACCENT_JOKES,
    PROFESSIONAL_MEETING,
    get_scenario,
    scenarios_for_module,
)

__all__ = [
    "Scenario",
    "ChoiceOption",
    "ALL_SCENARIOS",
    "PREBUNK_CHOCOLATE",
    "ETHICAL_ACCENT_JOKES",
    "PROFESSIONAL_MEETING",
    "get_scenario",
    "scenarios_for_module",
]
