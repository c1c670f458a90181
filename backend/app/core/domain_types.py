"""Domain Types — named types for counter keys and resources.

Invariants:
    - CounterKey wraps the unique string that identifies one counter row
    - Portfolio views live under a single fixed key (PORTFOLIO_VIEWS_KEY)
    - Every counter resource is an Enum member, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: member values double as log field values
"""

from enum import Enum
from typing import NewType


CounterKey = NewType("CounterKey", str)

PORTFOLIO_VIEWS_KEY = CounterKey("portfolio-views")


class CounterResource(str, Enum):
    """Resources whose occurrences are counted."""
    PORTFOLIO_VIEWS = "portfolio_views"
    PROJECT_CLICKS = "project_clicks"
    TAB_VISITS = "tab_visits"
