"""
Cyclodrive advisory - optional remote design assistant.

The advisory service is never required: every call returns a result with
``available=False`` when the service is unconfigured or unreachable.

Example:
    >>> from cyclodrive.advisory import AdvisoryClient
    >>> from cyclodrive.calculator import DEFAULT_PARAMS
    >>>
    >>> result = AdvisoryClient().analyze_design(DEFAULT_PARAMS, min_wall_thickness=22.4)
    >>> print(result.text if result.available else result.reason)
"""

from .settings import AdvisorySettings
from .client import (
    AdvisoryClient,
    AdvisoryResult,
    GeneratedDesign,
    ChatTurn,
    build_analysis_prompt,
    build_generation_prompt,
)

__all__ = [
    "AdvisorySettings",
    "AdvisoryClient",
    "AdvisoryResult",
    "GeneratedDesign",
    "ChatTurn",
    "build_analysis_prompt",
    "build_generation_prompt",
]
