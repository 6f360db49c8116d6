"""
CV generation.

- cv_generator: Swappable content generator (heuristic placeholder)
- pipeline: Validation and CV record assembly
"""

from jobboard.agents.cv_generator import ContentGenerator, HeuristicContentGenerator, get_content_generator
from jobboard.agents.pipeline import CVValidationError, generate_cv

__all__ = [
    "ContentGenerator",
    "HeuristicContentGenerator",
    "get_content_generator",
    "CVValidationError",
    "generate_cv",
]
