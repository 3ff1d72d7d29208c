from .category_keywords import CATEGORY_KEYWORDS, QUICK_LENGTH_LIMIT
from .task_patterns import FILLER_WORDS, GAP, TRAILING_CONJUNCTIONS, TRIGGER_GROUPS, WHITESPACE

__all__ = [
    "CATEGORY_KEYWORDS",
    "QUICK_LENGTH_LIMIT",
    "FILLER_WORDS",
    "GAP",
    "TRAILING_CONJUNCTIONS",
    "TRIGGER_GROUPS",
    "WHITESPACE",
]
