"""Keyword sets used to sort tasks by effort, checked in order."""

IDEA_KEYWORDS = [
    "idea",
    "explore",
    "research",
    "learn",
    "study",
    "read",
    "watch",
    "investigate",
    "consider",
    "think about",
    "look into",
    "check out",
    "maybe",
]

DEEP_KEYWORDS = [
    "write",
    "create",
    "build",
    "design",
    "develop",
    "plan",
    "analyze",
    "review",
    "complete",
    "finish",
    "prepare",
    "draft",
    "organize",
    "implement",
    "fix",
    "update",
    "refactor",
    "debug",
    "test",
]

# 5-15 minute tasks
QUICK_KEYWORDS = [
    "call",
    "email",
    "text",
    "message",
    "ping",
    "send",
    "reply",
    "respond",
    "check",
    "look up",
    "google",
    "find",
    "ask",
    "reach out",
    "follow up",
    "schedule",
    "buy",
    "pick up",
    "grab",
    "order",
]

# Priority order matters: "check out" is an idea even though "check" is quick.
CATEGORY_KEYWORDS = [
    ("idea", IDEA_KEYWORDS),
    ("deep", DEEP_KEYWORDS),
    ("quick", QUICK_KEYWORDS),
]

# Unmatched phrases shorter than this are quick, the rest deep.
QUICK_LENGTH_LIMIT = 30
