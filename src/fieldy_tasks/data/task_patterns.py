"""Trigger phrases that mark the start of a spoken task."""

# Characters that separate words in a transcript. Control characters such as
# \x1c-\x1f and \x85 are not gaps even though Python's \s would accept them.
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
GAP = f"[{WHITESPACE}]"

# (group name, trigger phrases, separator between trigger and captured task)
TRIGGER_GROUPS = [
    (
        "obligation",
        # "want to" extends the classic obligation markers so that "I want to research X" yields a task
        # (e.g. "Also want to research that new AI tool."). Remove it to only catch firm commitments.
        ["need to", "have to", "should", "must", "gonna", "going to", "will", "todo", "to do", "want to"],
        GAP + "+",
    ),
    ("reminder", ["remind me to", "make sure to", "don't forget to"], GAP + "+"),
    ("first_person", ["I'll", "I will"], GAP + "+"),
    ("label", ["action item", "task", "homework"], ":" + GAP + "*"),
    ("collective", ["let's", "we should", "we need to"], GAP + "+"),
]

FILLER_WORDS = ["like", "um", "uh", "so", "well", "actually"]

TRAILING_CONJUNCTIONS = ["and", "or", "but"]
