"""Static noise-word sets shared by keyword and item extraction."""

STOPWORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "to", "of", "in", "on", "at", "for",
        "with", "that", "this", "it", "is", "are", "be", "i", "you", "we",
        "they", "me", "my", "your", "our", "have", "has", "had", "will",
        "please", "next", "time", "from", "as", "by", "about", "so", "but",
    }
)  # fmt: skip

# Request verbs and list words that say *what to do*, never *what the item is*.
COMMON_VERBS: frozenset[str] = frozenset(
    {"add", "buy", "bought", "buying", "remember", "remind", "shopping", "list", "show", "need"}
)


def is_noise(token: str) -> bool:
    """True for stopwords, common verbs, and tokens of length <= 1."""
    return len(token) <= 1 or token in STOPWORDS or token in COMMON_VERBS
