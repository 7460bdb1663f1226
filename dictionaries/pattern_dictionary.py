# ============================================================
# PATTERN VOCABULARY
# ============================================================
#
# Word lists the pattern extractors build their regexes from.
# All entries are lowercase; the extractors match them
# case-insensitively. Names captured next to them must still
# be capitalised.
#
# ============================================================

# Verbs that attribute dialogue: "John said", "asked Mary"
DIALOGUE_VERBS = (
    "said", "whispered", "asked", "replied", "shouted", "murmured",
    "exclaimed", "responded", "called", "muttered", "answered", "stated",
    "declared", "announced", "remarked", "noted", "added", "continued",
    "interrupted", "inquired", "yelled", "explained", "insisted", "sighed",
    "laughed", "cried", "groaned", "argued", "agreed", "disagreed",
)

# Reduced vocabulary of the fallback extractor
FALLBACK_DIALOGUE_VERBS = (
    "said", "asked", "replied", "whispered", "shouted", "muttered",
)

# Nouns that introduce a character: "a man named X", "X was a woman"
ROLE_NOUNS = (
    "man", "woman", "boy", "girl", "person", "gentleman", "lady",
)

# Phrases that follow a directly addressed name: "John, please ..."
DIRECT_ADDRESS_CUES = (
    "please", "would you", "could you", "can you",
)

# Capitalised words the fallback capitalised-word pass never counts
FALLBACK_SKIP_WORDS = frozenset({
    "The", "I", "A", "An", "He", "She", "They", "We", "You",
})
