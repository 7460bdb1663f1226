# ============================================================
# TITLE TAXONOMY
# ============================================================
#
# Titles decide how the words that follow them are split into
# first and last names. Every title belongs to EXACTLY ONE
# category. Lookup is case-insensitive and ignores a trailing
# period ("Dr." == "Dr" == "dr").
#
# ------------------------------------------------------------
# CATEGORY RULES
# ------------------------------------------------------------
#
#   LAST_NAME_TITLES   "Captain Smith"       -> last name
#                      "Captain John Smith"  -> first + last
#
#   FORMAL_TITLES      "Mr Smith"            -> last name
#                      "Mrs Jane Smith"      -> first + last
#
#   FIRST_NAME_TITLES  "Lady Mary"           -> first name
#                      "Lady Mary Smith"     -> first + last
#
#   AMBIGUOUS_TITLES   "Professor Smith"     -> last name
#                      "Professor Ann Smith" -> first + last
#
# Categories are checked in TITLE_CATEGORY_ORDER. The first
# category containing the word wins.
#
# ============================================================

# Military, law enforcement
LAST_NAME_TITLES = frozenset({
    "Captain", "Capt", "Lieutenant", "Lt", "General", "Gen", "Colonel", "Col",
    "Major", "Maj", "Sergeant", "Sgt", "Corporal", "Corp", "Officer", "Constable",
    "Detective", "Inspector", "Chief", "Commander", "Admiral", "Private", "Pvt",
    "Ensign", "Commodore", "Marshal", "Sheriff", "Agent", "Trooper", "Deputy",
})

# Academic, religious, civic
AMBIGUOUS_TITLES = frozenset({
    "Dr", "Doctor", "Professor", "Prof", "Rev", "Reverend", "Judge", "Justice",
    "Principal", "Dean", "President", "Director", "Senator", "Councillor", "Minister",
})

# Nobility, honorifics
FIRST_NAME_TITLES = frozenset({
    "Sir", "Dame", "King", "Queen", "Prince", "Princess", "Duke", "Duchess",
    "Baron", "Baroness", "Count", "Countess", "Earl", "Lord", "Lady", "Master",
})

FORMAL_TITLES = frozenset({
    "Mr", "Mrs", "Ms", "Miss", "Mx",
})

TITLE_CATEGORIES = {
    "last_name": LAST_NAME_TITLES,
    "formal": FORMAL_TITLES,
    "first_name": FIRST_NAME_TITLES,
    "ambiguous": AMBIGUOUS_TITLES,
}

TITLE_CATEGORY_ORDER = ("last_name", "formal", "first_name", "ambiguous")

# Categories where a single following word is a LAST name
LAST_NAME_BINDING_CATEGORIES = frozenset({"last_name", "formal", "ambiguous"})

_all_titles = [t.lower() for titles in TITLE_CATEGORIES.values() for t in titles]
assert len(_all_titles) == len(set(_all_titles)), \
    "Title categories must be disjoint"
del _all_titles


# ------------------------------------------------------------
# DISPLAY_TITLES
# ------------------------------------------------------------
#
# Prefixes recognised by the title normalisation pass of the
# book analysis layer. Everything after the prefix becomes the
# first name. Checked in order; the first prefix wins.
#
DISPLAY_TITLES = (
    "Mayor", "Old", "Lady", "Master",
    "Captain", "Doctor", "Professor", "General", "Admiral", "Senator", "Governor",
    "Lord", "King", "Queen", "Prince", "Princess", "Chief", "Sir", "Dame",
    "President", "Chancellor", "Colonel", "Commander", "Father", "Sister", "Brother",
)
