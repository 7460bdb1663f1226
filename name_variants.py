"""
Common-Word Filter and Name-Variant Combiner

Both stages mutate the shared mention map produced by the pattern
extractors. The filter MUST run before the combiner: a stray stop word
left in the map ("Will", "Dad") would otherwise be merged into a real
name as one of its variants.

============================================================
MERGE POLICY
============================================================

Pass 1: full name absorbs bare first name:
    "Harry Potter" (4) + "Harry" (6)  ->  "Harry Potter" (10, ["Harry"])

Pass 2: canonical name absorbs nickname:
    "Robert Smith" (2) + "Bob" (3)    ->  "Robert Smith" (5, ["Bob"])

TIE-BREAK: when several entries could absorb the same bare name or
nickname, the FIRST one in map iteration (insertion) order wins. A name
is merged into exactly one entry; mentions are never split.
"""

from typing import Iterable, Mapping, Optional

from dictionaries.common_word_dictionary import COMMON_WORDS
from dictionaries.nickname_dictionary import NICKNAMES
from pattern_extractors import MentionMap


# --------------------------------------------------
# Common-word filter
# --------------------------------------------------

def filter_common_words(
    mention_map: MentionMap,
    stop_words: Iterable[str] = COMMON_WORDS,
) -> list[str]:
    """
    Delete every entry whose key case-insensitively equals a stop word.

    Only whole keys are compared: "Captain" is removed, "Captain Smith"
    is kept.

    Returns:
        Removed keys, in map order
    """
    lowered = {word.lower() for word in stop_words}
    removed = [name for name in mention_map if name.lower() in lowered]
    for name in removed:
        del mention_map[name]
    return removed


# --------------------------------------------------
# Variant combiner
# --------------------------------------------------

def _absorb(mention_map: MentionMap, target: str, source: str) -> None:
    """Move the mentions of `source` into `target` and delete `source`."""
    absorbed = mention_map.pop(source)
    record = mention_map[target]
    record.mentions += absorbed.mentions
    record.variants.append(source)
    record.variants.extend(absorbed.variants)


def merge_first_name_variants(
    mention_map: MentionMap,
    processed: Optional[set[str]] = None,
) -> int:
    """
    Pass 1: merge a standalone first name into the first multi-word
    name that starts with it.

    Args:
        mention_map: Map to mutate
        processed: Names already merged away (shared with pass 2)

    Returns:
        Number of merges performed
    """
    if processed is None:
        processed = set()

    merges = 0
    for full_name in list(mention_map):
        if full_name in processed or full_name not in mention_map:
            continue

        parts = full_name.split()
        if len(parts) <= 1:
            continue

        first_name = parts[0]
        if first_name in mention_map and first_name not in processed:
            _absorb(mention_map, full_name, first_name)
            processed.add(first_name)
            merges += 1

    return merges


def merge_nickname_variants(
    mention_map: MentionMap,
    processed: Optional[set[str]] = None,
    nicknames: Mapping[str, str] = NICKNAMES,
) -> int:
    """
    Pass 2: merge every entry led by a known nickname into the first
    other entry led by the canonical first name.

    "Bob" and "Bob Smith" are both nickname-led; "Robert", "Robert Smith"
    and "Robert Jones" are all valid targets for "Bob".

    Returns:
        Number of merges performed
    """
    if processed is None:
        processed = set()

    merges = 0
    for name in list(mention_map):
        if name in processed or name not in mention_map:
            continue

        canonical = nicknames.get(name.split()[0])
        if canonical is None:
            continue

        for other in list(mention_map):
            if other == name or other in processed:
                continue
            if other.split()[0] == canonical:
                _absorb(mention_map, other, name)
                processed.add(name)
                merges += 1
                break

    return merges


def combine_name_variants(mention_map: MentionMap) -> MentionMap:
    """
    Run both merge passes in order on the map and return it.

    The passes share one processed-set so that a name merged away in
    pass 1 is never considered again in pass 2.
    """
    processed: set[str] = set()
    merge_first_name_variants(mention_map, processed)
    merge_nickname_variants(mention_map, processed)
    return mention_map
