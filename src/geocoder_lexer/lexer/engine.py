"""
Rule application.

Every function here takes its rules as an argument and keeps no state
between calls, so one ruleset can be shared by any number of threads.
"""

import re
from typing import Iterable, List, Sequence, Tuple

from geocoder_lexer.lexer.rules import CleanRule, JoinRule
from geocoder_lexer.utils.logging_setup import logger


def apply_clean_rules(sentence: str, rules: Iterable[CleanRule]) -> str:
    """
    Run each rule over the whole sentence, in order. A rule sees the output
    of the one before it and runs exactly once.
    """
    for rule in rules:
        sentence = rule.clean(sentence)
    return sentence


def apply_join_rules(tokens: Sequence[str], rules: Sequence[JoinRule]) -> List[str]:
    """
    Fuse adjacent token pairs matched by a join rule.

    Pairs are checked left to right; for each pair the first matching rule
    wins and scanning resumes after the fused pair.

    Example: ["1200", "BRITISH", "COLUMBIA"] -> ["1200", "BC"]
    """
    joined: List[str] = []
    i = 0
    while i < len(tokens):
        if i + 1 < len(tokens):
            fused = _first_join(tokens[i], tokens[i + 1], rules)
            if fused is not None:
                logger.debug(f"Joined {tokens[i]!r} + {tokens[i + 1]!r} -> {fused!r}")
                joined.append(fused)
                i += 2
                continue
        joined.append(tokens[i])
        i += 1
    return joined


def strip_artifacts(sentence: str, patterns: Iterable[re.Pattern]) -> Tuple[str, bool]:
    """
    Delete every match of every pattern, in order, each pattern running on
    the output of the previous one.

    Returns:
        (sentence, found) where ``found`` is True once any pattern matched.
    """
    found = False
    for pattern in patterns:
        sentence, count = pattern.subn("", sentence)
        if count:
            logger.debug(f"Stripped {count} match(es) of {pattern.pattern!r}")
            found = True
    return sentence, found


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────


def _first_join(first: str, second: str, rules: Sequence[JoinRule]):
    for rule in rules:
        fused = rule.join(first, second)
        if fused is not None:
            return fused
    return None
