"""
Rule primitives for the lexer.

``CleanRule`` is one sentence-wide rewrite; ``JoinRule`` fuses two adjacent
tokens into one. Both compile their patterns when constructed so a bad
pattern fails while the ruleset is being built, never at call time.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from geocoder_lexer.lexer.errors import RuleConfigurationError
from geocoder_lexer.utils.logging_setup import logger


def compile_pattern(pattern: str, flags: int = 0) -> re.Pattern:
    """
    Compile a rule pattern, turning ``re.error`` into a configuration error.
    """
    try:
        return re.compile(pattern, flags)
    except re.error as err:
        logger.error(f"Invalid rule pattern {pattern!r}: {err}")
        raise RuleConfigurationError(f"Invalid rule pattern {pattern!r}: {err}") from err


# ─────────────────────────────────────────────────────────────────────────────
# Clean rules
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class CleanRule:
    pattern: str
    replacement: str
    flags: int = 0
    regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "regex", compile_pattern(self.pattern, self.flags))

    def clean(self, sentence: str) -> str:
        return self.regex.sub(self.replacement, sentence)


# ─────────────────────────────────────────────────────────────────────────────
# Join rules
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class JoinRule:
    """
    Two patterns, each with one capture group. When the first fully matches
    a token and the second fully matches the token right after it, the pair
    becomes a single token built from the two captured fragments:

        JoinRule.create_join("(?i)(B)RITISH", "(?i)(C)OLUMBIA")
        "BRITISH", "COLUMBIA" -> "BC"
    """

    first_pattern: str
    second_pattern: str
    first_regex: re.Pattern = field(init=False, repr=False, compare=False)
    second_regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        for attr, pattern in (
            ("first_regex", self.first_pattern),
            ("second_regex", self.second_pattern),
        ):
            regex = compile_pattern(pattern)
            if regex.groups < 1:
                logger.error(f"Join pattern {pattern!r} has no capture group")
                raise RuleConfigurationError(
                    f"Join pattern {pattern!r} must have a capture group"
                )
            object.__setattr__(self, attr, regex)

    @classmethod
    def create_join(cls, first_pattern: str, second_pattern: str) -> "JoinRule":
        return cls(first_pattern, second_pattern)

    def join(self, first: str, second: str) -> Optional[str]:
        """Fused token for ``(first, second)``, or None if the rule does not apply."""
        first_match = self.first_regex.fullmatch(first)
        if not first_match:
            return None
        second_match = self.second_regex.fullmatch(second)
        if not second_match:
            return None
        return (first_match.group(1) or "") + (second_match.group(1) or "")
