"""
Contract shared by every jurisdiction/language ruleset.

The tokenizer only ever talks to a ``LexicalRules``; which concrete ruleset
it gets is decided by name in ``geocoder_lexer.lexer.registry``.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

from geocoder_lexer.lexer.engine import apply_join_rules
from geocoder_lexer.lexer.rules import JoinRule

# Reserved tokens written into the sentence and understood downstream
POSTAL_ADDRESS_ELEMENT = "/PJ"
FRONT_GATE = "/FG"
OCCUPANT_SEPARATOR = "/OS"


class LexicalRules(ABC):
    def __init__(self, join_rules: Sequence[JoinRule] = ()):
        self._join_rules: Tuple[JoinRule, ...] = tuple(join_rules)

    @abstractmethod
    def clean_sentence(self, sentence: str) -> str:
        """Normalize raw address text into the canonical character set."""

    @abstractmethod
    def run_special_rules(self, sentence: str) -> str:
        """Strip postal junk from a cleaned sentence and flag it with /PJ."""

    def get_join_rules(self) -> Tuple[JoinRule, ...]:
        return self._join_rules

    def join_tokens(self, tokens: Sequence[str]) -> List[str]:
        return apply_join_rules(tokens, self._join_rules)

    def normalize_sentence(self, sentence: str) -> str:
        """``clean_sentence`` followed by ``run_special_rules``."""
        return self.run_special_rules(self.clean_sentence(sentence))

    @staticmethod
    def has_postal_junk(sentence: str) -> bool:
        return POSTAL_ADDRESS_ELEMENT in sentence.split()
