"""
Lexical restructuring rules for DRA (BC Digital Road Atlas) addresses.

Cleaning turns raw text into upper/lower ASCII letters, digits and the
reserved slash tokens, separated by single spaces. The special rules then
strip postal routing junk (postal codes, PO boxes, mailbags, rural routes,
general delivery) and append /PJ so the matcher knows something was there.
"""

import re
import unicodedata
from types import MappingProxyType
from typing import Tuple

from geocoder_lexer.config.mappings.ligatures import fraction_map, ligature_map
from geocoder_lexer.dra.grammar import GRAMMAR_FRAGMENTS
from geocoder_lexer.lexer.engine import apply_clean_rules, strip_artifacts
from geocoder_lexer.lexer.lexical_rules import (
    FRONT_GATE,
    OCCUPANT_SEPARATOR,
    POSTAL_ADDRESS_ELEMENT,
    LexicalRules,
)
from geocoder_lexer.lexer.rules import CleanRule, JoinRule, compile_pattern
from geocoder_lexer.utils.logging_setup import logger

# Matches are dropped if a front gate marker appears anywhere after them
_NOT_BEFORE_FRONT_GATE = f"(?!.*{re.escape(FRONT_GATE)})"


def build_clean_rules() -> Tuple[CleanRule, ...]:
    rules = [
        # remove periods and apostrophes between letters, squish letters together
        CleanRule(r"(?:(?<=[a-zA-Z])|^)[.'](?=[a-zA-Z]|$)", ""),
        # remove diacritical marks (split off by NFD)
        CleanRule(r"[\u0300-\u036f]+", ""),
    ]
    # replace ligatures and fractions with plain characters
    for char, replacement in {**ligature_map, **fraction_map}.items():
        rules.append(CleanRule(re.escape(char), replacement))
    rules += [
        CleanRule(r"&", " and "),
        # exactly two dashes
        CleanRule(r"(?:(?<=[^-])|^)--(?=[^-]|$)", f" {FRONT_GATE} "),
        # exactly two asterisks
        CleanRule(r"(?:(?<=[^*])|^)\*\*(?=[^*]|$)", f" {OCCUPANT_SEPARATOR} "),
        # anything else that is not a letter, digit or slash becomes a space
        CleanRule(r"[^a-zA-Z0-9/]", " "),
        CleanRule(r"\s+", " "),
    ]
    return tuple(rules)


def build_join_rules() -> Tuple[JoinRule, ...]:
    return (
        JoinRule.create_join(r"(?i)(B)RITISH", r"(?i)(C)OLUMBIA"),
        JoinRule.create_join(r"(?i)(C)OLUMBIE", r"(?i)(B)RITANIQUE"),
        JoinRule.create_join(r"(?i)(C)", r"(?i)(B)"),
    )


def build_postal_patterns() -> Tuple[re.Pattern, ...]:
    patterns = (
        # postal code eg: V9K 1X9
        r"\b[ABCEGHJ-NPRSTVXY][0-9][ABCEGHJ-NPRSTV-Z]\s*[0-9][ABCEGHJ-NPRSTV-Z][0-9]\b",
        # postal box eg: PO BOX ## STN ABC
        r"\b(PO\s*)?BOX\s*[0-9]+\s*(STN\s+\S*)?\b" + _NOT_BEFORE_FRONT_GATE,
        # mailbag eg: MAILBAG ##
        r"\b(((MAIL)?BAG)|LCD)\s*[0-9]+\b" + _NOT_BEFORE_FRONT_GATE,
        # rural route / mail route / suburban service eg: RR ##
        r"\b(RR|MR|SS|RURAL ROUTE)\s*[0-9]+\s*(STN\s+\S*)?\b" + _NOT_BEFORE_FRONT_GATE,
        # general delivery station eg: GD STN ABC
        r"\b(GD\s*)?STN\s+\S+\b" + _NOT_BEFORE_FRONT_GATE,
        # general delivery
        r"\bGENERAL\s+DELIVERY\b",
    )
    return tuple(compile_pattern(p, re.IGNORECASE) for p in patterns)


class DraLexicalRules(LexicalRules):
    name = "dra"

    def __init__(self):
        super().__init__(build_join_rules())
        self._clean_rules = build_clean_rules()
        self._postal_patterns = build_postal_patterns()
        logger.info(
            f"Built '{self.name}' ruleset: {len(self._clean_rules)} clean rules, "
            f"{len(self._join_rules)} join rules, "
            f"{len(self._postal_patterns)} postal patterns"
        )

    @property
    def clean_rules(self) -> Tuple[CleanRule, ...]:
        return self._clean_rules

    @property
    def postal_patterns(self) -> Tuple[re.Pattern, ...]:
        return self._postal_patterns

    @property
    def grammar_fragments(self):
        return MappingProxyType(GRAMMAR_FRAGMENTS)

    def clean_sentence(self, sentence: str) -> str:
        return self.clean(sentence, self._clean_rules)

    @staticmethod
    def clean(sentence: str, rules: Tuple[CleanRule, ...]) -> str:
        """
        NFD-decompose, then run the clean rules in order.

        Decomposition has to come first: the diacritic rule only removes
        combining marks, so a precomposed 'é' would otherwise be replaced
        by a space instead of becoming 'e'.
        """
        sentence = unicodedata.normalize("NFD", sentence)
        return apply_clean_rules(sentence, rules)

    def run_special_rules(self, sentence: str) -> str:
        # remove any and all postal junk, and put a "postal junk" flag on
        # the end of the string where it is easy to find
        sentence, found_postal_junk = strip_artifacts(sentence, self._postal_patterns)
        if found_postal_junk:
            sentence += " " + POSTAL_ADDRESS_ELEMENT
        return sentence
