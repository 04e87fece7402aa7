"""
Ruleset lookup by name.

Each ruleset is built on first request and the same instance is handed to
every later caller; rulesets hold no per-call state so sharing is safe.
"""

from functools import lru_cache
from typing import Dict, List, Optional, Type

from geocoder_lexer.config.settings import DEFAULT_RULESET
from geocoder_lexer.dra.lexical_rules import DraLexicalRules
from geocoder_lexer.lexer.errors import RuleConfigurationError
from geocoder_lexer.lexer.lexical_rules import LexicalRules
from geocoder_lexer.utils.logging_setup import logger

RULESETS: Dict[str, Type[LexicalRules]] = {
    "dra": DraLexicalRules,
}


def available_rulesets() -> List[str]:
    return sorted(RULESETS)


def get_lexical_rules(name: Optional[str] = None) -> LexicalRules:
    """
    Shared ruleset instance for ``name`` (defaults to ``lexer.ruleset`` in
    lexer.yaml). Raises RuleConfigurationError for an unknown name.
    """
    return _build_ruleset((name or DEFAULT_RULESET).lower())


@lru_cache(maxsize=None)
def _build_ruleset(name: str) -> LexicalRules:
    try:
        ruleset_cls = RULESETS[name]
    except KeyError:
        logger.error(f"Unknown ruleset '{name}'; available: {available_rulesets()}")
        raise RuleConfigurationError(
            f"Unknown ruleset '{name}'. Available: {', '.join(available_rulesets())}"
        ) from None
    return ruleset_cls()
