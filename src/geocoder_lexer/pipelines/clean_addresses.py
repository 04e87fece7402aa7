"""
Batch address cleaning over pandas DataFrames and CSV files.

Each address runs through ``normalize_sentence`` (clean + postal junk
rules). The cleaned sentence and a boolean postal-junk flag are appended
as new columns; rows that cannot be cleaned are reported as issues rather
than raised.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

import pandas as pd

from geocoder_lexer.config.settings import BATCH_CONFIG
from geocoder_lexer.lexer.lexical_rules import LexicalRules
from geocoder_lexer.lexer.registry import get_lexical_rules
from geocoder_lexer.utils.logging_setup import logger


def clean_address(
    addr_raw, rules: LexicalRules
) -> Tuple[Optional[str], bool, List[str]]:
    """
    Returns:
        (cleaned, postal_junk, issues)
    """
    issues: list[str] = []

    if not isinstance(addr_raw, str) or not addr_raw.strip():
        issues.append(f"Empty or non-string input: {addr_raw!r}")
        return None, False, issues

    cleaned = rules.normalize_sentence(addr_raw)
    if not cleaned.strip():
        issues.append(f"Nothing left after cleaning: {addr_raw!r}")

    return cleaned, rules.has_postal_junk(cleaned), issues


def clean_address_frame(
    df: pd.DataFrame,
    addr_col: Optional[str] = None,
    rules: Optional[LexicalRules] = None,
) -> Tuple[pd.DataFrame, List[str]]:
    """
    Clean the address column of ``df``.

    Column names are lower-cased with spaces turned into underscores first,
    so ``"Address"`` and ``"address"`` both work.

    Args:
        df (pd.DataFrame): Input rows; not modified.
        addr_col (str): Address column; defaults to ``batch.address_column``.
        rules (LexicalRules): Ruleset to use; defaults to the configured one.

    Returns:
        (DataFrame, issues): a copy of ``df`` with the cleaned and
        postal-junk columns appended, and one message per problem row.

    Raises:
        KeyError: If the address column is missing.
    """
    rules = rules or get_lexical_rules()
    addr_col = _format_column_name(addr_col or BATCH_CONFIG["address_column"])

    out = df.copy()
    out.columns = [_format_column_name(c) for c in out.columns]
    if addr_col not in out.columns:
        logger.error(f"Address column '{addr_col}' not in {list(out.columns)}")
        raise KeyError(addr_col)

    cleaned_values = []
    junk_flags = []
    issues: list[str] = []
    for idx, addr_raw in out[addr_col].items():
        cleaned, junk, errs = clean_address(addr_raw, rules)
        issues.extend(f"row {idx}: {msg}" for msg in errs)
        cleaned_values.append(cleaned)
        junk_flags.append(junk)

    # object dtype keeps None for rows that could not be cleaned
    out[BATCH_CONFIG["cleaned_column"]] = pd.Series(
        cleaned_values, index=out.index, dtype=object
    )
    out[BATCH_CONFIG["postal_flag_column"]] = pd.Series(
        junk_flags, index=out.index, dtype=bool
    )

    logger.info(
        f"Cleaned {len(out)} addresses: {sum(junk_flags)} with postal junk, "
        f"{len(issues)} issues"
    )
    return out, issues


def clean_address_csv(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    addr_col: Optional[str] = None,
    rules: Optional[LexicalRules] = None,
) -> List[str]:
    """
    Read ``input_path``, clean its address column and write ``output_path``.
    Returns the issues reported by ``clean_address_frame``.
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    if not input_path.exists():
        logger.error(f"Input file not found: {input_path}")
        raise FileNotFoundError(input_path)

    df = pd.read_csv(input_path, dtype=str, keep_default_na=False)
    cleaned, issues = clean_address_frame(df, addr_col=addr_col, rules=rules)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    cleaned.to_csv(output_path, index=False)
    logger.info(f"Wrote {len(cleaned)} rows to {output_path}")
    return issues


def _format_column_name(name) -> str:
    return str(name).strip().lower().replace(" ", "_")
