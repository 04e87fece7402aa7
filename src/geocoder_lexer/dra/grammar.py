"""
Grammar fragments for DRA addresses.

Plain pattern strings the tokenizer splices into its own patterns; nothing
in the lexer compiles or rewrites them.
"""

RE_WORD = r"[^0-9]+|[A-Za-z0-9_]{9,}"

RE_AND = r"AND"

RE_NUMBER = r"[0-9]{1,8}"

RE_NUMBER_WITH_SUFFIX = r"[0-9]{1,8}[a-zA-Z]"

RE_NUMBER_WITH_OPTIONAL_SUFFIX = r"[0-9]{1,8}([a-zA-Z])?"

# English and French ordinal endings: 1ST, 2ND, 1ER, 2E, 3EME, 1IERE ...
RE_ORDINAL = r"(?i:(ST|TH|RD|ND|E|ER|RE|EME|ERE|IEME|IERE))"

# unit numbers can be a single letter,
# or an optional letter followed by some numbers followed by an optional letter
RE_UNIT_NUMBER = r"[a-zA-Z0-9]?[0-9]{0,8}((?<=[0-9])[a-zA-Z])?"

RE_DIRECTIONAL = r"N|NW|NE|S|SE|SW|E|W"

RE_PROVINCE = r"BC|AB|YT|SK|MB|ON|QC|NB|NS|NL|NT|NU|PE"

RE_SUFFIX = r"[A-Z]|1/2"

GRAMMAR_FRAGMENTS = {
    "word": RE_WORD,
    "and": RE_AND,
    "number": RE_NUMBER,
    "number_with_suffix": RE_NUMBER_WITH_SUFFIX,
    "number_with_optional_suffix": RE_NUMBER_WITH_OPTIONAL_SUFFIX,
    "ordinal": RE_ORDINAL,
    "unit_number": RE_UNIT_NUMBER,
    "directional": RE_DIRECTIONAL,
    "province": RE_PROVINCE,
    "suffix": RE_SUFFIX,
}
