# Ligatures seen in practice, expanded to plain letters.
# Only a small subset; add entries as they turn up in real input.
ligature_map: dict[str, str] = {
    "æ": "ae",
    "Æ": "AE",
    "Œ": "OE",
    "œ": "oe",
}

# Vulgar fractions, padded so they split off the preceding number
fraction_map: dict[str, str] = {
    "½": " 1/2",
}
