"""
Possessive formation rules.

This file exists to make the rule tables explicit and enforceable.
"""

STYLE_STANDARD = "standard"          # Chris'
STYLE_ALTERNATIVE = "alternative"    # Chris's
STYLES = (STYLE_STANDARD, STYLE_ALTERNATIVE)

APOSTROPHE = "'"
APOSTROPHE_S = "'s"

GERMAN_ESZETT = "ß"

# Irregular possessives. Keys are lowercase.
DEFAULT_EXCEPTIONS = {
    "it": "its",
    "its": "its",  # already possessive
    "they": "their",
    "he": "his",
    "she": "her",
}

# Not applied by the formatter; see PossessiveFormatter.is_french_name.
FRENCH_SILENT_ENDINGS = ("s", "x", "z")
FRENCH_NAME_SUFFIXES = ("eau", "eux", "aux", "oux")
FRENCH_NAME_LETTERS = ("è", "é", "ç")
