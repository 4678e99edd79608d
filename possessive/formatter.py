"""
Singular possessive formation for English text.

Responsibilities:
- input validation (empty / non-string / whitespace-only)
- irregular forms via a per-instance exception table
- German eszett handling
- style-dependent suffix for nouns ending in "s"
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping, Union

from pydantic import ValidationError

from .errors import ConfigurationError, InvalidInputError
from .models import PossessiveOptions
from .rules import (
    APOSTROPHE,
    APOSTROPHE_S,
    DEFAULT_EXCEPTIONS,
    FRENCH_NAME_LETTERS,
    FRENCH_NAME_SUFFIXES,
    FRENCH_SILENT_ENDINGS,
    GERMAN_ESZETT,
    STYLE_ALTERNATIVE,
    STYLE_STANDARD,
    STYLES,
)

logger = logging.getLogger(__name__)

BYTE_ORDER_MARK = "\ufeff"

OptionsLike = Union[PossessiveOptions, Mapping[str, Any], None]


def _coerce_options(options: OptionsLike) -> PossessiveOptions:
    if options is None:
        options = PossessiveOptions()
    elif not isinstance(options, PossessiveOptions):
        try:
            options = PossessiveOptions.model_validate(dict(options))
        except (ValidationError, TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid possessive options: {exc}") from exc

    if options.style and options.style not in STYLES:
        raise ConfigurationError(
            "Style option must be either 'standard' or 'alternative'"
        )
    if not options.style:
        options = options.model_copy(update={"style": STYLE_STANDARD})
    return options


def trim_noun(noun: str) -> str:
    """Strip surrounding whitespace, including stray byte order marks."""
    trimmed = noun.strip().strip(BYTE_ORDER_MARK)
    while trimmed != noun:
        noun = trimmed
        trimmed = noun.strip().strip(BYTE_ORDER_MARK)
    return trimmed


def validate_input(noun: Any) -> None:
    """
    Reject values that cannot be turned into a possessive.

    Checks run in order, so None and "" are reported as empty
    before the type is looked at.
    """
    if not noun:
        raise InvalidInputError(
            InvalidInputError.EMPTY, "Input cannot be empty, null, or undefined"
        )
    if not isinstance(noun, str):
        raise InvalidInputError(InvalidInputError.NOT_A_STRING, "Input must be a string")
    if len(trim_noun(noun)) == 0:
        raise InvalidInputError(
            InvalidInputError.WHITESPACE_ONLY, "Input cannot be only whitespace"
        )


def preserve_case(original: str, transformed: str) -> str:
    """Apply the case pattern of `original` to `transformed`; mixed case is left alone."""
    if original == original.upper():
        return transformed.upper()
    if original == original.lower():
        return transformed.lower()
    return transformed


def _with_suffix(noun: str, suffix: str) -> str:
    if noun == noun.upper():
        return noun + suffix.upper()
    return noun + suffix


class PossessiveFormatter:
    """
    Returns the possessive form of a singular noun.

    Nouns ending in "s" take a bare apostrophe in the standard style
    ("Chris'") and apostrophe + s in the alternative style ("Chris's").
    Pronouns come from the exception table, German names ending in
    "ß" only ever get an apostrophe, and everything else gets "'s".
    """

    def __init__(self, options: OptionsLike = None):
        self._options = _coerce_options(options)
        self._exceptions: dict[str, str] = dict(DEFAULT_EXCEPTIONS)
        logger.debug("PossessiveFormatter created with %s", self._options)

    @property
    def options(self) -> PossessiveOptions:
        return self._options

    @property
    def exceptions(self) -> Mapping[str, str]:
        return MappingProxyType(self._exceptions)

    def make_possessive(self, noun: Any) -> str:
        validate_input(noun)
        noun = trim_noun(noun)

        form = self._exceptions.get(noun.lower())
        if form is not None:
            return preserve_case(noun, form)

        if self._options.enable_german_rules and noun.endswith(GERMAN_ESZETT):
            return noun + APOSTROPHE

        if noun.endswith(("s", "S")):
            suffix = APOSTROPHE_S if self._options.style == STYLE_ALTERNATIVE else APOSTROPHE
            return _with_suffix(noun, suffix)

        return _with_suffix(noun, APOSTROPHE_S)

    def add_exception(self, noun: Any, possessive_form: Any) -> None:
        """Register (or overwrite) an irregular possessive, e.g. for a custom name."""
        validate_input(noun)
        validate_input(possessive_form)
        self._exceptions[noun.lower()] = possessive_form
        logger.debug("Added possessive exception %r -> %r", noun, possessive_form)

    def is_french_silent_ending(self, noun: str) -> bool:
        return noun.endswith(FRENCH_SILENT_ENDINGS) and self.is_french_name(noun)

    def is_french_name(self, noun: str) -> bool:
        # Not used by make_possessive; French names follow the generic rules.
        if noun.lower().endswith(FRENCH_NAME_SUFFIXES):
            return True
        return any(letter in noun for letter in FRENCH_NAME_LETTERS)


def create(config: OptionsLike = None) -> PossessiveFormatter:
    """Build a formatter; raises ConfigurationError on an unknown style."""
    return PossessiveFormatter(config)
