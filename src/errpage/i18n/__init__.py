"""Language tag handling for localized resource lookup."""

from errpage.i18n.bcp47 import BCP47Parser, LanguageTag, LanguageTagParser, parse_language_tag

__all__ = ["BCP47Parser", "LanguageTag", "LanguageTagParser", "parse_language_tag"]
