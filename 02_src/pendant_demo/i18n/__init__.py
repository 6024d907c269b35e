"""Localization module."""

from .translations import Translations, bundle_filename, parse_properties

__all__ = ["Translations", "bundle_filename", "parse_properties"]
