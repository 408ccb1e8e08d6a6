"""
Merge translations across interface inheritance.

A translation class for ``Child`` also overrides the methods ``Child`` inherits
from its message interface ancestors. Ancestors contribute the translations of
their own translation files; the leaf interface's file is merged last so the
closest declaration wins.
"""
from typing import Dict, List, Set

from i18n_classgen.diagnostics import Diagnostics
from i18n_classgen.errors import PropertiesLoadError, TranslationDiscoveryError
from i18n_classgen.message_interface import MessageInterface, Method
from i18n_classgen.properties_parser import load_properties
from i18n_classgen.translation_discovery import TranslationFile, TranslationFileLocator
from i18n_classgen.translation_validator import validate_translations


def legal_methods(interface: MessageInterface) -> List[Method]:
    """
    Methods a translation file of an interface may translate.

    These are the interface's own methods and those of every interface it
    extends transitively, skipping marker interfaces and whatever is reachable
    only through them.
    """
    methods: List[Method] = []
    seen_methods: Set[Method] = set()
    visited: Set[str] = set()

    def collect(current: MessageInterface) -> None:
        if current.qualified_name in visited:
            return
        visited.add(current.qualified_name)
        for method in current.methods:
            if method not in seen_methods:
                seen_methods.add(method)
                methods.append(method)
        for ancestor in current.translatable_ancestors():
            collect(ancestor)

    if interface.translatable:
        collect(interface)
    return methods


class TranslationAggregator:
    """
    Compute merged translation maps for the files of one generation pass.

    Ancestor maps are memoized per interface, so the warnings of an ancestor's
    files are reported once per pass no matter how many files inherit from it.
    """

    def __init__(self, locator: TranslationFileLocator, diagnostics: Diagnostics):
        self.locator = locator
        self.diagnostics = diagnostics
        self._ancestor_translations: Dict[str, Dict[Method, str]] = {}
        self._own_translations: Dict[str, Dict[Method, str]] = {}

    def load_file_translations(self, interface: MessageInterface, translation_file: TranslationFile) -> Dict[Method, str]:
        """
        Load and validate one translation file against the interface's legal methods.

        Raises:
            PropertiesLoadError: If the file cannot be read or parsed.
        """
        raw_translations = load_properties(translation_file.path)
        return validate_translations(legal_methods(interface), raw_translations, self.diagnostics, translation_file.file_name)

    def own_translations(self, interface: MessageInterface) -> Dict[Method, str]:
        """
        Merge the translations of every file of an ancestor interface.

        Files are merged from the least to the most specific locale, so a more
        specific file wins a conflict. Unreadable files are reported and skipped,
        and an ancestor whose directory cannot be listed contributes nothing.
        """
        cached = self._own_translations.get(interface.qualified_name)
        if cached is not None:
            return cached

        translations: Dict[Method, str] = {}
        try:
            translation_files = self.locator.find_translation_files(interface)
        except TranslationDiscoveryError as e:
            self.diagnostics.error(str(e), interface.qualified_name)
            translation_files = []
        for translation_file in translation_files:
            try:
                translations.update(self.load_file_translations(interface, translation_file))
            except PropertiesLoadError as e:
                self.diagnostics.error(f"Cannot read the {translation_file.file_name} translation file: {e}",
                                       interface.qualified_name)
        self._own_translations[interface.qualified_name] = translations
        return translations

    def ancestor_translations(self, interface: MessageInterface) -> Dict[Method, str]:
        """Translations inherited from the translatable ancestors of an interface."""
        cached = self._ancestor_translations.get(interface.qualified_name)
        if cached is not None:
            return cached

        translations: Dict[Method, str] = {}
        for ancestor in interface.translatable_ancestors():
            translations.update(self.ancestor_translations(ancestor))
            translations.update(self.own_translations(ancestor))
        self._ancestor_translations[interface.qualified_name] = translations
        return translations

    def merged_translations(self, interface: MessageInterface, translation_file: TranslationFile) -> Dict[Method, str]:
        """
        Build the translation map of the class generated for one file.

        Args:
            interface: The leaf interface owning the file.
            translation_file: One of the leaf interface's translation files.

        Returns:
            Dict[Method, str]: A new map; inherited translations overlaid with the file's own.

        Raises:
            PropertiesLoadError: If the file cannot be read or parsed.
        """
        merged = dict(self.ancestor_translations(interface))
        merged.update(self.load_file_translations(interface, translation_file))
        return merged
