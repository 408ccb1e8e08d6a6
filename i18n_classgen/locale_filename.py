"""
Locale metadata carried by translation file names.

A translation file is named ``<InterfaceName>.i18n_<lang>[_<COUNTRY>[_<VARIANT>]].properties``.
Everything in this module is plain string work so it can be used without
touching the filesystem.
"""
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from i18n_classgen.errors import InvalidTranslationFileName

PROPERTIES_EXTENSION = ".properties"

# Skeleton file written by a previous pass. It matches the naming pattern
# (language "locale", country "COUNTRY", variant "VARIANT") but is never a
# translation source.
GENERATED_FILE_EXTENSION = ".i18n_locale_COUNTRY_VARIANT.properties"

LOCALE_QUALIFIER_PATTERN = (
    r"\.i18n_(?P<language>[a-z]+)"
    r"(?:_(?P<country>[A-Z]+)(?:_(?P<variant>[A-Za-z0-9]+))?)?"
    r"\.properties"
)

TRANSLATION_FILE_PATTERN = re.compile(r"^(?P<interface>[^.]+)" + LOCALE_QUALIFIER_PATTERN + "$")


def translation_file_pattern(interface_name: str) -> re.Pattern:
    """Compile the file name pattern of the translation files of one interface."""
    return re.compile("^" + re.escape(interface_name) + LOCALE_QUALIFIER_PATTERN + "$")


def is_generated_file(file_name: str) -> bool:
    return file_name.endswith(GENERATED_FILE_EXTENSION)


def base_file_name(interface_name: str) -> str:
    """Name of the non-localized file of an interface, e.g. ``Messages.properties``."""
    return interface_name + PROPERTIES_EXTENSION


@dataclass(frozen=True)
class TranslationFileName:
    """Parsed name of a locale-qualified translation file."""
    interface_name: str
    language: str
    country: Optional[str] = None
    variant: Optional[str] = None

    @classmethod
    def parse(cls, file_name: str) -> "TranslationFileName":
        """
        Parse a translation file name.

        Args:
            file_name: A bare file name such as ``Messages.i18n_en_US.properties``.

        Returns:
            TranslationFileName: The parsed locale qualifiers.

        Raises:
            InvalidTranslationFileName: If the name does not follow the naming contract.
        """
        match = TRANSLATION_FILE_PATTERN.match(file_name)
        if not match:
            raise InvalidTranslationFileName(f"'{file_name}' is not a translation file name")
        return cls(
            interface_name=match.group("interface"),
            language=match.group("language"),
            country=match.group("country"),
            variant=match.group("variant"),
        )

    @property
    def locale(self) -> Tuple[str, Optional[str], Optional[str]]:
        return self.language, self.country, self.variant

    @property
    def specificity(self) -> int:
        return 1 + (self.country is not None) + (self.variant is not None)

    @property
    def file_name(self) -> str:
        return f"{self.interface_name}.i18n{self.class_name_suffix()}{PROPERTIES_EXTENSION}"

    def class_name_suffix(self) -> str:
        """Locale suffix appended to the primary class name, e.g. ``_en_US_POSIX``."""
        return "_" + "_".join(part for part in self.locale if part)

    def parent(self) -> Optional["TranslationFileName"]:
        """
        The next less specific translation file name.

        Returns:
            The name without its least specific qualifier, or None when only the
            language is left (the parent is then the base file).
        """
        if self.variant is not None:
            return TranslationFileName(self.interface_name, self.language, self.country)
        if self.country is not None:
            return TranslationFileName(self.interface_name, self.language)
        return None

    def parent_file_name(self) -> str:
        parent = self.parent()
        if parent is None:
            return base_file_name(self.interface_name)
        return parent.file_name

    def __str__(self) -> str:
        return self.file_name


def enclosing_translation_file_name(file_name: str) -> str:
    """
    Derive the name of the file a translation file falls back to.

    ``Messages.i18n_en_US_POSIX.properties`` -> ``Messages.i18n_en_US.properties``
    -> ``Messages.i18n_en.properties`` -> ``Messages.properties``.
    """
    return TranslationFileName.parse(file_name).parent_file_name()


def translation_class_name_suffix(file_name: str) -> str:
    return TranslationFileName.parse(file_name).class_name_suffix()
