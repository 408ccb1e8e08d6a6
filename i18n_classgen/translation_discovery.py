"""Locate the translation files of a message interface."""
import os
from dataclasses import dataclass
from typing import Dict, List, Optional

from i18n_classgen.errors import TranslationDiscoveryError
from i18n_classgen.locale_filename import (
    TranslationFileName,
    is_generated_file,
    translation_file_pattern,
)
from i18n_classgen.message_interface import MessageInterface


@dataclass(frozen=True)
class TranslationFile:
    """A translation file on disk together with its parsed name."""
    path: str
    name: TranslationFileName

    @property
    def directory(self) -> str:
        return os.path.dirname(self.path)

    @property
    def file_name(self) -> str:
        return os.path.basename(self.path)

    @property
    def locale(self):
        return self.name.locale

    def sibling(self, name: TranslationFileName) -> "TranslationFile":
        """The file for another locale of the same interface, in the same directory."""
        return TranslationFile(os.path.join(self.directory, name.file_name), name)


class TranslationFileLocator:
    """
    Resolve and list the translation files of message interfaces.

    The directory of an interface is ``translation_files_path`` joined with the
    interface's package path when a root is configured, otherwise the class
    output directory joined with the package path.
    """

    def __init__(self, translation_files_path: Optional[str] = None, class_output_dir: Optional[str] = None):
        self.translation_files_path = translation_files_path
        self.class_output_dir = class_output_dir or os.curdir
        self._listings: Dict[str, List[TranslationFile]] = {}

    def directory_for(self, interface: MessageInterface) -> str:
        root = self.translation_files_path if self.translation_files_path else self.class_output_dir
        return os.path.join(root, *interface.package_name.split(".")) if interface.package_name else root

    def find_translation_files(self, interface: MessageInterface) -> List[TranslationFile]:
        """
        List the translation files of an interface.

        Args:
            interface (MessageInterface): The message interface.

        Returns:
            List[TranslationFile]: The matching files, least specific locale first.
            A missing directory yields an empty list.

        Raises:
            TranslationDiscoveryError: If the directory exists but cannot be listed.
        """
        cached = self._listings.get(interface.qualified_name)
        if cached is not None:
            return list(cached)

        directory = self.directory_for(interface)
        if not os.path.isdir(directory):
            self._listings[interface.qualified_name] = []
            return []
        try:
            file_names = os.listdir(directory)
        except OSError as e:
            raise TranslationDiscoveryError(f"Cannot read {interface.package_name} package files in '{directory}': {e}") from e

        pattern = translation_file_pattern(interface.simple_name)
        files = []
        for file_name in file_names:
            if is_generated_file(file_name) or not pattern.match(file_name):
                continue
            path = os.path.join(directory, file_name)
            if os.path.isfile(path):
                files.append(TranslationFile(path, TranslationFileName.parse(file_name)))

        # Sort for deterministic output across runs
        files.sort(key=lambda f: (f.name.specificity, f.file_name))
        self._listings[interface.qualified_name] = files
        return list(files)

    def clear(self) -> None:
        """Forget listings memoized during the current pass."""
        self._listings.clear()
