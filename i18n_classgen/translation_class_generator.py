"""
The translation class generator.

Generates the classes corresponding to the translation files of a message
bundle or message logger interface. Classes are chained by locale specificity:
``Messages$bundle_en_US_POSIX`` extends ``Messages$bundle_en_US``, which extends
``Messages$bundle_en``, which extends the primary ``Messages$bundle`` class.
A missing link of the chain is generated as an empty class.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Set

from i18n_classgen.class_model import ClassEmitter, ClassModel, translation_class_name
from i18n_classgen.diagnostics import Diagnostics
from i18n_classgen.errors import EmissionError, PropertiesLoadError
from i18n_classgen.message_interface import MessageInterface, Method
from i18n_classgen.translation_aggregator import TranslationAggregator
from i18n_classgen.translation_discovery import TranslationFile, TranslationFileLocator


@dataclass
class _GenerationPass:
    interface: MessageInterface
    aggregator: TranslationAggregator
    existing_locales: Set[tuple]
    emitted: Set[str] = field(default_factory=set)
    in_progress: Set[str] = field(default_factory=set)
    unreadable: Set[str] = field(default_factory=set)
    models: List[ClassModel] = field(default_factory=list)


class TranslationClassGenerator:
    """
    Generate the translation classes of message interfaces.

    Args:
        locator: Finds the translation files of an interface.
        emitter: Receives every class model, parents before children.
        diagnostics: Collects notes, warnings and errors.
    """

    def __init__(self, locator: TranslationFileLocator, emitter: ClassEmitter, diagnostics: Diagnostics):
        self.locator = locator
        self.emitter = emitter
        self.diagnostics = diagnostics

    def generate(self, interface: MessageInterface) -> List[ClassModel]:
        """
        Generate the translation classes of one interface.

        Args:
            interface (MessageInterface): The message interface.

        Returns:
            List[ClassModel]: The successfully emitted models, in emission order.

        Raises:
            TranslationDiscoveryError: If the interface's translation files cannot be listed.
        """
        self.locator.clear()
        files = self.locator.find_translation_files(interface)
        generation = _GenerationPass(
            interface=interface,
            aggregator=TranslationAggregator(self.locator, self.diagnostics),
            existing_locales={f.locale for f in files},
        )
        for translation_file in files:
            self._generate_file(generation, translation_file, required=False)
        return generation.models

    def _generate_file(self, generation: _GenerationPass, translation_file: TranslationFile, required: bool) -> None:
        interface = generation.interface
        name = translation_file.name
        qualified_class_name = translation_class_name(interface, name.class_name_suffix())
        if qualified_class_name in generation.emitted:
            return
        if qualified_class_name in generation.in_progress:
            self.diagnostics.warn(f"Locale chain of {translation_file.file_name} loops back to "
                                  f"{qualified_class_name}; skipped", interface.qualified_name)
            return

        generation.in_progress.add(qualified_class_name)
        try:
            superclass_name = self._ensure_parent(generation, translation_file)
            translations = self._translations_for(generation, translation_file, qualified_class_name, required)
            if translations is None:
                return
            self._emit(generation, ClassModel(qualified_class_name, superclass_name, translations, interface))
        finally:
            generation.in_progress.discard(qualified_class_name)

    def _ensure_parent(self, generation: _GenerationPass, translation_file: TranslationFile) -> str:
        """Generate the enclosing class if needed and return its qualified name."""
        parent_name = translation_file.name.parent()
        if parent_name is None:
            # The primary class is generated by the non-translated code path
            return translation_class_name(generation.interface)

        superclass_name = translation_class_name(generation.interface, parent_name.class_name_suffix())
        if superclass_name not in generation.emitted:
            self._generate_file(generation, translation_file.sibling(parent_name), required=True)
        return superclass_name

    def _translations_for(self, generation: _GenerationPass, translation_file: TranslationFile,
                          qualified_class_name: str, required: bool):
        if translation_file.locale not in generation.existing_locales:
            self.diagnostics.note(f"Generating empty translation super class {qualified_class_name}.",
                                  generation.interface.qualified_name)
            return {}
        if qualified_class_name in generation.unreadable:
            return {} if required else None

        self.diagnostics.note(f"Generating translation class for {translation_file.path}.",
                              generation.interface.qualified_name)
        try:
            translations: Dict[Method, str] = generation.aggregator.merged_translations(
                generation.interface, translation_file)
        except PropertiesLoadError as e:
            generation.unreadable.add(qualified_class_name)
            self.diagnostics.error(f"Cannot read the {translation_file.file_name} translation file: {e}",
                                   generation.interface.qualified_name)
            # A superclass must exist even when its translations are lost
            return {} if required else None
        return translations

    def _emit(self, generation: _GenerationPass, model: ClassModel) -> None:
        generation.emitted.add(model.qualified_class_name)
        try:
            self.emitter.emit(model)
        except EmissionError as e:
            self.diagnostics.error(f"Cannot generate {model.qualified_class_name} source file: {e}",
                                   generation.interface.qualified_name)
            return
        generation.models.append(model)
