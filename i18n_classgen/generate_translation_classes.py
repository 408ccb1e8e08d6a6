import logging
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from tqdm import tqdm

from i18n_classgen.app_config import AppConfig, load_app_config
from i18n_classgen.class_model import ClassEmitter, JavaSourceEmitter, RecordingEmitter
from i18n_classgen.diagnostics import ERROR, WARNING, Diagnostics
from i18n_classgen.errors import InterfaceDescriptorError, TranslationDiscoveryError
from i18n_classgen.logging_config import LOGGER_NAME
from i18n_classgen.message_interface import MessageInterface, load_interfaces
from i18n_classgen.translation_class_generator import TranslationClassGenerator
from i18n_classgen.translation_discovery import TranslationFileLocator


@dataclass
class GenerationReport:
    """Outcome of one run over a set of message interfaces."""
    generated_classes: Dict[str, List[str]] = field(default_factory=dict)
    failed_interfaces: List[str] = field(default_factory=list)
    warning_count: int = 0
    error_count: int = 0

    @property
    def class_count(self) -> int:
        return sum(len(names) for names in self.generated_classes.values())


def run(config: AppConfig, interfaces: List[MessageInterface], emitter: Optional[ClassEmitter] = None,
        logger: Optional[logging.Logger] = None) -> GenerationReport:
    """
    Generate the translation classes of every interface.

    Failures are isolated: a directory that cannot be listed abandons that
    interface only, and unreadable files or failed emissions only lose the
    affected class.

    Args:
        config: The application configuration.
        interfaces: The message interfaces to process.
        emitter: Receives the class models; defaults to a Java source emitter,
            or a recording emitter in dry-run mode.
        logger: Receives the diagnostics.

    Returns:
        GenerationReport: Generated class names per interface and diagnostic counts.
    """
    logger = logger or config.logger or logging.getLogger(LOGGER_NAME)
    if emitter is None:
        emitter = RecordingEmitter() if config.dry_run else JavaSourceEmitter(config.generated_sources_dir)

    diagnostics = Diagnostics()
    locator = TranslationFileLocator(config.translation_files_path, config.class_output_dir)
    generator = TranslationClassGenerator(locator, emitter, diagnostics)
    report = GenerationReport()

    for interface in tqdm(interfaces, desc="Generating translation classes", unit="interface"):
        if not interface.translatable:
            continue
        try:
            models = generator.generate(interface)
            report.generated_classes[interface.qualified_name] = [m.qualified_class_name for m in models]
            for model in models:
                logger.debug("%s extends %s: %s", model.qualified_class_name, model.superclass_name,
                             model.translation_keys())
        except TranslationDiscoveryError as e:
            diagnostics.error(str(e), interface.qualified_name)
            report.failed_interfaces.append(interface.qualified_name)
        finally:
            for diagnostic in diagnostics.drain_to(logger):
                if diagnostic.kind == WARNING:
                    report.warning_count += 1
                elif diagnostic.kind == ERROR:
                    report.error_count += 1
    return report


def main() -> int:
    """
    Load the configuration and the interface descriptor, then generate every class.

    Returns:
        int: The process exit status.
    """
    config = load_app_config()
    logger = config.logger

    try:
        interfaces = load_interfaces(config.interfaces_file)
    except InterfaceDescriptorError as e:
        logger.critical("%s", e)
        return 1
    logger.info("Loaded %d message interface(s) from '%s'.", len(interfaces), config.interfaces_file)

    report = run(config, interfaces, logger=logger)
    if config.dry_run:
        logger.info("[Dry Run] No source file was written.")
    logger.info(
        "Generated %d translation class(es) for %d interface(s); %d warning(s), %d error(s).",
        report.class_count, len(report.generated_classes), report.warning_count, report.error_count
    )
    for qualified_name in report.failed_interfaces:
        logger.error("Translation classes of %s were not generated.", qualified_name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
