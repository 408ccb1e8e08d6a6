"""Class models handed to emitters, and the emitters themselves."""
import os
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Protocol, runtime_checkable

from i18n_classgen.errors import EmissionError
from i18n_classgen.message_interface import LOGGER, MessageInterface, Method

BUNDLE_SUFFIX = "$bundle"
LOGGER_SUFFIX = "$logger"
GENERATOR_NAME = "i18n_classgen"


def primary_class_name(interface: MessageInterface) -> str:
    """Simple name of the non-localized class generated for an interface."""
    return interface.simple_name + (LOGGER_SUFFIX if interface.kind == LOGGER else BUNDLE_SUFFIX)


def translation_class_name(interface: MessageInterface, locale_suffix: str = "") -> str:
    """
    Qualified name of a generated class.

    Args:
        interface: The message interface.
        locale_suffix: ``_en``, ``_en_US`` ... or an empty string for the primary class.
    """
    simple_name = primary_class_name(interface) + locale_suffix
    if not interface.package_name:
        return simple_name
    return f"{interface.package_name}.{simple_name}"


@dataclass(frozen=True)
class ClassModel:
    """One generated translation class."""
    qualified_class_name: str
    superclass_name: str
    translations: Mapping[Method, str] = field(default_factory=dict, compare=False)
    interface: Optional[MessageInterface] = field(default=None, compare=False)

    @property
    def package_name(self) -> str:
        return self.qualified_class_name.rpartition(".")[0]

    @property
    def simple_name(self) -> str:
        return self.qualified_class_name.rpartition(".")[2]

    @property
    def is_synthetic(self) -> bool:
        return not self.translations

    def translation_keys(self) -> Dict[str, str]:
        """The translations keyed by translation key, for reporting."""
        return {method.translation_key: message for method, message in self.translations.items()}


@runtime_checkable
class ClassEmitter(Protocol):
    """Receives the class models of a generation pass, parents before children."""

    def emit(self, model: ClassModel) -> None:
        """
        Materialize one class model.

        Raises:
            EmissionError: If the class cannot be produced.
        """
        ...


class RecordingEmitter:
    """Keep emitted models in memory instead of writing them."""

    def __init__(self):
        self.models: List[ClassModel] = []

    def emit(self, model: ClassModel) -> None:
        self.models.append(model)


def _java_string(value: str) -> str:
    escaped = []
    for char in value:
        if char in ('"', '\\'):
            escaped.append('\\' + char)
        elif char == '\n':
            escaped.append('\\n')
        elif char == '\r':
            escaped.append('\\r')
        elif char == '\t':
            escaped.append('\\t')
        elif ord(char) < 0x20 or ord(char) > 0x7e:
            escaped.append(f'\\u{ord(char):04x}' if ord(char) <= 0xffff else char)
        else:
            escaped.append(char)
    return '"' + ''.join(escaped) + '"'


def render_java_source(model: ClassModel) -> str:
    """
    Render the Java source of a translation class.

    Each translated method name is overridden by one ``<name>$str()`` accessor
    returning the translated message; everything else is inherited. Overloads
    share their accessor, which returns the translation of the overload with the
    fewest parameter types.
    """
    lines = []
    if model.package_name:
        lines += [f"package {model.package_name};", ""]
    lines += [
        "import javax.annotation.Generated;",
        "",
        f'@Generated("{GENERATOR_NAME}")',
        f"public class {model.simple_name} extends {model.superclass_name} {{",
        "",
        "    private static final long serialVersionUID = 1L;",
    ]

    messages: Dict[str, str] = {}
    for method in sorted(model.translations, key=lambda m: (m.name, len(m.parameter_types), m.parameter_types,
                                                            m.declaring_interface)):
        messages.setdefault(method.name, model.translations[method])
    for index, (name, message) in enumerate(messages.items()):
        lines.append(f"    private static final String {name}{index} = {_java_string(message)};")

    if model.interface is not None and model.interface.kind == LOGGER:
        lines += [
            "",
            f"    public {model.simple_name}(final org.jboss.logging.Logger log) {{",
            "        super(log);",
            "    }",
        ]

    for index, name in enumerate(messages):
        lines += [
            "",
            "    @Override",
            f"    protected String {name}$str() {{",
            f"        return {name}{index};",
            "    }",
        ]
    lines += ["", "}", ""]
    return "\n".join(lines)


class JavaSourceEmitter:
    """Write one ``.java`` compilation unit per class model."""

    def __init__(self, output_dir: str):
        self.output_dir = output_dir

    def source_path(self, model: ClassModel) -> str:
        package_dirs = model.package_name.split(".") if model.package_name else []
        return os.path.join(self.output_dir, *package_dirs, model.simple_name + ".java")

    def emit(self, model: ClassModel) -> None:
        path = self.source_path(model)
        try:
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(render_java_source(model))
        except OSError as e:
            raise EmissionError(f"Cannot generate {model.qualified_class_name} source file: {e}") from e
