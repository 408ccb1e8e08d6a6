"""Model of message interfaces and their descriptor file."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Set, Tuple

import jsonschema
import yaml

from i18n_classgen.errors import InterfaceDescriptorError

BUNDLE = "bundle"
LOGGER = "logger"

# Schema of the YAML file describing the message interfaces to process.
INTERFACE_DESCRIPTOR_SCHEMA = {
    "type": "object",
    "properties": {
        "interfaces": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "package": {"type": "string"},
                    "name": {"type": "string", "pattern": r"^[^.\s]+$"},
                    "kind": {"enum": [BUNDLE, LOGGER]},
                    "marker": {"type": "boolean"},
                    "extends": {"type": "array", "items": {"type": "string"}},
                    "methods": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {
                                "name": {"type": "string"},
                                "key": {"type": "string"},
                                "message": {"type": "string"},
                                "parameters": {"type": "array", "items": {"type": "string"}},
                            },
                            "required": ["name"],
                            "additionalProperties": False,
                        },
                    },
                },
                "required": ["package", "name"],
                "additionalProperties": False,
            },
        }
    },
    "required": ["interfaces"],
}


@dataclass(frozen=True)
class Method:
    """
    A method of a message interface.

    Two methods are equal when they are declared by the same interface with the
    same signature; the translation key and default message do not take part.
    """
    declaring_interface: str
    name: str
    parameter_types: Tuple[str, ...] = ()
    translation_key: str = field(default="", compare=False)
    message: str = field(default="", compare=False)

    def __post_init__(self):
        if not self.translation_key:
            object.__setattr__(self, "translation_key", self.name)

    @property
    def signature(self) -> str:
        return f"{self.name}({', '.join(self.parameter_types)})"

    def __str__(self) -> str:
        return f"{self.declaring_interface}.{self.signature}"


@dataclass(frozen=True)
class MessageInterface:
    """
    A message bundle or message logger interface.

    Marker interfaces (for instance a basic logger contract) take part in the
    inheritance chain but never in translation: ``translatable`` is False for them.
    """
    package_name: str
    simple_name: str
    methods: Tuple[Method, ...] = field(default=(), compare=False)
    extended_interfaces: Tuple["MessageInterface", ...] = field(default=(), compare=False)
    marker: bool = field(default=False, compare=False)
    kind: str = field(default=BUNDLE, compare=False)

    @property
    def qualified_name(self) -> str:
        if not self.package_name:
            return self.simple_name
        return f"{self.package_name}.{self.simple_name}"

    @property
    def translatable(self) -> bool:
        return not self.marker

    def translatable_ancestors(self) -> List["MessageInterface"]:
        """Directly extended interfaces that contribute translations."""
        return [intf for intf in self.extended_interfaces if intf.translatable]

    def __str__(self) -> str:
        return self.qualified_name


def _qualify(package_name: str, reference: str) -> str:
    # A bare name refers to an interface of the same package.
    if "." in reference or not package_name:
        return reference
    return f"{package_name}.{reference}"


def build_interfaces(descriptor: Dict[str, Any]) -> List[MessageInterface]:
    """
    Build message interfaces from a parsed descriptor.

    Args:
        descriptor: The descriptor mapping, as loaded from YAML.

    Returns:
        List[MessageInterface]: The interfaces in declaration order, with their
        ``extends`` references resolved.

    Raises:
        InterfaceDescriptorError: On schema violations, duplicate or unknown
            interfaces, and inheritance cycles.
    """
    try:
        jsonschema.validate(instance=descriptor, schema=INTERFACE_DESCRIPTOR_SCHEMA)
    except jsonschema.ValidationError as schema_exc:
        raise InterfaceDescriptorError(f"Invalid interface descriptor: {schema_exc.message}") from schema_exc

    entries: Dict[str, Dict[str, Any]] = {}
    for entry in descriptor["interfaces"]:
        qualified_name = _qualify(entry["package"], entry["name"])
        if qualified_name in entries:
            raise InterfaceDescriptorError(f"Interface '{qualified_name}' is declared more than once")
        entries[qualified_name] = entry

    built: Dict[str, MessageInterface] = {}
    in_progress: Set[str] = set()

    def build(qualified_name: str) -> MessageInterface:
        if qualified_name in built:
            return built[qualified_name]
        if qualified_name in in_progress:
            raise InterfaceDescriptorError(f"Inheritance cycle through interface '{qualified_name}'")
        entry = entries.get(qualified_name)
        if entry is None:
            raise InterfaceDescriptorError(f"Unknown interface '{qualified_name}'")

        in_progress.add(qualified_name)
        extended = tuple(build(_qualify(entry["package"], ref)) for ref in entry.get("extends", []))
        in_progress.discard(qualified_name)

        methods = tuple(
            Method(
                declaring_interface=qualified_name,
                name=method["name"],
                parameter_types=tuple(method.get("parameters", [])),
                translation_key=method.get("key", ""),
                message=method.get("message", ""),
            )
            for method in entry.get("methods", [])
        )
        interface = MessageInterface(
            package_name=entry["package"],
            simple_name=entry["name"],
            methods=methods,
            extended_interfaces=extended,
            marker=entry.get("marker", False),
            kind=entry.get("kind", BUNDLE),
        )
        built[qualified_name] = interface
        return interface

    return [build(name) for name in entries]


def load_interfaces(descriptor_path: str) -> List[MessageInterface]:
    """
    Load the message interfaces described by a YAML file.

    Args:
        descriptor_path (str): Path to the descriptor file.

    Returns:
        List[MessageInterface]: The described interfaces.
    """
    try:
        with open(descriptor_path, 'r', encoding='utf-8') as descriptor_stream:
            descriptor = yaml.safe_load(descriptor_stream)
    except yaml.YAMLError as e:
        raise InterfaceDescriptorError(f"Invalid YAML in interface descriptor '{descriptor_path}': {e}") from e
    except OSError as e:
        raise InterfaceDescriptorError(f"Could not read interface descriptor '{descriptor_path}': {e}") from e

    if descriptor is None:
        descriptor = {"interfaces": []}
    return build_interfaces(descriptor)
