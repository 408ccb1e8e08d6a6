import os

import pytest

from i18n_classgen.diagnostics import Diagnostics
from i18n_classgen.message_interface import BUNDLE, LOGGER, MessageInterface, Method

PACKAGE = "org.example.i18n"


def make_interface(name, methods=(), extends=(), marker=False, kind=BUNDLE, package=PACKAGE):
    """Build a message interface from (method name, translation key) pairs."""
    qualified_name = f"{package}.{name}"
    return MessageInterface(
        package_name=package,
        simple_name=name,
        methods=tuple(Method(qualified_name, method_name, translation_key=key) for method_name, key in methods),
        extended_interfaces=tuple(extends),
        marker=marker,
        kind=kind,
    )


def method_of(interface, name):
    return next(m for m in interface.methods if m.name == name)


@pytest.fixture
def translations_root(tmp_path):
    """Root of the translation files; files land under the package path."""
    root = tmp_path / "translations"
    root.mkdir()
    return root


@pytest.fixture
def write_translation(translations_root):
    """Write a translation file for an interface and return its path."""
    def _write(interface_name, locale, content, package=PACKAGE):
        directory = os.path.join(str(translations_root), *package.split("."))
        os.makedirs(directory, exist_ok=True)
        suffix = f".i18n_{locale}" if locale else ""
        path = os.path.join(directory, f"{interface_name}{suffix}.properties")
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path
    return _write


@pytest.fixture
def diagnostics():
    return Diagnostics()


@pytest.fixture
def basic_logger():
    return make_interface("BasicLogger", methods=[("debugf", "debugf")], marker=True, kind=LOGGER,
                          package="org.jboss.logging")


@pytest.fixture
def messages_interface():
    """``Messages`` declares ``greet`` (key greet) and ``farewell`` (key bye)."""
    return make_interface("Messages", methods=[("greet", "greet"), ("farewell", "bye")])


@pytest.fixture(name="make_interface")
def make_interface_fixture():
    return make_interface


@pytest.fixture(name="method_of")
def method_of_fixture():
    return method_of
