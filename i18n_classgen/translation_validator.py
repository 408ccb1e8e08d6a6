from typing import Dict, Iterable, Mapping, Optional

from i18n_classgen.diagnostics import Diagnostics
from i18n_classgen.message_interface import Method

BLANK_VALUE_WARNING = "translation ignored: blank value for key {key}"
ORPHAN_KEY_WARNING = "orphan translation key: no method declares key {key}"


def validate_translations(
        legal_methods: Iterable[Method],
        raw_translations: Mapping[str, str],
        diagnostics: Diagnostics,
        source: Optional[str] = None
) -> Dict[Method, str]:
    """
    Keep the translations that belong to a method of the legal method set.

    A key present with a blank value is dropped with a warning. A key no legal
    method declares is reported as an orphan. A missing key is silent: the
    method falls back to the enclosing class.

    Args:
        legal_methods: The methods a translation file may translate.
        raw_translations: The key/value pairs loaded from the file.
        diagnostics: Collector receiving the warnings.
        source: Name of the translation file, used in warnings.

    Returns:
        Dict[Method, str]: The valid (method, message) pairs.
    """
    valid_translations: Dict[Method, str] = {}
    declared_keys = set()
    blank_keys = set()

    for method in legal_methods:
        key = method.translation_key
        declared_keys.add(key)
        if key not in raw_translations:
            continue
        message = raw_translations[key]
        if message.strip():
            valid_translations[method] = message
        else:
            blank_keys.add(key)

    # Sorted so the warnings do not depend on file or set ordering
    for key in sorted(blank_keys):
        diagnostics.warn(BLANK_VALUE_WARNING.format(key=key), source)
    for key in sorted(set(raw_translations) - declared_keys):
        diagnostics.warn(ORPHAN_KEY_WARNING.format(key=key), source)

    return valid_translations
