import re
from typing import Dict, List, Tuple

from i18n_classgen.errors import PropertiesLoadError, PropertiesSyntaxError

_SIMPLE_ESCAPES = {'t': '\t', 'n': '\n', 'r': '\r', 'f': '\f'}


def _has_unescaped_trailing_backslash(s: str) -> bool:
    """Check if a string ends with an odd number of backslashes."""
    if not s.endswith('\\'):
        return False
    # Count trailing backslashes
    count = 0
    i = len(s) - 1
    while i >= 0 and s[i] == '\\':
        count += 1
        i -= 1
    # An odd number of trailing backslashes indicates an unescaped one
    return count % 2 == 1


def _find_separator(line: str) -> int:
    """Index of the first unescaped '=', ':' or whitespace, or -1."""
    j = 0
    while j < len(line):
        char = line[j]
        if char == '\\':
            j += 2
            continue
        if char in (':', '=') or char.isspace():
            return j
        j += 1
    return -1


def read_properties_text(file_path: str) -> str:
    """
    Read the text of a .properties file.

    UTF-8 is tried first; a file that is not valid UTF-8 is decoded as
    ISO-8859-1, the historical encoding of .properties files.
    """
    with open(file_path, 'rb') as file:
        content = file.read()
    try:
        return content.decode('utf-8')
    except UnicodeDecodeError:
        return content.decode('iso-8859-1')


def parse_properties_file(file_path: str) -> List[Tuple[str, str, int]]:
    """
    Parse a .properties file.

    Values are returned as written (escapes are kept); use ``load_properties``
    for the decoded key/value mapping.

    Args:
        file_path (str): The path to the .properties file.

    Returns:
        List[Tuple[str, str, int]]: ``(raw key, raw value, line number)`` for each
        entry, in file order. Comments and blank lines are skipped.
    """
    lines = re.split(r'\r\n|[\r\n]', read_properties_text(file_path))

    entries = []
    i = 0
    while i < len(lines):
        stripped_line = lines[i].lstrip()

        if not stripped_line or stripped_line.startswith(('#', '!')):
            i += 1
            continue

        sep_index = _find_separator(stripped_line)
        if sep_index == -1:
            # A key with no value
            key_raw = stripped_line
            value = ''
        else:
            key_raw = stripped_line[:sep_index]
            # Whitespace around a single '=' or ':' belongs to the separator
            end_sep_group = sep_index
            while end_sep_group + 1 < len(stripped_line) and stripped_line[end_sep_group + 1].isspace():
                end_sep_group += 1
            if stripped_line[sep_index].isspace() and end_sep_group + 1 < len(stripped_line) \
                    and stripped_line[end_sep_group + 1] in (':', '='):
                end_sep_group += 1
                while end_sep_group + 1 < len(stripped_line) and stripped_line[end_sep_group + 1].isspace():
                    end_sep_group += 1
            value = stripped_line[end_sep_group + 1:]

        line_number = i + 1

        # Handle multiline values
        while _has_unescaped_trailing_backslash(value):
            value = value[:-1]  # Remove the backslash
            i += 1
            if i < len(lines):
                value += lines[i].lstrip()
            else:
                break
        i += 1

        entries.append((key_raw, value, line_number))
    return entries


def unescape(text: str, file_path: str = '<string>', line_number: int = 0) -> str:
    """
    Decode properties escapes (``\\t``, ``\\n``, ``\\uXXXX``, ``\\=`` ...).

    Raises:
        PropertiesSyntaxError: If a ``\\u`` escape is not followed by four hex digits.
    """
    if '\\' not in text:
        return text
    decoded = []
    i = 0
    while i < len(text):
        char = text[i]
        if char != '\\':
            decoded.append(char)
            i += 1
            continue
        if i + 1 >= len(text):
            # A lone trailing backslash is dropped, as Java does
            break
        escaped = text[i + 1]
        if escaped == 'u':
            hex_digits = text[i + 2:i + 6]
            if not re.fullmatch(r'[0-9a-fA-F]{4}', hex_digits):
                raise PropertiesSyntaxError(file_path, line_number, f"Malformed \\uxxxx encoding: '\\u{hex_digits}'")
            decoded.append(chr(int(hex_digits, 16)))
            i += 6
        else:
            decoded.append(_SIMPLE_ESCAPES.get(escaped, escaped))
            i += 2
    return ''.join(decoded)


def load_properties(file_path: str) -> Dict[str, str]:
    """
    Load the decoded key/value pairs of a .properties file.

    Duplicate keys resolve to the last occurrence. Blank values are kept as
    written so callers can tell them apart from missing keys.

    Args:
        file_path (str): The path to the .properties file.

    Returns:
        Dict[str, str]: The decoded properties, in file order.

    Raises:
        PropertiesSyntaxError: If the file holds a malformed escape.
        PropertiesLoadError: If the file cannot be read.
    """
    try:
        entries = parse_properties_file(file_path)
    except OSError as e:
        raise PropertiesLoadError(f"Could not read properties file '{file_path}'. Reason: {e}") from e

    properties = {}
    for key_raw, value_raw, line_number in entries:
        properties[unescape(key_raw, file_path, line_number)] = unescape(value_raw, file_path, line_number)
    return properties
