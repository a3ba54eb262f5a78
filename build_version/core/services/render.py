"""
Version constant renderer — descriptor in, source line out.

Each supported language has a template for the "present" and "absent"
forms of ``GIT_BUILD_VERSION``. The descriptor is escaped into a string
literal of that language, so any descriptor yields a line that compiles
and two different descriptors never yield the same line.
"""

from __future__ import annotations

from build_version.core.errors import ConfigError
from build_version.core.models.version import DEFAULT_LANGUAGE

CONSTANT_NAME = "GIT_BUILD_VERSION"

_TEMPLATES: dict[str, tuple[str, str]] = {
    # language: (present, absent)
    "rust": (
        'static {name}: Option<&\'static str> = Some({literal});\n',
        "static {name}: Option<&'static str> = None;\n",
    ),
    "python": (
        "{name}: str | None = {literal}\n",
        "{name}: str | None = None\n",
    ),
    "c": (
        "static const char *const {name} = {literal};\n",
        "static const char *const {name} = NULL;\n",
    ),
}

_EXTENSIONS: dict[str, str] = {
    "rust": "rs",
    "python": "py",
    "c": "h",
}

_SIMPLE_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def supported_languages() -> list[str]:
    """Languages that can be rendered, sorted."""
    return sorted(_TEMPLATES)


def version_file_name(language: str = DEFAULT_LANGUAGE) -> str:
    """File name the constant is written to, e.g. ``version.rs``."""
    _check_language(language)
    return f"version.{_EXTENSIONS[language]}"


def render_version(version: str | None, language: str = DEFAULT_LANGUAGE) -> str:
    """Render the ``GIT_BUILD_VERSION`` declaration for ``version``.

    Args:
        version: Descriptor to embed, or None for the "no version" form.
        language: One of ``supported_languages()``.

    Returns:
        A single line of source, newline-terminated.

    Raises:
        ConfigError: If ``language`` is not supported.
    """
    _check_language(language)
    present, absent = _TEMPLATES[language]
    if version is None:
        return absent.format(name=CONSTANT_NAME)
    return present.format(name=CONSTANT_NAME, literal=string_literal(version, language))


def string_literal(value: str, language: str) -> str:
    """Quote ``value`` as a double-quoted string literal for ``language``."""
    if language == "python":
        escape = "\\x{:02x}"
    elif language == "rust":
        escape = "\\u{{{:x}}}"
    else:
        return _c_literal(value)
    return '"' + "".join(_escape_char(ch, escape) for ch in value) + '"'


def _escape_char(ch: str, unicode_escape: str) -> str:
    if ch in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[ch]
    if ord(ch) < 0x20 or ord(ch) == 0x7F:
        return unicode_escape.format(ord(ch))
    return ch


def _c_literal(value: str) -> str:
    # Octal escapes on the UTF-8 bytes; '?' escaped so no trigraph can form.
    out = []
    for byte in value.encode("utf-8"):
        ch = chr(byte)
        if ch in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[ch])
        elif byte < 0x20 or byte >= 0x7F or ch == "?":
            out.append(f"\\{byte:03o}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def _check_language(language: str) -> None:
    if language not in _TEMPLATES:
        raise ConfigError(
            f"Unknown language '{language}'. Valid: {', '.join(supported_languages())}"
        )
