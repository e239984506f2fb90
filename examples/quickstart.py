"""Quickstart example for tagtranslate.

This example demonstrates formatting, plural selection and translation
validation with tagtranslate.
"""

from tagtranslate import (
    create_translator,
    format_message,
    introspect_message,
    validate_translation,
)


class Messages:
    """Minimal message provider backed by dictionaries."""

    def __init__(self, messages: dict[str, str], locale: str, base: dict[str, str]) -> None:
        self._messages = messages
        self._locale = locale
        self._base = base

    def get_message(self, key: str) -> str | None:
        return self._messages.get(key)

    def get_ui_language(self) -> str:
        return self._locale

    def get_base_message(self, key: str) -> str | None:
        return self._base.get(key)

    def get_base_ui_language(self) -> str:
        return "en"


ENGLISH = {
    "welcome": "Welcome, <b>%name%</b>!",
    "docs": "Read the <a>documentation</a>",
    "files": "No files | %count% file | %count% files",
}

RUSSIAN = {
    "welcome": "Добро пожаловать, <b>%name%</b>!",
    "files": "Нет файлов | %count% файл | %count% файла | %count% файлов",
}

# Example 1: Formatting into chunks
print("=" * 50)
print("Example 1: Formatting")
print("=" * 50)

chunks = format_message("Ping %value% ms", {"value": 100})
print(chunks)
# Output: ['Ping ', '100', ' ms']

chunks = format_message(
    "Read the <a>documentation</a>",
    {"a": lambda children: f'<a href="/docs">{children}</a>'},
)
print("".join(chunks))
# Output: Read the <a href="/docs">documentation</a>

# Example 2: Translator with plural forms
print("\n" + "=" * 50)
print("Example 2: Translator")
print("=" * 50)

translator = create_translator(Messages(RUSSIAN, "ru", ENGLISH))

print(translator.get_message("welcome", {"name": "Анна"}))
# Output: Добро пожаловать, <b>Анна</b>!

for count in (0, 1, 3, 5, 21):
    print(translator.get_plural("files", count))
# Output:
# Нет файлов
# 1 файл
# 3 файла
# 5 файлов
# 21 файл

# Missing in Russian, formatted from the English base message
print(translator.get_message("docs", {"a": lambda children: f"[{children}]"}))
# Output: Read the [documentation]

# Example 3: Validating translations
print("\n" + "=" * 50)
print("Example 3: Validation")
print("=" * 50)

for key, translated in RUSSIAN.items():
    result = validate_translation(ENGLISH[key], translated, "ru")
    print(f"{key}: {'ok' if result.is_valid else 'invalid'}")
# Output:
# welcome: ok
# files: ok

result = validate_translation(ENGLISH["welcome"], "Добро пожаловать, %name%!", "ru")
for error in result.errors:
    print(error.format_error())

result = validate_translation(ENGLISH["files"], "%count% файлов", "ru")
print(result.errors[0].message)
# Output: Invalid plural forms: expected 4, got 1

# Example 4: Introspection
print("\n" + "=" * 50)
print("Example 4: Introspection")
print("=" * 50)

info = introspect_message(ENGLISH["welcome"])
print(sorted(info.placeholders), sorted(info.tags))
# Output: ['name'] ['b']
