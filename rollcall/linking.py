"""
Helpers for linking a member to a character.

Builds the character display name used as the member's nickname and resolves
the default role within a guild's role list.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

# Returned by find_role_id when no role matches. Discord never issues 0 as a
# snowflake, so a role add with this id is rejected remotely.
MISSING_ROLE_ID = 0


class NamedRole(Protocol):
    id: int
    name: str


def _is_separator(char: str) -> bool:
    if char.isascii():
        return not (char.isalnum() or char == "_")
    if char.isalpha() or char.isdigit():
        return False
    return char.isspace()


def _to_title(char: str) -> str:
    # Single-character titlecase mapping only; "ß" would otherwise become "Ss"
    titled = char.title()
    return titled if len(titled) == 1 else char


def title_case(word: str) -> str:
    """
    Uppercase the first letter of each word, leaving the rest untouched.

    Unlike str.title(), the remainder is not lowercased:
    "mcDONALD" -> "McDONALD", "o'neil" -> "O'Neil".
    """
    chars = []
    previous = " "
    for char in word:
        chars.append(_to_title(char) if _is_separator(previous) else char)
        previous = char
    return "".join(chars)


def build_display_name(first_name: str, last_name: str) -> str:
    """Join the title-cased first and last name with a single space."""
    return f"{title_case(first_name)} {title_case(last_name)}"


def find_role_id(roles: Iterable[NamedRole], name: str) -> int:
    """
    Return the id of the first role named exactly `name`.

    The comparison is case-sensitive. MISSING_ROLE_ID is returned when no
    role matches.
    """
    for role in roles:
        if role.name == name:
            return role.id
    return MISSING_ROLE_ID
