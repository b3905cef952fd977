"""
English inflection helpers used to derive resource paths and payload root
keys from record class names.

Only the common English rules are covered; types with unusual names should
set ``resource_path`` / ``root_key`` on their RecordConfig instead.
"""

from __future__ import annotations

import re
from typing import List, Tuple

UNCOUNTABLE = frozenset(
    {
        "equipment",
        "information",
        "rice",
        "money",
        "species",
        "series",
        "fish",
        "sheep",
        "jeans",
        "police",
        "metadata",
    }
)

IRREGULAR = {
    "person": "people",
    "man": "men",
    "woman": "women",
    "child": "children",
    "sex": "sexes",
    "move": "moves",
    "zombie": "zombies",
    "ox": "oxen",
}

# Evaluated top to bottom, first match wins.
PLURAL_RULES: List[Tuple[str, str]] = [
    (r"(quiz)$", r"\1zes"),
    (r"^(oxen)$", r"\1"),
    (r"^(ox)$", r"\1en"),
    (r"(matr|vert|ind)(?:ix|ex)$", r"\1ices"),
    (r"(x|ch|ss|sh)$", r"\1es"),
    (r"([^aeiouy]|qu)y$", r"\1ies"),
    (r"(hive)$", r"\1s"),
    (r"(?:([^f])fe|([lr])f)$", r"\1\2ves"),
    (r"sis$", "ses"),
    (r"([ti])a$", r"\1a"),
    (r"([ti])um$", r"\1a"),
    (r"(buffal|tomat)o$", r"\1oes"),
    (r"(bu)s$", r"\1ses"),
    (r"(alias|status)$", r"\1es"),
    (r"(octop|vir)i$", r"\1i"),
    (r"(octop|vir)us$", r"\1i"),
    (r"^(ax|test)is$", r"\1es"),
    (r"s$", "s"),
    (r"$", "s"),
]

SINGULAR_RULES: List[Tuple[str, str]] = [
    (r"(database)s$", r"\1"),
    (r"(quiz)zes$", r"\1"),
    (r"(matr)ices$", r"\1ix"),
    (r"(vert|ind)ices$", r"\1ex"),
    (r"^(ox)en", r"\1"),
    (r"(alias|status)(es)?$", r"\1"),
    (r"(octop|vir)(us|i)$", r"\1us"),
    (r"^(a)x[ie]s$", r"\1xis"),
    (r"(cris|test)(is|es)$", r"\1is"),
    (r"(shoe)s$", r"\1"),
    (r"(o)es$", r"\1"),
    (r"(bus)(es)?$", r"\1"),
    (r"^(m|l)ice$", r"\1ouse"),
    (r"(x|ch|ss|sh)es$", r"\1"),
    (r"(m)ovies$", r"\1ovie"),
    (r"(s)eries$", r"\1eries"),
    (r"([^aeiouy]|qu)ies$", r"\1y"),
    (r"([lr])ves$", r"\1f"),
    (r"(tive)s$", r"\1"),
    (r"(hive)s$", r"\1"),
    (r"([^f])ves$", r"\1fe"),
    (r"(^analy)(sis|ses)$", r"\1sis"),
    (r"([ti])a$", r"\1um"),
    (r"(n)ews$", r"\1ews"),
    (r"(ss)$", r"\1"),
    (r"s$", ""),
]


def underscore(word: str) -> str:
    """
    FirstName -> first_name, HTTPStatus -> http_status, first-name -> first_name.
    """
    word = re.sub(r"([A-Z\d]+)([A-Z][a-z])", r"\1_\2", word)
    word = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", word)
    return word.replace("-", "_").lower()


def _last_word(word: str) -> Tuple[str, str]:
    # Inflect only the trailing word of CamelCase / snake_case compounds.
    match = re.match(r"^(.*?)([A-Z]?[a-z]+|[A-Z]+)$", word)
    if not match:
        return "", word
    return match.group(1), match.group(2)


def _inflect(word: str, rules: List[Tuple[str, str]], irregular: dict) -> str:
    if not word:
        return word
    prefix, last = _last_word(word)
    lowered = last.lower()
    if lowered in UNCOUNTABLE:
        return word
    if lowered in irregular:
        replacement = irregular[lowered]
        if last[:1].isupper():
            replacement = replacement[:1].upper() + replacement[1:]
        return prefix + replacement
    for pattern, repl in rules:
        if re.search(pattern, last, flags=re.IGNORECASE):
            return prefix + re.sub(pattern, repl, last, count=1, flags=re.IGNORECASE)
    return word


def pluralize(word: str) -> str:
    """
    Examples:
        >>> pluralize("User")
        'Users'
        >>> pluralize("BlogCategory")
        'BlogCategories'
        >>> pluralize("person")
        'people'
    """
    return _inflect(word, PLURAL_RULES, IRREGULAR)


def singularize(word: str) -> str:
    return _inflect(word, SINGULAR_RULES, {v: k for k, v in IRREGULAR.items()})


def resource_path_for(type_name: str) -> str:
    """TestApiRecord -> test_api_records"""
    return underscore(pluralize(type_name))


def root_key_for(type_name: str) -> str:
    """TestApiRecord -> test_api_record, BlogPosts -> blog_post"""
    return underscore(singularize(type_name))


__all__ = [
    "underscore",
    "pluralize",
    "singularize",
    "resource_path_for",
    "root_key_for",
]
