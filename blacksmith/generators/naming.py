"""Naming variants for generated code.

Case conversions (studly, snake, camel) and English inflection used to derive
every name a template needs from a single entity name.  Inflection is
deterministic: uncountable words first, then the irregular table, then the
ordered suffix rules, where the first matching rule wins.  ``Inflector``
instances can be given extra irregular or uncountable words.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence


# ---------------------------------------------------------------------------
# Inflection tables
# ---------------------------------------------------------------------------

UNCOUNTABLE: frozenset[str] = frozenset({
    "audio", "bison", "chassis", "compensation", "coreopsis", "data", "deer",
    "education", "equipment", "evidence", "feedback", "fish", "furniture",
    "gold", "information", "jedi", "knowledge", "love", "metadata", "money",
    "moose", "news", "nutrition", "offspring", "plankton", "police", "rain",
    "rice", "series", "sheep", "software", "species", "swine", "traffic",
    "wheat",
})

IRREGULAR: dict[str, str] = {
    "child": "children",
    "criterion": "criteria",
    "foot": "feet",
    "goose": "geese",
    "man": "men",
    "move": "moves",
    "mouse": "mice",
    "ox": "oxen",
    "person": "people",
    "quiz": "quizzes",
    "sex": "sexes",
    "tooth": "teeth",
    "woman": "women",
    "zombie": "zombies",
}

PLURAL_RULES: list[tuple[str, str]] = [
    (r"(matr|vert|ind)(ix|ex)$", r"\1ices"),
    (r"(alias|status|campus)$", r"\1es"),
    (r"(octop|vir)us$", r"\1i"),
    (r"(ax|test)is$", r"\1es"),
    (r"(bu)s$", r"\1ses"),
    (r"(x|ch|ss|sh)$", r"\1es"),
    (r"([^aeiouy]|qu)y$", r"\1ies"),
    (r"(hive)$", r"\1s"),
    (r"(?:([^f])fe|([lr])f)$", r"\1\2ves"),
    (r"sis$", "ses"),
    (r"([ti])um$", r"\1a"),
    (r"(buffal|tomat|potat|her)o$", r"\1oes"),
    (r"s$", "s"),
    (r"$", "s"),
]

SINGULAR_RULES: list[tuple[str, str]] = [
    (r"(matr)ices$", r"\1ix"),
    (r"(vert|ind)ices$", r"\1ex"),
    (r"(alias|status|campus)(es)?$", r"\1"),
    (r"(octop|vir)(us|i)$", r"\1us"),
    (r"(cris|ax|test)(is|es)$", r"\1is"),
    (r"(bus)(es)?$", r"\1"),
    (r"(shoe)s$", r"\1"),
    (r"(o)es$", r"\1"),
    (r"(x|ch|ss|sh)es$", r"\1"),
    (r"(m)ovies$", r"\1ovie"),
    (r"([^aeiouy]|qu)ies$", r"\1y"),
    (r"(hive|tive)s$", r"\1"),
    (r"([lr])ves$", r"\1f"),
    (r"([^f])ves$", r"\1fe"),
    (r"((a)naly|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)(sis|ses)$", r"\1sis"),
    (r"([ti])a$", r"\1um"),
    (r"(ss)$", r"\1"),
    (r"s$", ""),
]

_TRAILING_WORD_RE = re.compile(r"^(?P<head>.*?)(?P<word>[A-Za-z]+)$", re.DOTALL)


# ---------------------------------------------------------------------------
# Inflector
# ---------------------------------------------------------------------------


class Inflector:
    """English pluralization policy.

    Only the trailing alphabetic word of a name is inflected
    (``OrderItem`` -> ``OrderItems``, ``line_item`` -> ``line_items``) and its
    capitalisation is carried over to the result.
    """

    def __init__(
        self,
        irregular: dict[str, str] | None = None,
        uncountable: Iterable[str] | None = None,
    ) -> None:
        self.irregular: dict[str, str] = {**IRREGULAR, **(irregular or {})}
        self.uncountable: set[str] = set(UNCOUNTABLE) | {w.lower() for w in uncountable or ()}
        self._singular_irregular = {plural: single for single, plural in self.irregular.items()}
        self._plural_rules = [(re.compile(p, re.IGNORECASE), r) for p, r in PLURAL_RULES]
        self._singular_rules = [(re.compile(p, re.IGNORECASE), r) for p, r in SINGULAR_RULES]

    def pluralize(self, value: str) -> str:
        return self._inflect(value, self.irregular, self._singular_irregular, self._plural_rules)

    def singularize(self, value: str) -> str:
        return self._inflect(value, self._singular_irregular, self.irregular, self._singular_rules)

    def _inflect(
        self,
        value: str,
        irregular: dict[str, str],
        inflected: dict[str, str],
        rules: list[tuple[re.Pattern[str], str]],
    ) -> str:
        match = _TRAILING_WORD_RE.match(value)
        if match is None:
            return value

        head, word = match.group("head"), match.group("word")
        # Within a camel-cased run only the last capitalised word counts.
        parts = re.findall(r"[A-Z]?[a-z]+|[A-Z]+(?![a-z])", word)
        if len(parts) > 1:
            head += word[: -len(parts[-1])]
            word = parts[-1]

        lowered = word.lower()
        if lowered in self.uncountable:
            return value
        if lowered in irregular:
            return head + _match_case(word, irregular[lowered])
        # Already in the target form (people, children, ...).
        if lowered in inflected:
            return value

        for pattern, replacement in rules:
            if pattern.search(word):
                return head + pattern.sub(replacement, word, count=1)
        return value


def _match_case(original: str, replacement: str) -> str:
    if original.isupper() and len(original) > 1:
        return replacement.upper()
    if original[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


DEFAULT_INFLECTOR = Inflector()


# ---------------------------------------------------------------------------
# Case conversions
# ---------------------------------------------------------------------------


def studly(value: str) -> str:
    """Convert ``some-thing``, ``some_thing`` or ``some thing`` to ``SomeThing``.

    Only the first letter of each word is upper-cased, so ``orderItem``
    becomes ``OrderItem``.
    """
    parts = re.split(r"[-_\s]+", value)
    return "".join(part[:1].upper() + part[1:] for part in parts if part)


def snake(value: str) -> str:
    """Convert ``SomeThing``, ``someThing`` or ``some-thing`` to ``some_thing``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value.strip())
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[-\s_]+", "_", s2).lower()


def camel(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    pascal = studly(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


def pluralize(value: str, inflector: Inflector | None = None) -> str:
    return (inflector or DEFAULT_INFLECTOR).pluralize(value)


def singularize(value: str, inflector: Inflector | None = None) -> str:
    return (inflector or DEFAULT_INFLECTOR).singularize(value)


# ---------------------------------------------------------------------------
# Base path joins
# ---------------------------------------------------------------------------


def join_base_path(segments: Sequence[str]) -> str:
    """Studly-case every segment and join with ``/``: ``admin/orders`` -> ``Admin/Orders``."""
    return "/".join(studly(segment) for segment in segments)


def join_namespace(segments: Sequence[str], separator: str = ".") -> str:
    """Studly-case every segment and join with the namespace *separator*."""
    return separator.join(studly(segment) for segment in segments)
