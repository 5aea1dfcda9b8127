"""
Filename-to-name rules shared by every collector.

A stem such as ``gear_ball`` or ``1-60`` becomes:
    id    -> "gear-ball", "1-60"
    name  -> "Gear Ball", "1-60"
    short -> category specific, see the ``short_for_*`` helpers.
"""

import re
from typing import List, NamedTuple

from bxmanifest.overrides import Overrides


class HyphenSegment(NamedTuple):
    text: str
    # True when the hyphen right after ``text`` sits between two digits.
    # Always False for the last segment, which has no hyphen after it.
    numeric_hyphen: bool


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def split_hyphens(text: str) -> List[HyphenSegment]:
    """
    Split ``text`` on every hyphen, tagging each hyphen as numeric or not.

    >>> split_hyphens("x-1-60")
    [HyphenSegment(text='x', numeric_hyphen=False), HyphenSegment(text='1', numeric_hyphen=True), HyphenSegment(text='60', numeric_hyphen=False)]
    """
    chunks = text.split("-")
    segments = []
    for i, chunk in enumerate(chunks):
        if i == len(chunks) - 1:
            segments.append(HyphenSegment(chunk, False))
            break
        following = chunks[i + 1]
        numeric = bool(chunk) and bool(following) and _is_digit(chunk[-1]) and _is_digit(following[0])
        segments.append(HyphenSegment(chunk, numeric))
    return segments


def join_hyphens(segments: List[HyphenSegment]) -> str:
    """Rebuild the text, keeping numeric hyphens and turning the rest into spaces."""
    out = []
    for i, seg in enumerate(segments):
        out.append(seg.text)
        if i < len(segments) - 1:
            out.append("-" if seg.numeric_hyphen else " ")
    return "".join(out)


def id_from_stem(stem: str) -> str:
    s = stem.lower()
    s = re.sub(r"\s+", "-", s)
    return re.sub(r"_+", "-", s)


def _title_token(word: str) -> str:
    # Ranges like "1-60" and anything starting with a digit stay as-is
    if _is_digit(word[0]) or "-" in word:
        return word
    return word[0].upper() + word[1:]


def title_from_stem(stem: str) -> str:
    """
    Turn a filename stem into a display name.

    Underscores and non-numeric hyphens become word breaks; each word gets
    its first character upper-cased, the rest of its casing is kept.
    """
    spaced = join_hyphens(split_hyphens(stem.replace("_", " ")))
    return " ".join(_title_token(w) for w in spaced.split())


def short_for_blade(name: str) -> str:
    return name


def short_for_rachet(name: str) -> str:
    # Neither standard nor integrated ratchets are ever abbreviated
    return name


def short_for_bit(name: str, overrides: Overrides) -> str:
    """'Gear Ball' -> 'GB', 'Wedge' -> 'W' unless bitShort says otherwise."""
    override = overrides.bit_short.get(name.lower())
    if override:
        return override
    words = name.split()
    if not words:
        return ""
    if len(words) == 1:
        return words[0][0].upper()
    return (words[0][0] + words[1][0]).upper()


def short_for_chip(stem: str, overrides: Overrides) -> str:
    key = stem.lower()
    override = overrides.chip_short.get(key)
    if override:
        return override
    words = title_from_stem(key).split(" ")
    return words[0]


def short_for_assist(stem: str, overrides: Overrides) -> str:
    key = stem.lower()
    override = overrides.assist_short.get(key)
    if override:
        return override
    return title_from_stem(key)[:1].upper()
