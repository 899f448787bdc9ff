"""
Shuangpin (double-pinyin) encoding tables.

Every toneless Pinyin syllable is written as exactly two keys: one for the
initial, one for the final. Schemes differ only in their key tables, so they
are plain data here and new ones can be added with ``register_scheme``.

    to_shuangpin("xin", "xiaohe")    # -> "xb"
    to_shuangpin("zhong", "ziranma") # -> "vs"
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple

from ..errors import UnknownSchemeError

# Longest first so "zh"/"ch"/"sh" win over "z"/"c"/"s".
PINYIN_INITIALS: Tuple[str, ...] = (
    "zh", "ch", "sh",
    "b", "p", "m", "f", "d", "t", "n", "l", "g", "k", "h",
    "j", "q", "x", "r", "z", "c", "s", "y", "w",
)

_RETROFLEX_KEYS: Dict[str, str] = {"zh": "v", "ch": "i", "sh": "u"}

# Syllables without an initial: one-letter finals are doubled, two-letter
# finals are typed as-is, three-letter finals use the first letter plus the
# final's own key.
_ZERO_INITIAL: Dict[str, str] = {
    "a": "aa", "o": "oo", "e": "ee",
    "ai": "ai", "ei": "ei", "ao": "ao", "ou": "ou",
    "an": "an", "en": "en", "er": "er",
    "ang": "ah", "eng": "eg",
}

# ══════════════════════════════════════════════════════════════════════════════
#  Scheme tables
# ══════════════════════════════════════════════════════════════════════════════

# Xiaohe / Flypy
_XIAOHE_FINALS: Dict[str, str] = {
    "a": "a", "o": "o", "e": "e", "i": "i", "u": "u", "v": "v",
    "ai": "d", "ei": "w", "ui": "v", "ao": "c", "ou": "z", "iu": "q",
    "ie": "p", "ue": "t", "ve": "t",
    "an": "j", "en": "f", "in": "b", "un": "y", "vn": "y",
    "ang": "h", "eng": "g", "ing": "k", "ong": "s",
    "ia": "x", "ua": "x", "uo": "o", "uai": "k",
    "iao": "n", "ian": "m", "uan": "r", "van": "r",
    "iang": "l", "uang": "l", "iong": "s",
}

# Ziranma / Natural
_ZIRANMA_FINALS: Dict[str, str] = {
    "a": "a", "o": "o", "e": "e", "i": "i", "u": "u", "v": "v",
    "ai": "l", "ei": "z", "ui": "v", "ao": "k", "ou": "b", "iu": "q",
    "ie": "x", "ue": "t", "ve": "t",
    "an": "j", "en": "f", "in": "n", "un": "p", "vn": "p",
    "ang": "h", "eng": "g", "ing": "y", "ong": "s",
    "ia": "w", "ua": "w", "uo": "o", "uai": "y",
    "iao": "c", "ian": "m", "uan": "r", "van": "r",
    "iang": "d", "uang": "d", "iong": "s",
}

SHUANGPIN_SCHEMES: Dict[str, Dict[str, Dict[str, str]]] = {
    "xiaohe": {
        "initials": dict(_RETROFLEX_KEYS),
        "finals": _XIAOHE_FINALS,
        "zero_initial": dict(_ZERO_INITIAL),
    },
    "ziranma": {
        "initials": dict(_RETROFLEX_KEYS),
        "finals": _ZIRANMA_FINALS,
        "zero_initial": dict(_ZERO_INITIAL),
    },
}

# Invoked after every register_scheme call.
_SCHEME_LISTENERS: List[Callable[[], None]] = []


def on_scheme_change(callback: Callable[[], None]) -> None:
    _SCHEME_LISTENERS.append(callback)


def register_scheme(
    name: str,
    finals: Dict[str, str],
    initials: Optional[Dict[str, str]] = None,
    zero_initial: Optional[Dict[str, str]] = None,
) -> None:
    """Add (or replace) a scheme. Omitted tables fall back to the common ones."""
    SHUANGPIN_SCHEMES[name] = {
        "initials": dict(initials if initials is not None else _RETROFLEX_KEYS),
        "finals": dict(finals),
        "zero_initial": dict(zero_initial if zero_initial is not None else _ZERO_INITIAL),
    }
    for callback in _SCHEME_LISTENERS:
        callback()


def available_schemes() -> List[str]:
    return sorted(SHUANGPIN_SCHEMES)


def split_syllable(syllable: str) -> Tuple[str, str]:
    """Split a toneless syllable into ``(initial, final)``; initial may be ''."""
    for initial in PINYIN_INITIALS:
        if syllable.startswith(initial) and len(syllable) > len(initial):
            return initial, syllable[len(initial):]
    return "", syllable


def to_shuangpin(syllable: str, scheme: str = "xiaohe") -> str:
    """Encode one toneless, lower-case syllable as two keys."""
    try:
        table = SHUANGPIN_SCHEMES[scheme]
    except KeyError:
        raise UnknownSchemeError(scheme) from None

    initial, final = split_syllable(syllable)
    if not initial:
        zero = table["zero_initial"].get(final)
        if zero is not None:
            return zero
    else:
        final_key = table["finals"].get(final)
        if final_key is not None:
            return table["initials"].get(initial, initial) + final_key

    # Vowelless interjections (n, ng, m, hm, hng) have no table entry.
    return (syllable * 2)[:2]
