"""
Phonetic expansion of labels that contain CJK text.

A label such as "微信" can be typed as its full reading ("weixin"), its
initials ("wx") or a Shuangpin encoding ("wwxb" in Xiaohe). ``expand`` returns
all of them so the matcher can compare a query against every form.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import FrozenSet, Iterable, List, Optional, Set, Tuple

from pypinyin import Style, lazy_pinyin

from ..config import settings
from ..utils.shuangpin import on_scheme_change, to_shuangpin

_CJK_RUN = re.compile(r"([\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff]+)")


def contains_cjk(text: str) -> bool:
    return bool(text) and _CJK_RUN.search(text) is not None


def _segments(text: str) -> List[Tuple[bool, str]]:
    """Split text into ``(is_cjk, run)`` pieces, preserving order."""
    pieces = _CJK_RUN.split(text)
    # re.split with one capture group alternates plain / CJK runs.
    return [(index % 2 == 1, piece) for index, piece in enumerate(pieces) if piece]


def _readings(run: str) -> List[str]:
    """Toneless syllables for a CJK run (context-aware for polyphones)."""
    return [
        syllable.lower()
        for syllable in lazy_pinyin(run, style=Style.NORMAL, errors="ignore")
        if syllable
    ]


@lru_cache(maxsize=4096)
def _expand_cached(text: str, schemes: Tuple[str, ...]) -> FrozenSet[str]:
    full: List[str] = []
    initials: List[str] = []
    encoded: List[List[str]] = [[] for _ in schemes]

    for is_cjk, run in _segments(text):
        if not is_cjk:
            plain = run.lower()
            full.append(plain)
            initials.append(plain)
            for parts in encoded:
                parts.append(plain)
            continue

        for syllable in _readings(run):
            full.append(syllable)
            initials.append(syllable[0])
            for parts, scheme in zip(encoded, schemes):
                parts.append(to_shuangpin(syllable, scheme))

    variants = {"".join(full), "".join(initials)}
    variants.update("".join(parts) for parts in encoded)
    variants.discard("")
    return frozenset(variants)


on_scheme_change(_expand_cached.cache_clear)


def expand(text: str, schemes: Optional[Iterable[str]] = None) -> Set[str]:
    """
    Expand a label into lower-case search keys.

    Args:
        text:    Label, possibly mixing CJK and Latin text ("QQ音乐").
        schemes: Shuangpin schemes to encode with; defaults to
                 ``settings.shuangpin_schemes``.

    Returns:
        ``set()`` for empty input, ``{text.lower()}`` when there is no CJK,
        otherwise full reading, initials and one Shuangpin form per scheme.
    """
    if not text:
        return set()
    if not contains_cjk(text):
        return {text.lower()}
    chosen = tuple(schemes) if schemes is not None else tuple(settings.shuangpin_schemes)
    return set(_expand_cached(text, chosen))


def matches_pinyin(text: str, query: str) -> bool:
    """True when ``query`` occurs inside any phonetic variant of ``text``."""
    lowered = query.lower()
    return any(lowered in variant for variant in expand(text))
