"""
searcher: Query matching and ranking for the launcher.

Quick start
───────────
    from launcher.searcher import rank, expand, best_match

    expand("微信")                       # {"weixin", "wx", "wwxb", "wzxn"}
    best_match(candidate, "wx")          # MatchResult(field="name", ...)
    rank(candidates, "ste", arc)         # display order
"""

from .phonetic import contains_cjk, expand, matches_pinyin
from ..utils.shuangpin import SHUANGPIN_SCHEMES, available_schemes, register_scheme, split_syllable, to_shuangpin
from .matcher import best_match, fuzzy_penalty, match_sort_key, score_field
from .ranking import dedupe_candidates, rank, rank_matches, recommended

__all__ = [
    "SHUANGPIN_SCHEMES",
    "available_schemes",
    "best_match",
    "contains_cjk",
    "dedupe_candidates",
    "expand",
    "fuzzy_penalty",
    "match_sort_key",
    "matches_pinyin",
    "rank",
    "rank_matches",
    "recommended",
    "register_scheme",
    "score_field",
    "split_syllable",
    "to_shuangpin",
]
