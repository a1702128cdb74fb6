#------------------------------------------------------------
#                     language_service.py
#        Reduces per-repository language byte counts
#               into a ranked share distribution.

from typing import Dict, Iterable, List, Mapping, Sequence
from ..config import DEFAULT_LANGUAGE_TOP
from ..models import LanguageShare

def _coerce_bytes(value) -> int:
    try:
        count = int(value or 0)
    except (TypeError, ValueError):
        return 0
    return max(count, 0)

# This function does sum byte counts per language across repositories.
# Insertion order records where each language was first seen.
def accumulate_language_bytes(
    per_repo_language_bytes: Sequence[Mapping[str, int]],
    ignored_languages: Iterable[str] = (),
) -> Dict[str, int]:
    ignored = {item.strip().lower() for item in ignored_languages}
    totals: Dict[str, int] = {}
    for repo_languages in per_repo_language_bytes:
        for language, byte_count in repo_languages.items():
            if not language:
                continue
            if language.strip().lower() in ignored:
                continue
            totals[language] = totals.get(language, 0) + _coerce_bytes(byte_count)
    return totals

# This function does aggregate language usage into ranked percentage shares.
# Ties keep first-seen order; zero total bytes yields an empty ranking.
def aggregate_languages(
    per_repo_language_bytes: Sequence[Mapping[str, int]],
    ignored_languages: Iterable[str] = (),
    top_n: int = DEFAULT_LANGUAGE_TOP,
) -> List[LanguageShare]:
    totals = accumulate_language_bytes(per_repo_language_bytes, ignored_languages)
    total_bytes = sum(totals.values())
    if total_bytes == 0:
        return []

    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [
        LanguageShare(name=language, percent=(count / total_bytes) * 100)
        for language, count in ranked[:top_n]
    ]
