from __future__ import annotations

from collections.abc import Sequence

from ngram_langid.models import DetectedLanguage, LanguageProfile


def rank_languages(
    probabilities: Sequence[float],
    profiles: Sequence[LanguageProfile],
    threshold: float,
) -> list[DetectedLanguage]:
    """Languages above threshold, most probable first.

    Equal probabilities keep profile registration order.
    """
    ranked: list[DetectedLanguage] = []
    for profile, p in zip(profiles, probabilities):
        p = float(p)
        if p <= threshold:
            continue
        pos = len(ranked)
        for i, existing in enumerate(ranked):
            if existing.probability < p:
                pos = i
                break
        ranked.insert(pos, DetectedLanguage(language=profile.code, probability=p))
    return ranked
