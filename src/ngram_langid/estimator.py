"""Randomized naive-Bayes estimation of per-language probabilities.

Each trial starts from a uniform vector, draws its own smoothing alpha,
then repeatedly samples one extracted n-gram and multiplies every
language's probability by (alpha / base_frequency) + P(gram | language).
The vector is renormalized on every 5th iteration, counting from 0; the
trial stops once one language holds more than convergence_threshold of
the mass or max_iterations is reached. Trial vectors are averaged.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import numpy as np

from ngram_langid.config import DetectorConfig
from ngram_langid.models import LanguageProfile
from ngram_langid.utils.logging import get_logger

log = get_logger(__name__)

# Renormalization period, in iterations
CHECK_INTERVAL = 5

# Stand-in for an all-zero sum
_MIN_SUM = np.nextafter(0.0, 1.0)

WordLanguageProbabilities = Mapping[str, Mapping[str, float]]


def make_rng(seed: int | None) -> np.random.Generator:
    return np.random.default_rng(seed)


def initialize_probabilities(profile_count: int) -> np.ndarray:
    if profile_count == 0:
        return np.zeros(0)
    return np.full(profile_count, 1.0 / profile_count)


def update_probabilities(probs: np.ndarray, gram_probs: np.ndarray, weight: float) -> None:
    """Multiply probs in place by weight + P(gram | language)."""
    probs *= weight + gram_probs


def normalize_probabilities(probs: np.ndarray) -> float:
    """Rescale probs in place to sum to 1 and return the largest entry."""
    if probs.size == 0:
        return 0.0
    total = probs.sum()
    if total <= 0.0:
        total = _MIN_SUM
    probs /= total
    return float(probs.max())


def _gram_matrix(
    grams: Sequence[str],
    profiles: Sequence[LanguageProfile],
    index: WordLanguageProbabilities,
) -> np.ndarray:
    """Row i holds P(grams[i] | profile) for every profile, 0 when absent."""
    matrix = np.zeros((len(grams), len(profiles)))
    for i, gram in enumerate(grams):
        by_language = index.get(gram, {})
        for j, profile in enumerate(profiles):
            matrix[i, j] = by_language.get(profile.code, 0.0)
    return matrix


def estimate_probabilities(
    ngrams: Sequence[str],
    profiles: Sequence[LanguageProfile],
    index: WordLanguageProbabilities,
    config: DetectorConfig,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """Average per-language probability over config.trials randomized trials.

    Returns one entry per profile, in profile order. An empty profile list
    yields an empty vector.
    """
    result = np.zeros(len(profiles))
    if not ngrams or not profiles:
        return result

    if rng is None:
        rng = make_rng(config.random_seed)

    # Sample positions into the extracted sequence, look up rows by
    # distinct gram so duplicates keep their sampling weight.
    distinct = list(dict.fromkeys(ngrams))
    row_of = {gram: i for i, gram in enumerate(distinct)}
    rows = np.array([row_of[gram] for gram in ngrams])
    matrix = _gram_matrix(distinct, profiles, index)

    for trial in range(config.trials):
        probs = initialize_probabilities(len(profiles))
        alpha = config.alpha + rng.random() * config.alpha_width
        weight = alpha / config.base_frequency

        i = 0
        while True:
            r = int(rng.integers(len(rows)))
            update_probabilities(probs, matrix[rows[r]], weight)

            if i % CHECK_INTERVAL == 0:
                if normalize_probabilities(probs) > config.convergence_threshold or i >= config.max_iterations:
                    break
            i += 1

        log.debug(f"trial {trial + 1}/{config.trials} stopped after {i + 1} iterations")
        result += probs / config.trials

    return result
