"""N-gram language detector engine.

Holds the registered language profiles, the n-gram -> language ->
probability index built from them, and a DetectorConfig. Detection is
normalize -> extract -> estimate -> rank.
"""

from __future__ import annotations

from ngram_langid.config import DetectorConfig
from ngram_langid.estimator import estimate_probabilities
from ngram_langid.models import DetectedLanguage, LanguageProfile
from ngram_langid.profiles import ProfileFormatError, ProfileSource, parse_profile
from ngram_langid.ranker import rank_languages
from ngram_langid.text.ngrams import extract_ngrams
from ngram_langid.text.normalize import normalize_text
from ngram_langid.utils.logging import YELLOW, RESET, get_logger

log = get_logger(__name__)


class LanguageDetector:
    def __init__(self, source: ProfileSource | None = None, config: DetectorConfig | None = None):
        self.source = source
        self.config = config or DetectorConfig()
        self._profiles: list[LanguageProfile] = []
        # gram -> {language code: frequency / total for that gram length}
        self._word_lang_probs: dict[str, dict[str, float]] = {}

    # -- configuration, delegated to self.config ------------------------

    @property
    def alpha(self) -> float:
        return self.config.alpha

    @alpha.setter
    def alpha(self, value: float) -> None:
        self.config.alpha = value

    @property
    def alpha_width(self) -> float:
        return self.config.alpha_width

    @alpha_width.setter
    def alpha_width(self, value: float) -> None:
        self.config.alpha_width = value

    @property
    def random_seed(self) -> int | None:
        return self.config.random_seed

    @random_seed.setter
    def random_seed(self, value: int | None) -> None:
        self.config.random_seed = value

    @property
    def trials(self) -> int:
        return self.config.trials

    @trials.setter
    def trials(self, value: int) -> None:
        self.config.trials = value

    @property
    def ngram_length(self) -> int:
        return self.config.ngram_length

    @ngram_length.setter
    def ngram_length(self, value: int) -> None:
        self.config.ngram_length = value

    @property
    def max_text_length(self) -> int:
        return self.config.max_text_length

    @max_text_length.setter
    def max_text_length(self, value: int) -> None:
        self.config.max_text_length = value

    @property
    def max_iterations(self) -> int:
        return self.config.max_iterations

    @max_iterations.setter
    def max_iterations(self, value: int) -> None:
        self.config.max_iterations = value

    @property
    def probability_threshold(self) -> float:
        return self.config.probability_threshold

    @probability_threshold.setter
    def probability_threshold(self, value: float) -> None:
        self.config.probability_threshold = value

    @property
    def convergence_threshold(self) -> float:
        return self.config.convergence_threshold

    @convergence_threshold.setter
    def convergence_threshold(self, value: float) -> None:
        self.config.convergence_threshold = value

    @property
    def base_frequency(self) -> int:
        return self.config.base_frequency

    @base_frequency.setter
    def base_frequency(self, value: int) -> None:
        self.config.base_frequency = value

    # -- registration ---------------------------------------------------

    @property
    def word_language_probabilities(self) -> dict[str, dict[str, float]]:
        """gram -> {language code: P(gram | language)}. Read-only by convention."""
        return self._word_lang_probs

    @property
    def languages(self) -> list[str]:
        """Registered language codes in registration order."""
        return [p.code for p in self._profiles]

    def add_language_profile(self, profile: LanguageProfile) -> bool:
        """Register a parsed profile. Returns False if the code is already registered."""
        if profile.code in self.languages:
            log.warning(f"  {YELLOW}Language {profile.code} already registered, skipping{RESET}")
            return False

        self._profiles.append(profile)

        max_len = self.config.ngram_length
        for gram, freq in profile.frequencies.items():
            by_language = self._word_lang_probs.setdefault(gram, {})
            if 1 <= len(gram) <= max_len:
                total = profile.word_count[len(gram) - 1]
                if total > 0:
                    by_language[profile.code] = freq / total

        log.debug(f"  Registered {profile.code} ({len(profile.frequencies)} n-grams)")
        return True

    def add_languages(self, *codes: str) -> list[str]:
        """Load and register profiles for codes from the source.

        Codes the source has no profile for, and malformed profiles, are
        skipped. Returns the codes actually added.
        """
        if self.source is None:
            log.warning(f"  {YELLOW}No profile source configured, nothing to add{RESET}")
            return []

        added: list[str] = []
        for code in codes:
            data = self.source.read(code)
            if data is None:
                log.debug(f"  No profile for {code}")
                continue
            try:
                profile = parse_profile(data)
            except ProfileFormatError as e:
                log.warning(f"  {YELLOW}Skipping profile {code}: {e}{RESET}")
                continue
            if profile.code != code:
                log.warning(f"  {YELLOW}Skipping profile {code}: it declares language {profile.code}{RESET}")
                continue
            if self.add_language_profile(profile):
                added.append(profile.code)

        if added:
            log.info(f"Registered {len(added)} language(s): {', '.join(added)}")
        return added

    def add_all_languages(self) -> list[str]:
        if self.source is None:
            log.warning(f"  {YELLOW}No profile source configured, nothing to add{RESET}")
            return []
        return self.add_languages(*self.source.available_languages())

    # -- detection ------------------------------------------------------

    def detect(self, text: str | None) -> str | None:
        """Most probable language code, or None when nothing was detected."""
        ranked = self.detect_all(text)
        return ranked[0].language if ranked else None

    def detect_all(self, text: str | None) -> list[DetectedLanguage]:
        """Languages above the probability threshold, most probable first."""
        config = self.config.model_copy()

        ngrams = extract_ngrams(normalize_text(text, config.max_text_length), self._word_lang_probs)
        if not ngrams:
            return []

        probabilities = estimate_probabilities(ngrams, self._profiles, self._word_lang_probs, config)
        return rank_languages(probabilities, self._profiles, config.probability_threshold)
