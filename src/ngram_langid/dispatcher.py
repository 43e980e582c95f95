"""Two-tier detector: short inputs go to an engine built on short-text
profiles, everything else to the standard engine.

Both engines must be registered with the same languages for their answers
to be comparable. Configuration set on the facade applies to both.
"""

from __future__ import annotations

from ngram_langid.config import DetectorConfig
from ngram_langid.detector import LanguageDetector
from ngram_langid.models import DetectedLanguage
from ngram_langid.profiles import ProfileSource

DEFAULT_SHORT_TEXT_LENGTH = 25


class _Shared:
    """Attribute read from the standard engine and written to both."""

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return getattr(obj.standard, self.name)

    def __set__(self, obj, value):
        setattr(obj.standard, self.name, value)
        setattr(obj.short_text, self.name, value)


class TieredLanguageDetector:
    alpha = _Shared()
    alpha_width = _Shared()
    random_seed = _Shared()
    trials = _Shared()
    ngram_length = _Shared()
    max_text_length = _Shared()
    max_iterations = _Shared()
    probability_threshold = _Shared()
    convergence_threshold = _Shared()
    base_frequency = _Shared()

    def __init__(
        self,
        standard: LanguageDetector,
        short_text: LanguageDetector,
        short_text_length: int = DEFAULT_SHORT_TEXT_LENGTH,
    ):
        self.standard = standard
        self.short_text = short_text
        self.short_text_length = short_text_length

    @classmethod
    def from_sources(
        cls,
        source: ProfileSource,
        short_source: ProfileSource,
        config: DetectorConfig | None = None,
        short_text_length: int = DEFAULT_SHORT_TEXT_LENGTH,
    ) -> "TieredLanguageDetector":
        config = config or DetectorConfig()
        return cls(
            LanguageDetector(source, config.model_copy()),
            LanguageDetector(short_source, config.model_copy()),
            short_text_length,
        )

    def add_all_languages(self) -> None:
        self.standard.add_all_languages()
        self.short_text.add_all_languages()

    def add_languages(self, *codes: str) -> None:
        self.standard.add_languages(*codes)
        self.short_text.add_languages(*codes)

    def engine_for(self, text: str | None) -> LanguageDetector:
        if text is None or len(text) <= self.short_text_length:
            return self.short_text
        return self.standard

    def detect(self, text: str | None) -> str | None:
        return self.engine_for(text).detect(text)

    def detect_all(self, text: str | None) -> list[DetectedLanguage]:
        return self.engine_for(text).detect_all(text)
