from ngram_langid.dispatcher import TieredLanguageDetector
from ngram_langid.profiles import MappingProfileSource, dump_profile

LONG_ENGLISH = "The old man walked with his dog through the hills"


def _tiered(en_profile, fr_profile):
    # Distinguishable engines: the short one only knows French
    detector = TieredLanguageDetector.from_sources(
        MappingProfileSource({"en": dump_profile(en_profile)}),
        MappingProfileSource({"fr": dump_profile(fr_profile)}),
    )
    detector.random_seed = 42
    detector.add_all_languages()
    return detector


def test_short_input_uses_short_engine(en_profile, fr_profile):
    detector = _tiered(en_profile, fr_profile)
    text = "the dog is"
    assert len(text) == 10
    assert detector.engine_for(text) is detector.short_text
    assert detector.detect(text) == "fr"
    assert detector.standard.detect(text) == "en"


def test_long_input_uses_standard_engine(en_profile, fr_profile):
    detector = _tiered(en_profile, fr_profile)
    assert detector.engine_for(LONG_ENGLISH) is detector.standard
    assert detector.detect(LONG_ENGLISH) == "en"


def test_threshold_boundary(en_profile, fr_profile):
    detector = _tiered(en_profile, fr_profile)
    assert detector.engine_for("x" * 25) is detector.short_text
    assert detector.engine_for("x" * 26) is detector.standard
    detector.short_text_length = 5
    assert detector.engine_for("x" * 10) is detector.standard


def test_none_routes_to_short_engine(en_profile, fr_profile):
    detector = _tiered(en_profile, fr_profile)
    assert detector.engine_for(None) is detector.short_text
    assert detector.detect(None) is None
    assert detector.detect_all(None) == []


def test_configuration_applies_to_both(en_profile, fr_profile):
    detector = _tiered(en_profile, fr_profile)
    detector.trials = 3
    detector.probability_threshold = 0.2
    assert detector.standard.trials == detector.short_text.trials == 3
    assert detector.short_text.probability_threshold == 0.2
    assert detector.random_seed == 42


def test_add_languages_registers_on_both(en_profile):
    source = MappingProfileSource({"en": dump_profile(en_profile)})
    detector = TieredLanguageDetector.from_sources(source, source)
    detector.add_languages("en", "xx")
    assert detector.standard.languages == ["en"]
    assert detector.short_text.languages == ["en"]
    assert detector.standard.config is not detector.short_text.config
