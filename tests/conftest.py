from collections import Counter

import pytest

from ngram_langid.models import LanguageProfile
from ngram_langid.profiles import MappingProfileSource, dump_profile

ENGLISH_CORPUS = """
The quick brown fox jumps over the lazy dog. There is nothing in the world
that the old man would rather do than walk with his dog through the hills
in the morning. The weather was cold and the wind was strong, but they kept
going until they reached the top of the mountain. When they came back home
the children were waiting for them with hot tea and fresh bread. This is the
story of a family that lived near the river for many years, and of the things
they learned about patience, friendship and hard work. Over the years the
lazy brown dog grew old, yet every morning he would jump up and follow the
man wherever he went. Everyone in the village knew them both.
"""

FRENCH_CORPUS = """
Le renard brun rapide saute par-dessus le chien paresseux. Il n'y a rien au
monde que le vieil homme aime plus que de se promener avec son chien dans les
collines le matin. Le temps était froid et le vent était fort, mais ils ont
continué jusqu'au sommet de la montagne. Quand ils sont rentrés à la maison,
les enfants les attendaient avec du thé chaud et du pain frais. C'est
l'histoire d'une famille qui vivait près de la rivière depuis de nombreuses
années, et des choses qu'elle a apprises sur la patience, l'amitié et le
travail. Au fil des années le chat et le chien sont devenus vieux, mais chaque
matin ils suivaient l'homme partout où il allait. Tout le monde au village
les connaissait.
"""


def build_profile(code: str, corpus: str) -> LanguageProfile:
    """Count word-bounded 1-3 grams the way profile files are produced."""
    freq: Counter = Counter()
    for word in corpus.split():
        padded = f" {word} "
        for n in range(1, 4):
            for i in range(len(padded) - n + 1):
                gram = padded[i:i + n]
                if gram.strip() and not (n == 1 and gram == " "):
                    freq[gram] += 1
    word_count = [0, 0, 0]
    for gram, count in freq.items():
        word_count[len(gram) - 1] += count
    return LanguageProfile(code=code, frequencies=dict(freq), word_count=tuple(word_count))


@pytest.fixture
def en_profile():
    return build_profile("en", ENGLISH_CORPUS)


@pytest.fixture
def fr_profile():
    return build_profile("fr", FRENCH_CORPUS)


@pytest.fixture
def en_fr_source(en_profile, fr_profile):
    return MappingProfileSource({
        "en": dump_profile(en_profile),
        "fr": dump_profile(fr_profile, compress=True),
    })


@pytest.fixture
def profiles_dir(tmp_path, en_profile, fr_profile):
    directory = tmp_path / "profiles"
    directory.mkdir()
    (directory / "en.json").write_bytes(dump_profile(en_profile))
    (directory / "fr.json.gz").write_bytes(dump_profile(fr_profile, compress=True))
    return directory
