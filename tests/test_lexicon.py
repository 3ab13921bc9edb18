"""Unit tests for lexicon building and loading."""

import pytest

from feedback_portal.api.v1.deps import get_classifier
from feedback_portal.config import settings
from feedback_portal.core.lexicon import (
    LexiconFormatError,
    afinn_lexicon,
    build_lexicon,
    bundled_lexicon,
    default_lexicon,
    load_lexicon,
    vader_lexicon,
)


class TestBuildLexicon:

    def test_rounds_valences_to_integer_weights(self):
        lexicon = build_lexicon({"great": 3.1, "helpful": 1.6, "meh": -0.4, "bad": -2.5, "good": 2.5})

        assert lexicon["great"] == 3
        assert lexicon["helpful"] == 2
        assert lexicon["bad"] == -3
        assert lexicon["good"] == 3
        assert "meh" not in lexicon

    def test_accepts_pairs_and_normalizes_words(self):
        lexicon = build_lexicon([("  Brilliant ", 4), ("DULL", -2)])

        assert dict(lexicon) == {"brilliant": 4, "dull": -2}

    def test_is_read_only(self):
        lexicon = build_lexicon({"great": 3})

        with pytest.raises(TypeError):
            lexicon["great"] = -3


class TestLoadLexicon:

    def test_loads_afinn_layout(self, tmp_path):
        path = tmp_path / "afinn.txt"
        path.write_text("# course feedback words\nexcellent\t3\n\nboring\t-3\nwell-paced\t2\n", encoding="utf-8")

        assert dict(load_lexicon(str(path))) == {"excellent": 3, "boring": -3, "well-paced": 2}

    def test_loads_vader_layout(self, tmp_path):
        path = tmp_path / "vader.txt"
        path.write_text("adorable\t2.2\t0.6\t[3, 2, 2, 2, 1, 3, 2, 2, 2, 3]\nawful\t-2.0\t0.44721\t[-2, -2]\n", encoding="utf-8")

        assert dict(load_lexicon(str(path))) == {"adorable": 2, "awful": -2}

    def test_missing_valence_column(self, tmp_path):
        path = tmp_path / "broken.txt"
        path.write_text("excellent\t3\nboring -3\n", encoding="utf-8")

        with pytest.raises(LexiconFormatError, match=":2:"):
            load_lexicon(str(path))

    def test_non_numeric_valence(self, tmp_path):
        path = tmp_path / "broken.txt"
        path.write_text("excellent\tvery\n", encoding="utf-8")

        with pytest.raises(LexiconFormatError, match="invalid valence"):
            load_lexicon(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_lexicon(str(tmp_path / "absent.txt"))


class TestBundledLexicons:

    def test_default_is_afinn(self):
        lexicon = default_lexicon()

        assert lexicon is afinn_lexicon()
        assert lexicon["great"] == 3
        assert lexicon["wonderful"] == 4
        assert lexicon["terrible"] == -3
        assert all(isinstance(weight, int) and weight != 0 for weight in lexicon.values())

    def test_vader_weights_are_rounded(self):
        lexicon = vader_lexicon()

        assert len(lexicon) > 1000
        assert lexicon["great"] > 0
        assert lexicon["terrible"] < 0
        assert all(isinstance(weight, int) and weight != 0 for weight in lexicon.values())

    def test_lookup_by_name(self):
        assert bundled_lexicon("AFINN") is afinn_lexicon()
        assert bundled_lexicon(" vader ") is vader_lexicon()

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown bundled lexicon"):
            bundled_lexicon("sentiwordnet")


class TestServiceClassifier:

    @pytest.fixture(autouse=True)
    def fresh_classifier(self):
        get_classifier.cache_clear()
        yield
        get_classifier.cache_clear()

    def test_lexicon_path_takes_precedence(self, monkeypatch, tmp_path):
        path = tmp_path / "course_words.txt"
        path.write_text("inspiring\t3\ndreadful\t-3\n", encoding="utf-8")
        monkeypatch.setattr(settings, "LEXICON_PATH", str(path))
        monkeypatch.setattr(settings, "LEXICON_NAME", "vader")

        classifier = get_classifier()

        assert dict(classifier.lexicon) == {"inspiring": 3, "dreadful": -3}
        assert get_classifier() is classifier

    def test_named_lexicon_without_path(self, monkeypatch):
        monkeypatch.setattr(settings, "LEXICON_PATH", None)
        monkeypatch.setattr(settings, "LEXICON_NAME", "vader")

        assert get_classifier().lexicon is vader_lexicon()

    def test_afinn_by_default(self, monkeypatch):
        monkeypatch.setattr(settings, "LEXICON_PATH", None)
        monkeypatch.setattr(settings, "LEXICON_NAME", "afinn")

        assert get_classifier().lexicon is afinn_lexicon()
