import pytest

from resume_match.helpers.parsing import normalize_text
from resume_match.models.engine_settings import KeywordSettings
from resume_match.models.models import KeywordSet
from resume_match.services.keywords import KeywordExtractor, extract_keywords


def keywords(text, settings=None):
    return extract_keywords(normalize_text(text), settings)


class TestKeywordExtraction:
    """Test cases for the default keyword extractor"""

    def test_stopwords_and_filler_removed(self, resume_text):
        terms = keywords(resume_text).terms
        assert terms == {"python", "aws", "docker"}

    def test_job_description_terms(self, job_description):
        terms = keywords(job_description).terms
        assert {"python", "aws", "kubernetes", "ci/cd"} <= terms
        assert "looking" not in terms
        assert "familiar" not in terms
        assert "ci" not in terms and "cd" not in terms

    def test_weights_are_frequencies(self):
        ks = keywords("Python, python and PYTHON. Also Go and Rust; rust.")
        assert ks.weight("python") == 3
        assert ks.weight("rust") == 2
        assert ks.weight("go") == 1

    def test_short_tokens_dropped(self):
        ks = keywords("C and R plus Go")
        assert "c" not in ks
        assert "r" not in ks
        assert "go" in ks

    def test_symbol_tokens_kept_whole(self):
        terms = keywords("Strong C++, C#, Node.js and scikit-learn knowledge.").terms
        assert terms == {"c++", "c#", "node.js", "scikit-learn"}

    def test_trailing_punctuation_stripped(self):
        terms = keywords("Docker. Terraform- Ansible...").terms
        assert {"docker", "terraform", "ansible"} <= terms

    def test_slash_splits_plain_tokens(self):
        terms = keywords("Python/Django").terms
        assert terms == {"python", "django"}

    def test_numeric_tokens_dropped(self):
        terms = keywords("5+ years of Java since 2015").terms
        assert terms == {"java"}

    def test_numeric_tokens_kept_when_configured(self):
        settings = KeywordSettings(drop_numeric_tokens=False)
        assert "2015" in keywords("Java since 2015", settings)


class TestPhrases:
    """Test cases for phrase dictionary matching"""

    def test_phrase_not_fragmented(self):
        ks = keywords("Machine learning and project management")
        assert "machine learning" in ks
        assert "project management" in ks
        assert "machine" not in ks
        assert "learning" not in ks

    def test_phrase_across_line_break(self):
        assert "machine learning" in keywords("Machine\n\nLearning engineer")

    def test_longest_phrase_wins(self):
        settings = KeywordSettings(phrases=["data", "data pipeline", "data pipeline design"], stopwords=[])
        ks = keywords("data pipeline design", settings)
        assert ks.terms == {"data pipeline design"}

    def test_phrase_needs_term_boundaries(self):
        settings = KeywordSettings(phrases=["go"], stopwords=[])
        ks = keywords("golang go", settings)
        assert ks.weight("go") == 1
        assert "golang" in ks

    def test_phrase_weight_counts_occurrences(self):
        ks = keywords("machine learning, machine learning and more machine learning")
        assert ks.weight("machine learning") == 3

    def test_phrase_weight_multiplier(self):
        settings = KeywordSettings(phrase_weight=2.0)
        ks = keywords("machine learning and python", settings)
        assert ks.weight("machine learning") == 2.0
        assert ks.weight("python") == 1.0

    def test_phrase_at_least_as_heavy_as_constituents(self):
        text = "deep learning with deep learning frameworks"
        with_phrases = keywords(text)
        without_phrases = keywords(text, KeywordSettings(phrases=[]))
        assert with_phrases.weight("deep learning") >= without_phrases.weight("deep")
        assert with_phrases.weight("deep learning") >= without_phrases.weight("learning")

    def test_phrase_outweighs_word_also_used_alone(self):
        text = "machine learning, machine vision, machine translation"
        with_phrases = keywords(text)
        without_phrases = keywords(text, KeywordSettings(phrases=[]))
        assert without_phrases.weight("machine") == 3
        assert with_phrases.weight("machine learning") >= without_phrases.weight("machine")
        assert with_phrases.weight("machine") == 2

    def test_stopword_constituents_do_not_inflate_phrase(self):
        settings = KeywordSettings(phrases=["user experience"])
        ks = keywords("user experience matters; experience, experience", settings)
        assert ks.weight("user experience") == 1

    def test_phrase_weight_below_one_rejected(self):
        with pytest.raises(ValueError):
            KeywordSettings(phrase_weight=0.5)


class TestExtractionProperties:
    """Determinism, idempotence and degenerate configuration"""

    def test_deterministic(self, job_description):
        assert keywords(job_description) == keywords(job_description)

    def test_doubled_text_same_terms(self, job_description):
        single = keywords(job_description)
        doubled = keywords(job_description + " " + job_description)
        assert single.terms == doubled.terms
        assert all(doubled.weight(t) == 2 * single.weight(t) for t in single.terms)

    def test_empty_dictionaries_degrade_to_unique_tokens(self):
        settings = KeywordSettings(stopwords=[], phrases=[])
        ks = KeywordExtractor(settings).extract(normalize_text("the cat and the hat"))
        assert ks.terms == {"the", "cat", "and", "hat"}
        assert ks.weight("the") == 2

    def test_stopword_only_text_is_empty(self):
        ks = keywords("the and or but")
        assert len(ks) == 0
        assert ks.total_weight == 0

    def test_keyword_set_rejects_blank_terms(self):
        with pytest.raises(ValueError):
            KeywordSet(weights={"  ": 1.0})

    def test_keyword_set_rejects_duplicates_after_normalization(self):
        with pytest.raises(ValueError):
            KeywordSet(weights={"machine learning": 1.0, "machine  learning": 2.0})

    def test_ranked_order(self):
        ks = KeywordSet(weights={"b": 1.0, "a": 1.0, "c": 3.0})
        assert [t for t, _ in ks.ranked()] == ["c", "a", "b"]
