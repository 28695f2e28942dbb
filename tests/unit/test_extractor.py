"""Unit tests for tokenizing and keyword extraction."""

import pytest
from collections import Counter

from jobfit.extractor import (
    STOPWORDS,
    KeywordExtractor,
    extract_keywords,
    split_sentences,
    tokenize,
)


SAMPLE_JD = """Backend Developer
We are hiring a backend developer to build REST APIs in Python.
Responsibilities: design APIs, write Python services, review code.
Skills: Python, Django, SQL, Docker. 2+ years experience with Python/Django."""


@pytest.mark.unit
def test_empty_text_gives_no_keywords():
    assert extract_keywords("") == []
    assert extract_keywords(None) == []


@pytest.mark.unit
def test_keywords_ranked_by_frequency():
    text = "Python python Django. SQL, python; Django"
    assert extract_keywords(text) == ["python", "django", "sql"]


@pytest.mark.unit
def test_ties_keep_first_seen_order():
    assert extract_keywords("react vue angular") == ["react", "vue", "angular"]


@pytest.mark.unit
def test_stopwords_and_short_tokens_removed():
    assert extract_keywords("The skills and experience with Docker") == ["docker"]
    assert extract_keywords("go is ok") == []


@pytest.mark.unit
def test_punctuation_splits_words():
    assert tokenize("ci/cd front-end (node)") == ["front", "end", "node"]


@pytest.mark.unit
def test_tokenize_keeps_duplicates():
    assert tokenize("Python, python") == ["python", "python"]


@pytest.mark.unit
def test_top_n_limits_result():
    text = " ".join(f"word{i:02d}" for i in range(50))
    assert len(extract_keywords(text)) == 30
    assert len(extract_keywords(text, top_n=40)) == 40
    assert extract_keywords(text, top_n=2) == ["word00", "word01"]


@pytest.mark.unit
def test_keyword_invariants_hold_for_realistic_text():
    keywords = extract_keywords(SAMPLE_JD, top_n=40)
    counts = Counter(tokenize(SAMPLE_JD))

    assert keywords
    assert len(keywords) == len(set(keywords))
    for keyword in keywords:
        assert keyword == keyword.lower()
        assert len(keyword) > 2
        assert keyword not in STOPWORDS

    frequencies = [counts[k] for k in keywords]
    assert frequencies == sorted(frequencies, reverse=True)
    assert keywords[0] == "python"


@pytest.mark.unit
def test_custom_stopwords():
    extractor = KeywordExtractor(stopwords={"python"})
    assert extractor.extract("python django") == ["django"]


@pytest.mark.unit
def test_split_sentences():
    assert split_sentences("Built APIs. Led team!\nWrote docs") == [
        "Built APIs.",
        "Led team!",
        "Wrote docs",
    ]


@pytest.mark.unit
def test_split_sentences_needs_boundary_before_whitespace():
    # A single newline after a word is not a boundary; a blank line is
    assert split_sentences("Prabhu\nSkills: HTML") == ["Prabhu\nSkills: HTML"]
    assert split_sentences("Prabhu\n\nSkills: HTML") == ["Prabhu", "Skills: HTML"]
    assert split_sentences("") == []
