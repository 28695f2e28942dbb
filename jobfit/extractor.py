"""
Keyword extractor for job descriptions and resumes.
Tokenizes free text and ranks candidate keywords by frequency.
"""

import re
from collections import Counter
from typing import List, Optional, Set


# Common English words plus resume boilerplate that never count as keywords
STOPWORDS = frozenset({
    'a', 'an', 'the', 'and', 'or', 'in', 'on', 'at', 'for', 'with', 'to',
    'from', 'by', 'is', 'are', 'be', 'this', 'that', 'of', 'as', 'it',
    'will', 'you', 'your', 'we', 'our', 'i', 'me',
    'skills', 'responsibilities', 'experience', 'years',
})

# Characters treated as word separators before splitting on whitespace
PUNCTUATION = r'[\n,.;:()\[\]/\\\-]'

# Sentence boundary: whitespace that follows terminal punctuation or a newline
SENTENCE_BOUNDARY = r'(?<=[.!?\n])\s+'

MIN_TOKEN_LENGTH = 3


class KeywordExtractor:
    """Tokenize text and rank its most frequent keywords."""

    def __init__(self, stopwords: Optional[Set[str]] = None):
        self.stopwords = frozenset(stopwords) if stopwords is not None else STOPWORDS
        self.punctuation_pattern = re.compile(PUNCTUATION)

    def tokenize(self, text: str) -> List[str]:
        """Split text into lowercase candidate words, keeping duplicates."""
        if not text:
            return []
        spaced = self.punctuation_pattern.sub(' ', text).lower()
        return [
            word for word in spaced.split()
            if len(word) >= MIN_TOKEN_LENGTH and word not in self.stopwords
        ]

    def extract(self, text: str, top_n: int = 30) -> List[str]:
        """Return up to top_n distinct tokens, most frequent first.

        Counter keeps insertion order and sorted() is stable, so ties keep
        the order in which the words first appeared.
        """
        frequency = Counter(self.tokenize(text))
        ranked = sorted(frequency.items(), key=lambda item: item[1], reverse=True)
        return [word for word, _ in ranked[:top_n]]


def split_sentences(text: str) -> List[str]:
    """Split text into trimmed, non-empty sentences."""
    return [s.strip() for s in re.split(SENTENCE_BOUNDARY, text or '') if s.strip()]


_default_extractor = KeywordExtractor()


def tokenize(text: str) -> List[str]:
    """Convenience function to tokenize text with the default stopwords."""
    return _default_extractor.tokenize(text)


def extract_keywords(text: str, top_n: int = 30) -> List[str]:
    """Convenience function to extract ranked keywords from text."""
    return _default_extractor.extract(text, top_n)
