"""
Tokenization and stemming.

Normalizes raw text into stemmed terms. Documents and queries go through
the same analyzer so their term identities line up.

Dependencies: nltk
System role: Term normalization for TF-IDF indexing and querying
"""

from collections import Counter
from functools import lru_cache

from nltk.stem import PorterStemmer
from nltk.tokenize import RegexpTokenizer

_word_tokenizer = RegexpTokenizer(r"\w+")
_stemmer = PorterStemmer()


def tokenize(text: str) -> list[str]:
    """
    Split text into lowercase word tokens.

    Args:
        text: Raw text

    Returns:
        list[str]: Tokens in order of appearance
    """
    return _word_tokenizer.tokenize(text.lower())


@lru_cache(maxsize=65536)
def stem(token: str) -> str:
    """Reduce a token to its Porter stem."""
    return _stemmer.stem(token)


def analyze(text: str) -> list[str]:
    """Tokenize and stem text."""
    return [stem(token) for token in tokenize(text)]


def query_vector(text: str) -> Counter:
    """
    Build the term-frequency vector for a query.

    Args:
        text: Query text

    Returns:
        Counter: Stemmed term to occurrence count, repeats preserved
    """
    return Counter(analyze(text))
