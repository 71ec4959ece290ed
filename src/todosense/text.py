"""Summary: Tokenizer and stemmer adapter for task text.

Importance: Normalizes words so keyword matching tolerates inflection.
Alternatives: Use spaCy lemmatization or exact word matching only.
"""

from __future__ import annotations

from dataclasses import dataclass

from nltk.stem import PorterStemmer
from nltk.tokenize import RegexpTokenizer

_TOKENIZER = RegexpTokenizer(r"[A-Za-zА-Яа-я0-9_]+")
_STEMMER = PorterStemmer(mode=PorterStemmer.ORIGINAL_ALGORITHM)


@dataclass(frozen=True)
class Token:
    """Summary: A lowercase word with its stem.

    Importance: Keeps surface form and root together for matching.
    Alternatives: Return two parallel lists of words and stems.
    """

    word: str
    stem: str


def tokenize(text: str) -> list[str]:
    """Summary: Split text into lowercase word tokens.

    Importance: Feeds the category classifier with punctuation-free words.
    Alternatives: Use str.split and strip punctuation manually.
    """

    if not isinstance(text, str) or not text.strip():
        return []
    return _TOKENIZER.tokenize(text.lower())


def stem(word: str) -> str:
    """Summary: Reduce a word to its Porter stem.

    Importance: Collapses plurals and verb endings to a shared root.
    Alternatives: Use the Snowball stemmer or a lemmatizer.
    """

    # Porter leaves words under three letters untouched.
    if len(word) < 3:
        return word
    return _STEMMER.stem(word)


def analyze_tokens(text: str) -> list[Token]:
    """Summary: Tokenize text and attach a stem to every token.

    Importance: Single entry point for classifiers that need both forms.
    Alternatives: Stem lazily inside each classifier.
    """

    return [Token(word=word, stem=stem(word)) for word in tokenize(text)]
