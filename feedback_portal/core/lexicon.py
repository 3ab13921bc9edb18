# feedback_portal/core/lexicon.py
import logging
import math
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple, Union

from afinn import Afinn
from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

logger = logging.getLogger(__name__)

# A lexicon maps a lower-cased word to a signed integer weight.
Lexicon = Mapping[str, int]

LexiconEntries = Union[Mapping[str, float], Iterable[Tuple[str, float]]]


class LexiconFormatError(ValueError):
    """Raised when a lexicon file line cannot be parsed."""


def _to_weight(valence: float) -> int:
    # Halves round away from zero: 2.5 -> 3, -2.5 -> -3
    return int(math.copysign(math.floor(abs(valence) + 0.5), valence))


def build_lexicon(entries: LexiconEntries) -> Lexicon:
    """
    Builds a read-only lexicon from a mapping or from (word, valence) pairs.
    Valences are rounded to integer weights; words that round to 0 are dropped.
    """
    items = entries.items() if isinstance(entries, Mapping) else entries
    weights = {}
    for word, valence in items:
        token = word.strip().lower()
        weight = _to_weight(float(valence))
        if token and weight:
            weights[token] = weight
    return MappingProxyType(weights)


def load_lexicon(path: str) -> Lexicon:
    """
    Loads a tab-separated lexicon file: word in the first column, valence in the second.
    Extra columns are ignored, so both the AFINN and the VADER file layouts are accepted.
    """
    entries = []
    with open(path, encoding="utf-8") as lexicon_file:
        for line_number, line in enumerate(lexicon_file, start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            fields = line.rstrip("\n").split("\t")
            if len(fields) < 2:
                raise LexiconFormatError(f"{path}:{line_number}: expected '<word>\\t<valence>', got {stripped!r}")
            try:
                valence = float(fields[1])
            except ValueError as e:
                raise LexiconFormatError(f"{path}:{line_number}: invalid valence {fields[1]!r}") from e
            entries.append((fields[0], valence))

    lexicon = build_lexicon(entries)
    logger.info(f"Loaded sentiment lexicon from {path} with {len(lexicon)} weighted terms")
    return lexicon


@lru_cache(maxsize=1)
def afinn_lexicon() -> Lexicon:
    """AFINN-165 word list bundled with afinn; weights are already integers."""
    # Afinn keeps the parsed word file in _dict; phrases with spaces never match a token
    lexicon = build_lexicon(Afinn(language="en")._dict)
    logger.info(f"Loaded AFINN-165 sentiment lexicon with {len(lexicon)} weighted terms")
    return lexicon


@lru_cache(maxsize=1)
def vader_lexicon() -> Lexicon:
    """The VADER lexicon bundled with vaderSentiment, as integer weights."""
    analyzer = SentimentIntensityAnalyzer()
    lexicon = build_lexicon(analyzer.lexicon)
    logger.info(f"Loaded VADER sentiment lexicon with {len(lexicon)} weighted terms")
    return lexicon


BUNDLED_LEXICONS = {
    "afinn": afinn_lexicon,
    "vader": vader_lexicon,
}


def bundled_lexicon(name: str) -> Lexicon:
    try:
        loader = BUNDLED_LEXICONS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown bundled lexicon {name!r}; expected one of {sorted(BUNDLED_LEXICONS)}") from None
    return loader()


def default_lexicon() -> Lexicon:
    """AFINN-165, the word list used by the original feedback portal."""
    return afinn_lexicon()
