# feedback_portal/core/__init__.py
from .lexicon import Lexicon, LexiconFormatError, afinn_lexicon, build_lexicon, bundled_lexicon, default_lexicon, load_lexicon, vader_lexicon
from .sentiment import SentimentClassifier, SentimentLabel, SentimentResult, classify, sentiment_color
from .statistics import SentimentStats, aggregate
