"""Student feedback portal: lexicon sentiment labelling and faculty summaries."""

__version__ = "0.1.0"
