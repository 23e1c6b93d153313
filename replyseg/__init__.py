"""replyseg — split assistant replies into code and prose segments."""

from loguru import logger

from replyseg.models import Classification, ResponseSegment
from replyseg.segmenter.segmenter import classify, segment_reply
from replyseg.vocabulary import DEFAULT_VOCABULARY, Vocabulary

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_VOCABULARY",
    "Classification",
    "ResponseSegment",
    "Vocabulary",
    "classify",
    "segment_reply",
]

# Library logging stays silent until configure_logging() turns it on.
logger.disable("replyseg")
