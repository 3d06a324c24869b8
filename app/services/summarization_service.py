from collections import Counter
from dataclasses import dataclass
from typing import Any, List
import logging
import math
import re

from app.services.tokenization import tokenize

logger = logging.getLogger(__name__)

# A sentence is a run of non-terminators closed by one or more of . ! ?
SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")

LEVEL_RATIOS = {
    1: 1.0,
    2: 0.75,
    3: 0.50,
    4: 0.25,
    5: 0.10,
}
DEFAULT_RATIO = 1.0

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Sentence:
    text: str
    index: int
    score: float = 0.0


@dataclass
class CompressionResult:
    original_length: int
    compressed_length: int
    ratio: float
    text: str


class SummarizationService:
    @staticmethod
    def split_sentences(text: str) -> List[str]:
        """Split on terminal punctuation; unsegmentable text comes back whole."""
        return SENTENCE_RE.findall(text) or [text]

    @staticmethod
    def level_to_ratio(level: Any) -> float:
        """Map a compression level (1-5) to its ratio. Anything else is 1.0."""
        if level is None or isinstance(level, bool):
            return DEFAULT_RATIO
        match = _LEADING_INT_RE.match(str(level))
        if not match:
            return DEFAULT_RATIO
        return LEVEL_RATIOS.get(int(match.group(1)), DEFAULT_RATIO)

    @staticmethod
    def extractive_summary(text: str, ratio: float = DEFAULT_RATIO) -> str:
        """Extractive summarization by mean global word frequency."""
        if not text:
            return ""

        raw_sentences = SummarizationService.split_sentences(text)
        if len(raw_sentences) <= 1:
            return text

        word_freq = Counter(t for t in tokenize(text.lower()) if len(t) > 2)

        sentences = []
        for index, raw in enumerate(raw_sentences):
            words = tokenize(raw.lower())
            total = sum(word_freq[w] for w in words if w in word_freq)
            score = total / len(words) if words else 0.0
            sentences.append(Sentence(text=raw.strip(), index=index, score=score))

        ranked = sorted(sentences, key=lambda s: s.score, reverse=True)
        count = max(1, math.ceil(len(sentences) * ratio))
        selected = sorted(ranked[:count], key=lambda s: s.index)

        logger.debug("summary kept %d of %d sentences (ratio=%s)", count, len(sentences), ratio)
        return " ".join(s.text for s in selected)

    @staticmethod
    def compress(text: str, level: Any = None) -> CompressionResult:
        ratio = SummarizationService.level_to_ratio(level)
        summary = SummarizationService.extractive_summary(text, ratio)
        return CompressionResult(
            original_length=len(text),
            compressed_length=len(summary),
            ratio=ratio,
            text=summary,
        )

summarization_service = SummarizationService()
