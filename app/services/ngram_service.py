from collections import Counter
from typing import Dict, List, Sequence, Tuple
import logging

from app.services.tokenization import STOP_WORDS

logger = logging.getLogger(__name__)

TOP_K = 20

class NGramService:
    @staticmethod
    def filter_tokens(tokens: Sequence[str]) -> List[str]:
        """Drop stopwords and tokens of two characters or fewer."""
        return [t for t in tokens if t.lower() not in STOP_WORDS and len(t) > 2]

    @staticmethod
    def rank_ngrams(tokens: Sequence[str], n: int) -> List[Tuple[str, int]]:
        """
        Count lower-cased n-grams over a sliding window and return the
        TOP_K most frequent as (gram, count) pairs.

        Counter keeps first-seen order and sorted() is stable, so grams with
        equal counts stay in the order they first appeared.
        """
        if n < 1:
            raise ValueError("n must be >= 1")

        grams = Counter()
        for i in range(len(tokens) - n + 1):
            gram = " ".join(tokens[i:i + n]).lower()
            if len(gram) > 1:
                grams[gram] += 1

        ranked = sorted(grams.items(), key=lambda item: item[1], reverse=True)
        return ranked[:TOP_K]

    @staticmethod
    def analyze(tokens: Sequence[str]) -> Dict[str, List[Tuple[str, int]]]:
        """Filter the tokens and rank 1-, 2- and 3-grams over what remains."""
        filtered = NGramService.filter_tokens(tokens)
        logger.debug("n-gram analysis: %d tokens, %d after filtering", len(tokens), len(filtered))
        return {
            "oneGrams": NGramService.rank_ngrams(filtered, 1),
            "twoGrams": NGramService.rank_ngrams(filtered, 2),
            "threeGrams": NGramService.rank_ngrams(filtered, 3),
        }

ngram_service = NGramService()
