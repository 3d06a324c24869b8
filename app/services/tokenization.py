from nltk.tokenize import RegexpTokenizer
from typing import List
import re

# Runs of word characters; punctuation, apostrophes and whitespace all delimit.
_word_tokenizer = RegexpTokenizer(r"\w+")

_WHITESPACE_RE = re.compile(r"\s+")

STOP_WORDS = frozenset([
    'the', 'and', 'or', 'but', 'is', 'are', 'was', 'were', 'in', 'on', 'at',
    'to', 'for', 'of', 'with', 'by', 'a', 'an', 'this', 'that', 'it', 'as',
    'be', 'from', 'which', 'not', 'have', 'has', 'had', 'will', 'would',
    'can', 'could', 'should', 'may', 'might', 'must', 'do', 'does', 'did',
    'done', 'doing', 'i', 'you', 'he', 'she', 'we', 'they', 'me', 'him',
    'her', 'us', 'them', 'my', 'your', 'his', 'its', 'our', 'their', 'mine',
    'yours', 'hers', 'ours', 'theirs',
])


def tokenize(text: str) -> List[str]:
    """Split text into word tokens, preserving case and order."""
    if not text:
        return []
    return _word_tokenizer.tokenize(text)


def clean_text(text: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    return _WHITESPACE_RE.sub(" ", text or "").strip()
