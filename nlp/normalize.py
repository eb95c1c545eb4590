"""
Sentence normalization and tokenization.

Report sentences are normalized once and shared by the measurement parser
and the descriptor extractor:

    "Solid nodule, 7 x 8 mm."  ->  "Solid nodule 7 x 8 mm"
"""

from typing import Iterator, List, Optional, Tuple


def normalize_sentence(text: str) -> str:
    """Strip surrounding whitespace, one trailing period, and all commas."""
    if not isinstance(text, str):
        raise TypeError(f"Expected text as str, got {type(text).__name__}")
    text = text.strip()
    if text.endswith("."):
        text = text[:-1]
    return text.replace(",", "")


def tokenize(sentence: str) -> List[str]:
    """Split a normalized sentence into lowercase whitespace-delimited tokens."""
    return sentence.lower().split()


def token_window(tokens: List[str]) -> Iterator[Tuple[str, Optional[str]]]:
    """
    Yield (token, lookahead) pairs.

    The lookahead is the next token, or None for the last token.

    Example:
        >>> list(token_window(["part", "solid"]))
        [('part', 'solid'), ('solid', None)]
    """
    for index, token in enumerate(tokens):
        lookahead = tokens[index + 1] if index + 1 < len(tokens) else None
        yield token, lookahead
