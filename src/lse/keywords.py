"""Turn raw document text into per-document keyword counts."""

import re

from lse.data_models.occurrence import Occurrence
from lse.sources import DocumentNotFoundError, DocumentSource

PUNCTUATION = ".,?:;!"

_LEADING_PUNCT_RE = re.compile(f"^[{re.escape(PUNCTUATION)}]+")
_TRAILING_PUNCT_RE = re.compile(f"[{re.escape(PUNCTUATION)}]+\\Z")
_KEYWORD_RE = re.compile(r"[a-zA-Z]+")


def normalize(token: str, noise_words: frozenset[str] | set[str]) -> str | None:
    """Return token as a keyword, or None if it is not one.

    A keyword is the lowercased token with any leading and trailing run of
    punctuation removed, made only of ASCII letters, and not a noise word.

    normalize("World...", set())   -> "world"
    normalize("abc-def", set())    -> None
    normalize("The", {"the"})      -> None
    """
    word = _LEADING_PUNCT_RE.sub("", token.lower())
    word = _TRAILING_PUNCT_RE.sub("", word)
    if not _KEYWORD_RE.fullmatch(word) or word in noise_words:
        return None
    return word


def tokenize(text: str) -> list[str]:
    return text.split()


def count_keywords(
    doc_id: str, text: str, noise_words: frozenset[str] | set[str]
) -> dict[str, Occurrence]:
    counts: dict[str, int] = {}
    for token in tokenize(text):
        kw = normalize(token, noise_words)
        if kw is not None:
            counts[kw] = counts.get(kw, 0) + 1
    return {
        kw: Occurrence(doc_id=doc_id, frequency=freq) for kw, freq in counts.items()
    }


def load_document_keywords(
    doc_id: str, source: DocumentSource, noise_words: frozenset[str] | set[str]
) -> dict[str, Occurrence]:
    """Count the keywords of one document; an unreadable document counts as empty."""
    try:
        text = source.read(doc_id)
    except (DocumentNotFoundError, OSError, UnicodeDecodeError) as exc:
        print(f"[keywords] skipping {doc_id!r}: {exc!r}")
        return {}
    return count_keywords(doc_id, text, noise_words)
