"""In-memory keyword index: keyword → occurrences in descending frequency."""

from collections.abc import Iterable, Iterator

import polars as pl

from lse.data_models.occurrence import Occurrence
from lse.keywords import load_document_keywords
from lse.sources import DocumentSource

_SCHEMA = {
    "keyword": pl.String,
    "rank": pl.Int64,
    "doc_id": pl.String,
    "frequency": pl.Int64,
}


def insert_last(occs: list[Occurrence]) -> list[int]:
    """Move the last occurrence into place by binary search, in place.

    occs[:-1] must already be in descending frequency order. Returns the
    indices probed, outermost first. The last occurrence goes in front of any
    occurrences with the same frequency.

    [12, 8, 7, 5, 3, 2, 6] -> [12, 8, 7, 6, 5, 3, 2], probes [2, 4, 3]
    """
    if not occs:
        raise ValueError("Cannot insert into an empty occurrence list")
    last = occs[-1]
    probes: list[int] = []
    lo, hi = 0, len(occs) - 1  # search range, excludes last
    while lo < hi:
        mp = lo + (hi - lo - 1) // 2
        probes.append(mp)
        if last.frequency >= occs[mp].frequency:
            hi = mp
        else:
            lo = mp + 1
    occs.insert(lo, occs.pop())
    return probes


class OccurrenceIndex:
    def __init__(self) -> None:
        self._index: dict[str, list[Occurrence]] = {}

    def merge_document(self, kws: dict[str, Occurrence]) -> None:
        """Merge one document's keyword occurrences into the index."""
        for kw, occ in kws.items():
            occs = self._index.setdefault(kw, [])
            occs.append(occ)
            insert_last(occs)

    def get(self, keyword: str) -> list[Occurrence]:
        return list(self._index.get(keyword, []))

    def __getitem__(self, keyword: str) -> list[Occurrence]:
        return list(self._index[keyword])

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def keywords(self) -> list[str]:
        return sorted(self._index)

    def to_polars(self) -> pl.DataFrame:
        rows = [
            (kw, rank, occ.doc_id, occ.frequency)
            for kw, occs in self._index.items()
            for rank, occ in enumerate(occs)
        ]
        if not rows:
            return pl.DataFrame(schema=_SCHEMA)
        return pl.DataFrame(rows, schema=_SCHEMA, orient="row")


def make_index(
    doc_ids: Iterable[str],
    noise_words: frozenset[str] | set[str],
    source: DocumentSource,
) -> OccurrenceIndex:
    """Index every document, in the given order."""
    index = OccurrenceIndex()
    for doc_id in doc_ids:
        index.merge_document(load_document_keywords(doc_id, source, noise_words))
    return index
