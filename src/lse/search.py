from lse.data_models.occurrence import Occurrence
from lse.index import OccurrenceIndex, insert_last

TOP_N = 5


def top5_search(
    kw1: str, kw2: str, index: OccurrenceIndex, limit: int = TOP_N
) -> list[str]:
    """Return doc ids containing kw1 or kw2, by descending combined frequency.

    A document matching both keywords counts the sum of its two frequencies.
    Equal totals keep first-seen order: kw1's list order, then kw2's for
    documents kw1 did not match. At most `limit` ids are returned; no matches
    gives [].
    """
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")

    docs: dict[str, Occurrence] = {occ.doc_id: occ for occ in index.get(kw1)}
    for occ in index.get(kw2):
        seen = docs.get(occ.doc_id)
        docs[occ.doc_id] = occ if seen is None else seen.plus(occ.frequency)

    # insert_last puts ties first, so feed in reverse to keep first-seen order
    ranked: list[Occurrence] = []
    for occ in reversed(list(docs.values())):
        ranked.append(occ)
        insert_last(ranked)

    return [occ.doc_id for occ in ranked[:limit]]
