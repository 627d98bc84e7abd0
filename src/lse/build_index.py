"""Build the keyword index over a document list and run an OR query.

Usage:
    python -m lse.build_index \\
        --docs docs.txt --noise-words noisewords.txt --query down fall

    python -m lse.build_index \\
        --docs-parquet docs.parquet --noise-words noisewords.txt --show-index
"""

import argparse
from pathlib import Path

from lse.index import OccurrenceIndex, make_index
from lse.keywords import normalize
from lse.search import TOP_N, top5_search
from lse.sources import (
    DocumentSource,
    FileDocumentSource,
    ParquetDocumentSource,
    read_noise_words,
    read_word_list,
)


def format_index(index: OccurrenceIndex) -> list[str]:
    lines = []
    for kw in index.keywords():
        occs = ", ".join(f"({occ.doc_id},{occ.frequency})" for occ in index[kw])
        lines.append(f"{kw}: [{occs}]")
    return lines


def run_query(
    index: OccurrenceIndex,
    kw1: str,
    kw2: str,
    noise_words: frozenset[str],
    limit: int = TOP_N,
) -> list[str]:
    """Normalize both query words like document words, then search."""
    # A rejected word can never be an index key, so searching for "" is a miss.
    return top5_search(
        normalize(kw1, noise_words) or "",
        normalize(kw2, noise_words) or "",
        index,
        limit=limit,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Build a keyword index and query it")
    docs_group = parser.add_mutually_exclusive_group(required=True)
    docs_group.add_argument(
        "--docs", help="File listing document paths, whitespace-separated"
    )
    docs_group.add_argument(
        "--docs-parquet", help="Parquet table with doc_id and text columns"
    )
    parser.add_argument(
        "--noise-words", required=True, help="File listing noise words"
    )
    parser.add_argument("--query", nargs=2, metavar=("KW1", "KW2"), default=None)
    parser.add_argument("--limit", type=int, default=TOP_N)
    parser.add_argument("--show-index", action="store_true")
    args = parser.parse_args()

    noise_words = read_noise_words(Path(args.noise_words))
    print(f"Loaded {len(noise_words)} noise words")

    source: DocumentSource
    if args.docs_parquet:
        parquet_source = ParquetDocumentSource(Path(args.docs_parquet))
        doc_ids = parquet_source.doc_ids()
        source = parquet_source
    else:
        doc_ids = read_word_list(Path(args.docs))
        source = FileDocumentSource()

    print(f"Indexing {len(doc_ids)} documents...")
    index = make_index(doc_ids, noise_words, source)
    print(f"Indexed {len(index)} keywords")

    if args.show_index:
        for line in format_index(index):
            print(f"  {line}")

    if args.query:
        kw1, kw2 = args.query
        results = run_query(index, kw1, kw2, noise_words, limit=args.limit)
        print(f"Search result for '{kw1} or {kw2}': {len(results)} documents")
        for rank, doc_id in enumerate(results, start=1):
            print(f"  {rank}. {doc_id}")


if __name__ == "__main__":
    main()
