"""Where documents, document lists and noise words come from."""

from pathlib import Path
from typing import Protocol

import polars as pl

from lse.data_models.doc import Doc

_DOCS_SCHEMA = {"doc_id": pl.String, "text": pl.String}


class DocumentNotFoundError(KeyError):
    pass


class DocumentSource(Protocol):
    def read(self, doc_id: str) -> str: ...


def read_word_list(path: Path) -> list[str]:
    """Return the whitespace-separated entries of a file, in file order."""
    return Path(path).read_text(encoding="utf-8").split()


def read_noise_words(path: Path) -> frozenset[str]:
    return frozenset(word.lower() for word in read_word_list(path))


class FileDocumentSource:
    """Treats each doc_id as a path on disk."""

    def read(self, doc_id: str) -> str:
        return Path(doc_id).read_text(encoding="utf-8")


class ParquetDocumentSource:
    """Documents held in a table with doc_id and text columns."""

    def __init__(self, docs: pl.DataFrame | Path | str) -> None:
        if not isinstance(docs, pl.DataFrame):
            docs = pl.read_parquet(docs)
        missing = set(_DOCS_SCHEMA) - set(docs.columns)
        if missing:
            raise ValueError(f"Docs table is missing columns: {sorted(missing)}")
        self._docs = {
            row["doc_id"]: Doc(doc_id=row["doc_id"], text=row["text"])
            for row in docs.select(list(_DOCS_SCHEMA)).iter_rows(named=True)
        }

    def doc_ids(self) -> list[str]:
        return list(self._docs)

    def read(self, doc_id: str) -> str:
        doc = self._docs.get(doc_id)
        if doc is None:
            raise DocumentNotFoundError(doc_id)
        return doc.text
