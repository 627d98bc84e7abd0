import polars as pl

from lse.data_models.occurrence import Occurrence
from lse.keywords import count_keywords, load_document_keywords, normalize, tokenize
from lse.sources import FileDocumentSource, ParquetDocumentSource

NOISE = frozenset({"the", "this", "all", "an", "and", "another"})


def test_normalize_lowercases():
    assert normalize("World...", NOISE) == "world"
    assert normalize("WORLD", NOISE) == "world"


def test_normalize_strips_leading_and_trailing_punctuation():
    assert normalize(".,?:;!abc", NOISE) == "abc"
    assert normalize("abc.,?:;!", NOISE) == "abc"
    assert normalize("!!abc??", NOISE) == "abc"


def test_normalize_rejects_interior_punctuation():
    assert normalize("abc-def", NOISE) is None
    assert normalize("I've", NOISE) is None
    assert normalize("a.b", NOISE) is None


def test_normalize_rejects_punctuation_only():
    assert normalize("...", NOISE) is None
    assert normalize("", NOISE) is None


def test_normalize_rejects_non_letters():
    assert normalize("abc1", NOISE) is None
    assert normalize("'dinah'll", NOISE) is None
    assert normalize("café", NOISE) is None


def test_normalize_rejects_noise_words_any_case():
    assert normalize("The", NOISE) is None
    assert normalize("ANOTHER.", NOISE) is None
    assert normalize("other", NOISE) == "other"


def test_normalize_idempotent():
    for word in ["World...", "Down,", ".,?:;!abc", "Alice", "end!"]:
        kw = normalize(word, NOISE)
        assert kw is not None
        assert normalize(kw, NOISE) == kw


def test_tokenize_splits_on_any_whitespace():
    assert tokenize("Down,  down,\tdown.\n") == ["Down,", "down,", "down."]
    assert tokenize("   ") == []


def test_count_keywords():
    kws = count_keywords("d1", "Down, down, down. The end!", NOISE)
    assert kws == {
        "down": Occurrence(doc_id="d1", frequency=3),
        "end": Occurrence(doc_id="d1", frequency=1),
    }


def test_count_keywords_empty_text():
    assert count_keywords("d1", "", NOISE) == {}


def test_load_document_keywords_from_file(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("Would the fall NEVER come to an end!\n")
    kws = load_document_keywords(str(path), FileDocumentSource(), NOISE)
    assert set(kws) == {"would", "fall", "never", "come", "to", "end"}
    assert kws["fall"] == Occurrence(doc_id=str(path), frequency=1)


def test_load_document_keywords_missing_file_is_empty(tmp_path, capsys):
    missing = str(tmp_path / "nope.txt")
    assert load_document_keywords(missing, FileDocumentSource(), NOISE) == {}
    assert "[keywords] skipping" in capsys.readouterr().out


def test_load_document_keywords_unknown_doc_id_is_empty():
    source = ParquetDocumentSource(
        pl.DataFrame({"doc_id": ["d1"], "text": ["hello world"]})
    )
    assert load_document_keywords("d2", source, NOISE) == {}
    assert set(load_document_keywords("d1", source, NOISE)) == {"hello", "world"}
