import pytest

from recitation import (
    AlignedToken,
    ComparisonResult,
    ErrorType,
    Severity,
    Status,
    compare_texts,
)


def test_identical_texts():
    result = compare_texts("Hello world this is a test", "Hello world this is a test", "latin")
    assert result.accuracy == 1.0
    assert result.errors == []
    assert result.statistics.correct_words == 6
    assert result.statistics.total_words == 6


def test_missing_word():
    result = compare_texts("Hello world this is a test", "Hello world this is test", "latin")
    assert result.accuracy == pytest.approx(5 / 6)
    assert result.statistics.correct_words == 5
    assert len(result.errors) == 1
    error = result.errors[0]
    assert error.type is ErrorType.MISSING
    assert error.expected == "a"
    assert error.actual == ""
    assert error.position == 4
    assert error.severity is Severity.HIGH


def test_extra_words():
    result = compare_texts("Hello world test", "Hello world this is a test", "latin")
    assert result.accuracy == 1.0
    assert result.statistics.total_words == 3
    assert [e.type for e in result.errors] == [ErrorType.EXTRA] * 3
    assert all(e.position == -1 for e in result.errors)


def test_substitutions():
    result = compare_texts("Hello world this is a test", "Hello world that was a test", "latin")
    assert result.accuracy < 1.0
    assert result.statistics.correct_words == 4
    assert result.statistics.error_count == 2
    assert [e.type for e in result.errors] == [ErrorType.SUBSTITUTION] * 2


def test_near_miss():
    result = compare_texts("testing", "test", "latin")
    (row,) = result.aligned_tokens
    assert row.status is Status.NEAR_MISS
    assert row.confidence == pytest.approx(4 / 7)
    assert result.statistics.near_miss_count == 1
    assert result.statistics.error_count == 0
    assert result.errors[0].type is ErrorType.SUBSTITUTION
    assert result.errors[0].severity is Severity.MEDIUM
    assert result.accuracy == 0.0


def test_empty_recognized_text():
    result = compare_texts("Hello world", "", "latin")
    assert result.accuracy == 0
    assert len(result.errors) == 2
    assert all(t.status is Status.MISSING for t in result.aligned_tokens)
    assert all(e.type is ErrorType.MISSING for e in result.errors)


def test_empty_reference_text():
    result = compare_texts("", "some words", "latin")
    assert result.accuracy == 0
    assert result.statistics.total_words == 0
    assert [t.status for t in result.aligned_tokens] == [Status.EXTRA, Status.EXTRA]


def test_both_empty():
    result = compare_texts("", "   ")
    assert result == ComparisonResult(accuracy=0.0)


def test_case_insensitive():
    assert compare_texts("Hello World", "hello world", "latin").accuracy == 1.0


def test_punctuation_ignored():
    assert compare_texts("Hello, world!", "Hello world", "latin").accuracy == 1.0


def test_special_characters_differ():
    assert compare_texts("test@example.com", "test at example dot com", "latin").accuracy < 1.0


def test_arabic_identical():
    result = compare_texts("مرحبا بالعالم", "مرحبا بالعالم", "arabic")
    assert result.accuracy == 1.0
    assert result.statistics.correct_words == 2


def test_arabic_diacritics_normalized():
    result = compare_texts("الحمد", "الْحَمْد", "arabic")
    assert result.accuracy > 0.8


def test_turkish_matches_latin():
    reference = "Bugün hava çok güzel."
    recognized = "bugün hava cok guzel"
    assert compare_texts(reference, recognized, "turkish") == compare_texts(
        reference, recognized, "latin"
    )


def test_unknown_language_matches_latin():
    assert compare_texts("Hello, World", "hello world", "esperanto") == compare_texts(
        "Hello, World", "hello world", "latin"
    )


def test_single_word():
    result = compare_texts("word", "word", "latin")
    assert result.accuracy == 1.0
    assert result.statistics.total_words == 1
    assert result.aligned_tokens == [AlignedToken("word", "word", Status.CORRECT, 1.0, 0)]


def test_long_text():
    text = " ".join(["word"] * 500)
    result = compare_texts(text, text, "latin")
    assert result.accuracy == 1.0
    assert result.statistics.total_words == 500


def test_deterministic():
    args = ("The quick brown fox jumps", "the quack brown box jumped over", "latin")
    assert compare_texts(*args) == compare_texts(*args)
    assert compare_texts(*args).to_dict() == compare_texts(*args).to_dict()


@pytest.mark.parametrize(
    "reference,recognized",
    [
        ("the cat sat on the mat", "the cat sat on mat"),
        ("one two three four five", "five four three two one"),
        ("she sells sea shells", "she sells see shells by the shore"),
        ("a b c", "x y z"),
        ("", "only extra"),
    ],
)
def test_counts_are_consistent(reference, recognized):
    result = compare_texts(reference, recognized, "latin")
    stats = result.statistics
    rows = result.aligned_tokens

    assert 0.0 <= result.accuracy <= 1.0
    non_correct_with_reference = sum(
        1
        for t in rows
        if t.reference and t.status in (Status.NEAR_MISS, Status.ERROR, Status.MISSING)
    )
    assert stats.correct_words + non_correct_with_reference == stats.total_words
    assert len(result.errors) == sum(1 for t in rows if t.status is not Status.CORRECT)
    assert len([t for t in rows if t.reference]) == len(reference.split())
    assert len([t for t in rows if t.recognized]) == len(recognized.split())


def test_to_dict_wire_format():
    data = compare_texts("testing one", "test", "latin").to_dict()
    assert set(data) == {"accuracy", "alignedTokens", "errors", "statistics"}
    assert data["statistics"] == {
        "totalWords": 2,
        "correctWords": 0,
        "errorCount": 0,
        "nearMissCount": 1,
    }
    assert [t["status"] for t in data["alignedTokens"]] == ["near-miss", "missing"]
    assert data["alignedTokens"][1]["position"] == 1
    assert [e["type"] for e in data["errors"]] == ["substitution", "missing"]
    assert [e["severity"] for e in data["errors"]] == ["medium", "high"]
