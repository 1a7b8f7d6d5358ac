from domain.taxonomy import (
    SUGGESTION_MAX_DISTANCE,
    TagVocabulary,
    closest_match,
    levenshtein_distance,
    validate_tag,
    validate_tags,
)

VOCAB = ["javascript", "python", "testing", "cli"]


def test_levenshtein_distance() -> None:
    assert levenshtein_distance("kitten", "sitting") == 3
    assert levenshtein_distance("", "abc") == 3
    assert levenshtein_distance("same", "same") == 0
    assert levenshtein_distance("javascrip", "javascript") == 1


def test_misspelled_tag_gets_suggestion() -> None:
    result = validate_tag("javascrip", VOCAB)

    assert result.valid is True
    assert result.normalized == "javascrip"
    assert result.suggestion == "javascript"


def test_tag_that_normalizes_to_empty_is_invalid() -> None:
    result = validate_tag("!!!", VOCAB)

    assert result.valid is False
    assert result.normalized == ""
    assert result.suggestion is None


def test_exact_member_has_no_suggestion() -> None:
    result = validate_tag("  Python ", VOCAB)

    assert result.valid is True
    assert result.normalized == "python"
    assert result.suggestion is None


def test_distant_tag_is_valid_without_suggestion() -> None:
    result = validate_tag("kubernetes", VOCAB)

    assert result.valid is True
    assert result.suggestion is None


def test_suggestion_threshold_is_inclusive() -> None:
    assert SUGGESTION_MAX_DISTANCE == 2
    assert validate_tag("pythxx", VOCAB).suggestion == "python"
    assert validate_tag("pyxxxx", VOCAB).suggestion is None


def test_closest_match_ties_go_to_first_entry() -> None:
    assert closest_match("cat", ["bat", "car"]) == ("bat", 1)
    assert closest_match("cat", ["car", "bat"]) == ("car", 1)
    assert closest_match("cat", []) is None


def test_empty_vocabulary_never_suggests() -> None:
    assert validate_tag("anything", []).suggestion is None


def test_validate_tags_maps_over_input() -> None:
    results = validate_tags(["cli", "!!!"], VOCAB)

    assert [r.valid for r in results] == [True, False]


def test_tag_vocabulary_membership_and_validation() -> None:
    vocab = TagVocabulary(suggested_tags=VOCAB)

    assert "Testing" in vocab
    assert "kubernetes" not in vocab
    assert vocab.validate_tag("testng").suggestion == "testing"
    assert vocab.validate_tag("cli").suggestion is None


def test_tag_vocabulary_sees_later_additions() -> None:
    vocab = TagVocabulary(suggested_tags=["cli"])
    assert "rust" not in vocab

    vocab.suggested_tags.append("rust")

    assert "rust" in vocab
    assert vocab.validate_tag("rusty").suggestion == "rust"
    assert "!!!" not in vocab
