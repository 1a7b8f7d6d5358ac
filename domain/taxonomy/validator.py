"""Fuzzy validation of tags against the controlled vocabulary."""

from collections.abc import Sequence

from pydantic import BaseModel, Field

from domain.schemas import TagValidationResult
from domain.taxonomy.normalizer import normalize_tag

# A vocabulary entry within this many edits is offered as a suggestion
SUGGESTION_MAX_DISTANCE = 2


def levenshtein_distance(s1: str, s2: str) -> int:
    """Compute Levenshtein edit distance (unit-cost insert, delete, substitute)."""
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    prev_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        curr_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = prev_row[j + 1] + 1
            deletions = curr_row[j] + 1
            substitutions = prev_row[j] + (c1 != c2)
            curr_row.append(min(insertions, deletions, substitutions))
        prev_row = curr_row

    return prev_row[-1]


def closest_match(value: str, vocabulary: Sequence[str]) -> tuple[str, int] | None:
    """
    Return the vocabulary entry with the smallest edit distance to `value`.

    Ties go to the entry that appears first in the vocabulary.
    Returns None for an empty vocabulary.
    """
    best: tuple[str, int] | None = None
    for entry in vocabulary:
        distance = levenshtein_distance(value, entry)
        if best is None or distance < best[1]:
            best = (entry, distance)
            if distance == 0:
                break
    return best


def validate_tag(raw_tag: object, vocabulary: Sequence[str]) -> TagValidationResult:
    """
    Validate a tag and suggest a close vocabulary entry when one exists.

    The vocabulary is advisory: a tag outside it is still valid. Only a tag
    that normalizes to the empty string is rejected.

    Args:
        raw_tag: Free-text tag as submitted
        vocabulary: Controlled vocabulary (suggested tags), in priority order

    Returns:
        TagValidationResult with the normalized tag and an optional suggestion
    """
    normalized = normalize_tag(raw_tag)
    if not normalized:
        return TagValidationResult(valid=False, normalized="", suggestion=None)

    if normalized in vocabulary:
        return TagValidationResult(valid=True, normalized=normalized)

    best = closest_match(normalized, vocabulary)
    if best is not None and best[1] <= SUGGESTION_MAX_DISTANCE:
        return TagValidationResult(valid=True, normalized=normalized, suggestion=best[0])

    return TagValidationResult(valid=True, normalized=normalized)


def validate_tags(tags: Sequence[object], vocabulary: Sequence[str]) -> list[TagValidationResult]:
    """Validate several tags against the same vocabulary."""
    return [validate_tag(tag, vocabulary) for tag in tags]


class TagVocabulary(BaseModel):
    """Controlled tag vocabulary (the registry's suggested tags)."""

    suggested_tags: list[str] = Field(default_factory=list)

    def __contains__(self, tag: object) -> bool:
        normalized = normalize_tag(tag)
        return bool(normalized) and normalized in self.suggested_tags

    def validate_tag(self, raw_tag: object) -> TagValidationResult:
        return validate_tag(raw_tag, self.suggested_tags)
