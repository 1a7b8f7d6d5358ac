"""Confidence scoring for theme candidates."""

from collections.abc import Sized


def calculate_confidence(tools: Sized, keywords: Sized, categories: Sized) -> float:
    """
    Score how strongly a cluster of tools represents a coherent theme.

    Three contributions are summed and the total is capped at 1.0:
    - tool count: 0.4 for 5+, 0.3 for 3-4, 0.15 otherwise
    - keyword coherence: 0.2 for 3+, 0.1 for 2
    - category span: 0.2 for 2+, 0.1 for exactly 1

    Args:
        tools: Member tool names
        keywords: Distinguishing keywords of the cluster
        categories: Distinct categories spanned by the members

    Returns:
        Confidence in [0, 1]
    """
    confidence = 0.0

    n_tools = len(tools)
    if n_tools >= 5:
        confidence += 0.4
    elif n_tools >= 3:
        confidence += 0.3
    else:
        confidence += 0.15

    n_keywords = len(keywords)
    if n_keywords >= 3:
        confidence += 0.2
    elif n_keywords >= 2:
        confidence += 0.1

    n_categories = len(categories)
    if n_categories >= 2:
        confidence += 0.2
    elif n_categories == 1:
        confidence += 0.1

    # 0.4 + 0.2 + 0.2 is 0.8000000000000002 in binary floating point
    return min(round(confidence, 10), 1.0)
