"""
Similarity scoring over normalized strings

Formula:
  similarity(a, b) = 1 - levenshtein(norm(a), norm(b)) / max(len(norm(a)), len(norm(b)))

Identical normalized forms short-circuit to exactly 1.0.
"""
from typing import List

from quote_quiz.core.normalizer import normalize


def levenshtein_distance(a: str, b: str) -> int:
    """
    Classic edit distance (substitution, insertion, deletion all cost 1)

    The table has len(b) + 1 rows and len(a) + 1 columns.

    Example:
        >>> levenshtein_distance("kitten", "sitting")
        3
    """
    matrix: List[List[int]] = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]

    for i in range(len(b) + 1):
        matrix[i][0] = i
    for j in range(len(a) + 1):
        matrix[0][j] = j

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = min(
                    matrix[i - 1][j - 1] + 1,  # substitution
                    matrix[i][j - 1] + 1,      # insertion
                    matrix[i - 1][j] + 1,      # deletion
                )

    return matrix[len(b)][len(a)]


def similarity(a: str, b: str) -> float:
    """
    Similarity of two free-text strings

    Args:
        a: First string (e.g. player guess)
        b: Second string (e.g. actual episode title)

    Returns:
        Score in range [0.0, 1.0], 1.0 when normalized forms are equal
    """
    norm_a = normalize(a)
    norm_b = normalize(b)

    if norm_a == norm_b:
        return 1.0

    max_len = max(len(norm_a), len(norm_b))
    if max_len == 0:
        return 1.0

    distance = levenshtein_distance(norm_a, norm_b)
    return 1.0 - (distance / max_len)
