"""
Damerau-Levenshtein distance with a distance budget.

Insertions, deletions, substitutions and transpositions of adjacent characters
all cost 1. Transposed characters may be separated by later edits (the
unrestricted variant), so the distance is a metric.

`distance` only stores the diagonal band |i - j| <= max_distance of the DP
matrix, one row of width 2 * max_distance + 1 at a time. Any cell whose true
value is within the budget lies inside the band, so values up to the budget
are exact; everything else is reported as None.
"""
from typing import Dict, List, Optional


def distance(a: str, b: str, max_distance: int) -> Optional[int]:
    """
    Compute the Damerau-Levenshtein distance between two strings, up to a budget.

    Memory is O(max_distance ** 2) and time O(len(a) * max_distance),
    independent of how long the strings are.

    Args:
        a: First string
        b: Second string
        max_distance: Largest distance of interest (>= 0)

    Returns:
        The distance if it is <= max_distance, otherwise None

    Raises:
        ValueError: If max_distance is negative

    Example:
        >>> distance("kitten", "sitting", 4)
        3
        >>> distance("kitten", "sitting", 2) is None
        True
    """
    if max_distance < 0:
        raise ValueError(f"max_distance must be >= 0, got {max_distance}")

    if a == b:
        return 0

    len_a = len(a)
    len_b = len(b)
    if abs(len_a - len_b) > max_distance:
        return None
    if len_a == 0 or len_b == 0:
        # Length difference already checked against the budget
        return max(len_a, len_b)

    # Anything above the budget is stored as `cap`; callers only see None
    cap = max_distance + 1
    band = 2 * max_distance + 1

    # Row x holds D(x, y) for y in [x - max_distance, x + max_distance] at
    # index y - x + max_distance. A transposition reaching back more than
    # max_distance + 1 rows costs more than the budget, so only that many
    # previous rows are kept, in a ring.
    window = max_distance + 2
    rows: List[List[int]] = [[cap] * band for _ in range(window)]
    for y in range(0, min(len_b, max_distance) + 1):
        rows[0][y + max_distance] = y

    # Last row of `a` in which each character was seen
    last_row: Dict[str, int] = {}

    for i in range(1, len_a + 1):
        char_a = a[i - 1]
        # Last column of `b` in this row where the characters matched
        last_match_col = 0

        prev_row = rows[(i - 1) % window]
        row = [cap] * band
        rows[i % window] = row
        if i <= max_distance:
            row[max_distance - i] = i

        lo = max(1, i - max_distance)
        hi = min(len_b, i + max_distance)
        row_min = cap

        for j in range(lo, hi + 1):
            char_b = b[j - 1]
            k = last_row.get(char_b, 0)
            l = last_match_col
            idx = j - i + max_distance

            if char_a == char_b:
                cost = 0
                last_match_col = j
            else:
                cost = 1

            value = prev_row[idx] + cost                      # substitution / match
            if idx > 0 and row[idx - 1] + 1 < value:
                value = row[idx - 1] + 1                      # insertion
            if idx + 1 < band and prev_row[idx + 1] + 1 < value:
                value = prev_row[idx + 1] + 1                 # deletion

            # Transposition from D(k - 1, l - 1); k = 0 or l = 0 means no
            # earlier match, and a source outside the band or the ring is
            # already over budget.
            if k and l and i - k <= max_distance:
                offset = (l - 1) - (k - 1) + max_distance
                if 0 <= offset < band:
                    swapped = rows[(k - 1) % window][offset] + (i - k - 1) + 1 + (j - l - 1)
                    if swapped < value:
                        value = swapped

            if value > cap:
                value = cap
            row[idx] = value
            if value < row_min:
                row_min = value

        if row_min > max_distance:
            # Row minima never decrease, so the final cell is over budget too
            return None

        last_row[char_a] = i

    result = rows[len_a % window][len_b - len_a + max_distance]
    return result if result <= max_distance else None


def unbounded_distance(a: str, b: str) -> int:
    """
    Compute the Damerau-Levenshtein distance over the full DP matrix.

    This is the classical Lowrance-Wagner algorithm without any budget. It is
    quadratic in the input lengths and exists as the reference for `distance`.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of edits turning a into b
    """
    len_a = len(a)
    len_b = len(b)
    infinity = len_a + len_b

    matrix = [[0] * (len_b + 2) for _ in range(len_a + 2)]
    matrix[0][0] = infinity
    for i in range(len_a + 1):
        matrix[i + 1][0] = infinity
        matrix[i + 1][1] = i
    for j in range(len_b + 1):
        matrix[0][j + 1] = infinity
        matrix[1][j + 1] = j

    last_row: Dict[str, int] = {}
    for i in range(1, len_a + 1):
        last_match_col = 0
        for j in range(1, len_b + 1):
            k = last_row.get(b[j - 1], 0)
            l = last_match_col
            if a[i - 1] == b[j - 1]:
                cost = 0
                last_match_col = j
            else:
                cost = 1
            matrix[i + 1][j + 1] = min(
                matrix[i][j] + cost,
                matrix[i + 1][j] + 1,
                matrix[i][j + 1] + 1,
                matrix[k][l] + (i - k - 1) + 1 + (j - l - 1),
            )
        last_row[a[i - 1]] = i

    return matrix[len_a + 1][len_b + 1]
