"""Compact human-readable rendering of counts (downloads, reviews, lines of code)."""

SIZE_NAMES = ["", "K", "M", "G", "T", "P", "E", "Z", "Y"]

# Counts stay raw until they are comfortably past the unit boundary,
# so 1100 renders as "1100" and not as "1K".
REDUCTION_THRESHOLD = 1200


def format_magnitude(value: int) -> str:
    """Format a non-negative count with a base-1024 unit suffix.

    Zero is rendered as an empty string so that "no data" and "zero" look
    the same in the table, where empty cells already mean "unknown".

    Args:
        value: The count to format

    Returns:
        Decimal digits followed by the unit suffix (e.g. "999", "1K", "12M")

    Raises:
        ValueError: If value is negative
    """
    if value < 0:
        raise ValueError(f"Cannot format negative magnitude: {value}")
    if value == 0:
        return ""

    index = 0
    while value >= REDUCTION_THRESHOLD and index < len(SIZE_NAMES) - 1:
        value >>= 10
        index += 1

    return f"{value}{SIZE_NAMES[index]}"
