"""Bounds of the PostgreSQL column types behind ids and seat counts."""

INT4_MAX = 2**31 - 1


def is_storable_id(value: int) -> bool:
    """SERIAL ids start at 1 and fit INTEGER; any other value cannot match a row."""
    return 1 <= value <= INT4_MAX
