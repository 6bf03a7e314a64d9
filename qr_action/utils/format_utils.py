"""
Helper functions for formatting values into human-readable strings for logs.
"""

SIZE_UNITS = ("B", "KB", "MB", "GB")


def formatted_size(size_bytes: int) -> str:
    """
    Converts a size in bytes to a human-readable string.

    Args:
        size_bytes: The size of a file in bytes. Negative values count as 0.

    Returns:
        The size with the largest fitting unit, e.g. 812 gives "812 B",
        1536 gives "1.50 KB" and 2097152 gives "2 MB".
    """
    size = float(max(size_bytes, 0))
    if size < 1024:
        return f"{int(size)} B"

    for unit in SIZE_UNITS[1:]:
        size /= 1024.0
        if size < 1024 or unit == SIZE_UNITS[-1]:
            return f"{size:.2f} {unit}".replace(".00", "")
