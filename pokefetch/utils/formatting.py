"""
Helper functions for formatting data into human-readable strings.
"""


def format_size(bytes_size: int) -> str:
    """Formats bytes into a human-readable size string (e.g., '1.2 KB')."""
    if bytes_size <= 0:
        return "0 B"
    units = ["B", "KB", "MB", "GB", "TB"]
    i = 0
    while bytes_size >= 1024 and i < len(units) - 1:
        bytes_size /= 1024
        i += 1
    return f"{bytes_size:.1f} {units[i]}"


def format_height(decimetres: int) -> str:
    """The API reports height in decimetres; render it as metres."""
    return f"{decimetres / 10:.1f} m"


def describe_error(error: BaseException) -> str:
    """The exception text, or its class name when the text is empty (e.g. timeouts)."""
    return str(error) or type(error).__name__
