"""Date and time formatting utilities."""


def format_duration(seconds: float) -> str:
    """
    Format an elapsed time for humans.

    Args:
        seconds: Elapsed seconds

    Returns:
        "12.34ms" below one second, "1.23s" otherwise
    """
    if seconds < 1:
        return f"{seconds * 1000:.2f}ms"
    return f"{seconds:.2f}s"
