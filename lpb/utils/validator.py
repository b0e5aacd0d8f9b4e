"""Input validation: checks CLI-supplied lesson identity before generation."""


def validate_input(value, field: str = "Topic") -> str:
    """Validate that a lesson identity value is a non-empty string.

    Returns the stripped input on success.
    Raises ValueError if input is empty or whitespace-only.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{field} must be a non-empty string.")
    return value.strip()
