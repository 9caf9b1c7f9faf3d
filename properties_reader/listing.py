def to_list(value) -> list:
    """
    Normalize a file specification to a list.

    Examples:
        to_list(None) -> []
        to_list("app.properties") -> ["app.properties"]
        to_list(["a", "b"]) -> ["a", "b"]  (same object)
    """
    if not value:
        return []

    if isinstance(value, (list, tuple)):
        return value

    return [value]
