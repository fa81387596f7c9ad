from typing import Any


def not_null(value: Any) -> Any:
    """Reject an explicit null sent for a field whose column cannot be empty.

    Update forms declare every field optional so that omitted fields stay
    untouched; a field that is present must still carry a value.
    """
    if value is None:
        raise ValueError("Field cannot be null")
    return value
