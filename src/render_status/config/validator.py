"""Validation utilities for action configuration."""

from pydantic import ValidationError as PydanticValidationError

from render_status.config.defaults import INPUT_FIELD_MAP

_FIELD_TO_INPUT = {field: name for name, field in INPUT_FIELD_MAP.items()}


def flatten_pydantic_errors(exc: PydanticValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into human-readable messages.

    Field names are translated back to the action input names users set in
    their workflow files, so ``max_attempts`` is reported as ``max-attempts``.

    Args:
        exc: Pydantic ValidationError exception

    Returns:
        List of human-readable error messages, one per field error
    """
    errors: list[str] = []

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(item) for item in loc) if loc else "unknown"
        field_path = _FIELD_TO_INPUT.get(field_path, field_path)

        msg = error.get("msg", "Unknown error")
        error_type = error.get("type", "")

        if error_type == "value_error":
            input_val = error.get("input")
            formatted = f"Input '{field_path}': {msg} (received: {input_val!r})"
        else:
            formatted = f"Input '{field_path}': {msg}"

        errors.append(formatted)

    return errors if errors else ["Validation failed with unknown error"]
