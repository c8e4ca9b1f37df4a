"""Validate a command's output dict against its registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate ``output`` for ``func`` and return the normalised dict.

    The schema is looked up by the command's domain (the package holding the
    ``cmd_*`` module) and its name without the ``cmd_`` prefix.

    Raises:
        ValueError: If no schema is registered or validation fails
    """
    module_parts = func.__module__.split(".")
    if len(module_parts) < 2:
        raise ValueError(f"Cannot derive command domain from module {func.__module__!r}")
    domain = module_parts[-2]
    command_name = func.__name__.removeprefix("cmd_")
    schema = get_output_schema(domain, command_name)
    if schema is None:
        raise ValueError(f"No output schema registered for {domain}.{command_name}")
    try:
        return schema.model_validate(output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"{domain}.{command_name}: {e}") from e
