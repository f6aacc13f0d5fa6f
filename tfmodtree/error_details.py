"""Error message formatting for user-friendly exception handling."""

from tfmodtree.inputs.terraform import PlanError, RenderError, SchemaError


def _format_plan_error(error) -> str:
    """Format terraform failures, keeping terraform's own output."""
    return f"terraform failed:\n{error!s}"


ERROR_TYPES = {
    SchemaError: lambda e: f"Failed to deserialize plan: {e!s}",
    RenderError: lambda e: f"Failed to render module tree: {e!s}",
    PlanError: lambda e: _format_plan_error(e),
    FileNotFoundError: lambda e: str(e),
    PermissionError: lambda e: f"Permission denied: {e!s}\nCheck file permissions.",
    OSError: lambda e: f"System error: {e!s}",
}


def get_error_human_message(error: Exception) -> str:
    """
    Get user-friendly error message based on exception type.

    Args:
        error: The exception to format

    Returns:
        Formatted error message suitable for end users
    """
    for error_type, handler in ERROR_TYPES.items():
        if isinstance(error, error_type):
            return handler(error)
    return str(error)
