"""
Error handler for Booli MCP tool calls.

Converts failures into the uniform error envelope at the outermost tool
boundary. There is no retry and no backoff: one attempt, one outcome.
"""

import logging
from datetime import datetime

from booli_mcp.error_handling.errors import BooliError, ErrorKind
from booli_mcp.models import ToolResult


# Configure logging
logger = logging.getLogger(__name__)


def describe_error(error: Exception) -> str:
    """Return the message text of an exception, or a generic fallback."""
    message = str(error)
    return message if message else 'Unknown error occurred'


class ErrorHandler:
    """
    Boundary error handler for tool operations.

    Logs the failure with diagnostic context and produces a ToolResult with
    the error flag set. The original message text is embedded verbatim
    after a fixed, operation-specific prefix.
    """

    def to_result(
        self,
        operation: str,
        error: Exception,
        prefix: str
    ) -> ToolResult:
        """
        Convert an exception into the error envelope.

        Args:
            operation: Name of the tool that failed
            error: The exception that occurred
            prefix: Fixed text placed before the original message

        Returns:
            ToolResult with is_error set
        """
        self._log_error(operation, error)
        return ToolResult.error(f"{prefix}{describe_error(error)}")

    def _log_error(self, operation: str, error: Exception) -> None:
        """
        Log error with timestamp, context, and classification.

        Args:
            operation: Name of the tool that failed
            error: The exception that occurred
        """
        kind = error.kind if isinstance(error, BooliError) else ErrorKind.UPSTREAM
        context = {
            'timestamp': datetime.now().isoformat(),
            'operation': operation,
            'kind': kind.value,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }

        logger.error(
            f"Operation failed: {operation} | "
            f"Kind: {kind.value} | "
            f"Error: {type(error).__name__}: {str(error)}"
        )
        logger.debug(f"Full error context: {context}")
