"""
Error handling module for the Booli MCP server.

Provides the error taxonomy and the boundary that turns failures into
error envelopes.
"""

from .errors import BooliError, ErrorKind, GraphQLRequestError
from .error_handler import ErrorHandler, describe_error

__all__ = ['BooliError', 'ErrorKind', 'GraphQLRequestError', 'ErrorHandler', 'describe_error']
