"""MCP server exposing batch Jenkins build operations."""

import logging

# Stay silent unless the server entry point configures logging.
logging.getLogger("jenkins_mcp").addHandler(logging.NullHandler())

__version__ = "0.1.0"
