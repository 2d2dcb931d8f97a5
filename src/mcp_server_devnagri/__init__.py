"""
MCP server exposing the Devnagri machine translation API.

Provides translation, script-based language detection and a listing of the
languages the API supports.
"""

__version__ = "1.0.0"
