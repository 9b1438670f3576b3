"""
MCP (Model Context Protocol) server components.

Provides LLM-friendly tools and resources for NPB roster data.
"""

from .resources import RESOURCES, STATIC_RESOURCES
from .tools import TOOLS

__all__ = ["TOOLS", "RESOURCES", "STATIC_RESOURCES"]
