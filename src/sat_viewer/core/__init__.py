"""Core business logic — models, score classification, location helpers, and the API client.

This module is framework-agnostic. It has no dependency on MCP, FastMCP,
or any server framework.
"""
