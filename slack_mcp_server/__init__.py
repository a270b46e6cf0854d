"""Slack MCP server package."""
