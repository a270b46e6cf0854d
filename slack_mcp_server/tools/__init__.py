"""FastMCP tool registrations."""
