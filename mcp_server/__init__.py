"""MCP server exposing the analyzer and catalog as tools."""
