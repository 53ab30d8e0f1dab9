"""MCP tool implementations and response models."""
