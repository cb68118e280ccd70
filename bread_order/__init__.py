"""Shared bread ordering service: orders, catalog and users in flat JSON files."""
