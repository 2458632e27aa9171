"""Presentation layer for browsing a paginated, searchable recipe catalogue."""
