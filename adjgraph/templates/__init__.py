"""Jinja templates for graph export."""
