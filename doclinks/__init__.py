"""Markdown documentation link checker."""
