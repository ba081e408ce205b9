"""Helpers for fetching and extracting YouTube page data."""
