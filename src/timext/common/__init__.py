"""Helpers around the domain types: text notation and random sampling."""
