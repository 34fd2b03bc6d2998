"""Household pantry tools."""
