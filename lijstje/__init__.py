"""Household grocery-list prediction core."""
