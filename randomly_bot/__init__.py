"""Randomly - pick a random teammate from a Teams group chat or team."""
