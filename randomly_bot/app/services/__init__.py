"""Randomly Bot services: selection, card rendering, membership lookup."""
