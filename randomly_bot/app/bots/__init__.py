"""Randomly Bot activity handlers."""
from .randomly_bot import HELP_TEXT, RandomlyBot

__all__ = ["HELP_TEXT", "RandomlyBot"]
