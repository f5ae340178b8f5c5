"""Randomly Bot models package."""
from .announcement import AnnouncementCardModel, AnnouncementCardWinner, Participant

__all__ = ["AnnouncementCardModel", "AnnouncementCardWinner", "Participant"]
