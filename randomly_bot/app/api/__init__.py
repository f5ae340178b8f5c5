"""Randomly Bot HTTP API."""
