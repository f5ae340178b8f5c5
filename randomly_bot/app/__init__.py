"""
Randomly Bot Service - Microsoft Teams bot that picks a random teammate.

Provides:
- Bot Framework activity handler for group chat and team conversations
- Uniform random selection of conversation members
- Adaptive Card announcement rendered from a Jinja2 template
- FastAPI webhook for the Bot Framework channel
"""
