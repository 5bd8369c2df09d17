# brightpath/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports.

Models exported:
- User: account and authentication model
- Session: server-side login session
- Mood, Journal, Confession, Feedback: append-only wellness entries
"""
from .user import User
from .session import Session
from .entries import Mood, Journal, Confession, Feedback
