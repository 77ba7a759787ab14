"""Database __init__.py"""
from .db import init_db, get_db, close_db, sqlite_path_from_url
from .models import get_notf_channel, upsert_notf_channel

__all__ = [
    "init_db", "get_db", "close_db", "sqlite_path_from_url",
    "get_notf_channel", "upsert_notf_channel",
]
