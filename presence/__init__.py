"""Presence package __init__.py"""
from .classifier import (
    ABSENT, PresenceTransition, VoiceEventKind, VoiceLocation, classify,
)
from .notifier import DeliveryResult, Notifier, build_embed
from .resolver import ChannelResolver, text_channels_named

__all__ = [
    "ABSENT", "PresenceTransition", "VoiceEventKind", "VoiceLocation", "classify",
    "DeliveryResult", "Notifier", "build_embed",
    "ChannelResolver", "text_channels_named",
]
