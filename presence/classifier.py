"""
presence/classifier.py

Turns a member's before/after voice state into a presence event kind.
A voice_state_update also fires for mute, deafen and stream toggles, so
only a change of channel id counts as movement.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional


class VoiceEventKind(IntEnum):
    JOIN  = 0
    MOVE  = 1
    LEAVE = 2
    NOOP  = 3


@dataclass(frozen=True)
class VoiceLocation:
    """Where a member is in voice. ``channel_id is None`` means not connected."""

    channel_id: Optional[int] = None
    channel_name: Optional[str] = None

    @property
    def present(self) -> bool:
        return self.channel_id is not None

    @classmethod
    def from_voice_state(cls, state: Any) -> VoiceLocation:
        channel = getattr(state, "channel", None) if state is not None else None
        if channel is None:
            return ABSENT
        return cls(channel_id=channel.id, channel_name=channel.name)


ABSENT = VoiceLocation()


@dataclass(frozen=True)
class PresenceTransition:
    member_id: int
    display_name: str
    avatar_url: Optional[str]
    previous: VoiceLocation
    current: VoiceLocation

    @property
    def mention(self) -> str:
        return f"<@{self.member_id}>"

    @classmethod
    def from_voice_states(cls, member: Any, before: Any, after: Any) -> PresenceTransition:
        avatar = getattr(member, "display_avatar", None)
        return cls(
            member_id=member.id,
            display_name=member.display_name,
            avatar_url=str(avatar.url) if avatar is not None else None,
            previous=VoiceLocation.from_voice_state(before),
            current=VoiceLocation.from_voice_state(after),
        )


def classify(previous: VoiceLocation, current: VoiceLocation) -> VoiceEventKind:
    if not previous.present:
        return VoiceEventKind.JOIN if current.present else VoiceEventKind.NOOP
    if not current.present:
        return VoiceEventKind.LEAVE
    if previous.channel_id == current.channel_id:
        return VoiceEventKind.NOOP
    return VoiceEventKind.MOVE
