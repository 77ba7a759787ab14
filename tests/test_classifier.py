"""Tests for presence classification."""

import itertools

import pytest

from presence.classifier import (
    ABSENT, PresenceTransition, VoiceEventKind, VoiceLocation, classify,
)
from conftest import make_member, make_voice_state

LOBBY = VoiceLocation(1, "Lobby")
LOBBY_RENAMED = VoiceLocation(1, "Lobby (afk)")
STUDY = VoiceLocation(2, "Study")


@pytest.mark.parametrize(
    "previous, current, expected",
    [
        (ABSENT, LOBBY, VoiceEventKind.JOIN),
        (LOBBY, ABSENT, VoiceEventKind.LEAVE),
        (LOBBY, STUDY, VoiceEventKind.MOVE),
        (STUDY, LOBBY, VoiceEventKind.MOVE),
        (LOBBY, LOBBY, VoiceEventKind.NOOP),
        (ABSENT, ABSENT, VoiceEventKind.NOOP),
    ],
)
def test_classify(previous, current, expected):
    assert classify(previous, current) is expected


def test_same_channel_id_is_noop_even_if_name_changed():
    assert classify(LOBBY, LOBBY_RENAMED) is VoiceEventKind.NOOP


def test_classify_is_total_and_deterministic():
    locations = [ABSENT, LOBBY, LOBBY_RENAMED, STUDY]
    for previous, current in itertools.product(locations, repeat=2):
        first = classify(previous, current)
        assert first in VoiceEventKind
        assert classify(previous, current) is first


def test_event_kind_numbering():
    assert [k.value for k in (VoiceEventKind.JOIN, VoiceEventKind.MOVE, VoiceEventKind.LEAVE)] == [0, 1, 2]


def test_location_from_voice_state():
    assert VoiceLocation.from_voice_state(make_voice_state(5, "Games")) == VoiceLocation(5, "Games")
    assert VoiceLocation.from_voice_state(make_voice_state()) is ABSENT
    assert VoiceLocation.from_voice_state(None) is ABSENT
    assert not ABSENT.present


def test_transition_from_voice_states():
    member = make_member(7, "Rin")
    t = PresenceTransition.from_voice_states(member, make_voice_state(), make_voice_state(1, "Lobby"))

    assert t.member_id == 7
    assert t.display_name == "Rin"
    assert t.avatar_url == "https://cdn.example/avatars/7.png"
    assert t.mention == "<@7>"
    assert t.previous is ABSENT
    assert t.current == LOBBY
