"""Pytest configuration and shared fixtures.

This module contains sample snap CLI output used across test modules.
"""

import pytest


@pytest.fixture
def snap_list_output() -> str:
    """Sample `snap list --unicode=never` output."""
    return """\
Name      Version   Rev    Tracking       Publisher    Notes
core22    20240607  1612   latest/stable  canonical**  base
firefox   128.0     4336   latest/stable  mozilla**    -
vlc       3.0.20    3777   latest/stable  videolan**   -
"""


@pytest.fixture
def snap_info_output() -> str:
    """Sample `snap info firefox` output."""
    return """\
name:      firefox
summary:   Mozilla Firefox web browser
publisher: Mozilla**
license:   unset
description: |
  Firefox is a powerful, extensible web browser with support for modern web
  application technologies.
commands:
  - firefox
  - firefox.geckodriver
snap-id:      3wdHCAVyZEmYsCMFDE9qt92UV8rC8Wdk
tracking:     latest/stable
refresh-date: 3 days ago, at 10:12 UTC
channels:
  latest/stable:    128.0 2024-07-09 (4336) 264MB -
  latest/candidate: 128.0.3-1 2024-07-26 (4650) 265MB -
  latest/beta:      ^
  latest/edge:      130.0a1 2024-07-28 (4660) 280MB -
  esr/stable:       115.13.0esr-1 2024-07-09 (4340) 254MB -
installed:          128.0 (4336) 264MB -
"""


@pytest.fixture
def snap_list_all_output() -> str:
    """Sample `snap list --all firefox --unicode=never` output."""
    return """\
Name     Version  Rev   Tracking       Publisher  Notes
firefox  127.0    4259  latest/stable  mozilla**  disabled
firefox  128.0    4336  latest/stable  mozilla**  -
"""


@pytest.fixture
def snap_changes_output() -> str:
    """Sample `snap changes` output with finished and running changes."""
    return """\
ID   Status  Spawn                   Ready                   Summary
41   Done    yesterday at 09:12 UTC  yesterday at 09:13 UTC  Refresh "firefox" snap
42   Doing   today at 10:01 UTC      -                       Install "vlc" snap
43   Error   today at 10:05 UTC      today at 10:06 UTC      Remove "foo" snap
44   Undone  today at 10:07 UTC      today at 10:08 UTC      Connect vlc:camera to snapd
"""


@pytest.fixture
def snap_connections_output() -> str:
    """Sample `snap connections vlc` output."""
    return """\
Interface        Plug                 Slot             Notes
audio-playback   vlc:audio-playback   :audio-playback  -
camera           vlc:camera           -                -
home             vlc:home             :home            manual
removable-media  vlc:removable-media  -                -
network          vlc:network          :network         -
"""
