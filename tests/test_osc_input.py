"""
Tests for OSC tilt / music input.

Handlers are called directly; the socket test binds an ephemeral port.
"""

from src.config import OSC_PATHS
from src.input.osc_input import OscInputListener


class TestHandlers:

    def test_tilt_gamma_only(self):
        listener = OscInputListener()
        received = []
        listener.tilt_received.connect(lambda g, b: received.append((g, b)))
        listener._handle_tilt(OSC_PATHS['tilt'], 12.5)
        assert received == [(12.5, None)]

    def test_tilt_with_beta(self):
        listener = OscInputListener()
        received = []
        listener.tilt_received.connect(lambda g, b: received.append((g, b)))
        listener._handle_tilt(OSC_PATHS['tilt'], -10, 30.0)
        assert received == [(-10.0, 30.0)]

    def test_malformed_tilt_ignored(self):
        listener = OscInputListener()
        received = []
        listener.tilt_received.connect(lambda g, b: received.append((g, b)))
        listener._handle_tilt(OSC_PATHS['tilt'])
        listener._handle_tilt(OSC_PATHS['tilt'], "left")
        assert received == []

    def test_music_playing(self):
        listener = OscInputListener()
        received = []
        listener.music_playing_received.connect(received.append)
        listener._handle_music(OSC_PATHS['music_playing'], 1)
        listener._handle_music(OSC_PATHS['music_playing'], 0)
        assert received == [True, False]

    def test_malformed_music_ignored(self):
        listener = OscInputListener()
        received = []
        listener.music_playing_received.connect(received.append)
        listener._handle_music(OSC_PATHS['music_playing'])
        assert received == []


class TestServer:

    def test_start_and_stop(self):
        listener = OscInputListener()
        assert listener.start(port=0) is True
        assert listener.running
        assert listener.start(port=0) is True
        listener.stop()
        assert not listener.running
        listener.stop()
