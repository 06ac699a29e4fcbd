"""
Interactive modulation.

While interactive mode is on, pointer position and device tilt drive the
noise seed (and optionally amplitude). Turning it off stops further writes
and leaves the last computed values in place.

Pointer updates are throttled to one per POINTER_THROTTLE_MS; tilt updates
are taken at whatever rate the source delivers them.
"""

from typing import Callable, Optional

from src.config import (
    AMPLITUDE_OFFSET,
    INTERACTIVE_DEFAULT,
    POINTER_THROTTLE_MS,
    SEED_SCALE,
    TILT_RANGE_DEG,
)
from src.model.parameter_store import SOURCE_MODULATION, ParameterStore
from src.utils.logger import logger


def normalize_position(pos: float, extent: float) -> float:
    """Pixel position across an extent -> 0..1."""
    if extent <= 0:
        return 0.0
    return max(0.0, min(1.0, pos / extent))


def normalize_tilt(degrees: float, tilt_range: float = TILT_RANGE_DEG) -> float:
    """Tilt in degrees, clamped to +/- tilt_range -> 0..1."""
    clamped = max(-tilt_range, min(tilt_range, degrees))
    return (clamped + tilt_range) / (2 * tilt_range)


def seed_from_normalized(x: float) -> float:
    """0..1 -> seed 0..1000 with 2 decimal places."""
    return round(x * SEED_SCALE * 100) / 100


def amplitude_from_normalized(y: float) -> float:
    return round(y, 2) + AMPLITUDE_OFFSET


class ModulationAdapter:
    """
    Maps live input to seed/amplitude writes on a ParameterStore.

    Writes go through the store with SOURCE_MODULATION so they land after
    UI edits made in the same frame.
    """

    def __init__(self, store: ParameterStore, enabled: bool = INTERACTIVE_DEFAULT,
                 map_amplitude: bool = False, throttle_ms: int = POINTER_THROTTLE_MS):
        self.store = store
        self.enabled = enabled
        self.map_amplitude = map_amplitude
        self.throttle_ms = throttle_ms
        self._last_pointer_ms: Optional[float] = None

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = bool(enabled)
        logger.info(
            "Interactive mode enabled" if self.enabled else "Interactive mode disabled",
            component="INPUT",
        )

    def toggle(self) -> bool:
        self.set_enabled(not self.enabled)
        return self.enabled

    def on_pointer_move(self, x: float, width: float, now_ms: float,
                        y: Optional[float] = None, height: Optional[float] = None) -> bool:
        """
        Handle a pointer move in window pixels.

        Returns True if the event produced a write.
        """
        if not self.enabled:
            return False
        if self._last_pointer_ms is not None and now_ms - self._last_pointer_ms < self.throttle_ms:
            return False
        self._last_pointer_ms = now_ms

        nx = normalize_position(x, width)
        ny = None
        if y is not None and height:
            ny = normalize_position(y, height)
        self._write(nx, ny)
        return True

    def on_tilt(self, gamma: float, beta: Optional[float] = None) -> bool:
        """
        Handle a device tilt reading in degrees.

        gamma (left/right) drives the seed, beta (front/back) the amplitude
        variant. Not throttled.
        """
        if not self.enabled:
            return False
        ny = normalize_tilt(beta) if beta is not None else None
        self._write(normalize_tilt(gamma), ny)
        return True

    def _write(self, nx: float, ny: Optional[float]) -> None:
        updates = {'seed': seed_from_normalized(nx)}
        if self.map_amplitude and ny is not None:
            updates['amplitude'] = amplitude_from_normalized(ny)
        self.store.set(updates, source=SOURCE_MODULATION)


class OrientationPermissionGate:
    """
    Defers attaching tilt listeners until the user interacts.

    The first qualifying interaction (click/touch) triggers request_fn
    exactly once; if it returns True, attach_fn is called.
    """

    def __init__(self, request_fn: Callable[[], bool], attach_fn: Callable[[], None]):
        self._request_fn = request_fn
        self._attach_fn = attach_fn
        self.requested = False
        self.granted = False

    def on_user_interaction(self) -> bool:
        """Returns True if listeners are attached after this call."""
        if self.requested:
            return self.granted
        self.requested = True
        try:
            self.granted = bool(self._request_fn())
        except Exception as e:
            logger.error("Orientation permission request failed", component="INPUT", details=str(e))
            self.granted = False
        if self.granted:
            self._attach_fn()
            logger.info("Device orientation permission granted", component="INPUT")
        else:
            logger.info("Device orientation permission denied", component="INPUT")
        return self.granted
