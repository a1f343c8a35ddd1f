"""
Playback Contracts

Responsibility:
Define valid playback actions and apply them to a playback state.
The step sequence is only ever read by index; nothing here writes back.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from tarjanviz.contracts.trace import Snapshot
from tarjanviz.temporal.sequence import StepSequence

from ..presentation.describe import TraversalLog


class ActionType(Enum):
    """Types of user interaction."""
    PLAY_TOGGLE = "play_toggle"
    PAUSE = "pause"
    STEP_FORWARD = "step_forward"
    STEP_BACK = "step_back"
    SEEK = "seek"
    TICK = "tick"
    RESET = "reset"


@dataclass(frozen=True)
class InteractionRequest:
    """A specific user intent. SEEK carries ("index", n) in its payload."""
    action: ActionType
    payload: Tuple[Tuple[str, int], ...] = field(default_factory=tuple)

    @staticmethod
    def seek(index: int) -> InteractionRequest:
        return InteractionRequest(ActionType.SEEK, (("index", index),))

    def get(self, key: str) -> Optional[int]:
        for k, v in self.payload:
            if k == key:
                return v
        return None


@dataclass
class PlaybackConfig:
    """Timer and log settings for a playback client."""
    tick_ms: int = 900
    log_capacity: int = 200


@dataclass(frozen=True)
class PlaybackState:
    """
    State of the playback controls.
    Separate from the rendered frame.
    """
    index: int
    is_playing: bool
    step_count: int

    @staticmethod
    def initial(step_count: int) -> PlaybackState:
        return PlaybackState(index=0, is_playing=False, step_count=step_count)

    @property
    def last_index(self) -> int:
        return max(self.step_count - 1, 0)

    @property
    def at_end(self) -> bool:
        return self.index >= self.last_index


def _clamp(index: int, state: PlaybackState) -> int:
    return min(max(index, 0), state.last_index)


def apply_action(state: PlaybackState, request: InteractionRequest) -> PlaybackState:
    """Pure reducer: the index always stays inside [0, step_count - 1]."""
    action = request.action
    if action == ActionType.PLAY_TOGGLE:
        return replace(state, is_playing=not state.is_playing)
    if action == ActionType.PAUSE:
        return replace(state, is_playing=False)
    if action == ActionType.STEP_FORWARD:
        return replace(state, index=_clamp(state.index + 1, state))
    if action == ActionType.STEP_BACK:
        return replace(state, index=_clamp(state.index - 1, state))
    if action == ActionType.SEEK:
        target = request.get("index")
        if target is None:
            raise ValueError("SEEK requires an 'index' payload")
        return replace(state, index=_clamp(target, state))
    if action == ActionType.TICK:
        if not state.is_playing:
            return state
        return replace(state, index=_clamp(state.index + 1, state))
    if action == ActionType.RESET:
        return PlaybackState.initial(state.step_count)
    raise ValueError(f"Unknown action: {action}")


class PlaybackController:
    """
    Drives one frozen StepSequence.

    Every index change appends the new step's event description to the
    traversal log, including moves backwards.
    """

    def __init__(self, steps: StepSequence, config: Optional[PlaybackConfig] = None):
        if not steps.is_frozen:
            raise ValueError("playback requires a completed (frozen) step sequence")
        self._config = config or PlaybackConfig()
        self._steps = steps
        self._state = PlaybackState.initial(len(steps))
        self._log = TraversalLog(capacity=self._config.log_capacity)
        if len(steps):
            self._log.record(steps.at(0).event)

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def log(self) -> TraversalLog:
        return self._log

    @property
    def tick_ms(self) -> int:
        return self._config.tick_ms

    def current(self) -> Optional[Snapshot]:
        if not len(self._steps):
            return None
        return self._steps.at(self._state.index)

    def dispatch(self, request: InteractionRequest) -> PlaybackState:
        previous = self._state
        self._state = apply_action(previous, request)
        if request.action == ActionType.RESET:
            self._log.clear()
            if len(self._steps):
                self._log.record(self._steps.at(0).event)
        elif self._state.index != previous.index:
            self._log.record(self._steps.at(self._state.index).event)
        return self._state

    def play_toggle(self) -> PlaybackState:
        return self.dispatch(InteractionRequest(ActionType.PLAY_TOGGLE))

    def step_forward(self) -> PlaybackState:
        return self.dispatch(InteractionRequest(ActionType.STEP_FORWARD))

    def step_back(self) -> PlaybackState:
        return self.dispatch(InteractionRequest(ActionType.STEP_BACK))

    def seek(self, index: int) -> PlaybackState:
        return self.dispatch(InteractionRequest.seek(index))

    def tick(self) -> PlaybackState:
        return self.dispatch(InteractionRequest(ActionType.TICK))
