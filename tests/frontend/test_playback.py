"""
Playback Contract Tests

Tests that enforce the read-only playback boundary.

TEST CATEGORIES:
================
1. Reducer - index clamping, play/pause, tick semantics
2. Controller - log entries follow index changes
3. Descriptions - one line per event type
4. Boundary - playback never writes to the step sequence
"""

import pytest
from dataclasses import FrozenInstanceError

from tarjanviz.contracts.events import (
    Visit, TreeEdge, PostUpdateLow, Articulation, RootArticulation,
    Bridge, BackEdge, ComponentClosed,
)
from tarjanviz.core.graph import Graph
from tarjanviz.core.tarjan import TarjanEngine
from tarjanviz.temporal.sequence import StepSequence
from tarjanviz_frontend.interaction.playback import (
    ActionType, InteractionRequest, PlaybackConfig, PlaybackState,
    PlaybackController, apply_action,
)
from tarjanviz_frontend.presentation.describe import describe_event, TraversalLog


@pytest.fixture
def path_steps():
    return TarjanEngine().run(Graph.construct(3, [(0, 1), (1, 2)]))


# =============================================================================
# REDUCER TESTS
# =============================================================================

class TestApplyAction:

    def test_step_forward_clamps_at_end(self):
        state = PlaybackState(index=4, is_playing=False, step_count=5)
        assert apply_action(state, InteractionRequest(ActionType.STEP_FORWARD)).index == 4

    def test_step_back_clamps_at_zero(self):
        state = PlaybackState.initial(5)
        assert apply_action(state, InteractionRequest(ActionType.STEP_BACK)).index == 0

    def test_seek_clamps(self):
        state = PlaybackState.initial(5)
        assert apply_action(state, InteractionRequest.seek(99)).index == 4
        assert apply_action(state, InteractionRequest.seek(-3)).index == 0

    def test_seek_requires_index(self):
        with pytest.raises(ValueError):
            apply_action(PlaybackState.initial(5), InteractionRequest(ActionType.SEEK))

    def test_tick_only_when_playing(self):
        paused = PlaybackState.initial(5)
        assert apply_action(paused, InteractionRequest(ActionType.TICK)) == paused

        playing = apply_action(paused, InteractionRequest(ActionType.PLAY_TOGGLE))
        assert playing.is_playing
        assert apply_action(playing, InteractionRequest(ActionType.TICK)).index == 1

    def test_tick_at_end_holds_last_step(self):
        state = PlaybackState(index=4, is_playing=True, step_count=5)
        after = apply_action(state, InteractionRequest(ActionType.TICK))
        assert after.index == 4
        assert after.at_end

    def test_pause_and_reset(self):
        state = PlaybackState(index=3, is_playing=True, step_count=5)
        assert not apply_action(state, InteractionRequest(ActionType.PAUSE)).is_playing
        assert apply_action(state, InteractionRequest(ActionType.RESET)) == PlaybackState.initial(5)

    def test_empty_trace_stays_at_zero(self):
        state = PlaybackState.initial(0)
        assert apply_action(state, InteractionRequest(ActionType.STEP_FORWARD)).index == 0

    def test_state_is_frozen(self):
        with pytest.raises(FrozenInstanceError):
            PlaybackState.initial(3).index = 2


# =============================================================================
# CONTROLLER TESTS
# =============================================================================

class TestPlaybackController:

    def test_requires_frozen_sequence(self):
        with pytest.raises(ValueError):
            PlaybackController(StepSequence())

    def test_initial_log_has_first_event(self, path_steps):
        controller = PlaybackController(path_steps)
        assert controller.log.lines == ("Visit 0",)
        assert controller.current() is path_steps.at(0)

    def test_step_forward_logs(self, path_steps):
        controller = PlaybackController(path_steps)
        controller.step_forward()
        controller.step_forward()
        assert controller.log.lines == ("Visit 0", "Tree edge 0-1", "Visit 1")

    def test_step_back_also_logs(self, path_steps):
        controller = PlaybackController(path_steps)
        controller.seek(3)
        controller.step_back()
        assert controller.log.lines[-1] == "Visit 1"

    def test_no_log_when_index_unchanged(self, path_steps):
        controller = PlaybackController(path_steps)
        controller.step_back()
        controller.tick()
        assert len(controller.log) == 1

    def test_play_to_end(self, path_steps):
        controller = PlaybackController(path_steps)
        controller.play_toggle()
        for _ in range(len(path_steps) + 5):
            controller.tick()

        assert controller.state.at_end
        assert controller.current() is path_steps.final
        assert len(controller.log) == len(path_steps)

    def test_reset_clears_log(self, path_steps):
        controller = PlaybackController(path_steps)
        controller.seek(6)
        controller.dispatch(InteractionRequest(ActionType.RESET))
        assert controller.state.index == 0
        assert controller.log.lines == ("Visit 0",)

    def test_log_capacity(self, path_steps):
        controller = PlaybackController(path_steps, PlaybackConfig(log_capacity=3))
        controller.seek(len(path_steps) - 1)
        controller.seek(0)
        controller.seek(5)
        assert len(controller.log) == 3
        assert controller.log.lines[-1] == "Post DFS update low[1]"

    def test_playback_never_writes(self, path_steps):
        before = path_steps.state
        controller = PlaybackController(path_steps)
        controller.play_toggle()
        for _ in range(20):
            controller.tick()
        controller.seek(2)
        assert path_steps.state == before

    def test_empty_trace(self):
        steps = TarjanEngine().run(Graph.empty(0))
        controller = PlaybackController(steps)
        assert controller.current() is None
        assert len(controller.log) == 0

    def test_tick_interval(self, path_steps):
        assert PlaybackController(path_steps).tick_ms == 900


# =============================================================================
# DESCRIPTION TESTS
# =============================================================================

class TestDescribeEvent:

    @pytest.mark.parametrize("event,text", [
        (Visit(3), "Visit 3"),
        (TreeEdge(0, 1), "Tree edge 0-1"),
        (PostUpdateLow(2), "Post DFS update low[2]"),
        (Articulation(4), "4 is articulation"),
        (RootArticulation(0), "0 is root articulation"),
        (Bridge(1, 2), "Bridge 1-2"),
        (BackEdge(5, 0), "Back edge 5-0"),
        (ComponentClosed(1, frozenset({(1, 2)})), "Component closed at 1 (1 edge)"),
        (ComponentClosed(0, frozenset({(0, 1), (1, 2)})), "Component closed at 0 (2 edges)"),
    ])
    def test_descriptions(self, event, text):
        assert describe_event(event) == text

    def test_log_drops_oldest(self):
        log = TraversalLog(capacity=2)
        for node in range(3):
            log.record(Visit(node))
        assert log.lines == ("Visit 1", "Visit 2")
