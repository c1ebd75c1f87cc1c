import logging
from enum import Enum

logger = logging.getLogger(__name__)


class NarrationState(str, Enum):
    IDLE = "idle"
    SPEAKING = "speaking"
    PAUSED = "paused"
    CANCELLED = "cancelled"


class InvalidNarrationTransition(Exception):
    pass


# action -> {from_state: to_state}
_TRANSITIONS = {
    "play": {
        NarrationState.IDLE: NarrationState.SPEAKING,
        NarrationState.CANCELLED: NarrationState.SPEAKING,
        NarrationState.PAUSED: NarrationState.SPEAKING,
    },
    "pause": {NarrationState.SPEAKING: NarrationState.PAUSED},
    "resume": {NarrationState.PAUSED: NarrationState.SPEAKING},
    "stop": {
        NarrationState.SPEAKING: NarrationState.CANCELLED,
        NarrationState.PAUSED: NarrationState.CANCELLED,
    },
    "finish": {NarrationState.SPEAKING: NarrationState.IDLE},
}

ACTIONS = tuple(_TRANSITIONS)


class NarrationController:
    """
    Playback control for a narrated roadmap. Only tracks playback;
    stopping never cancels generation that is already in flight.
    """

    def __init__(self):
        self.state = NarrationState.IDLE

    def apply(self, action: str) -> NarrationState:
        if action not in _TRANSITIONS:
            raise InvalidNarrationTransition(f"Unknown narration action '{action}'.")
        # stop while already stopped is a no-op, like cancelling an idle synthesizer
        if action == "stop" and self.state in (NarrationState.IDLE, NarrationState.CANCELLED):
            return self.state

        next_state = _TRANSITIONS[action].get(self.state)
        if next_state is None:
            raise InvalidNarrationTransition(
                f"Cannot {action} narration while {self.state.value}."
            )
        logger.debug("Narration %s: %s -> %s", action, self.state.value, next_state.value)
        self.state = next_state
        return self.state

    def reset(self) -> None:
        self.state = NarrationState.IDLE
