"""
Game events and presentation state
"""

from enum import Enum, auto


class GameState(Enum):
    """What the front end is showing"""
    PLAYING = auto()
    LEVEL_COMPLETE = auto()
    GAME_OVER = auto()


class GameEvent:
    """Base class for events emitted by a session tick"""
    name = "event"

    def as_dict(self):
        data = dict(vars(self))
        data['event'] = self.name
        return data

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __repr__(self):
        fields = ", ".join(f"{k}={v}" for k, v in vars(self).items())
        return f"{type(self).__name__}({fields})"


class LevelComplete(GameEvent):
    """Every collectible picked up"""
    name = "level_complete"

    def __init__(self, level, score):
        self.level = level
        self.score = score


class LifeLost(GameEvent):
    """Enemy contact with lives to spare"""
    name = "life_lost"

    def __init__(self, lives):
        self.lives = lives


class GameOver(GameEvent):
    """Last life lost"""
    name = "game_over"

    def __init__(self, score):
        self.score = score


class GameStateManager:
    """
    Tracks the banner the front end shows after an event
    The session never waits on it; the banner just times out.
    """
    def __init__(self, message_duration):
        self.current_state = GameState.PLAYING
        self.state_data = {}
        self.message_duration = message_duration
        self.timer = 0.0

    def handle_event(self, event):
        """Switch banner for an emitted event"""
        if isinstance(event, LevelComplete):
            self.transition_to(GameState.LEVEL_COMPLETE, level=event.level, score=event.score)
        elif isinstance(event, GameOver):
            self.transition_to(GameState.GAME_OVER, score=event.score)

    def transition_to(self, new_state, **kwargs):
        self.current_state = new_state
        self.state_data = kwargs
        self.timer = self.message_duration if new_state != GameState.PLAYING else 0.0

    def update(self, dt):
        """Count down the banner; back to PLAYING when it expires"""
        if self.current_state == GameState.PLAYING:
            return
        self.timer -= dt
        if self.timer <= 0:
            self.transition_to(GameState.PLAYING)

    def is_state(self, state):
        """Check if current state matches"""
        return self.current_state == state

    def __repr__(self):
        return f"GameStateManager(state={self.current_state.name})"
