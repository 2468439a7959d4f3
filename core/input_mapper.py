# core/input_mapper.py
from __future__ import annotations
from .interfaces import Heading, HEADINGS, Outcome, opposite
from .engine import GameState

class InputMapper:
    """Commits direction requests to the game state; the next step reads whatever is committed last."""
    def __init__(self, state: GameState):
        self.state = state

    def on_direction(self, requested: Heading) -> bool:
        requested = tuple(requested)
        if requested not in HEADINGS:
            raise ValueError(f"heading must be one of {HEADINGS}, got {requested}")
        st = self.state
        if st.outcome is not Outcome.IN_PROGRESS:
            return False
        if requested == opposite(st.heading):
            # turn around: old tail leads from now on
            st.snake.reverse_order()
        st.heading = requested
        return True
