from __future__ import annotations
from ashfall.events import Event_Bus, State_Changed
from ashfall.models import Game_State, Resource_Type


class Hud:
    """Presentation listener: caches what the HUD shows and refreshes on State_Changed."""

    def __init__(self, state: Game_State, bus: Event_Bus):
        self.state = state
        self.refresh_count = 0
        self._data: dict = {}
        self.refresh()
        bus.subscribe(State_Changed, self.on_state_changed)

    def on_state_changed(self, event: State_Changed) -> None:
        self.state = event.state
        self.refresh()

    def refresh(self) -> None:
        state = self.state
        self._data = {
            "resources": {r.value: state.resources.get(r, 0) for r in Resource_Type},
            "doom": state.doom_meter,
            "turn": state.turn,
            "hand": len(state.cards_in_hand),
            "in_play": len(state.cards_in_play),
        }
        self.refresh_count += 1

    def get_display_data(self) -> dict:
        return dict(self._data)

    def resource_line(self) -> str:
        return "   ".join(f"{name}: {value}" for name, value in self._data["resources"].items())
