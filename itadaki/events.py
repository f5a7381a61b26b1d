"""
Game event logging.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class EventType(Enum):
    """Types of game events."""

    GAME_START = "game_start"
    TURN_START = "turn_start"
    DICE_ROLL = "dice_roll"
    MOVE = "move"
    LAND = "land"

    PURCHASE = "purchase"
    PURCHASE_DECLINED = "purchase_declined"
    FEE_PAYMENT = "fee_payment"

    SUIT_COLLECTED = "suit_collected"
    BANK_VISIT = "bank_visit"
    LEVEL_UP = "level_up"

    CHANCE = "chance"


@dataclass
class GameEvent:
    """A logged event in the game."""

    event_type: EventType
    player_id: Optional[int] = None
    turn_number: int = 0
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Flat JSON-friendly form."""
        payload: Dict[str, Any] = {"event_type": self.event_type.value, "turn_number": self.turn_number}
        if self.player_id is not None:
            payload["player_id"] = self.player_id
        payload.update(self.details)
        return payload

    def __repr__(self) -> str:
        player_str = f"P{self.player_id}" if self.player_id is not None else "System"
        return f"[{player_str}] {self.event_type.value}: {self.details}"


class EventLog:
    """Manages the game event log."""

    def __init__(self):
        self.events: List[GameEvent] = []

    def log(
        self,
        event_type: EventType,
        player_id: Optional[int] = None,
        turn_number: int = 0,
        **details: Any,
    ) -> GameEvent:
        """Log a game event."""
        event = GameEvent(event_type, player_id, turn_number, details)
        self.events.append(event)
        return event

    def get_events(self) -> List[GameEvent]:
        """Get all logged events."""
        return self.events.copy()

    def get_recent_events(self, count: int = 10) -> List[GameEvent]:
        """Get the most recent N events."""
        return self.events[-count:]

    def of_type(self, event_type: EventType) -> List[GameEvent]:
        """Get every event of one type, oldest first."""
        return [e for e in self.events if e.event_type == event_type]

    def __len__(self) -> int:
        return len(self.events)

    def clear(self) -> None:
        """Clear the event log."""
        self.events.clear()
