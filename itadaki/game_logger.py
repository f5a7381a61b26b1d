"""
JSONL logger for Itadaki game events.

Writes every engine event, plus per-turn player snapshots, as one JSON
object per line.
"""

import json
from datetime import datetime
from typing import Any, Dict, Optional

from itadaki.game import GameSession
from itadaki.snapshot import serialize_snapshot


class GameLogger:
    """Logger that writes game events to a JSONL file."""

    def __init__(self, log_file: Optional[str] = None):
        """
        Initialize game logger.

        Args:
            log_file: Path to log file. If None, generates timestamped filename.
        """
        if log_file is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = f"itadaki_game_{timestamp}.jsonl"

        self.log_file = log_file
        self.event_count = 0
        self._engine_last_idx = 0  # last flushed index from the session's EventLog

        # Create/clear log file
        with open(self.log_file, "w", encoding="utf-8"):
            pass

    def log_event(self, event_type: str, **kwargs: Any) -> Dict[str, Any]:
        """
        Append one event to the JSONL file.

        Args:
            event_type: Type of event (e.g., "game_start", "dice_roll", "purchase")
            **kwargs: Additional event data
        """
        event = {
            "event_id": self.event_count,
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            **kwargs,
        }

        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(event) + "\n")

        self.event_count += 1
        return event

    def flush_engine_events(self, game: GameSession) -> int:
        """Write session events logged since the previous flush.

        Returns the number of events written.
        """
        events = game.event_log.events
        if self._engine_last_idx >= len(events):
            return 0

        wrote = 0
        for event in events[self._engine_last_idx :]:
            payload = event.to_dict()
            if "player_id" in payload:
                payload["player_name"] = game.players[payload["player_id"]].name
            if payload.get("event_type") == "fee_payment":
                payload["owner_name"] = game.players[payload["owner"]].name

            etype = payload.pop("event_type")
            self.log_event(etype, **payload)
            wrote += 1

        self._engine_last_idx = len(events)
        return wrote

    def log_turn_snapshot(self, game: GameSession) -> None:
        """Log the state of every player at the start of a turn."""
        snapshot = serialize_snapshot(game)
        for player in snapshot["players"]:
            tile = game.board.get_tile(player["position"])
            self.log_event(
                "player_state",
                turn_number=snapshot["turn_number"],
                position_name=tile.label,
                **player,
            )
