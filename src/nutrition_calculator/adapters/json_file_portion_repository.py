"""JSON file store for the last-used portion record."""

import json
from dataclasses import dataclass
from pathlib import Path

from nutrition_calculator.services.portions import STORAGE_KEY, PortionStateRepository


@dataclass
class JsonFilePortionRepository(PortionStateRepository):
    """Keeps records in a JSON object keyed by storage key."""

    path: Path
    key: str = STORAGE_KEY

    def load(self) -> dict[str, object] | None:
        """Return the stored record, or None when nothing is saved."""
        if not self.path.exists():
            return None
        document = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(document, dict):
            raise ValueError(f"Portion store {self.path} is not a JSON object")
        return document.get(self.key)

    def save(self, record: dict[str, object]) -> None:
        """Write the record, keeping other keys in the file."""
        document: dict[str, object] = {}
        if self.path.exists():
            try:
                existing = json.loads(self.path.read_text(encoding="utf-8"))
            except json.JSONDecodeError:
                existing = None
            if isinstance(existing, dict):
                document = existing
        document[self.key] = record
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(document), encoding="utf-8")
