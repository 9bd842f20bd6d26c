"""
Dependencies for FastAPI - singleton instances
"""

import json
from pathlib import Path
from typing import Dict, Optional

from ingestion.schema import MythDatabase, MythRecord
from utils import config


class MythStore:
    """Holds the built database in memory, loaded lazily from disk"""

    def __init__(self, path: str):
        self.path = Path(path)
        self._database: Optional[MythDatabase] = None
        self._by_id: Dict[str, MythRecord] = {}

    def load(self) -> MythDatabase:
        """
        Reads the database JSON

        Raises:
            FileNotFoundError: If the pipeline has not been run yet
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Database not found: {self.path}")

        data = json.loads(self.path.read_text(encoding="utf-8"))
        self._database = MythDatabase.model_validate(data)
        # Later records win on id collisions, as in the browser
        self._by_id = {myth.id: myth for myth in self._database.myths}
        return self._database

    def get(self) -> MythDatabase:
        if self._database is None:
            return self.load()
        return self._database

    def find(self, myth_id: str) -> Optional[MythRecord]:
        self.get()
        return self._by_id.get(myth_id)

    def invalidate(self):
        self._database = None
        self._by_id = {}


store = MythStore(config.OUTPUT_PATH)
