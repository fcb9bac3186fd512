"""
Habits Repository - Persistence layer for habits and the user profile
State is stored as one serialized JSON blob per well-known key
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional
import logging
import os

from pydantic import TypeAdapter, ValidationError

from habit_tracker.core.constants import HABITS_STORAGE_KEY, PROFILE_STORAGE_KEY
from habit_tracker.core.exceptions import StorageError
from habit_tracker.models.habit import Habit
from habit_tracker.models.profile import UserProfile

logger = logging.getLogger(__name__)

_habit_list_adapter = TypeAdapter(List[Habit])


class HabitRepository(ABC):
    """Load/save contract for the habit collection and the profile"""

    @abstractmethod
    def load_habits(self) -> List[Habit]:
        """Return the persisted habits, [] if nothing was saved yet"""

    @abstractmethod
    def save_habits(self, habits: List[Habit]) -> None:
        """Persist the full habit collection"""

    @abstractmethod
    def load_profile(self) -> Optional[UserProfile]:
        """Return the persisted profile, None if nothing was saved yet"""

    @abstractmethod
    def save_profile(self, profile: UserProfile) -> None:
        """Persist the profile"""


class KeyValueRepository(HabitRepository):
    """
    Repository over a key-value blob store

    Subclasses provide raw blob access; this class owns the JSON format.
    """

    @abstractmethod
    def _read_blob(self, key: str) -> Optional[str]:
        """Return the blob stored under key, None if absent"""

    @abstractmethod
    def _write_blob(self, key: str, blob: str) -> None:
        """Store blob under key"""

    # ========================================================================
    # HABITS
    # ========================================================================

    def load_habits(self) -> List[Habit]:
        """
        Load all habits

        Returns:
            List of habits in saved order

        Raises:
            StorageError: If the blob cannot be read or decoded
        """
        blob = self._read_blob(HABITS_STORAGE_KEY)
        if blob is None:
            return []
        try:
            return _habit_list_adapter.validate_json(blob)
        except ValidationError as e:
            logger.error(f"Corrupt habits blob: {e}")
            raise StorageError(f"Failed to decode habits: {e}")

    def save_habits(self, habits: List[Habit]) -> None:
        """
        Save the full habit collection

        Args:
            habits: Every habit, in display order

        Raises:
            StorageError: If the blob cannot be written
        """
        blob = _habit_list_adapter.dump_json(habits, by_alias=True).decode("utf-8")
        self._write_blob(HABITS_STORAGE_KEY, blob)

    # ========================================================================
    # USER PROFILE
    # ========================================================================

    def load_profile(self) -> Optional[UserProfile]:
        """
        Load the user profile

        Returns:
            UserProfile or None if none was saved

        Raises:
            StorageError: If the blob cannot be read or decoded
        """
        blob = self._read_blob(PROFILE_STORAGE_KEY)
        if blob is None:
            return None
        try:
            return UserProfile.model_validate_json(blob)
        except ValidationError as e:
            logger.error(f"Corrupt profile blob: {e}")
            raise StorageError(f"Failed to decode profile: {e}")

    def save_profile(self, profile: UserProfile) -> None:
        """
        Save the user profile

        Raises:
            StorageError: If the blob cannot be written
        """
        self._write_blob(PROFILE_STORAGE_KEY, profile.model_dump_json(by_alias=True))


class JsonFileRepository(KeyValueRepository):
    """Stores each key as <data_dir>/<key>.json"""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def _path_for(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def _read_blob(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {path}: {e}")
            raise StorageError(f"Failed to read {key}: {e}")

    def _write_blob(self, key: str, blob: str) -> None:
        path = self._path_for(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(blob, encoding="utf-8")
            # Atomic swap so a crash never leaves a half-written blob
            os.replace(tmp_path, path)
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            raise StorageError(f"Failed to write {key}: {e}")


class InMemoryRepository(KeyValueRepository):
    """Keeps serialized blobs in a dict; used for tests and ephemeral sessions"""

    def __init__(self, blobs: Optional[Dict[str, str]] = None):
        self.blobs: Dict[str, str] = dict(blobs or {})

    def _read_blob(self, key: str) -> Optional[str]:
        return self.blobs.get(key)

    def _write_blob(self, key: str, blob: str) -> None:
        self.blobs[key] = blob
