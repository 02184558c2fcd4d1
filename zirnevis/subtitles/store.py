"""
Caption Store

JSON file persistence for caption sets. One file per project, holding the
ordered caption records. save() has the on_change signature, so a store
can be handed to CaptionSet directly as its save callback.
"""
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger

from ..config import settings
from .caption_set import CaptionSet
from .models import CaptionError


class CaptionStore:
    """
    Reads and writes one project's captions.

    Usage:
        store = CaptionStore.for_project("episode-01")
        captions = store.load()          # saves itself on every change
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    @classmethod
    def for_project(cls, project_id: str, base_dir: Optional[Path] = None) -> "CaptionStore":
        """Store under the configured projects directory"""
        base_dir = Path(base_dir) if base_dir else settings.PROJECTS_DIR
        return cls(base_dir / f"{project_id}.captions.json")

    def load(self, **kwargs: Any) -> CaptionSet:
        """
        Load the caption set; a missing file gives an empty set.

        The returned set saves back to this store on every change.

        Raises:
            CaptionError: the file exists but cannot be read
        """
        if not self.path.exists():
            logger.info(f"No captions stored at {self.path}, starting empty")
            return CaptionSet(on_change=self.save, **kwargs)

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                records = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load captions from {self.path}: {e}")
            raise CaptionError(f"Cannot read caption file {self.path}: {e}") from e

        if not isinstance(records, list):
            raise CaptionError(f"Caption file {self.path} does not hold a list of records")

        return CaptionSet.from_records(records, on_change=self.save, **kwargs)

    def save(self, records: List[Dict[str, Any]]) -> None:
        """Write the ordered caption records"""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")

        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(records, f, ensure_ascii=False, indent=2)
        tmp_path.replace(self.path)

        logger.info(f"Saved {len(records)} captions to {self.path}")
