"""
Caption Set Module

Owns the ordered captions of one editing session. Every mutation goes through
add/update/remove, which normalize and validate the translation on the spot,
so a caption's validation report always matches its current text.

The set is a plain in-memory structure meant to be driven from a single
thread (the editor's event loop).
"""
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from loguru import logger

from ..proofreading import PersianTextNormalizer, PersianTextValidator, ValidationReport
from .models import (
    Caption,
    CaptionDraft,
    CaptionNotFoundError,
    DuplicateCaptionError,
    InvalidRangeError,
)

ChangeCallback = Callable[[List[Dict[str, Any]]], None]

EDITABLE_FIELDS = (
    "start_time",
    "end_time",
    "source_text",
    "target_text",
    "speaker_label",
    "notes",
)


def _check_range(start_time: float, end_time: float) -> None:
    if start_time < 0 or start_time >= end_time:
        raise InvalidRangeError(start_time, end_time)


class CaptionSet:
    """
    Time-ordered captions with unique ids.

    Captions are sorted by start time; captions that start at the same time
    keep the order in which they were added. Overlapping ranges are allowed
    but logged and reported by find_overlaps().

    Usage:
        captions = CaptionSet(on_change=store.save)
        caption = captions.add(CaptionDraft(start_time=1.0, end_time=3.5, target_text="سلام"))
        captions.update(caption.id, end_time=4.0)
        active = captions.active_at(2.0)
    """

    def __init__(
        self,
        on_change: Optional[ChangeCallback] = None,
        normalizer: Optional[PersianTextNormalizer] = None,
        validator: Optional[PersianTextValidator] = None,
        id_factory: Optional[Callable[[], str]] = None
    ):
        """
        Initialize caption set.

        Args:
            on_change: Save callback, called with the ordered records after each mutation
            normalizer: Text normalizer for translations
            validator: Validator producing each caption's report
            id_factory: Id generator (uuid4 hex by default)
        """
        self.on_change = on_change
        self.normalizer = normalizer or PersianTextNormalizer()
        self.validator = validator or PersianTextValidator(normalizer=self.normalizer)
        self._id_factory = id_factory or (lambda: uuid.uuid4().hex)

        self._captions: List[Caption] = []
        self._index: Dict[str, Caption] = {}
        self._sequence: Dict[str, int] = {}  # insertion order, breaks start time ties
        self._next_sequence = 0

    # ==================== Queries ====================

    def all(self) -> Tuple[Caption, ...]:
        """All captions in start time order (immutable snapshots)"""
        return tuple(self._captions)

    def get(self, caption_id: str) -> Optional[Caption]:
        return self._index.get(caption_id)

    def active_at(self, time: float) -> Optional[Caption]:
        """
        Find the caption shown at a playback time.

        Ranges are inclusive on both ends. When ranges overlap, the
        earliest caption in sorted order wins.

        Args:
            time: Playback time in seconds

        Returns:
            The active caption, or None
        """
        for caption in self._captions:
            if caption.start_time > time:
                break
            if caption.contains(time):
                return caption
        return None

    def find_overlaps(self) -> List[Tuple[Caption, Caption]]:
        """List every pair of captions whose time ranges overlap"""
        overlaps = []
        for i, current in enumerate(self._captions):
            for other in self._captions[i + 1:]:
                if other.start_time >= current.end_time:
                    break
                if current.overlaps_with(other):
                    overlaps.append((current, other))
        return overlaps

    def __len__(self) -> int:
        return len(self._captions)

    def __iter__(self) -> Iterator[Caption]:
        return iter(tuple(self._captions))

    def __contains__(self, caption_id: object) -> bool:
        return caption_id in self._index

    # ==================== Mutations ====================

    def add(self, draft: CaptionDraft) -> Caption:
        """
        Add a caption.

        Args:
            draft: Caption fields from the editor

        Returns:
            The created caption

        Raises:
            InvalidRangeError: start time negative or not before end time
        """
        _check_range(draft.start_time, draft.end_time)

        caption_id = self._id_factory()
        if caption_id in self._index:
            raise DuplicateCaptionError(caption_id)

        target_text = self.normalizer.normalize(draft.target_text)
        caption = Caption(
            id=caption_id,
            start_time=float(draft.start_time),
            end_time=float(draft.end_time),
            source_text=draft.source_text,
            target_text=target_text,
            speaker_label=draft.speaker_label,
            notes=draft.notes,
            validation=self._validate(target_text),
        )

        self._insert(caption)
        logger.debug(f"Added caption {caption.id} [{caption.start_time:.3f}-{caption.end_time:.3f}]")
        self._warn_overlaps(caption)
        self._notify()
        return caption

    def update(self, caption_id: str, **changes: Any) -> Caption:
        """
        Update fields of a caption.

        Only the given fields change. A new target_text is normalized and
        re-validated; new times are range-checked and the set re-sorted.
        Captions are immutable, so the set holds a new instance afterwards
        and earlier references keep the old values.

        Args:
            caption_id: Caption to change
            **changes: Any of start_time, end_time, source_text, target_text,
                speaker_label, notes

        Returns:
            The updated caption

        Raises:
            CaptionNotFoundError: unknown id
            InvalidRangeError: the patched range is invalid (nothing is changed)
            ValueError: a field that cannot be edited was given
        """
        current = self._index.get(caption_id)
        if current is None:
            raise CaptionNotFoundError(caption_id)

        unknown = [name for name in changes if name not in EDITABLE_FIELDS]
        if unknown:
            raise ValueError(f"Fields cannot be edited: {', '.join(sorted(unknown))}")

        fields = dict(changes)
        fields["start_time"] = float(changes.get("start_time", current.start_time))
        fields["end_time"] = float(changes.get("end_time", current.end_time))
        _check_range(fields["start_time"], fields["end_time"])

        if "target_text" in changes:
            fields["target_text"] = self.normalizer.normalize(changes["target_text"])
            fields["validation"] = self._validate(fields["target_text"])

        caption = replace(current, last_modified=datetime.now(), **fields)
        retimed = caption.start_time != current.start_time or caption.end_time != current.end_time

        self._index[caption_id] = caption
        self._captions[self._captions.index(current)] = caption

        if retimed:
            self._sort()
            self._warn_overlaps(caption)

        logger.debug(f"Updated caption {caption_id}: {', '.join(sorted(changes)) or 'no fields'}")
        self._notify()
        return caption

    def remove(self, caption_id: str) -> Optional[Caption]:
        """
        Remove a caption. Unknown ids are ignored.

        Returns:
            The removed caption, or None if it was not in the set
        """
        caption = self._index.pop(caption_id, None)
        if caption is None:
            return None

        self._captions.remove(caption)
        self._sequence.pop(caption_id, None)
        logger.debug(f"Removed caption {caption_id}")
        self._notify()
        return caption

    # ==================== Persistence ====================

    def to_records(self) -> List[Dict[str, Any]]:
        """Ordered plain records for the persistence collaborator"""
        return [caption.to_dict() for caption in self._captions]

    @classmethod
    def from_records(
        cls,
        records: Iterable[Dict[str, Any]],
        on_change: Optional[ChangeCallback] = None,
        **kwargs: Any
    ) -> "CaptionSet":
        """
        Rebuild a caption set from stored records.

        Ids and timestamps are kept; translations are normalized and
        validation is recomputed. The save callback is attached after
        loading, so loading does not trigger a save.

        Raises:
            InvalidRangeError: a record has an invalid range
            DuplicateCaptionError: two records share an id
        """
        caption_set = cls(**kwargs)

        for record in records:
            caption = Caption.from_dict(record)
            _check_range(caption.start_time, caption.end_time)
            if caption.id in caption_set._index:
                raise DuplicateCaptionError(caption.id)

            target_text = caption_set.normalizer.normalize(caption.target_text)
            caption_set._insert(replace(
                caption,
                target_text=target_text,
                validation=caption_set._validate(target_text),
            ))

        caption_set.on_change = on_change
        logger.info(f"Loaded {len(caption_set)} captions")
        return caption_set

    # ==================== Internals ====================

    def _validate(self, target_text: str) -> Optional[ValidationReport]:
        if not target_text:
            return None
        return self.validator.validate(target_text)

    def _insert(self, caption: Caption) -> None:
        self._index[caption.id] = caption
        self._sequence[caption.id] = self._next_sequence
        self._next_sequence += 1
        self._captions.append(caption)
        self._sort()

    def _sort(self) -> None:
        self._captions.sort(key=lambda c: (c.start_time, self._sequence[c.id]))

    def _warn_overlaps(self, caption: Caption) -> None:
        for other in self._captions:
            if other is not caption and caption.overlaps_with(other):
                logger.warning(
                    f"Caption {caption.id} overlaps caption {other.id} "
                    f"({caption.start_time:.3f}-{caption.end_time:.3f} / "
                    f"{other.start_time:.3f}-{other.end_time:.3f})"
                )

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.to_records())
