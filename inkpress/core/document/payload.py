"""
Export payloads stored as JSON.

A payload is what the viewer hands to the exporter:

    {"highlights": [<record wire dicts>], "options": {<camelCase options>}}

Loading turns it into records plus an ExportConfiguration ready for
export_annotated; saving writes the same shape back.
"""
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from inkpress.core.annotations import AnnotationRecord
from inkpress.core.errors import PayloadError
from inkpress.core.style import ExportConfiguration

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ExportPayload:
    records: Tuple[AnnotationRecord, ...] = ()
    config: ExportConfiguration = field(default_factory=ExportConfiguration)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'highlights': [record.to_dict() for record in self.records],
            'options': self.config.to_dict(),
        }

    @staticmethod
    def from_dict(data: Any) -> "ExportPayload":
        """
        Parse a payload mapping.

        Raises:
            PayloadError: The mapping or one of its highlights is malformed
        """
        if not isinstance(data, dict):
            raise PayloadError(f"Payload must be an object, got {type(data).__name__}")

        highlights = data.get('highlights') or []
        options = data.get('options') or {}
        if not isinstance(highlights, list):
            raise PayloadError("'highlights' must be a list")
        if not isinstance(options, dict):
            raise PayloadError("'options' must be an object")

        records = []
        for index, item in enumerate(highlights):
            if not isinstance(item, dict):
                raise PayloadError(f"Highlight {index} must be an object")
            try:
                records.append(AnnotationRecord.from_dict(item))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                raise PayloadError(f"Highlight {index} is malformed: {e!r}") from e

        # A stored callback cannot be called
        options = {key: value for key, value in options.items() if key != 'onProgress'}
        return ExportPayload(tuple(records), ExportConfiguration.from_dict(options))


def load_payload(path: PathLike) -> ExportPayload:
    """
    Load an export payload from a JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        The parsed payload

    Raises:
        PayloadError: The file cannot be read, is not JSON or has the wrong shape
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise PayloadError(f"Failed to read payload from {path}: {e}") from e

    payload = ExportPayload.from_dict(data)
    logger.debug("Loaded %d highlight(s) from %s", len(payload.records), path)
    return payload


def save_payload(payload: ExportPayload, path: PathLike) -> None:
    """
    Write an export payload to a JSON file, creating parent directories.

    Raises:
        PayloadError: The file cannot be written
    """
    try:
        data = payload.to_dict()
        directory = os.path.dirname(os.fspath(path))
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
    except (OSError, TypeError, ValueError) as e:
        raise PayloadError(f"Failed to save payload to {path}: {e}") from e

    logger.debug("Saved %d highlight(s) to %s", len(payload.records), path)
