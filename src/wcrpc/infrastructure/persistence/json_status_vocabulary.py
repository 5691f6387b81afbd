"""JSON-file-backed implementation of StatusVocabulary.

The file is re-read on every call so edits take effect without a restart.
"""

from __future__ import annotations

import json
from pathlib import Path

from wcrpc.domain.repository.status_vocabulary import StatusVocabulary

DEFAULT_STATUSES = [
    "pending",
    "failed",
    "on-hold",
    "processing",
    "completed",
    "refunded",
    "cancelled",
]


class JsonStatusVocabulary(StatusVocabulary):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def list_valid_statuses(self) -> set[str]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {str(status) for status in raw}

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(DEFAULT_STATUSES, indent=2) + "\n", encoding="utf-8"
            )
