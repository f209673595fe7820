# Role: One-slot-per-key persistence, the local equivalent of browser localStorage.
# JsonFileStore keeps every key in a single JSON object file and rewrites it atomically on each change.

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

import health_advisor.config as config


class KeyValueStore(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStore:
    def __init__(self, items: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStore:
    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path).expanduser() if path else config.storage_path()
        self._lock = threading.Lock()

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            items = self._read_all()
            items[key] = value
            self._write_all(items)

    def remove_item(self, key: str) -> None:
        with self._lock:
            items = self._read_all()
            if key not in items:
                return
            del items[key]
            if items:
                self._write_all(items)
            else:
                self.path.unlink(missing_ok=True)

    def _read_all(self) -> Dict[str, str]:
        # Key line: a missing or corrupt file reads as "nothing stored".
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return {}
        except OSError as e:
            if config.DEBUG:
                print(f"[STORAGE] could not read {self.path}: {e!r}")
            return {}

        try:
            # Key line: undecodable bytes and absurd nesting are "corrupt" too, not crashes.
            payload = json.loads(raw.decode("utf-8"))
        except (ValueError, RecursionError) as e:
            if config.DEBUG:
                print(f"[STORAGE] ignoring unreadable file {self.path}: {e!r}")
            return {}

        return payload if isinstance(payload, dict) else {}

    def _write_all(self, items: Dict[str, str]) -> None:
        # 1) Write to a temp file in the same directory
        # 2) os.replace() it over the target, so readers see either the old or the new blob
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(items, fh, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
