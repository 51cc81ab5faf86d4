# pressure_dashboard/client/state_store.py
import json, os, threading
from contextlib import suppress


class StateStore:
    """
    Namespaced key/value persistence for the client stores:
      - process-local dict by default
      - JSON files under ``STATE_DIR`` when ``persist_dir`` is given
        (or ``PRESSURE_STATE_DIR`` is set)
    """
    def __init__(self, namespace="pressure-dashboard", persist_dir=None):
        self.ns = namespace
        self._mem = {}
        self._lock = threading.Lock()
        self._dir = persist_dir or os.getenv("PRESSURE_STATE_DIR")
        if self._dir:
            os.makedirs(self._dir, exist_ok=True)

    def _key(self, name):
        return f"{self.ns}:{name}"

    def _path(self, key):
        return os.path.join(self._dir, key.replace(":", "_") + ".json")

    def get_json(self, name):
        key = self._key(name)
        if self._dir:
            with suppress(FileNotFoundError):
                with open(self._path(key), "r", encoding="utf-8") as f:
                    return json.load(f)
            return None

        with self._lock:
            return self._mem.get(key)

    def set_json(self, name, payload):
        key = self._key(name)
        if self._dir:
            path = self._path(key)
            tmp = path + ".tmp"
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False)
            os.replace(tmp, path)
            return

        with self._lock:
            self._mem[key] = payload
