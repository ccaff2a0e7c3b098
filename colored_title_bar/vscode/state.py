from pathlib import Path

from .json_store import load_json_object, save_json_object


class WorkspaceState:
    """Key-value memento persisted as a JSON file."""

    def __init__(self, path):
        self.path = Path(path)
        self._data = None

    def _load(self):
        if self._data is None:
            self._data = load_json_object(self.path)
        return self._data

    def get(self, key, default=None):
        return self._load().get(key, default)

    def keys(self):
        return list(self._load().keys())

    def update(self, key, value):
        """Store value under key; None removes the key."""
        data = dict(self._load())
        if value is None:
            data.pop(key, None)
        else:
            data[key] = value

        if data:
            save_json_object(self.path, data)
        else:
            self.path.unlink(missing_ok=True)
        self._data = data
