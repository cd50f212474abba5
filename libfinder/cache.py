import os
import toml
from .cli_logger import logger

CACHE_FILE = "LibFinderCache.toml"


class CacheStore:
    """
    Option values and advanced (hidden) flags kept between detection runs.

    `values` maps an option name such as FOO_INCLUDE_DIR to its path;
    `advanced` maps the same names to True when the option is hidden.
    """

    def __init__(self, path=None):
        self.path = path
        self.values = {}
        self.advanced = {}

    @classmethod
    def load(cls, directory="."):
        store = cls(os.path.join(directory, CACHE_FILE))
        if not os.path.exists(store.path):
            return store
        try:
            with open(store.path, "r") as f:
                data = toml.load(f)
        except toml.TomlDecodeError as e:
            logger.error(f"Error decoding cache file at {store.path}: {e}")
            logger.info("Run 'libfinder cache clean' to discard it.")
            return store
        except IOError as e:
            logger.error(f"Error reading cache file at {store.path}: {e}")
            return store
        store.values = dict(data.get("values", {}))
        store.advanced = {k: bool(v) for k, v in data.get("advanced", {}).items()}
        return store

    def save(self):
        if not self.path:
            return False
        try:
            with open(self.path, "w") as f:
                toml.dump({"values": self.values, "advanced": self.advanced}, f)
            return True
        except IOError as e:
            logger.error(f"Error saving cache to {self.path}: {e}")
            logger.info("Please check file permissions and ensure the directory is writable.")
            return False

    def get_value(self, name):
        return self.values.get(name)

    def set_value(self, name, value):
        self.values[name] = value

    def unset(self, name):
        removed = name in self.values
        self.values.pop(name, None)
        self.advanced.pop(name, None)
        return removed

    def is_advanced(self, name):
        return self.advanced.get(name, False)

    def apply(self, directives):
        for directive in directives:
            self.advanced[directive.name] = not directive.visible

    def clean(self):
        self.values.clear()
        self.advanced.clear()
        if self.path and os.path.exists(self.path):
            os.remove(self.path)
            return True
        return False
