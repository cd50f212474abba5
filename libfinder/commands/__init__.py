from .cache import cache
from .detect import detect
from .list_packages import list_packages
from .log import log
from .version import version

__all__ = ["cache", "detect", "list_packages", "log", "version"]
