# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

import os
import sys
import logging
import weakref
import itertools

from collections.abc import Callable, Sequence
from contextlib import AbstractContextManager
# This module is imported by everything and thus must not import GLib or Wnck.

LOG_PREFIX: str = os.environ.get("NOTITLEBAR_LOG_PREFIX", "")
LOG_FORMAT: str = os.environ.get("NOTITLEBAR_LOG_FORMAT", "%(asctime)s %(message)s")
DEBUG_MODULES: Sequence[str] = tuple(
    x.strip() for x in os.environ.get("NOTITLEBAR_DEBUG_MODULES", "").split(",") if x.strip()
)


logging.basicConfig(format=LOG_FORMAT)
logging.root.setLevel(logging.INFO)

debug_enabled_categories: set[str] = set()
debug_disabled_categories: set[str] = set()


def add_debug_category(*cat: str) -> None:
    remove_disabled_category(*cat)
    for c in cat:
        debug_enabled_categories.add(ALIASES.get(c, c))


def remove_debug_category(*cat: str) -> None:
    for c in cat:
        c = ALIASES.get(c, c)
        if c in debug_enabled_categories:
            debug_enabled_categories.remove(c)


def is_debug_enabled(cat: str) -> bool:
    if "all" in debug_enabled_categories:
        return True
    if cat in debug_enabled_categories:
        return True
    return isenvdebug(cat) or isenvdebug("ALL")


def add_disabled_category(*cat: str) -> None:
    remove_debug_category(*cat)
    for c in cat:
        debug_disabled_categories.add(ALIASES.get(c, c))


def remove_disabled_category(*cat: str) -> None:
    for c in cat:
        c = ALIASES.get(c, c)
        if c in debug_disabled_categories:
            debug_disabled_categories.remove(c)


default_level: int = logging.DEBUG


def standard_logging(log, level: int, msg: str, *args, **kwargs) -> None:
    # this function just delegates to the regular python stdlib logging `log`:
    log(level, msg, *args, **kwargs)


# this allows us to capture all logging and redirect it,
# the tests inject their own handler here
global_logging_handler: Callable = standard_logging


def set_global_logging_handler(h: Callable) -> Callable:
    assert callable(h)
    global global_logging_handler
    saved = global_logging_handler
    global_logging_handler = h
    return saved


def parse_debug_categories(value: str) -> tuple[list[str], list[str]]:
    """
    Parses a comma separated list of logging categories,
    categories prefixed with "-" are disabled rather than enabled.
    """
    enabled: list[str] = []
    disabled: list[str] = []
    for x in value.split(","):
        x = x.strip()
        if not x:
            continue
        if x.startswith("-"):
            disabled.append(x[1:])
        else:
            enabled.append(x)
    return enabled, disabled


# makes it easier to rename logging categories
ALIASES: dict[str, str] = {
    "event": "events",
    "decoration": "decorations",
    "hints": "decorations",
    "glib": "gtk",
    "display": "screen",
}

# noinspection PyPep8
STRUCT_KNOWN_FILTERS: dict[str, dict[str, str]] = {
    "General": {
        "decorations"   : "Title bar hiding and restoring",
        "events"        : "Window manager events and debouncing",
        "screen"        : "Screen and window enumeration",
        "wnck"          : "libwnck window host",
        "gtk"           : "GLib main loop and signal handling",
        "util"          : "All utility functions",
    },
    "X11": {
        "x11"           : "All X11 code",
        "window"        : "Window identity and types",
        "exec"          : "Executing the xprop command",
    },
    "Misc": {
        "test"          : "Test code",
        "verbose"       : "Very verbose flag",
    },
}

# flatten it:
KNOWN_FILTERS: list[str] = []           # ie: ["decorations", "x11", ...]
for d in STRUCT_KNOWN_FILTERS.values():
    KNOWN_FILTERS += list(d.keys())


def isenvdebug(category: str) -> bool:
    return os.environ.get("NOTITLEBAR_%s_DEBUG" % category.upper().replace("-", "_").replace("+", "_"), "0") == "1"


class Logger:
    """
    A wrapper around 'logging' with some convenience stuff.  In particular:
    * You initialize it with a list of categories
        If unset, the default logging target is set to the name of the module where
        Logger() was called.
    * Any of the categories can enable debug logging if the environment
    variable 'NOTITLEBAR_${CATEGORY}_DEBUG' is set to "1"
    * We also keep a list of debug_categories, so these can get enabled
        programmatically too
    * We keep track of which loggers are associated with each category,
        so we can enable/disable debug logging by category
    * You can pass exc_info=True to any method, and sys.exc_info() will be
        substituted.
    * __call__ is an alias for debug
    * we bypass the logging system unless debugging is enabled for the logger,
        which is much faster than relying on the python logging code
    """
    __slots__ = ("categories", "level", "min_level", "_logger", "debug_enabled", "__weakref__", "debug")

    def __init__(self, *categories: str):
        self.debug = self.__call__
        self.min_level = 0
        self.categories = list(ALIASES.get(category, category) for category in categories)
        n = 1
        caller = ""
        while n < 10:
            try:
                # noinspection PyProtectedMember
                caller = sys._getframe(n).f_globals["__name__"]  # pylint: disable=protected-access
                if caller == "__main__" or caller.startswith("importlib"):
                    n += 1
                else:
                    break
            except (AttributeError, ValueError):
                break
        if caller and caller != "__main__" and not caller.startswith("importlib"):
            self.categories.insert(0, caller)
        self.level = logging.INFO
        self._logger = logging.getLogger(".".join(self.categories))
        self.setLevel(default_level)
        disabled = False
        enabled = False
        if caller in DEBUG_MODULES:
            enabled = True
        else:
            for cat in self.categories:
                if cat in debug_disabled_categories:
                    disabled = True
                if is_debug_enabled(cat):
                    enabled = True
            if len(categories) > 1:
                # try all string permutations of those categories:
                # "x11", "exec" -> "x11+exec" or "exec+x11"
                for cats in itertools.permutations(categories):
                    cstr = "+".join(cats)
                    if cstr in debug_disabled_categories:
                        disabled = True
                    if is_debug_enabled(cstr):
                        enabled = True
        self.debug_enabled = enabled and not disabled
        # ready, keep track of it:
        add_logger(self.categories, self)
        for x in categories:
            if ALIASES.get(x, x) not in KNOWN_FILTERS:
                self.warn("unknown logging category: %s", x)
        if self.debug_enabled:
            self.debug(f"debug enabled for {self.categories}")

    def __repr__(self):
        return f"Logger{self.categories}"

    def getEffectiveLevel(self) -> int:
        return self._logger.getEffectiveLevel()

    def setLevel(self, level: int) -> None:
        self.level = level
        self._logger.setLevel(level)

    def is_debug_enabled(self) -> bool:
        return self.debug_enabled

    def enable_debug(self) -> None:
        self.debug_enabled = True

    def disable_debug(self) -> None:
        self.debug_enabled = False

    def log(self, level: int, msg: str, *args, **kwargs) -> None:
        if level <= self.min_level:
            return
        exc_info = kwargs.get("exc_info", None)
        # noinspection PySimplifyBooleanCheck
        if exc_info is True:
            kwargs.pop("exc_info")
            ei = sys.exc_info()
            if ei != (None, None, None):
                kwargs["exc_info"] = ei
        if LOG_PREFIX:
            msg = LOG_PREFIX + msg
        global_logging_handler(self._logger.log, level, msg, *args, **kwargs)

    def __call__(self, msg: str, *args, **kwargs) -> None:
        if self.debug_enabled:
            self.log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self.log(logging.INFO, msg, *args, **kwargs)

    def warn(self, msg: str, *args, **kwargs) -> None:
        self.log(logging.WARN, msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self.log(logging.ERROR, msg, *args, **kwargs)

    def trap_error(self, message: str, *args) -> AbstractContextManager:
        return ErrorTrapper(self, message, args)


class ErrorTrapper(AbstractContextManager):
    def __init__(self, logger, message, args):
        self.logger = logger
        self.message = message
        self.args = args

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type:
            self.logger.error(self.message, *self.args, exc_info=(exc_type, exc_val, exc_tb))
            return True
        return False

    def __repr__(self):
        return "ErrorTrapper"


# we want to keep a reference to all the loggers in use,
# and we may have multiple loggers for the same key,
# but we don't want to prevent garbage collection so use a list of `weakref`s
all_loggers: dict[str, set['weakref.ReferenceType[Logger]']] = {}


def add_logger(categories: Sequence[str], logger: Logger) -> None:
    categories = list(categories)
    categories.append("all")
    ref_logger = weakref.ref(logger)
    for cat in categories:
        all_loggers.setdefault(cat, set()).add(ref_logger)


def get_all_loggers() -> set[Logger]:
    a = set()
    for loggers_set in all_loggers.values():
        for logger in tuple(loggers_set):
            # weakref:
            instance = logger()
            if instance:
                a.add(instance)
    return a


def get_loggers_for_categories(*categories: str) -> list[Logger]:
    if not categories or (len(categories) == 1 and categories[0] in ("none", "")):
        return []
    if "all" in categories:
        return list(get_all_loggers())
    cset = set(ALIASES.get(cat, cat) for cat in categories)
    matches = set()
    for logger in get_all_loggers():
        if set(logger.categories).issuperset(cset):
            matches.add(logger)
    return list(matches)


def enable_debug_for(*cat: str) -> list[Logger]:
    loggers: list[Logger] = []
    for logger in get_loggers_for_categories(*cat):
        if not logger.is_debug_enabled():
            logger.enable_debug()
            loggers.append(logger)
    return loggers


def disable_debug_for(*cat: str) -> list[Logger]:
    loggers: list[Logger] = []
    for logger in get_loggers_for_categories(*cat):
        if logger.is_debug_enabled():
            logger.disable_debug()
            loggers.append(logger)
    return loggers


class CaptureHandler(logging.Handler):
    def __init__(self):
        super().__init__(logging.DEBUG)
        self.records = []

    def handle(self, record) -> None:
        self.records.append(record)

    def emit(self, record) -> None:
        self.records.append(record)

    def createLock(self) -> None:
        self.lock = None
