import logging
from logging import getLogger, DEBUG

TRACE = DEBUG - 5


def add_logging_level(level_name: str, level_num: int) -> None:
    """
    Register a new level with the logging module and a method of the same name (lowercase)
    on the logger class, e.g. TRACE and log.trace(...).
    """
    method_name = level_name.lower()

    def log_for_level(self, message, *args, **kwargs):
        if self.isEnabledFor(level_num):
            self._log(level_num, message, args, **kwargs)

    logging.addLevelName(level_num, level_name)
    setattr(logging, level_name, level_num)
    setattr(logging.getLoggerClass(), method_name, log_for_level)


# the hosting application might have registered the level already
if not hasattr(logging.getLoggerClass(), "trace"):
    add_logging_level("TRACE", TRACE)

log = getLogger("fixbytes")
