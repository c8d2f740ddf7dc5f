import functools
import logging

from rpgcombat import config

logger = logging.getLogger(__name__)


def log_call(fn):
    @functools.wraps(fn)
    def __wrapped(*args, **kwargs):
        if config.DEFAULT_LOG_CALLS:
            logger.debug(f"Calling {fn.__name__} {args} {kwargs}")
        return fn(*args, **kwargs)
    return __wrapped
