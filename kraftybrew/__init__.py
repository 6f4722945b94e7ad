import logging

from kraftybrew.config import LOG_LEVEL

log = logging.getLogger("kraftybrew")
if not log.handlers:
    log.addHandler(logging.StreamHandler())
log.setLevel(LOG_LEVEL)
