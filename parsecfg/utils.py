import logging

logger: logging.Logger = logging.getLogger("parsecfg")
logger.addHandler(logging.StreamHandler())
# Quiet unless a caller lowers the level.
logger.setLevel(logging.CRITICAL)
