import logging

from hungarian_validators.data_models.constants import LOG_LEVEL

_FALLBACK_LEVEL = logging.WARNING


def prepare_logger(logger_name: str, level: str = LOG_LEVEL):
    logger = logging.getLogger(logger_name)
    # One handler per logger, even when several modules prepare the same name
    if not logger.handlers:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(_resolve_level(level))
    return logger


def _resolve_level(level: str) -> int:
    # Unknown names such as "VERBOSE" must not break the package import
    resolved = logging.getLevelName(str(level).strip().upper())
    if isinstance(resolved, int):
        return resolved
    return _FALLBACK_LEVEL
