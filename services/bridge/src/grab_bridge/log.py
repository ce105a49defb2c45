"""Structured one-line JSON logging."""
import json
import logging

logger = logging.getLogger("grab_bridge")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format="%(message)s")
    logger.setLevel(getattr(logging, level, logging.INFO))


def log_event(msg: str, level: int = logging.INFO, **extra) -> None:
    entry = {"msg": msg}
    entry.update(extra)
    logger.log(level, json.dumps(entry, default=str))
