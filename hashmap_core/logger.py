import logging, json, sys, time, os


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record; the message text is escaped by json.dumps."""

    converter = time.gmtime  # UTC

    def __init__(self):
        super().__init__(datefmt="%Y-%m-%dT%H:%M:%SZ")

    def format(self, record):
        entry = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def get_logger(name="hashmap", level=logging.INFO, to_file=None):
    """Structured JSON-lines logger shared by all hashmap_core modules."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    formatter = JsonLineFormatter()

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if to_file:
        path = os.path.abspath(to_file)
        attached = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == path
            for h in logger.handlers
        )
        if not attached:
            os.makedirs(os.path.dirname(path), exist_ok=True)
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
