# io/resolver_logging.py
import json
import logging
import sys

from routable.app.hooks import NoopHooks


def _default_json_logger(name="routable", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class ResolverLogging(NoopHooks):
    """
    Structured logs for the resolver. Rejections and dropped overrides are
    caller data problems, so they log at WARNING; successes only under debug.
    """

    def __init__(
        self,
        name: str = "routable",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.name, self.debug = name, debug
        self.log = logger or _default_json_logger(name=name, level=level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"resolver": self.name, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    def rejected(self, *, reason: str, **kw):
        self._emit("WARNING", "resolve_rejected", reason=reason, **kw)

    def override_dropped(self, *, index: int, reason: str):
        self._emit("WARNING", "override_dropped", index=index, reason=reason)

    def resolved(self, *, branch: str, points: int | None):
        if self.debug:
            self._emit("DEBUG", "resolved", branch=branch, points=points)
