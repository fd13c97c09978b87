"""
로깅 설정. 앱 시작 시 한 번 호출된다.
Logging setup, called once on application startup.
"""

from datetime import datetime, timezone
import json
import logging


# setup_logging 이 붙인 핸들러 표시 / Marks handlers installed by setup_logging
_HANDLER_MARKER = "_safediv_handler"

class JSONFormatter(logging.Formatter):
    """로그 레코드를 한 줄 JSON 으로 출력한다.
    Format log records as single-line JSON.
    """

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """
    루트 로거에 핸들러를 붙이고 레벨을 설정한다.
    이전 호출에서 붙인 핸들러는 교체하므로 여러 번 호출해도 로그가 중복되지 않는다.

    Attach a stream handler to the root logger and set its level.
    A handler installed by an earlier call is replaced, so repeated
    startups do not duplicate log lines.
    """
    for existing in list(logging.root.handlers):
        if getattr(existing, _HANDLER_MARKER, False):
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    setattr(handler, _HANDLER_MARKER, True)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
