"""
Log formatters.

``JsonFormatter`` emits one JSON object per record so logs can be shipped to
an aggregator without parsing.
"""

import json
import logging
from datetime import datetime
from typing import Any, Dict, Mapping, Optional


class JsonFormatter(logging.Formatter):
    """
    Format log records as JSON lines.

    Every line carries the timestamp, level, logger name and message. Fields
    given as ``static_fields`` (e.g. the application name) are added to every
    line, and the formatted traceback is added when the record has one.
    """

    def __init__(self, static_fields: Optional[Mapping[str, Any]] = None):
        super().__init__()
        self.static_fields = dict(static_fields or {})

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = dict(self.static_fields)
        log_data.update(
            timestamp=datetime.fromtimestamp(record.created).isoformat(),
            level=record.levelname,
            logger=record.name,
            message=record.getMessage(),
        )
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)
