"""
Logging setup for the Workforce API.

JSON lines in deployed environments (one object per record, tagged with the
service name and environment), plain text for local runs and tests.
"""

import logging
import sys
from typing import Any, Dict, Optional
from datetime import datetime, timezone
from pythonjsonlogger import jsonlogger

# Third-party loggers that drown out request logs at INFO
QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "alembic.runtime.migration": logging.WARNING,
    "uvicorn.access": logging.WARNING,
    "passlib": logging.ERROR,
}


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter stamping every record with the service and environment,
    so logs from several deployments can share one sink.
    """

    def __init__(self, *args, service: Optional[str] = None, environment: Optional[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service
        self.environment = environment

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace('+00:00', 'Z')
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        if self.service:
            log_record['service'] = self.service
        if self.environment:
            log_record['environment'] = self.environment

        # Source location only where someone will go looking for it
        if record.levelno >= logging.WARNING:
            log_record['location'] = f"{record.pathname}:{record.lineno} in {record.funcName}"


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = True,
    service: Optional[str] = None,
    environment: Optional[str] = None,
) -> None:
    """
    Install a single stdout handler on the root logger.

    Args:
        log_level: Root level name (DEBUG, INFO, WARNING, ...)
        json_logs: JSON lines when True, human-readable text otherwise
        service: Service name added to every JSON record
        environment: Deployment environment added to every JSON record
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        handler.setFormatter(CustomJsonFormatter(
            '%(timestamp)s %(level)s %(logger)s %(message)s',
            service=service,
            environment=environment,
        ))
    else:
        handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)-8s [%(name)s] %(message)s',
            datefmt='%H:%M:%S'
        ))

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root_logger.addHandler(handler)

    for name, level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)
