import os
import logging
import json

# LogRecord attributes that are not user-supplied extra fields
_RECORD_ATTRIBUTES = {
    'args', 'asctime', 'created', 'exc_info', 'exc_text', 'filename',
    'funcName', 'id', 'levelname', 'levelno', 'lineno', 'module',
    'msecs', 'message', 'msg', 'name', 'pathname', 'process',
    'processName', 'relativeCreated', 'stack_info', 'taskName', 'thread', 'threadName'
}


def setup_logging(level=None, json_output=None):
    """
    Set up logging, switching to JSON lines when running inside AWS.

    Args:
        level: Optional log level override (default: LOG_LEVEL env var or INFO)
        json_output: Force JSON formatting on or off (default: on when AWS_EXECUTION_ENV is set)
    """
    if level is None:
        level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)

    if json_output is None:
        json_output = os.environ.get('AWS_EXECUTION_ENV') is not None

    logging.basicConfig(
        format='%(asctime)s [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # The Lambda runtime installs its own root handler, so basicConfig alone
    # does not set the level there
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    if json_output:
        for handler in root_logger.handlers:
            handler.setFormatter(JsonFormatter())

    # Silence noisy loggers
    logging.getLogger('boto3').setLevel(logging.WARNING)
    logging.getLogger('botocore').setLevel(logging.WARNING)
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('redis').setLevel(logging.WARNING)

    logging.debug("Logging initialized")


class JsonFormatter(logging.Formatter):
    """
    Format logs as JSON for CloudWatch Logs Insights.
    """

    def format(self, record):
        log_record = {
            'timestamp': self.formatTime(record, self.datefmt),
            'level': record.levelname,
            'name': record.name,
            'message': record.getMessage(),
            'file': record.pathname,
            'line': record.lineno,
            'function': record.funcName
        }

        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)

        # Fields passed through `extra=`
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_record[key] = value

        return json.dumps(log_record, default=str)
