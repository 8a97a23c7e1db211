"""
Shared Powertools instances for the web shop.

Handlers, services and the DAL all log, trace and emit metrics through the
objects defined here. Service name, log level and metrics namespace come from
the modeled environment (see ``web_shop.handlers.models.env_vars``).
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

from web_shop.handlers.models.env_vars import get_handler_env_vars

_env_vars = get_handler_env_vars()

# Structured JSON logs, one line per event
logger: Logger = Logger(service=_env_vars.POWERTOOLS_SERVICE_NAME, level=_env_vars.LOG_LEVEL)

# Disabled by setting POWERTOOLS_TRACE_DISABLED to "true"
tracer: Tracer = Tracer(service=_env_vars.POWERTOOLS_SERVICE_NAME)

metrics: Metrics = Metrics(namespace=_env_vars.POWERTOOLS_METRICS_NAMESPACE, service=_env_vars.POWERTOOLS_SERVICE_NAME)
