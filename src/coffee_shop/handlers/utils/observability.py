"""
Shared Powertools instances for the coffee order handlers.

Every handler, logic function and DAL method logs, traces and counts through
the objects below so one invocation produces one correlated log stream, one
X-Ray trace and one EMF metrics blob.
"""

import os

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

# Level from LOG_LEVEL, service from POWERTOOLS_SERVICE_NAME
logger: Logger = Logger()

# Off outside Lambda or with POWERTOOLS_TRACE_DISABLED=true
tracer: Tracer = Tracer()

# POWERTOOLS_METRICS_NAMESPACE wins; CoffeeShop matches the env model default
metrics: Metrics = Metrics(namespace=os.getenv("POWERTOOLS_METRICS_NAMESPACE", "CoffeeShop"))
