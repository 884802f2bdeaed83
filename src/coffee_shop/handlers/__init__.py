"""
AWS Lambda Handlers Module.

One independent handler per order operation. Each is the handler layer of a
three-layer stack:

1. Handler Layer (this package): request parsing, response envelope, error mapping
2. Logic Layer: one function per operation
3. Data Access Layer: DynamoDB table access

The handlers use AWS Lambda Powertools for structured logging with
correlation IDs, X-Ray tracing and custom metrics.
"""

__version__ = "1.0.0"
