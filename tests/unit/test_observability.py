"""
Unit tests for the shared Powertools instances.
"""

from aws_lambda_powertools.metrics import MetricUnit

from coffee_shop.handlers.utils.observability import metrics


class TestMetrics:
    """Test cases for the shared metrics instance."""

    def test_namespace_read_from_environment(self):
        metrics.add_metric(name="OrderCreated", unit=MetricUnit.Count, value=1)
        try:
            blob = metrics.serialize_metric_set()
        finally:
            metrics.clear_metrics()

        assert blob["_aws"]["CloudWatchMetrics"][0]["Namespace"] == "TestCoffeeShop"
