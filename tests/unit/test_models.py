"""
Unit tests for Pydantic models.

This module tests the validation, serialization, and item conversion of the
models used throughout the service.
"""

import pytest
from pydantic import ValidationError

from coffee_shop.models.input import CreateOrderRequest, DeleteOrderRequest, UpdateOrderStatusRequest
from coffee_shop.models.order import Order, OrderStatus, order_key
from coffee_shop.models.output import ErrorOutput, OrderActionOutput


class TestOrder:
    """Test cases for the Order domain model."""

    def test_create_sets_pending_status(self):
        """Test that new orders start as Pending."""
        order = Order.create(customer_name="Jane Smith", coffee_blend="House Blend")

        assert order.order_status == "Pending"
        assert order.order_status == OrderStatus.PENDING.value
        assert order.customer_name == "Jane Smith"
        assert order.coffee_blend == "House Blend"
        assert order.order_id

    def test_create_generates_distinct_ids(self):
        """Test that identical inputs still get distinct order IDs."""
        first = Order.create(customer_name="Jane Smith", coffee_blend="House Blend")
        second = Order.create(customer_name="Jane Smith", coffee_blend="House Blend")

        assert first.order_id != second.order_id

    def test_to_item_uses_stored_attribute_names(self):
        """Test that items are written with the table's attribute names."""
        order = Order(
            order_id="order-1",
            customer_name="Jane Smith",
            coffee_blend="Espresso Roast",
            order_status="Brewing",
        )

        assert order.to_item() == {
            "OrderId": "order-1",
            "CustomerName": "Jane Smith",
            "CoffeeBlend": "Espresso Roast",
            "OrderStatus": "Brewing",
        }

    def test_key(self):
        """Test the composite key of an order."""
        order = Order.create(customer_name="Alice", coffee_blend="Mocha")

        assert order.key == {"OrderId": order.order_id, "CustomerName": "Alice"}
        assert order_key("x", "y") == {"OrderId": "x", "CustomerName": "y"}

    def test_status_values(self):
        """Test the known lifecycle states."""
        assert [status.value for status in OrderStatus] == ["Pending", "Brewing", "Ready", "Completed"]


class TestRequests:
    """Test cases for request models."""

    def test_create_request_valid(self):
        request = CreateOrderRequest(customer_name="Jane", coffee_blend="House Blend")

        assert request.customer_name == "Jane"
        assert request.coffee_blend == "House Blend"

    def test_create_request_missing_blend(self):
        """Test that a missing coffee blend is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            CreateOrderRequest.model_validate({"customer_name": "Jane"})

        assert exc_info.value.errors()[0]["loc"] == ("coffee_blend",)

    def test_create_request_rejects_non_string(self):
        with pytest.raises(ValidationError):
            CreateOrderRequest.model_validate({"customer_name": "Jane", "coffee_blend": None})

    def test_update_request_accepts_any_status(self):
        """Test that new_status is free-form text."""
        request = UpdateOrderStatusRequest(order_id="o-1", customer_name="Jane", new_status="Spilled on the floor")

        assert request.new_status == "Spilled on the floor"

    def test_update_request_requires_key_and_status(self):
        with pytest.raises(ValidationError) as exc_info:
            UpdateOrderStatusRequest.model_validate({"order_id": "o-1"})

        missing = {error["loc"][0] for error in exc_info.value.errors()}
        assert missing == {"customer_name", "new_status"}

    def test_delete_request(self):
        request = DeleteOrderRequest.model_validate({"order_id": "o-1", "customer_name": "Jane", "extra": 1})

        assert request.order_id == "o-1"
        assert request.customer_name == "Jane"


class TestOutputs:
    """Test cases for response models."""

    def test_action_output_serializes_order_id_alias(self):
        output = OrderActionOutput(message="Order created successfully!", order_id="o-1")

        assert output.model_dump(by_alias=True) == {
            "message": "Order created successfully!",
            "OrderId": "o-1",
        }

    def test_error_output(self):
        output = ErrorOutput(error="Could not delete order: boom", error_code="STORE_UNAVAILABLE")

        assert output.error_code == "STORE_UNAVAILABLE"
