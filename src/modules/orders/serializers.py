"""Order DRF serializers for API input.

They only parse the request shape; business rules run in the service and
responses are rendered from ``OrderOutputDTO``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.notifications import NotificationKind


class CreateOrderLinkSerializer(serializers.Serializer):
    customer_id = serializers.UUIDField(required=False, allow_null=True, default=None)
    notes = serializers.CharField(required=False, default="", allow_blank=True)


class PlaceOrderItemSerializer(serializers.Serializer):
    product_id = serializers.CharField(max_length=64)
    product_name = serializers.CharField(allow_blank=True)
    quantity = serializers.IntegerField(min_value=1)
    unit_price = serializers.DecimalField(max_digits=10, decimal_places=2)


class PlaceOrderSerializer(serializers.Serializer):
    customer_name = serializers.CharField(allow_blank=True)
    customer_phone = serializers.CharField(allow_blank=True)
    customer_email = serializers.CharField(allow_blank=True)
    customer_street_address = serializers.CharField(allow_blank=True)
    customer_city = serializers.CharField(allow_blank=True)
    items = PlaceOrderItemSerializer(many=True, required=False, default=list)
    delivery_date = serializers.DateField(required=False, allow_null=True, default=None)
    notes = serializers.CharField(required=False, default="", allow_blank=True)


class NotifyOrderSerializer(serializers.Serializer):
    kind = serializers.ChoiceField(choices=[kind.value for kind in NotificationKind])
