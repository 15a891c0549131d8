"""Customer DRF serializers.

Only request parsing happens here; field rules run in the service so every
failure uses the shared error shape.
"""

from __future__ import annotations

from rest_framework import serializers


class CustomerPayloadSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=True)
    phone_number = serializers.CharField(allow_blank=True)
    email = serializers.CharField(allow_blank=True)
    street_address = serializers.CharField(allow_blank=True)
    city = serializers.CharField(allow_blank=True)
    state_id = serializers.CharField(allow_blank=True)
