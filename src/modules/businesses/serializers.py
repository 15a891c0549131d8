from __future__ import annotations

from rest_framework import serializers


class BusinessDetailsSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=True)
    state_id_number = serializers.CharField(allow_blank=True)
    email = serializers.CharField(allow_blank=True)
    phone_number = serializers.CharField(allow_blank=True)
    street_address = serializers.CharField(allow_blank=True)
    city = serializers.CharField(allow_blank=True)
