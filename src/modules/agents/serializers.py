"""Agent DRF serializers (request parsing only)."""

from __future__ import annotations

from rest_framework import serializers


class AgentDetailsSerializer(serializers.Serializer):
    first_name = serializers.CharField(allow_blank=True)
    last_name = serializers.CharField(allow_blank=True)
    phone_number = serializers.CharField(allow_blank=True)
    street_address = serializers.CharField(allow_blank=True)
    city = serializers.CharField(allow_blank=True)


class CreateAgentSerializer(AgentDetailsSerializer):
    email = serializers.CharField(allow_blank=True)
    password = serializers.CharField(allow_blank=True, write_only=True)
