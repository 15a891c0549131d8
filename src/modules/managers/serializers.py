"""Manager DRF serializers (request parsing only)."""

from __future__ import annotations

from rest_framework import serializers


class ManagerDetailsSerializer(serializers.Serializer):
    first_name = serializers.CharField(allow_blank=True)
    last_name = serializers.CharField(allow_blank=True)
    phone_number = serializers.CharField(allow_blank=True)
    date_of_birth = serializers.DateField()
    street_address = serializers.CharField(allow_blank=True)
    city = serializers.CharField(allow_blank=True)


class CreateManagerSerializer(ManagerDetailsSerializer):
    email = serializers.CharField(allow_blank=True)
    password = serializers.CharField(allow_blank=True, write_only=True)


class ChangePasswordSerializer(serializers.Serializer):
    old_password = serializers.CharField(allow_blank=True, write_only=True, trim_whitespace=False)
    new_password = serializers.CharField(allow_blank=True, write_only=True, trim_whitespace=False)
    new_password_confirmation = serializers.CharField(
        allow_blank=True, write_only=True, trim_whitespace=False
    )
