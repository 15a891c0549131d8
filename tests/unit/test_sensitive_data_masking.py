import pytest

from config.settings import mask_sensitive_data

pytestmark = pytest.mark.unit


class TestSensitiveDataMasking:
    def test_state_id_key_masked(self):
        result = mask_sensitive_data(None, None, {"event": "test", "state_id": "123456789"})
        assert result["state_id"] == "***MASKED***"

    def test_state_id_in_free_text_masked(self):
        event_dict = {"event": "test", "detail": "customer rejected: state_id=123456789"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["detail"] == "customer rejected: state_id=***MASKED***"

    def test_bare_digit_runs_unchanged(self):
        event_dict = {"event": "test", "detail": "callback 912345678 requested"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["detail"] == "callback 912345678 requested"

    def test_password_masked(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert result["data"].startswith("password='***MASKED***")

    def test_token_masked(self):
        result = mask_sensitive_data(None, None, {"event": "test", "header": "token=abc123xyz"})
        assert result["header"] == "token=***MASKED***"

    @pytest.mark.parametrize("key", ["password", "access", "refresh", "authorization"])
    def test_credential_keys_masked(self, key):
        result = mask_sensitive_data(None, None, {"event": "test", key: "anything"})
        assert result[key] == "***MASKED***"

    def test_phone_numbers_and_ids_unchanged(self):
        event_dict = {
            "event": "order.placed",
            "order_id": "0190b3c2-7d8e-7a51-9f0a-1b2c3d4e5f60",
            "phone": "912-345-678",
            "phone_compact": "912345678",
            "expired_count": 3,
        }
        result = mask_sensitive_data(None, None, dict(event_dict))
        assert result == event_dict
