"""Tests for login request bodies."""

from vco_api.models.login import AuthObject


class TestAuthObject:
    def test_optional_keys_omitted(self):
        assert AuthObject("admin", "s3cret").to_dict() == {
            "username": "admin",
            "password": "s3cret",
        }

    def test_optional_keys_present(self):
        body = AuthObject("admin", "s3cret", password2="s3cret", email="a@example.com")
        assert body.to_dict()["password2"] == "s3cret"
        assert body.to_dict()["email"] == "a@example.com"

    def test_repr_redacts_password(self):
        text = repr(AuthObject("admin", "s3cret"))
        assert "s3cret" not in text
        assert text == "AuthObject('admin', ****)"
