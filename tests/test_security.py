# tests/test_security.py
import pytest

from catalog.errors import Unauthorized
from catalog.security import Authorizer, TokenAuthorizer


def test_matching_token_passes():
    TokenAuthorizer("12345").authorize("12345")


@pytest.mark.parametrize("token", [None, "", "1234", "12345 ", "wrong"])
def test_other_tokens_rejected(token):
    with pytest.raises(Unauthorized):
        TokenAuthorizer("12345").authorize(token)


def test_empty_secret_rejects_everything():
    with pytest.raises(Unauthorized):
        TokenAuthorizer("").authorize("")


def test_authorizer_is_abstract():
    with pytest.raises(TypeError):
        Authorizer()
