"""Tests for OAuth 1.0a signing."""

import base64
import string

from nutrition_gateway.adapters.oauth import (
    SignatureRequest,
    generate_nonce,
    normalize_params,
    percent_encode,
    sign,
    signature_base_string,
)

API_URL = "https://platform.fatsecret.com/rest/server.api"


def test_percent_encode_escapes_sub_delims() -> None:
    assert percent_encode("!'()*") == "%21%27%28%29%2A"


def test_percent_encode_keeps_unreserved_characters() -> None:
    assert percent_encode("AZaz09-_.~") == "AZaz09-_.~"


def test_percent_encode_reserved_and_unicode() -> None:
    assert percent_encode("a b&c=d/e+f") == "a%20b%26c%3Dd%2Fe%2Bf"
    assert percent_encode("café") == "caf%C3%A9"


def test_normalize_params_sorts_by_key() -> None:
    params = {"search_expression": "chicken breast", "format": "json", "b": "1"}

    assert normalize_params(params) == (
        "b=1&format=json&search_expression=chicken%20breast"
    )


def test_signature_base_string_layout() -> None:
    params = {"b": "x y", "a": "it's (ok)*!"}

    base = signature_base_string("get", API_URL, params)

    assert base == (
        "GET&https%3A%2F%2Fplatform.fatsecret.com%2Frest%2Fserver.api"
        "&a%3Dit%2527s%2520%2528ok%2529%252A%2521%26b%3Dx%2520y"
    )


def test_sign_matches_known_vector() -> None:
    params = {"b": "x y", "a": "it's (ok)*!"}

    assert sign("GET", API_URL, params, "secret") == "Bbh4maLVFOxCx1Q8nuTTKQznVak="


def test_sign_matches_vector_with_search_expression() -> None:
    params = {
        "b": "x y",
        "a": "it's (ok)*!",
        "search_expression": "mac 'n' cheese",
    }

    assert sign("GET", API_URL, params, "secret") == "MWNy7O5JvLAPWd/fY2R989i+IsA="


def test_sign_is_deterministic() -> None:
    params = {"method": "foods.search", "search_expression": "rice"}

    first = sign("GET", API_URL, params, "secret")
    second = sign("GET", API_URL, dict(params), "secret")

    assert first == second
    assert len(base64.b64decode(first)) == 20


def test_sign_changes_when_any_value_changes() -> None:
    params = {"b": "x y", "a": "it's (ok)*!"}
    baseline = sign("GET", API_URL, params, "secret")

    assert sign("GET", API_URL, {**params, "b": "x z"}, "secret") == (
        "LtXBaWtsZKZ3fQTjCvFVJKWwOtI="
    )
    assert sign("GET", API_URL, {**params, "a": "other"}, "secret") != baseline
    assert sign("POST", API_URL, params, "secret") != baseline
    assert sign("GET", API_URL + "x", params, "secret") != baseline
    assert sign("GET", API_URL, params, "other-secret") != baseline


def test_signature_request_adds_signature() -> None:
    request = SignatureRequest(
        method="GET",
        base_url=API_URL,
        consumer_secret="secret",
        params={"b": "x y", "a": "it's (ok)*!"},
    )

    signed = request.signed_params()

    assert signed["oauth_signature"] == "Bbh4maLVFOxCx1Q8nuTTKQznVak="
    assert "oauth_signature" not in request.params


def test_generate_nonce_is_alphanumeric() -> None:
    nonce = generate_nonce()

    assert len(nonce) == 26
    assert set(nonce) <= set(string.ascii_letters + string.digits)
    assert generate_nonce() != nonce
