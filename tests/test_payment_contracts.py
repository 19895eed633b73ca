from src.integrations.contracts.payments import (
    TRANSACTION_ID_PREFIX,
    CachedToken,
    PaymentRequest,
    build_payment_payload,
    generate_transaction_id,
    validate_payment_request,
)


def test_payload_shape_for_uganda():
    request = PaymentRequest(phone_number="0771234567", amount=500, reference="REF1")

    payload = build_payment_payload(request, country="UG", currency="UGX")

    assert payload["reference"] == "REF1"
    assert payload["subscriber"]["msisdn"] == "0771234567"
    assert payload["subscriber"]["country"] == "UG"
    assert payload["subscriber"]["currency"] == "UGX"
    assert payload["transaction"]["amount"] == 500
    assert payload["transaction"]["country"] == "UG"
    assert payload["transaction"]["currency"] == "UGX"
    assert payload["transaction"]["id"].startswith(TRANSACTION_ID_PREFIX)


def test_reference_passed_through_unmodified():
    request = PaymentRequest(phone_number="0771234567", amount=1.5, reference="  ref/with spaces  ")

    payload = build_payment_payload(request, country="UG", currency="UGX", transaction_id="TXN-1")

    assert payload["reference"] == "  ref/with spaces  "
    assert payload["transaction"]["id"] == "TXN-1"


def test_transaction_id_uses_milliseconds():
    assert generate_transaction_id(clock=lambda: 1_700_000_000.123) == "TXN-1700000000123"


def test_validate_payment_request_presence_only():
    assert validate_payment_request(PaymentRequest(phone_number="abc", amount=0, reference="r")) == []

    errors = validate_payment_request(PaymentRequest(phone_number="", amount=None, reference=""))
    assert errors == ["phone_number is required", "amount is required", "reference is required"]


def test_cached_token_validity():
    token = CachedToken(value="abc", expires_at=100.0)
    assert token.is_valid(now=99.0)
    assert not token.is_valid(now=100.0)
    assert not CachedToken(value="", expires_at=100.0).is_valid(now=0.0)
