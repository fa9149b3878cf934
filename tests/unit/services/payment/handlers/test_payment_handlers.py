import json
from unittest.mock import MagicMock

from services.payment.handlers import list_payments, record
from services.shared.domain.exception import BusinessRuleViolationException


class TestRecordPaymentHandler:
    def test_created(
        self, monkeypatch, api_event, lambda_context, customer, create_payment
    ):
        payment = create_payment()
        payment.complete()
        service = MagicMock()
        service.record.return_value = payment
        monkeypatch.setattr(record, "service", service)

        response = record.lambda_handler(
            api_event(
                actor=customer,
                body=json.dumps(
                    {
                        "amount": "4089",
                        "payment_method": "upi",
                        "payment_type": "advance",
                        "transaction_id": "UPI-REF-001",
                    }
                ),
                path_parameters={"booking_id": str(payment.booking_id)},
                http_method="POST",
            ),
            lambda_context,
        )

        assert response["statusCode"] == 201
        data = json.loads(response["body"])["data"]
        assert data["payment_type"] == "advance"
        assert data["status"] == "completed"
        _, _, details = service.record.call_args.args
        assert details["currency_code"] == "INR"
        assert details["method"] == "upi"

    def test_unknown_method_returns_400(
        self, monkeypatch, api_event, lambda_context, customer
    ):
        monkeypatch.setattr(record, "service", MagicMock())

        response = record.lambda_handler(
            api_event(
                actor=customer,
                body=json.dumps(
                    {"amount": 10, "payment_method": "cheque", "payment_type": "full"}
                ),
                path_parameters={"booking_id": "STB-1"},
            ),
            lambda_context,
        )

        assert response["statusCode"] == 400

    def test_cancelled_booking_returns_409(
        self, monkeypatch, api_event, lambda_context, customer
    ):
        service = MagicMock()
        service.record.side_effect = BusinessRuleViolationException("cancelled")
        monkeypatch.setattr(record, "service", service)

        response = record.lambda_handler(
            api_event(
                actor=customer,
                body=json.dumps(
                    {"amount": 10, "payment_method": "cash", "payment_type": "full"}
                ),
                path_parameters={"booking_id": "STB-1"},
            ),
            lambda_context,
        )

        assert response["statusCode"] == 409


class TestListPaymentsHandler:
    def test_lists_payments(
        self, monkeypatch, api_event, lambda_context, customer, create_payment
    ):
        service = MagicMock()
        service.list.return_value = [create_payment(), create_payment()]
        monkeypatch.setattr(list_payments, "service", service)

        response = list_payments.lambda_handler(
            api_event(actor=customer, path_parameters={"booking_id": "STB-1"}),
            lambda_context,
        )

        assert response["statusCode"] == 200
        assert len(json.loads(response["body"])["data"]) == 2

    def test_missing_path_parameter_returns_400(
        self, monkeypatch, api_event, lambda_context, customer
    ):
        monkeypatch.setattr(list_payments, "service", MagicMock())

        response = list_payments.lambda_handler(
            api_event(actor=customer), lambda_context
        )

        assert response["statusCode"] == 400
