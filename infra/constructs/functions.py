import datetime

from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

BOOKING_SERVICE = "booking-service"
PAYMENT_SERVICE = "payment-service"


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        pricing_environment: dict[str, str] | None = None,
    ) -> None:
        super().__init__(scope, id)

        self._table = table
        self._common_layer = common_layer
        self._pricing_environment = pricing_environment or {}

        self.estimate_cost = self._create_function(
            "EstimateCostLambda",
            "services.booking.handlers.estimate.lambda_handler",
            BOOKING_SERVICE,
        )
        self.create_booking = self._create_function(
            "CreateBookingLambda",
            "services.booking.handlers.create.lambda_handler",
            BOOKING_SERVICE,
        )
        self.get_booking = self._create_function(
            "GetBookingLambda",
            "services.booking.handlers.get.lambda_handler",
            BOOKING_SERVICE,
        )
        self.list_bookings = self._create_function(
            "ListBookingsLambda",
            "services.booking.handlers.list_bookings.lambda_handler",
            BOOKING_SERVICE,
        )
        self.update_booking_status = self._create_function(
            "UpdateBookingStatusLambda",
            "services.booking.handlers.update_status.lambda_handler",
            BOOKING_SERVICE,
        )
        self.assign_driver = self._create_function(
            "AssignDriverLambda",
            "services.booking.handlers.assign_driver.lambda_handler",
            BOOKING_SERVICE,
        )
        self.cancel_booking = self._create_function(
            "CancelBookingLambda",
            "services.booking.handlers.cancel.lambda_handler",
            BOOKING_SERVICE,
        )
        self.record_payment = self._create_function(
            "RecordPaymentLambda",
            "services.payment.handlers.record.lambda_handler",
            PAYMENT_SERVICE,
        )
        self.list_payments = self._create_function(
            "ListPaymentsLambda",
            "services.payment.handlers.list_payments.lambda_handler",
            PAYMENT_SERVICE,
        )

        for fn in [
            self.create_booking,
            self.update_booking_status,
            self.assign_driver,
            self.cancel_booking,
            self.record_payment,
        ]:
            table.grant_read_write_data(fn)

        for fn in [
            self.estimate_cost,
            self.get_booking,
            self.list_bookings,
            self.list_payments,
        ]:
            table.grant_read_data(fn)

    @property
    def all_functions(self) -> list[_lambda.Function]:
        return [
            self.estimate_cost,
            self.create_booking,
            self.get_booking,
            self.list_bookings,
            self.update_booking_status,
            self.assign_driver,
            self.cancel_booking,
            self.record_payment,
            self.list_payments,
        ]

    def _create_function(
        self,
        id: str,
        handler: str,
        service_name: str,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_14,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._common_layer],
            environment={
                "TABLE_NAME": self._table.table_name,
                "POWERTOOLS_SERVICE_NAME": service_name,
                "POWERTOOLS_LOG_LEVEL": "INFO",
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
                **self._pricing_environment,
            },
        )
