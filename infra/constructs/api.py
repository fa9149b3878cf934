from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_cognito as cognito
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Api(Construct):
    """API Gateway Construct

    全エンドポイントを Cognito User Pool Authorizer で保護する。
    ロールはユーザー属性 custom:role（customer / driver / admin）で渡す。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        estimate_cost: _lambda.Function,
        create_booking: _lambda.Function,
        get_booking: _lambda.Function,
        list_bookings: _lambda.Function,
        update_booking_status: _lambda.Function,
        assign_driver: _lambda.Function,
        cancel_booking: _lambda.Function,
        record_payment: _lambda.Function,
        list_payments: _lambda.Function,
    ) -> None:
        super().__init__(scope, id)

        self.user_pool = cognito.UserPool(
            self,
            "TourBookingUserPool",
            self_sign_up_enabled=True,
            sign_in_aliases=cognito.SignInAliases(email=True),
            custom_attributes={
                "role": cognito.StringAttribute(mutable=True),
            },
        )
        self.user_pool_client = self.user_pool.add_client(
            "TourBookingClient",
            auth_flows=cognito.AuthFlow(user_password=True, user_srp=True),
        )

        authorizer = apigw.CognitoUserPoolsAuthorizer(
            self,
            "TourBookingAuthorizer",
            cognito_user_pools=[self.user_pool],
        )

        self.rest_api = apigw.RestApi(
            self,
            "TourBookingRestApi",
            rest_api_name="Tour Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
            default_method_options=apigw.MethodOptions(
                authorizer=authorizer,
                authorization_type=apigw.AuthorizationType.COGNITO,
            ),
        )

        # /bookings
        bookings = self.rest_api.root.add_resource("bookings")
        bookings.add_method("POST", apigw.LambdaIntegration(create_booking))
        bookings.add_method("GET", apigw.LambdaIntegration(list_bookings))

        # /bookings/estimate（予約前の見積もり）
        estimate = bookings.add_resource("estimate")
        estimate.add_method("POST", apigw.LambdaIntegration(estimate_cost))

        # /bookings/{booking_id}
        booking = bookings.add_resource("{booking_id}")
        booking.add_method("GET", apigw.LambdaIntegration(get_booking))

        booking.add_resource("status").add_method(
            "PATCH", apigw.LambdaIntegration(update_booking_status)
        )
        booking.add_resource("driver").add_method(
            "PUT", apigw.LambdaIntegration(assign_driver)
        )
        booking.add_resource("cancel").add_method(
            "PUT", apigw.LambdaIntegration(cancel_booking)
        )

        # /bookings/{booking_id}/payments
        payments = booking.add_resource("payments")
        payments.add_method("POST", apigw.LambdaIntegration(record_payment))
        payments.add_method("GET", apigw.LambdaIntegration(list_payments))
