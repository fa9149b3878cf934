from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Database, Functions, Layers, Observability


class TourBookingStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        enable_observability: bool = True,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        pricing_environment = self.node.try_get_context("pricing") or {}
        fns = Functions(
            self,
            "Functions",
            table=database.table,
            common_layer=layers.common_layer,
            pricing_environment={k: str(v) for k, v in pricing_environment.items()},
        )

        api = Api(
            self,
            "Api",
            estimate_cost=fns.estimate_cost,
            create_booking=fns.create_booking,
            get_booking=fns.get_booking,
            list_bookings=fns.list_bookings,
            update_booking_status=fns.update_booking_status,
            assign_driver=fns.assign_driver,
            cancel_booking=fns.cancel_booking,
            record_payment=fns.record_payment,
            list_payments=fns.list_payments,
        )

        if enable_observability:
            Observability(self, "Observability", functions=fns.all_functions)

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
        CfnOutput(self, "UserPoolId", value=api.user_pool.user_pool_id)
        CfnOutput(
            self, "UserPoolClientId", value=api.user_pool_client.user_pool_client_id
        )
        CfnOutput(self, "TableName", value=database.table.table_name)
