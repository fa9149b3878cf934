from aws_cdk import RemovalPolicy
from aws_cdk import aws_dynamodb as dynamodb
from constructs import Construct


class Database(Construct):
    """DynamoDB Construct（シングルテーブル）

    - PK/SK: BOOKING#<id> / METADATA, PAYMENT#<id>、TOUR#/VEHICLE#/DRIVER# / PROFILE
    - GSI1: 全予約フィード（GSI1PK=BOOKINGS、作成日時順）
    - GSI2: ユーザー単位の検索（GSI2PK=USER#<user_id>）
    - GSI3: ドライバー単位の検索（GSI3PK=DRIVER#<driver_id>、割当済みの予約のみ）
    """

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.table = dynamodb.Table(
            self,
            "TourBookingTable",
            partition_key=dynamodb.Attribute(
                name="PK", type=dynamodb.AttributeType.STRING
            ),
            sort_key=dynamodb.Attribute(name="SK", type=dynamodb.AttributeType.STRING),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.DESTROY,
        )

        for index in ("GSI1", "GSI2", "GSI3"):
            self.table.add_global_secondary_index(
                index_name=index,
                partition_key=dynamodb.Attribute(
                    name=f"{index}PK", type=dynamodb.AttributeType.STRING
                ),
                sort_key=dynamodb.Attribute(
                    name=f"{index}SK", type=dynamodb.AttributeType.STRING
                ),
            )
