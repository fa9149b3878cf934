from aws_cdk import (
    CfnStack,
    RemovalPolicy,
    SecretValue,
)
from aws_cdk import (
    aws_lambda as _lambda,
)
from aws_cdk import (
    aws_secretsmanager as secretsmanager,
)
from constructs import Construct
from datadog_cdk_constructs_v2 import DatadogLambda


class Observability(Construct):
    """可観測性を管理する Construct (Datadog版)

    SSM Parameter Store の API Key を起点に Secret・Forwarder・Lambda 計装を構築する。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        functions: list[_lambda.Function],
        datadog_api_key_ssm_parameter_name: str = (
            "/serverless-tour-booking/datadog-api-key"
        ),
        service_name: str = "serverless-tour-booking",
        env: str = "dev",
    ) -> None:
        super().__init__(scope, id)

        api_key_secret = secretsmanager.Secret(
            self,
            "DatadogApiKeySecret",
            secret_string_value=SecretValue.ssm_secure(
                datadog_api_key_ssm_parameter_name
            ),
            removal_policy=RemovalPolicy.DESTROY,
        )

        # Datadog Forwarder のデプロイ (Nested Stack)
        CfnStack(
            self,
            "DatadogForwarder",
            template_url="https://datadog-cloudformation-template.s3.amazonaws.com/aws/forwarder/latest.yaml",
            parameters={
                "DdApiKeySecretArn": api_key_secret.secret_arn,
                "DdSite": "datadoghq.com",
                "FunctionName": f"{service_name}-datadog-forwarder",
            },
        )

        datadog_lambda = DatadogLambda(
            self,
            "DatadogLambda",
            python_layer_version=122,
            extension_layer_version=92,
            api_key_secret_arn=api_key_secret.secret_arn,
            enable_datadog_tracing=True,
            enable_datadog_logs=True,
            capture_lambda_payload=False,
            site="datadoghq.com",
            service=service_name,
            env=env,
        )
        datadog_lambda.add_lambda_functions(functions)
