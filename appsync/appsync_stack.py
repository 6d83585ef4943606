'''
    Dependency: cognito, dynamodb
'''
import os

from constructs import Construct
from aws_cdk import Stack, CfnOutput, aws_appsync, aws_iam

SCHEMA_FILE = os.path.join(os.path.dirname(__file__), "schema.graphql")

class AppSyncStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, project: dict, cognito, dynamodb, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)
        # init
        self.project = project
        self.cognito = cognito
        self.dynamodb = dynamodb
        self.datasource = dict()
        self.role = dict()

        # appsync api, authorized by the cognito user pool
        self.api = aws_appsync.GraphqlApi(self, "appsync-transaction-api",
            name=f"{self.project['prefix']}-api",
            authorization_config=aws_appsync.AuthorizationConfig(
                default_authorization=aws_appsync.AuthorizationMode(
                    authorization_type=aws_appsync.AuthorizationType.USER_POOL,
                    user_pool_config=aws_appsync.UserPoolConfig(
                        user_pool=self.cognito.user_pool,
                        # TODO: switch to DENY once per-field auth directives are in the schema
                        default_action=aws_appsync.UserPoolDefaultAction.ALLOW))),
            log_config=aws_appsync.LogConfig(
                exclude_verbose_content=None,
                field_log_level=aws_appsync.FieldLogLevel.ALL,
                role=None),
            definition=aws_appsync.Definition.from_file(SCHEMA_FILE),
            xray_enabled=None)

        # iam policy for dynamodb, item level access to the transaction table only
        policy = {
            "Version": "2012-10-17",
            "Statement": [
                {
                    "Action": [
                        "dynamodb:DeleteItem",
                        "dynamodb:GetItem",
                        "dynamodb:PutItem",
                        "dynamodb:Query",
                        "dynamodb:Scan",
                        "dynamodb:UpdateItem"
                    ],
                    "Effect": "Allow",
                    "Resource": [
                        self.dynamodb['transaction'].table_arn
                    ]
                }
            ]
        }

        # iam role, assumable by unauthenticated identities of the identity pool and by appsync
        self.role['appsync-datasource-ddb'] = aws_iam.Role(self, "role-appsync-datasource-ddb",
            role_name   = f"{self.project['prefix']}-role-appsync-datasource-ddb",
            description = "AppSync access to the transaction table",
            assumed_by  = self.cognito.identity_principal("unauthenticated"),
            inline_policies = {
                "ddb_policy": aws_iam.PolicyDocument(
                    statements=[
                        aws_iam.PolicyStatement.from_json(statement) for statement in policy['Statement']
                    ]),
            })
        self.role['appsync-datasource-ddb'].assume_role_policy.add_statements(
            aws_iam.PolicyStatement(
                actions=["sts:AssumeRole"],
                principals=[aws_iam.ServicePrincipal("appsync.amazonaws.com")]))

        # appsync datasource to dynamodb
        self.datasource['ddb'] = aws_appsync.BaseDataSource(self, "datasource-ddb",
            props=aws_appsync.BackedDataSourceProps(
                api=self.api,
                description="DynamoDB Data Source",
                name="dynamodb",
                service_role=self.role['appsync-datasource-ddb']),
            type="AMAZON_DYNAMODB",
            dynamo_db_config=aws_appsync.CfnDataSource.DynamoDBConfigProperty(
                aws_region=self.region,
                table_name=self.dynamodb['transaction'].table_name,
                use_caller_credentials=None,
                versioned=None))

        # output
        CfnOutput(self, "graphql_url", value=self.api.graphql_url)
        CfnOutput(self, "api_id", value=self.api.api_id)
