'''
    Dependency: none
'''
from constructs import Construct
from aws_cdk import Stack, CfnOutput, aws_dynamodb

class DynamoDBStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, project: dict, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)
        # init
        self.project = project
        self.dynamodb = dict()

        # single table, no secondary indexes
        self.dynamodb['transaction'] = aws_dynamodb.Table(self, "dynamodb-transaction",
            table_name=f"{self.project['prefix']}-transaction",
            billing_mode=aws_dynamodb.BillingMode.PAY_PER_REQUEST,
            encryption=aws_dynamodb.TableEncryption.AWS_MANAGED,
            removal_policy=self.project['removal_policy'],
            stream=None,
            table_class=aws_dynamodb.TableClass.STANDARD,
            time_to_live_attribute=None,
            partition_key=aws_dynamodb.Attribute(name="PK", type=aws_dynamodb.AttributeType.STRING),
            sort_key=aws_dynamodb.Attribute(name="SK", type=aws_dynamodb.AttributeType.STRING))

        # output
        CfnOutput(self, "transaction_table_name",
            value=self.dynamodb['transaction'].table_name)
