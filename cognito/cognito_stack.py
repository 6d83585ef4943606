'''
    Dependency: none
'''
from constructs import Construct
from aws_cdk import Stack, CfnOutput, aws_cognito, aws_iam

class CognitoStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, project: dict, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)
        # init
        self.project = project
        self.role = dict()

        # user pool
        self.user_pool = aws_cognito.UserPool(self, "cognito-user-pool",
            user_pool_name      = f"{self.project['prefix']}-user-pool",
            self_sign_up_enabled = True,
            sign_in_aliases     = aws_cognito.SignInAliases(email=True, username=True),
            auto_verify         = aws_cognito.AutoVerifiedAttrs(email=True),
            password_policy     = aws_cognito.PasswordPolicy(
                min_length        = 8,
                require_lowercase = False,
                require_uppercase = False,
                require_digits    = False,
                require_symbols   = False),
            removal_policy      = self.project['removal_policy'])

        # user pool client
        self.user_pool_client = aws_cognito.UserPoolClient(self, "cognito-user-pool-client",
            user_pool       = self.user_pool,
            generate_secret = False)

        # identity pool
        self.identity_pool = aws_cognito.CfnIdentityPool(self, "cognito-identity-pool",
            identity_pool_name               = f"{self.project['prefix']}-identity-pool",
            allow_unauthenticated_identities = False,
            cognito_identity_providers       = [
                aws_cognito.CfnIdentityPool.CognitoIdentityProviderProperty(
                    client_id     = self.user_pool_client.user_pool_client_id,
                    provider_name = self.user_pool.user_pool_provider_name)
            ])

        # iam role for unauthenticated identities
        self.add_identity_role(
            amr = "unauthenticated",
            actions = [
                "mobileanalytics:PutEvents",
                "cognito-sync:*"
            ])

        # iam role for authenticated identities
        self.add_identity_role(
            amr = "authenticated",
            actions = [
                "mobileanalytics:PutEvents",
                "cognito-sync:*",
                "cognito-identity:*"
            ])

        # bind roles to the identity pool
        self.role_attachment = aws_cognito.CfnIdentityPoolRoleAttachment(self, "cognito-identity-pool-roles",
            identity_pool_id = self.identity_pool.ref,
            roles = {
                "unauthenticated": self.role['unauthenticated'].role_arn,
                "authenticated": self.role['authenticated'].role_arn
            })

        # output
        CfnOutput(self, "user_pool_id", value=self.user_pool.user_pool_id)
        CfnOutput(self, "user_pool_client_id", value=self.user_pool_client.user_pool_client_id)
        CfnOutput(self, "identity_pool_id", value=self.identity_pool.ref)

    '''
        Principal for identities federated through this stack's identity pool.
        amr is "authenticated" or "unauthenticated".
    '''
    def identity_principal(self, amr: str):
        return aws_iam.FederatedPrincipal("cognito-identity.amazonaws.com",
            conditions = {
                "StringEquals": {
                    "cognito-identity.amazonaws.com:aud": self.identity_pool.ref
                },
                "ForAnyValue:StringLike": {
                    "cognito-identity.amazonaws.com:amr": amr
                }
            },
            assume_role_action = "sts:AssumeRoleWithWebIdentity")

    def add_identity_role(self, amr: str, actions: list):
        policy = {
            "Version": "2012-10-17",
            "Statement": [
                {
                    "Effect": "Allow",
                    "Action": actions,
                    "Resource": "*"
                }
            ]
        }
        self.role[amr] = aws_iam.Role(self, f"role-cognito-{amr}",
            role_name   = f"{self.project['prefix']}-role-cognito-{amr}",
            description = f"Role for {amr} identities of {self.project['prefix']}-identity-pool",
            assumed_by  = self.identity_principal(amr),
            inline_policies = {
                f"cognito_{amr}_policy": aws_iam.PolicyDocument(
                    statements=[
                        aws_iam.PolicyStatement.from_json(statement) for statement in policy['Statement']
                    ]),
            })
