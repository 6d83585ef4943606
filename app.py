#!/usr/bin/env python3
'''
    Initial cdk project information
    1. Import CDK modules
    2. Import Services modules in this project
    3. Project information
    4. cdk Construct
'''
import logging

# Import CDK modules
from aws_cdk import App, Environment, RemovalPolicy

# Import Services modules
from cognito.cognito_stack import CognitoStack
from dynamodb.dynamodb_stack import DynamoDBStack
from appsync.appsync_stack import AppSyncStack

logger = logging.getLogger(__name__)

TRUE_VALUES = ("true", "yes", "1")
FALSE_VALUES = ("false", "no", "0")

def to_bool(key: str, value) -> bool:
    '''
        Context values arrive as JSON from cdk.json or as strings from `cdk -c`.
    '''
    if isinstance(value, bool):
        return value
    if str(value).strip().lower() in TRUE_VALUES:
        return True
    if str(value).strip().lower() in FALSE_VALUES:
        return False
    raise ValueError(f"context '{key}' must be a boolean, got {value!r}")

def load_project(app: App) -> dict:
    # Information of project
    project = dict()
    project['account'] = app.node.try_get_context("account")
    project['region']  = app.node.try_get_context("region")
    project['env']     = "dev"
    project['name']    = "debt-burner"
    project['prefix']  = f"{project['name']}-{project['env']}"
    project['api']     = True
    project['removal_policy'] = RemovalPolicy.DESTROY

    api = app.node.try_get_context("api")
    if api is not None:
        project['api'] = to_bool("api", api)
    return project

def build(app: App, project: dict) -> dict:
    '''
        Declare every stack of the project on `app`, in dependency order.
        Returns the stacks keyed by service name.
    '''
    # cdk environment
    cdk_environment = Environment(
        account=project['account'],
        region=project['region'])

    stacks = dict()
    logger.info("declaring %s (api=%s)", project['prefix'], project['api'])

    # Cognito user pool, identity pool and identity roles
    stacks['cognito'] = CognitoStack(
        scope          = app,
        env            = cdk_environment,
        construct_id   = f"{project['prefix']}-cognito",
        project        = project)

    if project['api']:
        stacks['dynamodb'] = DynamoDBStack(
            scope          = app,
            env            = cdk_environment,
            construct_id   = f"{project['prefix']}-dynamodb",
            project        = project)

        stacks['appsync'] = AppSyncStack(
            scope          = app,
            env            = cdk_environment,
            construct_id   = f"{project['prefix']}-appsync",
            project        = project,
            cognito        = stacks['cognito'],
            dynamodb       = stacks['dynamodb'].dynamodb)

    for stack in stacks.values():
        logger.info("declared stack %s", stack.stack_name)
    return stacks

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # cdk construct
    app = App()
    build(app, load_project(app))

    # app synth -> cloudformation template
    app.synth()
