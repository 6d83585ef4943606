import pytest
from aws_cdk import App
from aws_cdk.assertions import Template

import app as debt_burner


@pytest.fixture
def stacks():
    cdk_app = App()
    return debt_burner.build(cdk_app, debt_burner.load_project(cdk_app))


@pytest.fixture
def cognito_template(stacks):
    return Template.from_stack(stacks['cognito'])


@pytest.fixture
def dynamodb_template(stacks):
    return Template.from_stack(stacks['dynamodb'])


@pytest.fixture
def appsync_template(stacks):
    return Template.from_stack(stacks['appsync'])


def actions_of(statement):
    actions = statement["Action"]
    if isinstance(actions, str):
        return [actions]
    return list(actions)


def role_named(template, role_name):
    """Return (logical_id, resource) of the IAM role with the given RoleName."""
    roles = template.find_resources("AWS::IAM::Role", {
        "Properties": {"RoleName": role_name}
    })
    assert len(roles) == 1, f"expected one role named {role_name}, found {list(roles)}"
    return next(iter(roles.items()))
