import json

import pytest
from aws_cdk import App
from aws_cdk.assertions import Template

import app as debt_burner


def _templates(context=None):
    cdk_app = App(context=context)
    stacks = debt_burner.build(cdk_app, debt_burner.load_project(cdk_app))
    return {
        name: json.dumps(Template.from_stack(stack).to_json(), sort_keys=True)
        for name, stack in stacks.items()
    }


def test_default_project():
    project = debt_burner.load_project(App())
    assert project['prefix'] == "debt-burner-dev"
    assert project['api'] is True
    assert project['account'] is None
    assert project['region'] is None


def test_context_sets_environment():
    project = debt_burner.load_project(App(context={"account": "123456789012", "region": "us-east-1"}))
    assert project['account'] == "123456789012"
    assert project['region'] == "us-east-1"


def test_api_variant_declares_all_stacks(stacks):
    assert list(stacks) == ['cognito', 'dynamodb', 'appsync']


def test_identity_only_variant():
    cdk_app = App(context={"api": "false"})
    stacks = debt_burner.build(cdk_app, debt_burner.load_project(cdk_app))
    assert list(stacks) == ['cognito']

    template = Template.from_stack(stacks['cognito'])
    template.resource_count_is("AWS::Cognito::IdentityPoolRoleAttachment", 1)
    template.resource_count_is("AWS::AppSync::GraphQLApi", 0)
    template.resource_count_is("AWS::DynamoDB::Table", 0)


def test_stacks_depend_on_earlier_stacks_only():
    cdk_app = App()
    stacks = debt_burner.build(cdk_app, debt_burner.load_project(cdk_app))
    # cross-stack references turn into dependencies while synthesizing
    cdk_app.synth()

    appsync_dependencies = {stack.stack_name for stack in stacks['appsync'].dependencies}
    assert appsync_dependencies == {stacks['cognito'].stack_name, stacks['dynamodb'].stack_name}
    assert stacks['cognito'].dependencies == []
    assert stacks['dynamodb'].dependencies == []


def test_synthesis_is_deterministic():
    assert _templates() == _templates()


@pytest.mark.parametrize("value, expected", [
    (True, True),
    (False, False),
    ("true", True),
    ("False", False),
    ("yes", True),
    ("NO", False),
    ("1", True),
    ("0", False),
    (" true ", True),
])
def test_to_bool_accepts(value, expected):
    assert debt_burner.to_bool("api", value) is expected


@pytest.mark.parametrize("value", ["maybe", "", "2", None])
def test_to_bool_rejects(value):
    with pytest.raises(ValueError, match="context 'api'"):
        debt_burner.to_bool("api", value)


def test_invalid_api_context_fails_before_any_stack():
    cdk_app = App(context={"api": "sometimes"})
    with pytest.raises(ValueError):
        debt_burner.load_project(cdk_app)
    assert cdk_app.node.children == []
