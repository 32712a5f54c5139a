"""Fixture factories for generating CloudFormation test samples.

This module provides factory functions for creating templates and service
definitions with varying complexity for unit and integration testing.

template structure:
    {
        "Resources": dict[str, {"Type": str, "Properties": dict}],
        "Outputs": dict[str, {"Value": Any, "Export": dict}],
    }
"""

from typing import Any, Dict, Optional


def resource(type_tag: str, **properties: Any) -> Dict[str, Any]:
    """Create a single resource declaration."""
    declaration = {"Type": type_tag}
    if properties:
        declaration["Properties"] = dict(properties)
    return declaration


def minimal_template() -> Dict[str, Any]:
    """Create a template with one bucket and no outputs."""
    return {"Resources": {"DataBucket": resource("AWS::S3::Bucket")}}


def service_template(with_outputs: bool = True) -> Dict[str, Any]:
    """Create a template resembling a packaged service.

    Args:
        with_outputs: Include Outputs with and without Export blocks

    Returns:
        dict: template with functions, roles, tables, buckets and structural resources
    """
    template = {
        "Resources": {
            "ProcessOrderLambdaFunction": resource(
                "AWS::Lambda::Function", Handler="handler.process", Runtime="python3.12"
            ),
            "ProcessOrderLambdaVersion": resource(
                "AWS::Lambda::Version", FunctionName={"Ref": "ProcessOrderLambdaFunction"}
            ),
            "IamRoleLambdaExecution": resource(
                "AWS::IAM::Role",
                Policies=[
                    {"PolicyName": "custom-name", "PolicyDocument": {}},
                    {"PolicyDocument": {}},
                ],
            ),
            "OrdersTable": resource("AWS::DynamoDB::Table", BillingMode="PAY_PER_REQUEST"),
            "ServerlessDeploymentBucket": resource("AWS::S3::Bucket"),
            "ApiGatewayRestApi": resource("AWS::ApiGateway::RestApi"),
            "OrdersQueue": resource("AWS::SQS::Queue"),
        }
    }
    if with_outputs:
        template["Outputs"] = {
            "ServiceEndpoint": {"Value": "https://example.com"},
            "OrdersTableArn": {
                "Value": {"Fn::GetAtt": ["OrdersTable", "Arn"]},
                "Export": {"Name": "orders-table-arn"},
            },
        }
    return template


def service_definition(
    naming: Optional[Dict[str, Any]] = None,
    provider: str = "aws",
    user_resources: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Create a serverless style service definition.

    Args:
        naming: custom.awsAutoResourceNames block, defaults to {"prefix": "shop-"}
        provider: Provider name
        user_resources: User declared "Resources" section

    Returns:
        dict: service with provider, custom, functions and resources
    """
    return {
        "service": "shop",
        "provider": {"name": provider, "runtime": "python3.12"},
        "custom": {"awsAutoResourceNames": naming if naming is not None else {"prefix": "shop-"}},
        "functions": {
            "processOrder": {"handler": "handler.process"},
            "sendReceipt": {"handler": "handler.receipt"},
        },
        "resources": {"Resources": user_resources or {}},
    }
