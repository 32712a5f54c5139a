"""
Unit tests for the naming driver.

Tests the service level orchestration including:
- Hook registration for aws and non aws services
- Function renaming through the Lambda naming rule
- Template naming with user declared resources as prior view
- JSON template file rewriting
"""

import copy
import json
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.dirname(__file__))
from autonames.driver import (
    CREATE_STACK_TEMPLATE,
    HOOK_DEPLOY_FUNCTION,
    HOOK_MERGE_PROVIDER_RESOURCES,
    HOOK_PACKAGE_INITIALIZE,
    NamingDriver,
    function_logical_id,
)
from autonames.exceptions import InvalidConfigurationError, InvalidTypeTagError
from autonames.rule_table import RuleTable
from fixtures.cfn_samples import resource, service_definition, service_template


@pytest.fixture
def messages():
    return []


@pytest.fixture
def driver(messages, tmp_path):
    return NamingDriver(service_definition(), str(tmp_path), diagnostics=messages.append)


class TestHooks:
    """Tests for lifecycle hook registration."""

    def test_aws_service_registers_hooks(self, driver):
        assert set(driver.hooks) == {
            HOOK_DEPLOY_FUNCTION,
            HOOK_PACKAGE_INITIALIZE,
            HOOK_MERGE_PROVIDER_RESOURCES,
        }

    def test_non_aws_service_skipped(self, caplog):
        with caplog.at_level("INFO", logger="autonames.driver"):
            driver = NamingDriver(service_definition(provider="azure"))

        assert driver.hooks == {}
        assert "not aws" in caplog.text

    def test_hook_loads_config_first(self, tmp_path):
        service = service_definition(naming={"prefix": ""})
        driver = NamingDriver(service, str(tmp_path))

        with pytest.raises(InvalidConfigurationError):
            driver.hooks[HOOK_DEPLOY_FUNCTION]()

    def test_hook_picks_up_config_changes(self, driver):
        driver.hooks[HOOK_DEPLOY_FUNCTION]()
        driver.service["custom"]["awsAutoResourceNames"]["prefix"] = "next-"
        driver.hooks[HOOK_MERGE_PROVIDER_RESOURCES]()

        assert driver.config.prefix == "next-"

    def test_deploy_function_hook(self, driver):
        driver.service["resources"]["Resources"]["Uploads"] = resource("AWS::S3::Bucket")

        driver.hooks[HOOK_DEPLOY_FUNCTION]()

        assert driver.service["functions"]["processOrder"]["name"] == "shop-process-order"
        uploads = driver.service["resources"]["Resources"]["Uploads"]
        assert uploads["Properties"]["BucketName"] == "shop-uploads"

    def test_merge_provider_resources_hook(self, driver):
        compiled = service_template()
        core = {"Resources": {"ServerlessDeploymentBucket": resource("AWS::S3::Bucket")}}
        driver.service["provider"]["compiledCloudFormationTemplate"] = compiled
        driver.service["provider"]["coreCloudFormationTemplate"] = core

        driver.hooks[HOOK_MERGE_PROVIDER_RESOURCES]()

        assert compiled["Resources"]["OrdersTable"]["Properties"]["TableName"] == "shop-orders-table"
        bucket = core["Resources"]["ServerlessDeploymentBucket"]["Properties"]["BucketName"]
        assert bucket == "shop-serverless-deployment-bucket"

    def test_package_initialize_hook(self, driver, tmp_path):
        path = tmp_path / CREATE_STACK_TEMPLATE
        path.parent.mkdir()
        path.write_text(json.dumps(service_template()))

        driver.hooks[HOOK_PACKAGE_INITIALIZE]()

        named = json.loads(path.read_text())
        assert named["Resources"]["OrdersTable"]["Properties"]["TableName"] == "shop-orders-table"


class TestFunctionNames:
    """Tests for function name materialization."""

    def test_function_logical_id(self):
        assert function_logical_id("processOrder") == "processOrderLambdaFunction"

    def test_function_names(self, driver):
        assert driver.function_names() == {
            "processOrder": "shop-process-order",
            "sendReceipt": "shop-send-receipt",
        }

    def test_function_names_keep_suffix(self, tmp_path):
        service = service_definition(naming={"prefix": "shop-", "removeLambdaFunctionSuffix": False})
        driver = NamingDriver(service, str(tmp_path))

        assert driver.function_names()["processOrder"] == "shop-process-order-lambda-function"

    def test_same_name_as_template_pass(self, driver):
        """Pre-computed names match what the generic pass writes."""
        template = service_template()
        template["Resources"] = {
            function_logical_id("processOrder"): resource("AWS::Lambda::Function")
        }
        driver.rename_functions()
        driver.apply_on_template(template)

        generated = template["Resources"]["processOrderLambdaFunction"]["Properties"]["FunctionName"]
        assert generated == driver.service["functions"]["processOrder"]["name"]

    def test_function_without_body(self, tmp_path):
        service = service_definition()
        service["functions"]["bare"] = None
        driver = NamingDriver(service, str(tmp_path))

        driver.rename_functions()

        assert service["functions"]["bare"] == {"name": "shop-bare"}

    def test_missing_function_rule(self, tmp_path):
        driver = NamingDriver(service_definition(), str(tmp_path), rule_table=RuleTable([]))

        with pytest.raises(LookupError):
            driver.function_names()


class TestApplyOnTemplate:
    """Tests for apply_on_template()."""

    def test_user_declared_name_wins(self, tmp_path):
        user = {"OrdersTable": resource("AWS::DynamoDB::Table", TableName="legacy-orders")}
        driver = NamingDriver(service_definition(user_resources=user), str(tmp_path))
        template = service_template()

        driver.apply_on_template(template)

        assert template["Resources"]["OrdersTable"]["Properties"]["TableName"] == "legacy-orders"

    def test_policies_labelled(self, driver):
        template = service_template()

        driver.apply_on_template(template)

        policies = template["Resources"]["IamRoleLambdaExecution"]["Properties"]["Policies"]
        assert [p["PolicyName"] for p in policies] == ["inline-policy-0", "inline-policy-1"]

    def test_unmatched_type_reported(self, driver, messages):
        driver.apply_on_template(service_template())

        assert len(messages) == 1
        assert "AWS::SQS::Queue" in messages[0]

    def test_exports_only_when_enabled(self, driver):
        template = service_template()
        driver.apply_on_template(template)

        assert "Export" not in template["Outputs"]["ServiceEndpoint"]

    def test_exports_generated(self, tmp_path):
        naming = {"prefix": "shop-", "generateExports": True, "exportPrefix": "shared-"}
        driver = NamingDriver(service_definition(naming=naming), str(tmp_path))
        template = service_template()

        driver.apply_on_template(template)

        assert template["Outputs"]["ServiceEndpoint"]["Export"] == {"Name": "shared-service-endpoint"}
        assert template["Outputs"]["OrdersTableArn"]["Export"] == {"Name": "orders-table-arn"}

    def test_template_without_resources(self, driver):
        template = {"Outputs": {}}
        driver.apply_on_template(template)

        assert template == {"Outputs": {}}

    def test_idempotent(self, driver):
        template = service_template()
        driver.apply_on_template(template)
        first = copy.deepcopy(template)

        driver.service["resources"]["Resources"] = copy.deepcopy(first["Resources"])
        driver.apply_on_template(template)

        assert template == first

    def test_malformed_type_aborts(self, driver):
        template = {"Resources": {"Broken": {"Type": "BadTag"}}}

        with pytest.raises(InvalidTypeTagError) as exc_info:
            driver.apply_on_template(template)

        assert exc_info.value.context["logical_id"] == "Broken"


class TestApplyOnJsonFile:
    def test_rewrites_file(self, driver, tmp_path):
        path = tmp_path / "template.json"
        path.write_text(json.dumps(service_template()))

        result = driver.apply_on_json_file(str(path))

        assert json.loads(path.read_text()) == result
        assert result["Resources"]["ProcessOrderLambdaFunction"]["Properties"]["FunctionName"] == (
            "shop-process-order"
        )
