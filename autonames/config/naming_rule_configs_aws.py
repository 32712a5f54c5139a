"""AWS-specific naming rule configurations.

Ordered list of per type naming behaviour. Each entry names the resource
"type" and the NamingRule options that differ from the defaults; converters
are referenced by their registered names in autonames.converters.
Earlier entries take precedence when a type is listed twice.
"""

NAMING_RULE_CONFIGS = [
    # ASK
    {"type": "Alexa::ASK::Skill", "options": {"include_type_name_in_property": False}},
    # AmazonMQ
    {"type": "AWS::AmazonMQ::Broker"},
    {
        "type": "AWS::AmazonMQ::Configuration",
        "options": {"include_type_name_in_property": False},
    },
    # Amplify Console
    {"type": "AWS::Amplify::App", "options": {"include_type_name_in_property": False}},
    # API Gateway
    {"type": "AWS::ApiGateway::ApiKey", "options": {"include_type_name_in_property": False}},
    {"type": "AWS::ApiGateway::VpcLink", "options": {"include_type_name_in_property": False}},
    {
        "type": "AWS::ApiGateway::Authorizer",
        "options": {"include_type_name_in_property": False},
    },
    {"type": "AWS::ApiGateway::RestApi", "options": {"include_type_name_in_property": False}},
    {"type": "AWS::ApiGateway::UsagePlan"},
    {"type": "AWS::ApiGateway::Deployment", "options": {"name_insertion_enabled": False}},
    {"type": "AWS::ApiGateway::Method", "options": {"name_insertion_enabled": False}},
    {"type": "AWS::ApiGateway::Resource", "options": {"name_insertion_enabled": False}},
    # API Gateway V2
    {"type": "AWS::ApiGatewayV2::Api", "options": {"include_type_name_in_property": False}},
    {
        "type": "AWS::ApiGatewayV2::Authorizer",
        "options": {"include_type_name_in_property": False},
    },
    {"type": "AWS::ApiGatewayV2::Model", "options": {"include_type_name_in_property": False}},
    # Application Auto Scaling
    {
        "type": "AWS::ApplicationAutoScaling::ScalingPolicy",
        "options": {"name_property_override": "PolicyName"},
    },
    # AppSync
    {
        "type": "AWS::AppSync::DataSource",
        "options": {
            "include_type_name_in_property": False,
            "name_converter": "hyphens_to_underscores",
        },
    },
    {
        "type": "AWS::AppSync::FunctionConfiguration",
        "options": {
            "include_type_name_in_property": False,
            "name_converter": "hyphens_to_underscores",
        },
    },
    {"type": "AWS::AppSync::GraphQLApi", "options": {"include_type_name_in_property": False}},
    # CloudWatch Logs
    {"type": "AWS::Logs::Destination"},
    {"type": "AWS::Logs::LogGroup"},
    {"type": "AWS::Logs::LogStream"},
    # Code Build
    {"type": "AWS::CodeBuild::Project", "options": {"include_type_name_in_property": False}},
    # Code Commit
    {"type": "AWS::CodeCommit::Repository"},
    # Code Deploy
    {"type": "AWS::CodeDeploy::Application"},
    {"type": "AWS::CodeDeploy::DeploymentConfig"},
    {"type": "AWS::CodeDeploy::DeploymentGroup"},
    # Code Pipeline
    {
        "type": "AWS::CodePipeline::Pipeline",
        "options": {"include_type_name_in_property": False},
    },
    # DynamoDB
    {"type": "AWS::DynamoDB::Table"},
    # Amazon Cognito
    {"type": "AWS::Cognito::IdentityPool"},
    {"type": "AWS::Cognito::UserPool"},
    {
        "type": "AWS::Cognito::UserPoolClient",
        "options": {"name_property_override": "ClientName"},
    },
    # Lambda
    {
        "type": "AWS::Lambda::Function",
        "options": {"logical_name_converter": "strip_lambda_function_suffix"},
    },
    {
        "type": "AWS::Lambda::LayerVersion",
        "options": {"name_property_override": "LayerName"},
    },
    {"type": "AWS::Lambda::Permission", "options": {"name_insertion_enabled": False}},
    {"type": "AWS::Lambda::Version", "options": {"name_insertion_enabled": False}},
    {
        "type": "AWS::Lambda::EventSourceMapping",
        "options": {"name_insertion_enabled": False},
    },
    # IAM
    {"type": "AWS::IAM::Group"},
    {"type": "AWS::IAM::InstanceProfile"},
    {"type": "AWS::IAM::ManagedPolicy"},
    {"type": "AWS::IAM::Policy"},
    {"type": "AWS::IAM::Role"},
    {"type": "AWS::IAM::User"},
    # Amazon S3
    {"type": "AWS::S3::Bucket", "options": {"name_converter": "bucket_safe"}},
    {"type": "AWS::S3::BucketPolicy", "options": {"name_insertion_enabled": False}},
]

# Rule used for output exports, which have no resource type of their own
EXPORT_RULE_CONFIG = {
    "type": "CUSTOM::Output::Export",
    "options": {"include_type_name_in_property": False},
}
