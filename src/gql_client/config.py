"""Configuration module for the GraphQL client wrapper."""


class Config:
    """Configuration class for the client and its mocks."""

    def __init__(self):
        self.GRAPHQL_ENDPOINT = "http://localhost:8080/v1/graphql"
        self.MOCK_ENDPOINT = "http://graphql.mock/v1/graphql"
        self.REQUEST_TIMEOUT = 30
        self.LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        self.LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
        self.VALIDATION_ERROR_CODE = "validation-failed"
        self.VALIDATION_ERROR_PATH = "$.selectionSet.test"
        self.VALIDATION_ERROR_STATUS = 400
