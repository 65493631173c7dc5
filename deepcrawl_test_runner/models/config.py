"""Configuration for a single Automation Hub build step."""

from pydantic import AliasChoices, Field, SecretStr

from deepcrawl_test_runner.models.base import Model

DEFAULT_DOWNLOAD_BASE_URL = (
    "https://github.com/deepcrawl/deepcrawl-test/releases/download"
)


class InvocationConfig(Model):
    """User-supplied job configuration.

    Fields also accept the camelCase keys of the job configuration form, so
    ``{"testSuiteId": "abc123", "startOnly": true}`` validates directly.
    """

    test_suite_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("test_suite_id", "testSuiteId"),
    )
    user_key_id: str | None = Field(
        default=None, validation_alias=AliasChoices("user_key_id", "userKeyId")
    )
    user_key_secret: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("user_key_secret", "userKeySecret"),
    )
    start_only: bool = Field(
        default=False, validation_alias=AliasChoices("start_only", "startOnly")
    )


class RunnerSettings(Model):
    """Settings for the runner itself, not exposed in the job form."""

    download_base_url: str = DEFAULT_DOWNLOAD_BASE_URL
    # Seconds for the whole artifact download
    http_timeout: float = Field(default=300, gt=0)
