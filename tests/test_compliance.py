import pytest

from tweetkit.compliance import (
    ComplianceStatus,
    ComplianceType,
    CreateJobInput,
    CreateJobOutput,
    GetJobInput,
    GetJobOutput,
    ListJobsInput,
    ListJobsOutput,
)

ENDPOINT = "test/endpoint/"


@pytest.mark.parametrize(
    "params, expected",
    [
        (ListJobsInput(type=ComplianceType.TWEETS), ENDPOINT + "?type=tweets"),
        (
            ListJobsInput(type=ComplianceType.USERS, status=ComplianceStatus.FAILED),
            ENDPOINT + "?status=failed&type=users",
        ),
        (ListJobsInput(status=ComplianceStatus.FAILED), ""),
    ],
)
def test_list_jobs_resolve_endpoint(params, expected):
    assert params.resolve_endpoint(ENDPOINT) == expected


def test_list_jobs_body():
    assert ListJobsInput().body() is None


def test_list_jobs_parameter_map():
    params = ListJobsInput(type=ComplianceType.USERS, status=ComplianceStatus.IN_PROGRESS)
    assert params.parameter_map() == {"type": "users", "status": "in_progress"}


@pytest.mark.parametrize(
    "params, expected",
    [
        (GetJobInput(id="test-id"), ENDPOINT + "test-id"),
        (GetJobInput(), ""),
    ],
)
def test_get_job_resolve_endpoint(params, expected):
    assert params.resolve_endpoint(ENDPOINT + ":id") == expected


def test_get_job_resolve_endpoint_escapes_id():
    assert GetJobInput(id="a b/c").resolve_endpoint(ENDPOINT + ":id") == ENDPOINT + "a+b%2Fc"


def test_get_job_body():
    assert GetJobInput().body() is None


@pytest.mark.parametrize("params", [GetJobInput(id="id"), GetJobInput()])
def test_get_job_parameter_map(params):
    assert params.parameter_map() == {}


def test_create_job_resolve_endpoint():
    assert CreateJobInput().resolve_endpoint(ENDPOINT) == ENDPOINT


@pytest.mark.parametrize(
    "params, expected",
    [
        (CreateJobInput(type=ComplianceType.TWEETS), '{"type":"tweets"}'),
        (CreateJobInput(name="test-name"), '{"name":"test-name"}'),
        (CreateJobInput(resumable=True), '{"resumable":true}'),
        (
            CreateJobInput(type=ComplianceType.TWEETS, name="test-name", resumable=True),
            '{"type":"tweets","name":"test-name","resumable":true}',
        ),
        (CreateJobInput(), "{}"),
    ],
)
def test_create_job_body(params, expected):
    assert params.body().read() == expected


def test_create_job_parameter_map():
    assert CreateJobInput(type=ComplianceType.USERS).parameter_map() == {}


@pytest.mark.parametrize("output_class", [ListJobsOutput, GetJobOutput, CreateJobOutput])
@pytest.mark.parametrize(
    "errors, expected",
    [
        ([{"title": "test partical error"}], True),
        ([], False),
    ],
)
def test_has_partial_error(output_class, errors, expected):
    assert output_class(errors=errors).has_partial_error() is expected


@pytest.mark.parametrize("output_class", [ListJobsOutput, GetJobOutput, CreateJobOutput])
def test_default_output_has_no_partial_error(output_class):
    assert output_class().has_partial_error() is False