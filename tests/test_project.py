"""Tests for the Project handle."""

import pytest

from pdum.resource import LifecycleState, Project


def test_project_id_is_read_only(resource):
    project = resource.project("grape-spaceship-123")

    with pytest.raises(AttributeError):
        project.project_id = "other"

    assert project.id == "grape-spaceship-123"
    assert project.full_resource_name() == "projects/grape-spaceship-123"


def test_get_metadata_overwrites_metadata(resource, http):
    body = {"projectId": "p1", "name": "Project One", "lifecycleState": "ACTIVE"}
    http.queue(body)
    project = resource.project("p1")
    project.metadata = {"stale": True}

    metadata, api_response = project.get_metadata()

    assert http.requests[0].path == "/projects/p1"
    assert metadata == body
    assert project.metadata == body
    assert project.metadata["lifecycleState"] == LifecycleState.ACTIVE


def test_handles_compare_by_id_and_client(resource):
    assert resource.project("p1") == resource.project("p1")
    assert resource.project("p1") != resource.project("p2")
    assert resource.project("p1") != resource.operation("p1")
    assert len({resource.project("p1"), resource.project("p1")}) == 1


def test_repr(resource):
    assert repr(resource.project("p1")) == "Project('p1')"


def test_suggest_id_with_prefix():
    project_id = Project.suggest_id(prefix="myapp")

    assert project_id.startswith("myapp-")
    assert len(project_id) == len("myapp-") + 5
    assert project_id[len("myapp-"):].isdigit()


def test_suggest_id_without_digits():
    assert Project.suggest_id(prefix="production", random_digits=0) == "production"


def test_suggest_id_with_coolname():
    project_id = Project.suggest_id(random_digits=3)

    assert 6 <= len(project_id) <= 30
    assert project_id[0].islower()


@pytest.mark.parametrize("prefix", ["", "1abc", "Upper"])
def test_suggest_id_rejects_bad_prefix(prefix):
    with pytest.raises(ValueError, match="lowercase letter"):
        Project.suggest_id(prefix=prefix)


def test_suggest_id_rejects_digit_count():
    with pytest.raises(ValueError, match="random_digits"):
        Project.suggest_id(prefix="myapp", random_digits=11)


def test_suggest_id_rejects_too_short():
    with pytest.raises(ValueError, match="6-30 characters"):
        Project.suggest_id(prefix="ab", random_digits=0)
