"""Unit tests for the Project entity's metadata accessors."""

from resource_hub.core.database.entities import Project


def test_project_metadata_validates_details():
    project = Project(
        slug="demo",
        details={"name": "Demo", "listed": False, "links": [{"id": "spigot", "url": "https://spigotmc.org/r/demo.42/"}]},
    )

    metadata = project.project_metadata

    assert metadata.name == "Demo"
    assert metadata.listed is False
    assert project.get_link_url("spigot") == "https://spigotmc.org/r/demo.42/"
    assert project.get_link_url("polymart") is None


def test_empty_details_fall_back_to_defaults():
    project = Project(slug="bare")

    assert project.details == {}
    assert project.project_metadata.listed is True
    assert project.restricted is False


def test_malformed_details_read_as_default_metadata(caplog):
    project = Project(slug="broken", details={"listed": "sometimes", "links": [{"id": "polymart"}]})

    with caplog.at_level("WARNING", logger="resource_hub.core.database.entities.projects"):
        metadata = project.project_metadata

    assert metadata.listed is True
    assert project.get_link_url("polymart") is None
    assert "malformed metadata of project broken" in caplog.text
