"""Tests for repository identifiers and release serialization."""

import pytest

from release_checker.models.release import ReleaseInfo, RepositoryID


@pytest.mark.parametrize(
    "value",
    [
        "spalmeida/verificador",
        " spalmeida/verificador ",
        "https://github.com/spalmeida/verificador",
        "https://github.com/spalmeida/verificador/",
        "github.com/spalmeida/verificador.git",
    ],
)
def test_parse_repository_id(value: str) -> None:
    repo = RepositoryID.parse(value)
    assert repo == RepositoryID("spalmeida", "verificador")
    assert str(repo) == "spalmeida/verificador"
    assert repo.html_url == "https://github.com/spalmeida/verificador"


@pytest.mark.parametrize("value", ["", "verificador", "a/b/c", "a b/c", "https://gitlab.com/a/b", "/b"])
def test_parse_repository_id_rejects(value: str) -> None:
    with pytest.raises(ValueError):
        RepositoryID.parse(value)


def test_release_info_dict_round_trip_and_immutability() -> None:
    release = ReleaseInfo(tag="1.0.1", artifact_url="https://x/zip", prerelease=True)
    assert ReleaseInfo.from_dict(release.to_dict()) == release
    with pytest.raises(AttributeError):
        release.tag = "2.0"  # type: ignore[misc]
