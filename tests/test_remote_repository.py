import pytest

from jarfetch.modules.artifacts import Coordinate, InvalidCoordinateError, RemoteRepository


def sample() -> Coordinate:
    return Coordinate("org.junit.jupiter", "junit-jupiter-api", "5.10.2")


def test_artifact_url_without_extension():
    remote = RemoteRepository()

    assert remote.artifact_url(sample()) == (
        "https://repo1.maven.org/maven2/org/junit/jupiter/junit-jupiter-api/5.10.2/junit-jupiter-api-5.10.2"
    )


def test_binary_and_manifest_urls():
    remote = RemoteRepository("https://repo1.maven.org/")

    assert remote.binary_url(sample()) == (
        "https://repo1.maven.org/maven2/org/junit/jupiter/junit-jupiter-api/5.10.2/junit-jupiter-api-5.10.2.jar"
    )
    assert remote.manifest_url(sample()) == (
        "https://repo1.maven.org/maven2/org/junit/jupiter/junit-jupiter-api/5.10.2/junit-jupiter-api-5.10.2.pom"
    )


def test_layout_is_appended_under_base_path():
    coordinate = Coordinate("com.acme", "lib", "1.0")

    for base in ("https://host/nexus", "https://host/nexus/"):
        assert RemoteRepository(base).binary_url(coordinate) == "https://host/nexus/maven2/com/acme/lib/1.0/lib-1.0.jar"


def test_empty_layout_uses_base_path_directly():
    remote = RemoteRepository("http://nexus.local/repository/public", layout="")

    assert remote.binary_url(Coordinate("com.acme", "lib", "1.0")) == (
        "http://nexus.local/repository/public/com/acme/lib/1.0/lib-1.0.jar"
    )


@pytest.mark.parametrize(
    "coordinate",
    [
        Coordinate(".org.acme", "lib", "1.0"),
        Coordinate("org.acme.", "lib", "1.0"),
        Coordinate("org..acme", "lib", "1.0"),
        Coordinate("org.acme", "lib name", "1.0"),
        Coordinate("org.acme", "lib", "1.0/../2.0"),
        Coordinate("org.acme", "", "1.0"),
        Coordinate("org.acme\n.x", "lib", "1.0"),
        Coordinate("org.acme", "lib\n", "1.0"),
    ],
)
def test_invalid_coordinates_raise(coordinate):
    remote = RemoteRepository()

    with pytest.raises(InvalidCoordinateError):
        remote.binary_url(coordinate)
    with pytest.raises(InvalidCoordinateError):
        remote.manifest_url(coordinate)


@pytest.mark.parametrize("url", ["ftp://repo.example.com/", "repo1.maven.org", "https://host/?q=1"])
def test_rejects_unusable_base_url(url):
    with pytest.raises(InvalidCoordinateError):
        RemoteRepository(url)
