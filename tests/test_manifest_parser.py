import pytest

from jarfetch.modules.artifacts import Coordinate, ManifestParseError, dependencies
from jarfetch.modules.artifacts.manifest import strip_xml_declaration

BODY = """<project xmlns="http://maven.apache.org/POM/4.0.0" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">
    <modelVersion>4.0.0</modelVersion>
    <groupId>me.folgue</groupId>
    <artifactId>adt_tar4</artifactId>
    <version>1.0-SNAPSHOT</version>
    <properties>
        <maven.compiler.source>17</maven.compiler.source>
    </properties>

    <dependencies>
        <dependency>
            <groupId>org.mariadb.jdbc</groupId>
            <artifactId>mariadb-java-client</artifactId>
            <version>3.3.3</version>
        </dependency>
        <dependency>
            <groupId>org.hibernate.orm</groupId>
            <artifactId>hibernate-core</artifactId>
            <version>6.4.4.Final</version>
        </dependency>
        <dependency>
            <groupId>org.junit.jupiter</groupId>
            <artifactId>junit-jupiter</artifactId>
            <version>5.10.0</version>
        </dependency>
    </dependencies>
</project>
"""

SAMPLE_VALID_POM = '\n<?xml version="1.0" encoding="UTF-8"?>\n' + BODY

EXPECTED = [
    Coordinate("org.mariadb.jdbc", "mariadb-java-client", "3.3.3"),
    Coordinate("org.hibernate.orm", "hibernate-core", "6.4.4.Final"),
    Coordinate("org.junit.jupiter", "junit-jupiter", "5.10.0"),
]


def test_dependencies_in_declaration_order():
    assert dependencies(SAMPLE_VALID_POM) == EXPECTED


def test_declaration_does_not_change_result():
    assert dependencies(BODY) == dependencies(SAMPLE_VALID_POM)


def test_declaration_on_same_line_as_root():
    inline = '<?xml version="1.0"?><project><dependencies/></project>'

    assert dependencies(inline) == []


def test_accepts_bytes():
    assert dependencies(SAMPLE_VALID_POM.encode("utf-8")) == EXPECTED


def test_field_text_is_stripped():
    pom = """<project><dependencies><dependency>
        <groupId>
            com.acme
        </groupId>
        <artifactId>lib</artifactId>
        <version> 1.2 </version>
    </dependency></dependencies></project>"""

    assert dependencies(pom) == [Coordinate("com.acme", "lib", "1.2")]


def test_managed_and_plugin_dependencies_are_ignored():
    pom = """<project>
        <dependencyManagement><dependencies><dependency>
            <groupId>managed</groupId><artifactId>x</artifactId><version>1</version>
        </dependency></dependencies></dependencyManagement>
        <dependencies><dependency>
            <groupId>direct</groupId><artifactId>y</artifactId><version>2</version>
        </dependency></dependencies>
        <build><plugins><plugin><dependencies><dependency>
            <groupId>plugin</groupId><artifactId>z</artifactId><version>3</version>
        </dependency></dependencies></plugin></plugins></build>
    </project>"""

    assert dependencies(pom) == [Coordinate("direct", "y", "2")]


def test_missing_dependencies_element_fails():
    with pytest.raises(ManifestParseError):
        dependencies("<project><groupId>g</groupId></project>")


def test_missing_version_fails():
    pom = "<project><dependencies><dependency><groupId>g</groupId><artifactId>a</artifactId></dependency></dependencies></project>"

    with pytest.raises(ManifestParseError):
        dependencies(pom)


def test_field_names_are_case_sensitive():
    pom = "<project><dependencies><dependency><groupid>g</groupid><artifactId>a</artifactId><version>1</version></dependency></dependencies></project>"

    with pytest.raises(ManifestParseError):
        dependencies(pom)


@pytest.mark.parametrize(
    "text",
    ["", "<project><dependencies>", "not xml at all", "<metadata><dependencies/></metadata>"],
)
def test_malformed_documents_fail(text):
    with pytest.raises(ManifestParseError):
        dependencies(text)


def test_strip_leaves_other_documents_untouched():
    text = "  <project/>"

    assert strip_xml_declaration(text) == text
