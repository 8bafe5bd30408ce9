"""
Unit tests for XcodeProject construction.
"""

import pytest

from conftest import PROJECT_ID, SAMPLE_PBXPROJ, UNKNOWN_ID
from xcodeproj import ParserConfig, XcodeProject
from xcodeproj.errors import MissingField, ParseError, TypeMismatch, UnknownFieldsError
from xcodeproj.parser.kind import ObjectKind, UnknownKind
from xcodeproj.pbxproj.model import PBXPassthrough, PBXProject, XCBuildConfiguration

MINIMAL = """// !$*UTF8*$!
{
    archiveVersion = 1;
    objectVersion = 46;
    objects = {
    };
    rootObject = BA2B3C4D5E6F708192A3B4C5;
}
"""


class TestFromStr:
    """Test cases for parsing a complete document."""

    def test_header_fields(self, project):
        assert project.archive_version == 1
        assert project.object_version == 56
        assert project.classes == {}
        assert project.root_object_reference == PROJECT_ID
        assert project.extra == {}

    def test_objects(self, project):
        assert len(project.objects) == 20
        assert isinstance(project.root_object, PBXProject)

    def test_unknown_object_survives(self, project):
        obj = project.get(UNKNOWN_ID)
        assert isinstance(obj, PBXPassthrough)
        assert obj.kind == UnknownKind("PBXSpatialWidget")
        assert obj.values == {"depth": 3, "label": "Future object"}

    def test_objects_of_kind(self, project):
        configurations = project.objects_of_kind(ObjectKind.XC_BUILD_CONFIGURATION)
        assert len(configurations) == 4
        assert project.objects_of_kind(UnknownKind("PBXSpatialWidget")) == [
            (UNKNOWN_ID, project.get(UNKNOWN_ID))
        ]

    def test_objects_of_type(self, project):
        names = [obj.name for _, obj in project.objects_of_type(XCBuildConfiguration)]
        assert names == ["Debug", "Release", "Debug", "Release"]

    def test_minimal_document(self):
        project = XcodeProject.from_str(MINIMAL)
        assert len(project.objects) == 0
        assert project.root_object is None
        assert project.targets() == []

    def test_missing_root_object(self):
        """No document is produced when rootObject is absent."""
        text = MINIMAL.replace("    rootObject = BA2B3C4D5E6F708192A3B4C5;\n", "")
        with pytest.raises(MissingField) as exc_info:
            XcodeProject.from_str(text)
        assert exc_info.value.key == "root_object"

    def test_missing_objects(self):
        text = MINIMAL.replace("    objects = {\n    };\n", "")
        with pytest.raises(MissingField) as exc_info:
            XcodeProject.from_str(text)
        assert exc_info.value.key == "objects"

    def test_wrong_version_type(self):
        text = MINIMAL.replace("objectVersion = 46", "objectVersion = \"46\"")
        with pytest.raises(TypeMismatch) as exc_info:
            XcodeProject.from_str(text)
        assert exc_info.value.key == "object_version"

    def test_object_errors_carry_identifier(self, sample_text):
        text = sample_text.replace("name = Release;", "", 1)
        with pytest.raises(MissingField) as exc_info:
            XcodeProject.from_str(text)
        assert exc_info.value.key == "objects.FA2B3C4D5E6F708192A3B4C5.name"

    def test_syntax_error(self):
        with pytest.raises(ParseError):
            XcodeProject.from_str(MINIMAL.replace("};", "}", 1))

    def test_unknown_top_level_fields(self):
        text = MINIMAL.replace("archiveVersion = 1;", "archiveVersion = 1;\n    futureTopLevel = abc;")
        assert XcodeProject.from_str(text).extra == {"futureTopLevel": "abc"}
        with pytest.raises(UnknownFieldsError) as exc_info:
            XcodeProject.from_str(text, ParserConfig(strict=True))
        assert exc_info.value.fields == ["futureTopLevel"]


class TestFromPath:
    """Test cases for reading documents from disk."""

    def test_from_file(self, tmp_path):
        path = tmp_path / "project.pbxproj"
        path.write_text(SAMPLE_PBXPROJ, encoding="utf-8")
        project = XcodeProject.from_path(path)
        assert project.targets()[0].name == "Demo"

    def test_from_bundle(self, tmp_path):
        bundle = tmp_path / "Demo.xcodeproj"
        bundle.mkdir()
        (bundle / "project.pbxproj").write_text(SAMPLE_PBXPROJ, encoding="utf-8")
        project = XcodeProject.from_path(str(bundle))
        assert project.root_object_reference == PROJECT_ID

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            XcodeProject.from_path(tmp_path / "missing.pbxproj")
