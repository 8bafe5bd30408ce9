"""
Unit tests for the pbxproj formatter.
"""

import pytest

from xcodeproj import XcodeProject
from xcodeproj.parser.kind import ObjectKind, UnknownKind
from xcodeproj.parser.value import parse_value
from xcodeproj.pbxproj.formatter import HEADER, format_dict, format_list, format_string, format_value


class TestFormatValue:
    """Test cases for scalar and container formatting."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("main.swift", "main.swift"),
            ("F2E640B5C2B85914F6801498", "F2E640B5C2B85914F6801498"),
            ("5.0", "5.0"),
            ("/bin/sh", "/bin/sh"),
            ("<group>", '"<group>"'),
            ("", '""'),
            ("Xcode 14.0", '"Xcode 14.0"'),
            ("$(TARGET_NAME)", '"$(TARGET_NAME)"'),
            ("YES", '"YES"'),
            ("42", '"42"'),
            ("PBXGroup", '"PBXGroup"'),
            ("//path", '"//path"'),
        ],
    )
    def test_format_string(self, value, expected):
        """Strings are bare only when they would read back as the same string."""
        assert format_string(value) == expected

    def test_escaped_quotes_stay_as_written(self):
        assert format_string(r"echo \"hi\"") == r'"echo \"hi\""'

    def test_unescaped_quotes_are_escaped(self):
        assert format_string('say "hi"') == r'"say \"hi\""'

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("C:\\work\\", r'"C:\work\\"'),
            ("\\", r'"\\"'),
            (r"a\\", r'"a\\"'),
            (r'a\\"', r'"a\\\""'),
        ],
    )
    def test_backslashes_never_end_the_literal(self, value, expected):
        """A lone final backslash is doubled; escape pairs are left as written."""
        formatted = format_string(value)
        assert formatted == expected
        assert isinstance(parse_value(formatted), str)

    def test_scalars(self):
        assert format_value(True, 0) == "YES"
        assert format_value(False, 0) == "NO"
        assert format_value(2147483647, 0) == "2147483647"
        assert format_value(ObjectKind.PBX_GROUP, 0) == "PBXGroup"
        assert format_value(UnknownKind("PBXSpatialWidget"), 0) == "PBXSpatialWidget"

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            format_value(1.5, 0)

    def test_lists(self):
        assert format_list([], 0) == "()"
        assert format_list(["a"], 0) == "(a)"
        assert format_list(["a", "b"], 1) == "(\n\t\ta,\n\t\tb,\n\t)"

    def test_dicts(self):
        assert format_dict({}, 1) == "{\n\t}"
        assert format_dict({"b": 1, "isa": ObjectKind.PBX_GROUP, "a": "x"}, 0) == (
            "{\n\tisa = PBXGroup;\n\ta = x;\n\tb = 1;\n}"
        )

    @pytest.mark.parametrize(
        "value",
        [
            "<group>",
            "5.0",
            "42",
            "YES",
            "PBXGroup",
            "",
            r"a \"quoted\" word",
            ["x", 1, True, {"k": "v"}],
            {"nested": {"list": ["1.2.3", "F2E640B5C2B85914F6801498"]}},
        ],
    )
    def test_values_read_back_unchanged(self, value):
        assert parse_value(format_value(value, 0)) == value


class TestFormatDocument:
    """Test cases for whole document output."""

    def test_header_and_sections(self, project):
        text = project.to_string()
        assert text.startswith(HEADER + "{\n\tarchiveVersion = 1;\n")
        assert "/* Begin PBXBuildFile section */" in text
        assert "/* End XCSwiftPackageProductDependency section */" in text
        assert "/* Begin PBXSpatialWidget section */" in text
        assert "\trootObject = BA2B3C4D5E6F708192A3B4C5;\n" in text

    def test_sections_are_sorted(self, project):
        text = project.to_string()
        assert text.index("Begin PBXBuildFile") < text.index("Begin PBXProject")
        assert text.index("Begin PBXProject") < text.index("Begin XCBuildConfiguration")

    def test_round_trip(self, project):
        """Formatting and parsing again yields equal objects."""
        reparsed = XcodeProject.from_str(project.to_string())
        assert reparsed.archive_version == project.archive_version
        assert reparsed.object_version == project.object_version
        assert reparsed.root_object_reference == project.root_object_reference
        assert reparsed.objects.ids() != []
        assert sorted(reparsed.objects.ids()) == sorted(project.objects.ids())
        for identifier, obj in project.objects.items():
            other = reparsed.get(identifier)
            assert other == obj
            assert other.extra == obj.extra

    def test_output_is_stable(self, project):
        text = project.to_string()
        assert XcodeProject.from_str(text).to_string() == text

    def test_edits_are_written(self, project):
        config_list = project.root_object.get_build_configuration_list()
        added = config_list.add_default_configurations(project.objects)
        reparsed = XcodeProject.from_str(project.to_string())
        names = [
            configuration.name
            for configuration in reparsed.get(project.root_object.build_configuration_list).resolve(
                reparsed.objects
            )
        ]
        assert names == ["Debug", "Release", "Debug", "Release"]
        assert all(identifier in reparsed.objects for identifier in added)

    def test_integer_leading_zeros_are_dropped(self):
        """Integers are rewritten from their value, not their source text."""
        value = parse_value("{ LastUpgradeCheck = 0940; }")
        assert value == {"LastUpgradeCheck": 940}
        assert "LastUpgradeCheck = 940;" in format_dict(value, 0)

    def test_edited_path_ending_in_backslash(self, project):
        """A value edited to end in a backslash still reads back."""
        project.root_object.project_dir_path = "C:\\work\\"
        reparsed = XcodeProject.from_str(project.to_string())
        assert reparsed.root_object.project_dir_path == r"C:\work\\"
        assert reparsed.root_object.main_group == project.root_object.main_group

    def test_residue_is_written(self):
        text = """{
            archiveVersion = 1;
            objectVersion = 56;
            objects = {
                EA2B3C4D5E6F708192A3B4C5 = { isa = XCBuildConfiguration; name = Debug; futureSetting = 7; };
            };
            rootObject = EA2B3C4D5E6F708192A3B4C5;
            futureTopLevel = abc;
        }"""
        output = XcodeProject.from_str(text).to_string()
        assert "futureSetting = 7;" in output
        assert "\tfutureTopLevel = abc;\n" in output
