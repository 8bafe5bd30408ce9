# Xcode project object model.
#
# One dataclass per known object kind. Fields that point at other objects hold raw
# identifier strings; the objects behind them are looked up through the weak graph
# handle each object receives when it is inserted into an ObjectGraph. Each class
# builds itself from a consuming Record and renders itself back to a record for
# the formatter.

import logging
import re
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Union

from xcodeproj.errors import XcodeProjError
from xcodeproj.parser.kind import Kind, ObjectKind
from xcodeproj.parser.value import PBXObjectMap, Value
from xcodeproj.pbxproj.graph import ObjectGraph, WeakHandle
from xcodeproj.pbxproj.record import Record

logger = logging.getLogger(__name__)

_SNAKE_WORD = re.compile(r"_([a-z0-9])")


def camel_case(name: str) -> str:
    return _SNAKE_WORD.sub(lambda m: m.group(1).upper(), name)


def pbx(key: Optional[str] = None, ref: bool = False, **kwargs: Any) -> Any:
    """Dataclass field carrying its pbxproj spelling and whether it holds identifiers."""
    return field(metadata={"key": key, "ref": ref}, **kwargs)


# Destination subfolder specifications used in PBXCopyFilesBuildPhase
class DstSubfolderSpec(Enum):
    ABSOLUTE_PATH = 0
    WRAPPER = 1
    EXECUTABLES = 2
    RESOURCES = 7
    JAVA_RESOURCES = 15
    FRAMEWORKS = 10
    SHARED_FRAMEWORKS = 11
    SHARED_SUPPORT = 12
    PLUGINS = 13
    PRODUCTS_DIRECTORY = 16


# Product types used in PBXNativeTarget
class ProductType(Enum):
    APPLICATION = "com.apple.product-type.application"
    FRAMEWORK = "com.apple.product-type.framework"
    STATIC_LIBRARY = "com.apple.product-type.library.static"
    DYNAMIC_LIBRARY = "com.apple.product-type.library.dynamic"
    BUNDLE = "com.apple.product-type.bundle"
    TOOL = "com.apple.product-type.tool"
    UNIT_TEST_BUNDLE = "com.apple.product-type.bundle.unit-test"
    UI_TEST_BUNDLE = "com.apple.product-type.bundle.ui-testing"
    APP_EXTENSION = "com.apple.product-type.app-extension"


class ProxyType(Enum):
    NATIVE_TARGET = 1  # For target dependencies
    REFERENCE = 2  # For product references
    OTHER = 3


class VersionRequirementKind(Enum):
    UP_TO_NEXT_MAJOR_VERSION = "upToNextMajorVersion"
    UP_TO_NEXT_MINOR_VERSION = "upToNextMinorVersion"
    RANGE = "versionRange"
    EXACT = "exactVersion"
    BRANCH = "branch"
    REVISION = "revision"


# Which requirement fields each kind of version rule needs
_REQUIREMENT_FIELDS = {
    VersionRequirementKind.UP_TO_NEXT_MAJOR_VERSION: ("minimum_version",),
    VersionRequirementKind.UP_TO_NEXT_MINOR_VERSION: ("minimum_version",),
    VersionRequirementKind.RANGE: ("minimum_version", "maximum_version"),
    VersionRequirementKind.EXACT: ("version",),
    VersionRequirementKind.BRANCH: ("branch",),
    VersionRequirementKind.REVISION: ("revision",),
}


@dataclass
class XCVersionRequirement:
    kind: VersionRequirementKind
    minimum_version: Optional[str] = None
    maximum_version: Optional[str] = None
    version: Optional[str] = None
    branch: Optional[str] = None
    revision: Optional[str] = None
    # Requirement keys the kind does not use, keyed by their pbxproj spelling
    extra: Dict[str, Value] = field(default_factory=dict)

    @classmethod
    def from_value(cls, value: PBXObjectMap) -> "XCVersionRequirement":
        record = Record(value)
        kind_text = record.take_string("kind")
        try:
            kind = VersionRequirementKind(kind_text)
        except ValueError as e:
            raise XcodeProjError(f"unknown version requirement kind {kind_text!r}") from e
        values = {name: record.take_string(name) for name in _REQUIREMENT_FIELDS[kind]}
        return cls(kind=kind, extra=record.residue(), **values)

    def to_value(self) -> PBXObjectMap:
        value: PBXObjectMap = {"kind": self.kind.value}
        for name in _REQUIREMENT_FIELDS[self.kind]:
            value[camel_case(name)] = getattr(self, name)
        value.update(self.extra)
        return value


# Base class for all Xcode objects
@dataclass
class PBXObject:
    KIND: ClassVar[Kind]

    # Set when the object is inserted into a graph
    objects: WeakHandle = field(init=False, repr=False, compare=False)
    # Fields the constructor did not consume, keyed by their pbxproj spelling
    extra: Dict[str, Value] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.objects = WeakHandle()
        self.extra = {}

    @property
    def kind(self) -> Kind:
        return self.KIND

    @classmethod
    def from_record(cls, record: Record) -> "PBXObject":
        raise NotImplementedError

    def references(self) -> Dict[str, Union[str, List[str]]]:
        """Identifiers this object points at, keyed by pbxproj field name."""
        result: Dict[str, Union[str, List[str]]] = {}
        for f in fields(self):
            if not f.init or not f.metadata.get("ref"):
                continue
            value = getattr(self, f.name)
            if value is None:
                continue
            key = f.metadata.get("key") or camel_case(f.name)
            result[key] = list(value) if isinstance(value, list) else value
        return result

    def to_record(self) -> PBXObjectMap:
        record: PBXObjectMap = {"isa": self.kind}
        for f in fields(self):
            if not f.init:
                continue
            value = getattr(self, f.name)
            if value is None:
                continue
            key = f.metadata.get("key") or camel_case(f.name)
            record[key] = _render(value)
        record.update(self.extra)
        return record


def _render(value: Any) -> Value:
    # Object level flags are written as 0/1, YES/NO only appears inside settings.
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, XCVersionRequirement):
        return value.to_value()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return list(value)
    return value


@dataclass
class PBXPassthrough(PBXObject):
    """Object of a kind without a registered constructor; keeps its record as is."""

    isa: Kind
    values: Dict[str, Value] = field(default_factory=dict)

    @property
    def kind(self) -> Kind:
        return self.isa

    @classmethod
    def from_record(cls, record: Record, isa: Kind) -> "PBXPassthrough":
        values = {}
        for key, _ in record.items():
            values[record.original_key(key)] = record.take_value(key)
        return cls(isa=isa, values=values)

    def to_record(self) -> PBXObjectMap:
        record: PBXObjectMap = {"isa": self.kind}
        record.update(self.values)
        record.update(self.extra)
        return record


@dataclass
class PBXBuildFile(PBXObject):
    KIND: ClassVar[Kind] = ObjectKind.PBX_BUILD_FILE

    file_ref: Optional[str] = pbx(ref=True, default=None)
    product_ref: Optional[str] = pbx(ref=True, default=None)
    settings: Optional[Dict[str, Value]] = None
    platform_filter: Optional[str] = None
    platform_filters: Optional[List[str]] = None

    @classmethod
    def from_record(cls, record: Record) -> "PBXBuildFile":
        return cls(
            file_ref=record.take_optional_string("file_ref"),
            product_ref=record.take_optional_string("product_ref"),
            settings=record.take_optional_object("settings"),
            platform_filter=record.take_optional_string("platform_filter"),
            platform_filters=record.take_optional_string_list("platform_filters") or None,
        )

    @property
    def file(self) -> Optional[PBXObject]:
        return self.objects.get(self.file_ref)

    @property
    def product(self) -> Optional["XCSwiftPackageProductDependency"]:
        return self.objects.get_as(self.product_ref, XCSwiftPackageProductDependency)


# Common fields of everything that can appear in a group
@dataclass
class PBXFileElement(PBXObject):
    name: Optional[str] = None
    path: Optional[str] = None
    source_tree: Optional[str] = None
    uses_tabs: Optional[bool] = None
    indent_width: Optional[int] = None
    tab_width: Optional[int] = None
    wraps_lines: Optional[bool] = None

    @classmethod
    def _element_fields(cls, record: Record) -> Dict[str, Any]:
        return dict(
            name=record.take_optional_string("name"),
            path=record.take_optional_string("path"),
            source_tree=record.take_optional_string("source_tree"),
            uses_tabs=record.take_optional_bool("uses_tabs"),
            indent_width=record.take_optional_number("indent_width"),
            tab_width=record.take_optional_number("tab_width"),
            wraps_lines=record.take_optional_bool("wraps_lines"),
        )

    @property
    def display_name(self) -> Optional[str]:
        if self.name:
            return self.name
        if self.path:
            return self.path.rsplit("/", 1)[-1]
        return None


@dataclass
class PBXFileReference(PBXFileElement):
    KIND: ClassVar[Kind] = ObjectKind.PBX_FILE_REFERENCE

    file_encoding: Optional[int] = None
    explicit_file_type: Optional[str] = None
    last_known_file_type: Optional[str] = None
    include_in_index: Optional[bool] = None
    line_ending: Optional[int] = None
    xc_language_specification_identifier: Optional[str] = None
    plist_structure_definition_identifier: Optional[str] = None

    @classmethod
    def from_record(cls, record: Record) -> "PBXFileReference":
        return cls(
            **cls._element_fields(record),
            file_encoding=record.take_optional_number("file_encoding"),
            explicit_file_type=record.take_optional_string("explicit_file_type"),
            last_known_file_type=record.take_optional_string("last_known_file_type"),
            include_in_index=record.take_optional_bool("include_in_index"),
            line_ending=record.take_optional_number("line_ending"),
            xc_language_specification_identifier=record.take_optional_string(
                "xc_language_specification_identifier"
            ),
            plist_structure_definition_identifier=record.take_optional_string(
                "plist_structure_definition_identifier"
            ),
        )

    @property
    def file_type(self) -> Optional[str]:
        return self.explicit_file_type or self.last_known_file_type


@dataclass
class PBXReferenceProxy(PBXFileElement):
    KIND: ClassVar[Kind] = ObjectKind.PBX_REFERENCE_PROXY

    file_type: Optional[str] = None
    remote_ref: Optional[str] = pbx(ref=True, default=None)

    @classmethod
    def from_record(cls, record: Record) -> "PBXReferenceProxy":
        return cls(
            **cls._element_fields(record),
            file_type=record.take_optional_string("file_type"),
            remote_ref=record.take_optional_string("remote_ref"),
        )

    def get_remote(self) -> Optional["PBXContainerItemProxy"]:
        return self.objects.get_as(self.remote_ref, PBXContainerItemProxy)


@dataclass
class PBXGroup(PBXFileElement):
    KIND: ClassVar[Kind] = ObjectKind.PBX_GROUP

    children: List[str] = pbx(ref=True, default_factory=list)

    @classmethod
    def from_record(cls, record: Record) -> "PBXGroup":
        return cls(
            **cls._element_fields(record),
            children=record.take_string_list("children"),
        )

    def get_children(self) -> List[PBXObject]:
        return self.objects.resolve(self.children)

    def get_file_references(self) -> List[PBXFileReference]:
        return self.objects.resolve_as(self.children, PBXFileReference)

    def get_subgroups(self) -> List["PBXGroup"]:
        return self.objects.resolve_as(self.children, PBXGroup)


@dataclass
class PBXVariantGroup(PBXGroup):
    KIND: ClassVar[Kind] = ObjectKind.PBX_VARIANT_GROUP


@dataclass
class XCVersionGroup(PBXGroup):
    KIND: ClassVar[Kind] = ObjectKind.XC_VERSION_GROUP

    current_version: Optional[str] = pbx(ref=True, default=None)
    version_group_type: Optional[str] = None

    @classmethod
    def from_record(cls, record: Record) -> "XCVersionGroup":
        return cls(
            **cls._element_fields(record),
            children=record.take_string_list("children"),
            current_version=record.take_optional_string("current_version"),
            version_group_type=record.take_optional_string("version_group_type"),
        )

    def get_current_version(self) -> Optional[PBXFileReference]:
        return self.objects.get_as(self.current_version, PBXFileReference)


@dataclass
class PBXFileSystemSynchronizedRootGroup(PBXFileElement):
    KIND: ClassVar[Kind] = ObjectKind.PBX_FILE_SYSTEM_SYNCHRONIZED_ROOT_GROUP

    exceptions: List[str] = pbx(ref=True, default_factory=list)
    explicit_file_types: Optional[Dict[str, Value]] = None
    explicit_folders: Optional[List[str]] = None

    @classmethod
    def from_record(cls, record: Record) -> "PBXFileSystemSynchronizedRootGroup":
        explicit_folders = None
        if "explicit_folders" in record:
            explicit_folders = record.take_string_list("explicit_folders")
        return cls(
            **cls._element_fields(record),
            exceptions=record.take_optional_string_list("exceptions"),
            explicit_file_types=record.take_optional_object("explicit_file_types"),
            explicit_folders=explicit_folders,
        )


# Common fields of all build phases
@dataclass
class PBXBuildPhase(PBXObject):
    files: List[str] = pbx(ref=True, default_factory=list)
    build_action_mask: int = 2147483647
    run_only_for_deployment_postprocessing: bool = False
    name: Optional[str] = None

    @classmethod
    def _phase_fields(cls, record: Record) -> Dict[str, Any]:
        return dict(
            files=record.take_optional_string_list("files"),
            build_action_mask=record.take_optional_number("build_action_mask", 2147483647),
            run_only_for_deployment_postprocessing=record.take_optional_bool(
                "run_only_for_deployment_postprocessing", False
            ),
            name=record.take_optional_string("name"),
        )

    @classmethod
    def from_record(cls, record: Record) -> "PBXBuildPhase":
        return cls(**cls._phase_fields(record))

    def get_files(self) -> List[PBXBuildFile]:
        return self.objects.resolve_as(self.files, PBXBuildFile)


@dataclass
class PBXSourcesBuildPhase(PBXBuildPhase):
    KIND: ClassVar[Kind] = ObjectKind.PBX_SOURCES_BUILD_PHASE


@dataclass
class PBXHeadersBuildPhase(PBXBuildPhase):
    KIND: ClassVar[Kind] = ObjectKind.PBX_HEADERS_BUILD_PHASE


@dataclass
class PBXFrameworksBuildPhase(PBXBuildPhase):
    KIND: ClassVar[Kind] = ObjectKind.PBX_FRAMEWORKS_BUILD_PHASE


@dataclass
class PBXResourcesBuildPhase(PBXBuildPhase):
    KIND: ClassVar[Kind] = ObjectKind.PBX_RESOURCES_BUILD_PHASE


@dataclass
class PBXRezBuildPhase(PBXBuildPhase):
    KIND: ClassVar[Kind] = ObjectKind.PBX_REZ_BUILD_PHASE


@dataclass
class PBXCopyFilesBuildPhase(PBXBuildPhase):
    KIND: ClassVar[Kind] = ObjectKind.PBX_COPY_FILES_BUILD_PHASE

    dst_path: Optional[str] = None
    dst_subfolder_spec: Optional[int] = None

    @classmethod
    def from_record(cls, record: Record) -> "PBXCopyFilesBuildPhase":
        return cls(
            **cls._phase_fields(record),
            dst_path=record.take_optional_string("dst_path"),
            dst_subfolder_spec=record.take_optional_number("dst_subfolder_spec"),
        )

    @property
    def subfolder(self) -> Optional[DstSubfolderSpec]:
        if self.dst_subfolder_spec is None:
            return None
        try:
            return DstSubfolderSpec(self.dst_subfolder_spec)
        except ValueError:
            return None


@dataclass
class PBXShellScriptBuildPhase(PBXBuildPhase):
    KIND: ClassVar[Kind] = ObjectKind.PBX_SHELL_SCRIPT_BUILD_PHASE

    shell_script: str = ""
    shell_path: str = "/bin/sh"
    input_paths: List[str] = field(default_factory=list)
    output_paths: List[str] = field(default_factory=list)
    input_file_list_paths: Optional[List[str]] = None
    output_file_list_paths: Optional[List[str]] = None
    show_env_vars_in_log: Optional[bool] = None
    always_out_of_date: Optional[bool] = None
    dependency_file: Optional[str] = None

    @classmethod
    def from_record(cls, record: Record) -> "PBXShellScriptBuildPhase":
        return cls(
            **cls._phase_fields(record),
            shell_script=record.take_string("shell_script"),
            shell_path=record.take_optional_string("shell_path", "/bin/sh"),
            input_paths=record.take_optional_string_list("input_paths"),
            output_paths=record.take_optional_string_list("output_paths"),
            input_file_list_paths=record.take_optional_string_list("input_file_list_paths")
            or None,
            output_file_list_paths=record.take_optional_string_list("output_file_list_paths")
            or None,
            show_env_vars_in_log=record.take_optional_bool("show_env_vars_in_log"),
            always_out_of_date=record.take_optional_bool("always_out_of_date"),
            dependency_file=record.take_optional_string("dependency_file"),
        )


@dataclass
class PBXBuildRule(PBXObject):
    KIND: ClassVar[Kind] = ObjectKind.PBX_BUILD_RULE

    compiler_spec: str
    file_type: str
    is_editable: bool = True
    name: Optional[str] = None
    file_patterns: Optional[str] = None
    input_files: List[str] = field(default_factory=list)
    output_files: List[str] = field(default_factory=list)
    output_files_compiler_flags: Optional[List[str]] = None
    script: Optional[str] = None
    run_once_per_architecture: Optional[bool] = None
    dependency_file: Optional[str] = None

    @classmethod
    def from_record(cls, record: Record) -> "PBXBuildRule":
        return cls(
            compiler_spec=record.take_string("compiler_spec"),
            file_type=record.take_string("file_type"),
            is_editable=record.take_optional_bool("is_editable", True),
            name=record.take_optional_string("name"),
            file_patterns=record.take_optional_string("file_patterns"),
            input_files=record.take_optional_string_list("input_files"),
            output_files=record.take_optional_string_list("output_files"),
            output_files_compiler_flags=record.take_optional_string_list(
                "output_files_compiler_flags"
            )
            or None,
            script=record.take_optional_string("script"),
            run_once_per_architecture=record.take_optional_bool("run_once_per_architecture"),
            dependency_file=record.take_optional_string("dependency_file"),
        )


@dataclass
class PBXContainerItemProxy(PBXObject):
    KIND: ClassVar[Kind] = ObjectKind.PBX_CONTAINER_ITEM_PROXY

    container_portal: str = pbx(ref=True)
    proxy_type: int = 1
    remote_global_id_string: Optional[str] = pbx(
        key="remoteGlobalIDString", ref=True, default=None
    )
    remote_info: Optional[str] = None

    @classmethod
    def from_record(cls, record: Record) -> "PBXContainerItemProxy":
        return cls(
            container_portal=record.take_string("container_portal"),
            proxy_type=record.take_number("proxy_type"),
            remote_global_id_string=record.take_optional_string("remote_global_id_string"),
            remote_info=record.take_optional_string("remote_info"),
        )

    @property
    def proxy(self) -> Optional[ProxyType]:
        try:
            return ProxyType(self.proxy_type)
        except ValueError:
            return None

    def get_remote_object(self) -> Optional[PBXObject]:
        # Only resolvable when the portal is this project rather than a sub-project file.
        return self.objects.get(self.remote_global_id_string)


@dataclass
class PBXTargetDependency(PBXObject):
    KIND: ClassVar[Kind] = ObjectKind.PBX_TARGET_DEPENDENCY

    name: Optional[str] = None
    target: Optional[str] = pbx(ref=True, default=None)
    target_proxy: Optional[str] = pbx(ref=True, default=None)
    product_ref: Optional[str] = pbx(ref=True, default=None)
    platform_filter: Optional[str] = None

    @classmethod
    def from_record(cls, record: Record) -> "PBXTargetDependency":
        return cls(
            name=record.take_optional_string("name"),
            target=record.take_optional_string("target"),
            target_proxy=record.take_optional_string("target_proxy"),
            product_ref=record.take_optional_string("product_ref"),
            platform_filter=record.take_optional_string("platform_filter"),
        )

    def get_target(self) -> Optional["PBXTarget"]:
        return self.objects.get_as(self.target, PBXTarget)

    def get_target_proxy(self) -> Optional[PBXContainerItemProxy]:
        return self.objects.get_as(self.target_proxy, PBXContainerItemProxy)

    @property
    def display_name(self) -> Optional[str]:
        """Name of the target this dependency points at, as far as it can be resolved."""
        if self.name:
            return self.name
        target = self.get_target()
        if target is not None:
            return target.name
        proxy = self.get_target_proxy()
        if proxy is not None:
            return proxy.remote_info
        return None


@dataclass
class XCBuildConfiguration(PBXObject):
    KIND: ClassVar[Kind] = ObjectKind.XC_BUILD_CONFIGURATION

    name: str
    build_settings: Dict[str, Value] = field(default_factory=dict)
    base_configuration_reference: Optional[str] = pbx(ref=True, default=None)

    @classmethod
    def from_record(cls, record: Record) -> "XCBuildConfiguration":
        return cls(
            name=record.take_string("name"),
            build_settings=record.take_optional_object("build_settings", {}),
            base_configuration_reference=record.take_optional_string(
                "base_configuration_reference"
            ),
        )

    def get_base_configuration(self) -> Optional[PBXFileReference]:
        return self.objects.get_as(self.base_configuration_reference, PBXFileReference)


@dataclass
class XCConfigurationList(PBXObject):
    KIND: ClassVar[Kind] = ObjectKind.XC_CONFIGURATION_LIST

    build_configuration_references: List[str] = pbx(
        key="buildConfigurations", ref=True, default_factory=list
    )
    default_configuration_is_visible: bool = False
    default_configuration_name: Optional[str] = None

    @classmethod
    def from_record(cls, record: Record) -> "XCConfigurationList":
        return cls(
            build_configuration_references=record.take_string_list("build_configurations"),
            default_configuration_is_visible=record.take_optional_bool(
                "default_configuration_is_visible", False
            ),
            default_configuration_name=record.take_optional_string(
                "default_configuration_name"
            ),
        )

    def set_build_configuration_references(self, references: List[str]) -> List[str]:
        """Replace the member identifiers, returning the previous ones."""
        old = self.build_configuration_references
        self.build_configuration_references = list(references)
        return old

    def resolve(self, graph: ObjectGraph) -> List[XCBuildConfiguration]:
        return graph.resolve_as(self.build_configuration_references, XCBuildConfiguration)

    def get_build_configurations(self, graph: ObjectGraph) -> List[XCBuildConfiguration]:
        return self.resolve(graph)

    def get_configuration_by_name(
        self, graph: ObjectGraph, name: str
    ) -> Optional[XCBuildConfiguration]:
        for configuration in self.resolve(graph):
            if configuration.name == name:
                return configuration
        return None

    def add_default_configurations(self, graph: ObjectGraph) -> List[str]:
        """Add Debug and Release configurations to the graph and to this list."""
        with graph.mutation():
            added: List[str] = []
            try:
                for name in ("Debug", "Release"):
                    identifier = graph.new_id()
                    graph.insert(identifier, XCBuildConfiguration(name=name))
                    added.append(identifier)
            except XcodeProjError:
                for identifier in added:
                    graph.remove(identifier)
                raise
            self.build_configuration_references.extend(added)
        return added

    def object_with_configuration_list(self, graph: ObjectGraph) -> Optional[PBXObject]:
        """The project or target this list belongs to."""
        identifier = graph.identifier_of(self)
        if identifier is None:
            return None
        for _, obj in graph.items():
            if isinstance(obj, (PBXProject, PBXTarget)):
                if obj.build_configuration_list == identifier:
                    return obj
        return None


# Common fields of native, aggregate and legacy targets
@dataclass
class PBXTarget(PBXObject):
    name: str = ""
    build_configuration_list: Optional[str] = pbx(ref=True, default=None)
    build_phases: List[str] = pbx(ref=True, default_factory=list)
    dependencies: List[str] = pbx(ref=True, default_factory=list)
    product_name: Optional[str] = None

    @classmethod
    def _target_fields(cls, record: Record) -> Dict[str, Any]:
        return dict(
            name=record.take_string("name"),
            build_configuration_list=record.take_optional_string("build_configuration_list"),
            build_phases=record.take_optional_string_list("build_phases"),
            dependencies=record.take_optional_string_list("dependencies"),
            product_name=record.take_optional_string("product_name"),
        )

    def get_build_configuration_list(self) -> Optional[XCConfigurationList]:
        return self.objects.get_as(self.build_configuration_list, XCConfigurationList)

    def get_build_phases(self) -> List[PBXBuildPhase]:
        return self.objects.resolve_as(self.build_phases, PBXBuildPhase)

    def get_dependencies(self) -> List[PBXTargetDependency]:
        return self.objects.resolve_as(self.dependencies, PBXTargetDependency)


@dataclass
class PBXNativeTarget(PBXTarget):
    KIND: ClassVar[Kind] = ObjectKind.PBX_NATIVE_TARGET

    product_type: Optional[str] = None
    product_reference: Optional[str] = pbx(ref=True, default=None)
    product_install_path: Optional[str] = None
    build_rules: List[str] = pbx(ref=True, default_factory=list)
    package_product_dependencies: List[str] = pbx(ref=True, default_factory=list)
    file_system_synchronized_groups: List[str] = pbx(ref=True, default_factory=list)

    @classmethod
    def from_record(cls, record: Record) -> "PBXNativeTarget":
        return cls(
            **cls._target_fields(record),
            product_type=record.take_optional_string("product_type"),
            product_reference=record.take_optional_string("product_reference"),
            product_install_path=record.take_optional_string("product_install_path"),
            build_rules=record.take_optional_string_list("build_rules"),
            package_product_dependencies=record.take_optional_string_list(
                "package_product_dependencies"
            ),
            file_system_synchronized_groups=record.take_optional_string_list(
                "file_system_synchronized_groups"
            ),
        )

    @property
    def product(self) -> Optional[ProductType]:
        if self.product_type is None:
            return None
        try:
            return ProductType(self.product_type)
        except ValueError:
            return None

    def get_product_reference(self) -> Optional[PBXFileReference]:
        return self.objects.get_as(self.product_reference, PBXFileReference)

    def get_package_product_dependencies(self) -> List["XCSwiftPackageProductDependency"]:
        return self.objects.resolve_as(
            self.package_product_dependencies, XCSwiftPackageProductDependency
        )


@dataclass
class PBXAggregateTarget(PBXTarget):
    KIND: ClassVar[Kind] = ObjectKind.PBX_AGGREGATE_TARGET

    @classmethod
    def from_record(cls, record: Record) -> "PBXAggregateTarget":
        return cls(**cls._target_fields(record))


@dataclass
class PBXLegacyTarget(PBXTarget):
    KIND: ClassVar[Kind] = ObjectKind.PBX_LEGACY_TARGET

    build_tool_path: Optional[str] = None
    build_arguments_string: Optional[str] = None
    build_working_directory: Optional[str] = None
    pass_build_settings_in_environment: bool = False

    @classmethod
    def from_record(cls, record: Record) -> "PBXLegacyTarget":
        return cls(
            **cls._target_fields(record),
            build_tool_path=record.take_optional_string("build_tool_path"),
            build_arguments_string=record.take_optional_string("build_arguments_string"),
            build_working_directory=record.take_optional_string("build_working_directory"),
            pass_build_settings_in_environment=record.take_optional_bool(
                "pass_build_settings_in_environment", False
            ),
        )


@dataclass
class PBXProject(PBXObject):
    KIND: ClassVar[Kind] = ObjectKind.PBX_PROJECT

    build_configuration_list: str = pbx(ref=True)
    main_group: str = pbx(ref=True)
    product_ref_group: Optional[str] = pbx(ref=True, default=None)
    targets: List[str] = pbx(ref=True, default_factory=list)
    attributes: Dict[str, Value] = field(default_factory=dict)
    compatibility_version: Optional[str] = None
    development_region: Optional[str] = None
    has_scanned_for_encodings: Optional[bool] = None
    known_regions: List[str] = field(default_factory=list)
    project_dir_path: str = ""
    project_root: str = ""
    project_references: Optional[List[Value]] = None
    package_references: List[str] = pbx(ref=True, default_factory=list)
    preferred_project_object_version: Optional[int] = None
    minimized_project_reference_proxies: Optional[bool] = None

    @classmethod
    def from_record(cls, record: Record) -> "PBXProject":
        return cls(
            build_configuration_list=record.take_string("build_configuration_list"),
            main_group=record.take_string("main_group"),
            product_ref_group=record.take_optional_string("product_ref_group"),
            targets=record.take_optional_string_list("targets"),
            attributes=record.take_optional_object("attributes", {}),
            compatibility_version=record.take_optional_string("compatibility_version"),
            development_region=record.take_optional_string("development_region"),
            has_scanned_for_encodings=record.take_optional_bool("has_scanned_for_encodings"),
            known_regions=record.take_optional_string_list("known_regions"),
            project_dir_path=record.take_optional_string("project_dir_path", ""),
            project_root=record.take_optional_string("project_root", ""),
            project_references=record.take_optional_array("project_references"),
            package_references=record.take_optional_string_list("package_references"),
            preferred_project_object_version=record.take_optional_number(
                "preferred_project_object_version"
            ),
            minimized_project_reference_proxies=record.take_optional_bool(
                "minimized_project_reference_proxies"
            ),
        )

    def get_build_configuration_list(self) -> Optional[XCConfigurationList]:
        return self.objects.get_as(self.build_configuration_list, XCConfigurationList)

    def get_main_group(self) -> Optional[PBXGroup]:
        return self.objects.get_as(self.main_group, PBXGroup)

    def get_product_ref_group(self) -> Optional[PBXGroup]:
        return self.objects.get_as(self.product_ref_group, PBXGroup)

    def get_targets(self) -> List[PBXTarget]:
        return self.objects.resolve_as(self.targets, PBXTarget)

    def get_target_by_name(self, name: str) -> Optional[PBXTarget]:
        for target in self.get_targets():
            if target.name == name:
                return target
        return None

    def get_package_references(self) -> List[PBXObject]:
        return self.objects.resolve(self.package_references)


@dataclass
class XCRemoteSwiftPackageReference(PBXObject):
    KIND: ClassVar[Kind] = ObjectKind.XC_REMOTE_SWIFT_PACKAGE_REFERENCE

    repository_url: Optional[str] = pbx(key="repositoryURL", default=None)
    requirement: Optional[XCVersionRequirement] = None

    @classmethod
    def from_record(cls, record: Record) -> "XCRemoteSwiftPackageReference":
        repository_url = record.take_optional_string("repository_url")
        requirement = None
        raw = record.take_optional_object("requirement")
        if raw is not None:
            try:
                requirement = XCVersionRequirement.from_value(raw)
            except XcodeProjError as e:
                # Unreadable rules stay in the record untouched.
                logger.debug("keeping raw package requirement: %s", e)
                record.restore("requirement", raw)
        return cls(repository_url=repository_url, requirement=requirement)

    @property
    def name(self) -> Optional[str]:
        if not self.repository_url:
            return None
        name = self.repository_url.rstrip("/").rsplit("/", 1)[-1]
        if name.endswith(".git"):
            name = name[: -len(".git")]
        return name

    @property
    def version_requirement(self) -> Optional[XCVersionRequirement]:
        return self.requirement


@dataclass
class XCLocalSwiftPackageReference(PBXObject):
    KIND: ClassVar[Kind] = ObjectKind.XC_LOCAL_SWIFT_PACKAGE_REFERENCE

    relative_path: str

    @classmethod
    def from_record(cls, record: Record) -> "XCLocalSwiftPackageReference":
        return cls(relative_path=record.take_string("relative_path"))

    @property
    def name(self) -> str:
        return self.relative_path.rstrip("/").rsplit("/", 1)[-1]


@dataclass
class XCSwiftPackageProductDependency(PBXObject):
    KIND: ClassVar[Kind] = ObjectKind.XC_SWIFT_PACKAGE_PRODUCT_DEPENDENCY

    product_name: Optional[str] = None
    package_reference: Optional[str] = pbx(key="package", ref=True, default=None)

    @classmethod
    def from_record(cls, record: Record) -> "XCSwiftPackageProductDependency":
        return cls(
            product_name=record.take_optional_string("product_name"),
            package_reference=record.take_optional_string("package"),
        )

    def get_package(
        self,
    ) -> Optional[Union[XCRemoteSwiftPackageReference, XCLocalSwiftPackageReference]]:
        package = self.objects.get(self.package_reference)
        if isinstance(package, (XCRemoteSwiftPackageReference, XCLocalSwiftPackageReference)):
            return package
        return None
