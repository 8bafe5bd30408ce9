# Xcode object kinds.
#
# The "isa" field of every object in a pbxproj file names its kind. Known kinds are
# members of ObjectKind; any other tag is kept verbatim in an UnknownKind so that
# files written by newer Xcode versions still load.

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union


class ObjectKind(Enum):
    PBX_AGGREGATE_TARGET = "PBXAggregateTarget"
    PBX_BUILD_FILE = "PBXBuildFile"
    PBX_BUILD_RULE = "PBXBuildRule"
    PBX_CONTAINER_ITEM_PROXY = "PBXContainerItemProxy"
    PBX_COPY_FILES_BUILD_PHASE = "PBXCopyFilesBuildPhase"
    PBX_FILE_REFERENCE = "PBXFileReference"
    PBX_FILE_SYSTEM_SYNCHRONIZED_ROOT_GROUP = "PBXFileSystemSynchronizedRootGroup"
    PBX_FILE_SYSTEM_SYNCHRONIZED_BUILD_FILE_EXCEPTION_SET = (
        "PBXFileSystemSynchronizedBuildFileExceptionSet"
    )
    PBX_FRAMEWORKS_BUILD_PHASE = "PBXFrameworksBuildPhase"
    PBX_GROUP = "PBXGroup"
    PBX_HEADERS_BUILD_PHASE = "PBXHeadersBuildPhase"
    PBX_LEGACY_TARGET = "PBXLegacyTarget"
    PBX_NATIVE_TARGET = "PBXNativeTarget"
    PBX_PROJECT = "PBXProject"
    PBX_REFERENCE_PROXY = "PBXReferenceProxy"
    PBX_RESOURCES_BUILD_PHASE = "PBXResourcesBuildPhase"
    PBX_REZ_BUILD_PHASE = "PBXRezBuildPhase"
    PBX_SHELL_SCRIPT_BUILD_PHASE = "PBXShellScriptBuildPhase"
    PBX_SOURCES_BUILD_PHASE = "PBXSourcesBuildPhase"
    PBX_TARGET_DEPENDENCY = "PBXTargetDependency"
    PBX_VARIANT_GROUP = "PBXVariantGroup"
    XC_BUILD_CONFIGURATION = "XCBuildConfiguration"
    XC_CONFIGURATION_LIST = "XCConfigurationList"
    XC_LOCAL_SWIFT_PACKAGE_REFERENCE = "XCLocalSwiftPackageReference"
    XC_REMOTE_SWIFT_PACKAGE_REFERENCE = "XCRemoteSwiftPackageReference"
    XC_SWIFT_PACKAGE_PRODUCT_DEPENDENCY = "XCSwiftPackageProductDependency"
    XC_VERSION_GROUP = "XCVersionGroup"

    @property
    def tag(self) -> str:
        return self.value

    @property
    def is_build_phase(self) -> bool:
        return self.value.endswith("BuildPhase")

    @property
    def is_target(self) -> bool:
        return self.value.endswith("Target")

    @staticmethod
    def from_tag(tag: str) -> "Kind":
        """Map an isa tag to its ObjectKind, or to UnknownKind when not known."""
        kind = KNOWN_TAGS.get(tag)
        if kind is None:
            return UnknownKind(tag)
        return kind

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UnknownKind:
    tag: str

    @property
    def is_build_phase(self) -> bool:
        return False

    @property
    def is_target(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.tag


Kind = Union[ObjectKind, UnknownKind]

KNOWN_TAGS: Dict[str, ObjectKind] = {kind.value: kind for kind in ObjectKind}
