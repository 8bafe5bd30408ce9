from xcodeproj.pbxproj.document import XcodeProject
from xcodeproj.pbxproj.graph import ObjectGraph, WeakHandle, XcodeID, generate_id
from xcodeproj.pbxproj.mapper import CONSTRUCTORS, build_graph, build_object
from xcodeproj.pbxproj.model import (
    DstSubfolderSpec,
    PBXAggregateTarget,
    PBXBuildFile,
    PBXBuildPhase,
    PBXBuildRule,
    PBXContainerItemProxy,
    PBXCopyFilesBuildPhase,
    PBXFileElement,
    PBXFileReference,
    PBXFileSystemSynchronizedRootGroup,
    PBXFrameworksBuildPhase,
    PBXGroup,
    PBXHeadersBuildPhase,
    PBXLegacyTarget,
    PBXNativeTarget,
    PBXObject,
    PBXPassthrough,
    PBXProject,
    PBXReferenceProxy,
    PBXResourcesBuildPhase,
    PBXRezBuildPhase,
    PBXShellScriptBuildPhase,
    PBXSourcesBuildPhase,
    PBXTarget,
    PBXTargetDependency,
    PBXVariantGroup,
    ProductType,
    ProxyType,
    VersionRequirementKind,
    XCBuildConfiguration,
    XCConfigurationList,
    XCLocalSwiftPackageReference,
    XCRemoteSwiftPackageReference,
    XCSwiftPackageProductDependency,
    XCVersionGroup,
    XCVersionRequirement,
)
from xcodeproj.pbxproj.record import Record, normalize_key
from xcodeproj.pbxproj.validator import validate_references
