# Typed object mapper.
#
# Turns the raw "objects" dictionary of a pbxproj file into an ObjectGraph. Each
# record is dispatched on its "isa" tag through CONSTRUCTORS; supporting a new
# Xcode object kind means adding an entry there.

import logging
from typing import Callable, Dict, Optional

from xcodeproj.config import DEFAULT_CONFIG, ParserConfig
from xcodeproj.errors import MappingError, TypeMismatch, UnknownFieldsError
from xcodeproj.parser.kind import Kind, ObjectKind
from xcodeproj.parser.value import PBXObjectMap, Value, value_kind
from xcodeproj.pbxproj.graph import ObjectGraph
from xcodeproj.pbxproj.model import (
    PBXAggregateTarget,
    PBXBuildFile,
    PBXBuildRule,
    PBXContainerItemProxy,
    PBXCopyFilesBuildPhase,
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
    PBXTargetDependency,
    PBXVariantGroup,
    XCBuildConfiguration,
    XCConfigurationList,
    XCLocalSwiftPackageReference,
    XCRemoteSwiftPackageReference,
    XCSwiftPackageProductDependency,
    XCVersionGroup,
)
from xcodeproj.pbxproj.record import Record

logger = logging.getLogger(__name__)

Constructor = Callable[[Record], PBXObject]

CONSTRUCTORS: Dict[Kind, Constructor] = {
    ObjectKind.PBX_AGGREGATE_TARGET: PBXAggregateTarget.from_record,
    ObjectKind.PBX_BUILD_FILE: PBXBuildFile.from_record,
    ObjectKind.PBX_BUILD_RULE: PBXBuildRule.from_record,
    ObjectKind.PBX_CONTAINER_ITEM_PROXY: PBXContainerItemProxy.from_record,
    ObjectKind.PBX_COPY_FILES_BUILD_PHASE: PBXCopyFilesBuildPhase.from_record,
    ObjectKind.PBX_FILE_REFERENCE: PBXFileReference.from_record,
    ObjectKind.PBX_FILE_SYSTEM_SYNCHRONIZED_ROOT_GROUP: PBXFileSystemSynchronizedRootGroup.from_record,
    ObjectKind.PBX_FRAMEWORKS_BUILD_PHASE: PBXFrameworksBuildPhase.from_record,
    ObjectKind.PBX_GROUP: PBXGroup.from_record,
    ObjectKind.PBX_HEADERS_BUILD_PHASE: PBXHeadersBuildPhase.from_record,
    ObjectKind.PBX_LEGACY_TARGET: PBXLegacyTarget.from_record,
    ObjectKind.PBX_NATIVE_TARGET: PBXNativeTarget.from_record,
    ObjectKind.PBX_PROJECT: PBXProject.from_record,
    ObjectKind.PBX_REFERENCE_PROXY: PBXReferenceProxy.from_record,
    ObjectKind.PBX_RESOURCES_BUILD_PHASE: PBXResourcesBuildPhase.from_record,
    ObjectKind.PBX_REZ_BUILD_PHASE: PBXRezBuildPhase.from_record,
    ObjectKind.PBX_SHELL_SCRIPT_BUILD_PHASE: PBXShellScriptBuildPhase.from_record,
    ObjectKind.PBX_SOURCES_BUILD_PHASE: PBXSourcesBuildPhase.from_record,
    ObjectKind.PBX_TARGET_DEPENDENCY: PBXTargetDependency.from_record,
    ObjectKind.PBX_VARIANT_GROUP: PBXVariantGroup.from_record,
    ObjectKind.XC_BUILD_CONFIGURATION: XCBuildConfiguration.from_record,
    ObjectKind.XC_CONFIGURATION_LIST: XCConfigurationList.from_record,
    ObjectKind.XC_LOCAL_SWIFT_PACKAGE_REFERENCE: XCLocalSwiftPackageReference.from_record,
    ObjectKind.XC_REMOTE_SWIFT_PACKAGE_REFERENCE: XCRemoteSwiftPackageReference.from_record,
    ObjectKind.XC_SWIFT_PACKAGE_PRODUCT_DEPENDENCY: XCSwiftPackageProductDependency.from_record,
    ObjectKind.XC_VERSION_GROUP: XCVersionGroup.from_record,
}


def build_object(
    record: Record, config: Optional[ParserConfig] = None
) -> PBXObject:
    """Build the domain object for one record, consuming its fields."""
    config = config or DEFAULT_CONFIG
    kind = record.take_kind("isa")
    constructor = CONSTRUCTORS.get(kind)
    if constructor is None:
        logger.debug("no constructor for %s, keeping raw record", kind)
        return PBXPassthrough.from_record(record, kind)

    obj = constructor(record)
    residue = record.residue()
    if residue:
        if config.strict:
            raise UnknownFieldsError(str(kind), residue)
        if config.keep_unknown_fields:
            logger.debug("%s: keeping unknown fields %s", kind, ", ".join(residue))
            obj.extra = residue
    return obj


def build_graph(
    objects: PBXObjectMap, config: Optional[ParserConfig] = None
) -> ObjectGraph:
    """Map every record of an "objects" dictionary into a new ObjectGraph."""
    config = config or DEFAULT_CONFIG
    graph = ObjectGraph(config)
    with graph.mutation():
        for identifier, values in objects.items():
            graph.insert(identifier, map_object(identifier, values, config))
    return graph


def map_object(
    identifier: str, values: Value, config: Optional[ParserConfig] = None
) -> PBXObject:
    path = f"objects.{identifier}"
    if not isinstance(values, dict):
        raise TypeMismatch(path, "object", value_kind(values))
    try:
        return build_object(Record(values), config)
    except MappingError as e:
        raise e.within(path) from e
