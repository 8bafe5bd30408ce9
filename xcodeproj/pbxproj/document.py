# Xcode project document.
#
# The top-level aggregate of a pbxproj file: archive and object versions, the
# classes table, the identifier of the root PBXProject and the object graph.
# Construction is all or nothing; any structural error propagates and no
# partially filled project is returned.

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Type, TypeVar, Union

from xcodeproj.config import DEFAULT_CONFIG, ParserConfig
from xcodeproj.errors import UnknownFieldsError
from xcodeproj.parser.kind import Kind
from xcodeproj.parser.value import PBXObjectMap, Value, parse_file
from xcodeproj.pbxproj.formatter import format_document
from xcodeproj.pbxproj.graph import ObjectGraph
from xcodeproj.pbxproj.mapper import build_graph
from xcodeproj.pbxproj.model import PBXObject, PBXProject, PBXTarget
from xcodeproj.pbxproj.record import Record

logger = logging.getLogger(__name__)

ObjectT = TypeVar("ObjectT", bound=PBXObject)


@dataclass
class XcodeProject:
    archive_version: int
    object_version: int
    root_object_reference: str
    objects: ObjectGraph
    classes: Dict[str, Value] = field(default_factory=dict)
    # Top-level fields other than the five above
    extra: Dict[str, Value] = field(default_factory=dict, repr=False)

    @classmethod
    def from_str(cls, text: str, config: Optional[ParserConfig] = None) -> "XcodeProject":
        """Parse a complete pbxproj text."""
        logger.debug("parsing pbxproj text (%d characters)", len(text))
        project = cls.from_value(parse_file(text), config)
        logger.debug("parsed %d objects", len(project.objects))
        return project

    @classmethod
    def from_path(
        cls, path: Union[str, Path], config: Optional[ParserConfig] = None
    ) -> "XcodeProject":
        """Parse a project.pbxproj file, or the one inside an .xcodeproj bundle."""
        path = Path(path)
        if path.suffix == ".xcodeproj":
            path = path / "project.pbxproj"
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
        return cls.from_str(text, config)

    @classmethod
    def from_value(
        cls, value: PBXObjectMap, config: Optional[ParserConfig] = None
    ) -> "XcodeProject":
        """Build the project from the parsed top-level dictionary."""
        config = config or DEFAULT_CONFIG
        record = Record(value)
        archive_version = record.take_number("archive_version")
        object_version = record.take_number("object_version")
        classes = record.take_optional_object("classes", {})
        root_object_reference = record.take_string("root_object")
        objects = build_graph(record.take_object("objects"), config)
        extra = record.residue()
        if extra and config.strict:
            raise UnknownFieldsError("project", extra)
        return cls(
            archive_version=archive_version,
            object_version=object_version,
            root_object_reference=root_object_reference,
            objects=objects,
            classes=classes,
            extra=extra,
        )

    @property
    def root_object(self) -> Optional[PBXProject]:
        return self.objects.get_as(self.root_object_reference, PBXProject)

    def get(self, identifier: str) -> Optional[PBXObject]:
        return self.objects.get(identifier)

    def targets(self) -> List[PBXTarget]:
        project = self.root_object
        if project is None:
            return []
        return project.get_targets()

    def objects_of_kind(self, kind: Kind) -> List[Tuple[str, PBXObject]]:
        return [(i, obj) for i, obj in self.objects.items() if obj.kind == kind]

    def objects_of_type(self, cls: Type[ObjectT]) -> List[Tuple[str, ObjectT]]:
        return self.objects.of_type(cls)

    def to_string(self) -> str:
        return format_document(self)
