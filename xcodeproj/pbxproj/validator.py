from typing import List

from xcodeproj.pbxproj.document import XcodeProject
from xcodeproj.pbxproj.model import PBXContainerItemProxy, PBXProject


def _points_into_project(proxy: PBXContainerItemProxy, project: XcodeProject) -> bool:
    # A proxy whose portal is a sub-project file reference names an object of that file.
    return isinstance(project.get(proxy.container_portal), PBXProject)


def validate_references(project: XcodeProject) -> List[str]:
    """Report every identifier that does not resolve to an object of the project."""
    errors = []
    graph = project.objects

    if project.root_object_reference not in graph:
        errors.append(f"Invalid reference in rootObject: {project.root_object_reference}")

    for identifier, obj in graph.items():
        for key, value in obj.references().items():
            if (
                key == "remoteGlobalIDString"
                and isinstance(obj, PBXContainerItemProxy)
                and not _points_into_project(obj, project)
            ):
                continue
            context = f"objects.{identifier}.{key}"
            if isinstance(value, list):
                for index, reference in enumerate(value):
                    if reference not in graph:
                        errors.append(f"Invalid reference in {context}[{index}]: {reference}")
            elif value not in graph:
                errors.append(f"Invalid reference in {context}: {value}")

    return errors
