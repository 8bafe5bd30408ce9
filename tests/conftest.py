"""
Shared fixtures for xcodeproj tests.
"""

import pytest

from xcodeproj import XcodeProject

PROJECT_ID = "BA2B3C4D5E6F708192A3B4C5"
TARGET_ID = "6A2B3C4D5E6F708192A3B4C5"
MAIN_GROUP_ID = "4A2B3C4D5E6F708192A3B4C5"
PRODUCTS_GROUP_ID = "5A2B3C4D5E6F708192A3B4C5"
SOURCE_FILE_ID = "F2E640B5C2B85914F6801498"
APP_FILE_ID = "3A2B3C4D5E6F708192A3B4C5"
SOURCE_BUILD_FILE_ID = "0EC07ACE89150EC90442393B"
PACKAGE_BUILD_FILE_ID = "1A2B3C4D5E6F708192A3B4C5"
PRODUCT_DEPENDENCY_ID = "2A2B3C4D5E6F708192A3B4C5"
SOURCES_PHASE_ID = "8A2B3C4D5E6F708192A3B4C5"
FRAMEWORKS_PHASE_ID = "9A2B3C4D5E6F708192A3B4C5"
SCRIPT_PHASE_ID = "AA2B3C4D5E6F708192A3B4C5"
TARGET_CONFIG_LIST_ID = "7A2B3C4D5E6F708192A3B4C5"
PROJECT_CONFIG_LIST_ID = "CA2B3C4D5E6F708192A3B4C5"
PACKAGE_ID = "DA2B3C4D5E6F708192A3B4C5"
PROJECT_DEBUG_ID = "EA2B3C4D5E6F708192A3B4C5"
PROJECT_RELEASE_ID = "FA2B3C4D5E6F708192A3B4C5"
TARGET_DEBUG_ID = "0B2B3C4D5E6F708192A3B4C5"
TARGET_RELEASE_ID = "1B2B3C4D5E6F708192A3B4C5"
UNKNOWN_ID = "2B2B3C4D5E6F708192A3B4C5"

SAMPLE_PBXPROJ = r"""// !$*UTF8*$!
{
	archiveVersion = 1;
	classes = {
	};
	objectVersion = 56;
	objects = {

/* Begin PBXBuildFile section */
		0EC07ACE89150EC90442393B /* main.swift in Sources */ = {isa = PBXBuildFile; fileRef = F2E640B5C2B85914F6801498 /* main.swift */; };
		1A2B3C4D5E6F708192A3B4C5 /* Alamofire in Frameworks */ = {isa = PBXBuildFile; productRef = 2A2B3C4D5E6F708192A3B4C5 /* Alamofire */; };
/* End PBXBuildFile section */

/* Begin PBXFileReference section */
		3A2B3C4D5E6F708192A3B4C5 /* Demo.app */ = {isa = PBXFileReference; explicitFileType = wrapper.application; includeInIndex = 0; path = Demo.app; sourceTree = BUILT_PRODUCTS_DIR; };
		F2E640B5C2B85914F6801498 /* main.swift */ = {isa = PBXFileReference; lastKnownFileType = sourcecode.swift; path = main.swift; sourceTree = "<group>"; };
/* End PBXFileReference section */

/* Begin PBXFrameworksBuildPhase section */
		9A2B3C4D5E6F708192A3B4C5 /* Frameworks */ = {
			isa = PBXFrameworksBuildPhase;
			buildActionMask = 2147483647;
			files = (
				1A2B3C4D5E6F708192A3B4C5 /* Alamofire in Frameworks */,
			);
			runOnlyForDeploymentPostprocessing = 0;
		};
/* End PBXFrameworksBuildPhase section */

/* Begin PBXGroup section */
		4A2B3C4D5E6F708192A3B4C5 = {
			isa = PBXGroup;
			children = (
				F2E640B5C2B85914F6801498 /* main.swift */,
				5A2B3C4D5E6F708192A3B4C5 /* Products */,
			);
			sourceTree = "<group>";
		};
		5A2B3C4D5E6F708192A3B4C5 /* Products */ = {
			isa = PBXGroup;
			children = (
				3A2B3C4D5E6F708192A3B4C5 /* Demo.app */,
			);
			name = Products;
			sourceTree = "<group>";
		};
/* End PBXGroup section */

/* Begin PBXNativeTarget section */
		6A2B3C4D5E6F708192A3B4C5 /* Demo */ = {
			isa = PBXNativeTarget;
			buildConfigurationList = 7A2B3C4D5E6F708192A3B4C5 /* Build configuration list for PBXNativeTarget "Demo" */;
			buildPhases = (
				8A2B3C4D5E6F708192A3B4C5 /* Sources */,
				9A2B3C4D5E6F708192A3B4C5 /* Frameworks */,
				AA2B3C4D5E6F708192A3B4C5 /* ShellScript */,
			);
			buildRules = (
			);
			dependencies = (
			);
			name = Demo;
			packageProductDependencies = (
				2A2B3C4D5E6F708192A3B4C5 /* Alamofire */,
			);
			productName = Demo;
			productReference = 3A2B3C4D5E6F708192A3B4C5 /* Demo.app */;
			productType = "com.apple.product-type.application";
		};
/* End PBXNativeTarget section */

/* Begin PBXProject section */
		BA2B3C4D5E6F708192A3B4C5 /* Project object */ = {
			isa = PBXProject;
			attributes = {
				BuildIndependentTargetsInParallel = 1;
				LastSwiftUpdateCheck = 1500;
				LastUpgradeCheck = 1500;
				TargetAttributes = {
					6A2B3C4D5E6F708192A3B4C5 = {
						CreatedOnToolsVersion = 15.0;
					};
				};
			};
			buildConfigurationList = CA2B3C4D5E6F708192A3B4C5 /* Build configuration list for PBXProject "Demo" */;
			compatibilityVersion = "Xcode 14.0";
			developmentRegion = en;
			hasScannedForEncodings = 0;
			knownRegions = (
				en,
				Base,
			);
			mainGroup = 4A2B3C4D5E6F708192A3B4C5;
			packageReferences = (
				DA2B3C4D5E6F708192A3B4C5 /* XCRemoteSwiftPackageReference "Alamofire" */,
			);
			productRefGroup = 5A2B3C4D5E6F708192A3B4C5 /* Products */;
			projectDirPath = "";
			projectRoot = "";
			targets = (
				6A2B3C4D5E6F708192A3B4C5 /* Demo */,
			);
		};
/* End PBXProject section */

/* Begin PBXShellScriptBuildPhase section */
		AA2B3C4D5E6F708192A3B4C5 /* ShellScript */ = {
			isa = PBXShellScriptBuildPhase;
			buildActionMask = 2147483647;
			files = (
			);
			inputPaths = (
			);
			outputPaths = (
			);
			runOnlyForDeploymentPostprocessing = 0;
			shellPath = /bin/sh;
			shellScript = "echo \"hello\"\n";
		};
/* End PBXShellScriptBuildPhase section */

/* Begin PBXSourcesBuildPhase section */
		8A2B3C4D5E6F708192A3B4C5 /* Sources */ = {
			isa = PBXSourcesBuildPhase;
			buildActionMask = 2147483647;
			files = (
				0EC07ACE89150EC90442393B /* main.swift in Sources */,
			);
			runOnlyForDeploymentPostprocessing = 0;
		};
/* End PBXSourcesBuildPhase section */

/* Begin PBXSpatialWidget section */
		2B2B3C4D5E6F708192A3B4C5 = {
			isa = PBXSpatialWidget;
			depth = 3;
			label = "Future object";
		};
/* End PBXSpatialWidget section */

/* Begin XCBuildConfiguration section */
		EA2B3C4D5E6F708192A3B4C5 /* Debug */ = {
			isa = XCBuildConfiguration;
			buildSettings = {
				ALWAYS_SEARCH_USER_PATHS = NO;
				GCC_OPTIMIZATION_LEVEL = 0;
				MACOSX_DEPLOYMENT_TARGET = 13.0;
				ONLY_ACTIVE_ARCH = YES;
				SWIFT_VERSION = 5.0;
			};
			name = Debug;
		};
		FA2B3C4D5E6F708192A3B4C5 /* Release */ = {
			isa = XCBuildConfiguration;
			buildSettings = {
				ALWAYS_SEARCH_USER_PATHS = NO;
				MACOSX_DEPLOYMENT_TARGET = 13.0;
				SWIFT_VERSION = 5.0;
			};
			name = Release;
		};
		0B2B3C4D5E6F708192A3B4C5 /* Debug */ = {
			isa = XCBuildConfiguration;
			buildSettings = {
				PRODUCT_NAME = "$(TARGET_NAME)";
			};
			name = Debug;
		};
		1B2B3C4D5E6F708192A3B4C5 /* Release */ = {
			isa = XCBuildConfiguration;
			buildSettings = {
				PRODUCT_NAME = "$(TARGET_NAME)";
			};
			name = Release;
		};
/* End XCBuildConfiguration section */

/* Begin XCConfigurationList section */
		7A2B3C4D5E6F708192A3B4C5 /* Build configuration list for PBXNativeTarget "Demo" */ = {
			isa = XCConfigurationList;
			buildConfigurations = (
				0B2B3C4D5E6F708192A3B4C5 /* Debug */,
				1B2B3C4D5E6F708192A3B4C5 /* Release */,
			);
			defaultConfigurationIsVisible = 0;
			defaultConfigurationName = Release;
		};
		CA2B3C4D5E6F708192A3B4C5 /* Build configuration list for PBXProject "Demo" */ = {
			isa = XCConfigurationList;
			buildConfigurations = (
				EA2B3C4D5E6F708192A3B4C5 /* Debug */,
				FA2B3C4D5E6F708192A3B4C5 /* Release */,
			);
			defaultConfigurationIsVisible = 0;
			defaultConfigurationName = Release;
		};
/* End XCConfigurationList section */

/* Begin XCRemoteSwiftPackageReference section */
		DA2B3C4D5E6F708192A3B4C5 /* XCRemoteSwiftPackageReference "Alamofire" */ = {
			isa = XCRemoteSwiftPackageReference;
			repositoryURL = "https://github.com/Alamofire/Alamofire.git";
			requirement = {
				kind = upToNextMajorVersion;
				minimumVersion = 5.8.0;
			};
		};
/* End XCRemoteSwiftPackageReference section */

/* Begin XCSwiftPackageProductDependency section */
		2A2B3C4D5E6F708192A3B4C5 /* Alamofire */ = {
			isa = XCSwiftPackageProductDependency;
			package = DA2B3C4D5E6F708192A3B4C5 /* XCRemoteSwiftPackageReference "Alamofire" */;
			productName = Alamofire;
		};
/* End XCSwiftPackageProductDependency section */
	};
	rootObject = BA2B3C4D5E6F708192A3B4C5 /* Project object */;
}
"""


@pytest.fixture
def sample_text():
    """The text of a small single-target app project."""
    return SAMPLE_PBXPROJ


@pytest.fixture
def project(sample_text):
    """The sample project, parsed with the default configuration."""
    return XcodeProject.from_str(sample_text)
