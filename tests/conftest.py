"""Shared fixtures: a small single-target iOS application project."""

import copy

import pytest

from pbxedit.project.store import ObjectStore

PROJECT = "A10000000000000000000001"
MAIN_GROUP = "A10000000000000000000002"
PRODUCTS_GROUP = "A10000000000000000000003"
APP_PRODUCT = "A10000000000000000000004"
SOURCE_REF = "A10000000000000000000005"
SOURCE_BUILD = "A10000000000000000000006"
SOURCES_PHASE = "A10000000000000000000007"
FRAMEWORKS_PHASE = "A10000000000000000000008"
RESOURCES_PHASE = "A10000000000000000000009"
TARGET = "A1000000000000000000000A"
TARGET_CONFIG_LIST = "A1000000000000000000000B"
TARGET_DEBUG = "A1000000000000000000000C"
TARGET_RELEASE = "A1000000000000000000000D"
PROJECT_CONFIG_LIST = "A1000000000000000000000E"
PROJECT_DEBUG = "A1000000000000000000000F"
PROJECT_RELEASE = "A10000000000000000000010"

# Quoted value holding both backslashes and double quotes
PREPROCESSOR_DEFINITIONS = r'DEMO_PATTERN="s/\./x/" DEMO_HOME=\$HOME'

DOCUMENT = {
    "archiveVersion": "1",
    "classes": {},
    "objectVersion": "50",
    "rootObject": PROJECT,
    "objects": {
        PROJECT: {
            "isa": "PBXProject",
            "attributes": {
                "LastUpgradeCheck": "0920",
                "TargetAttributes": {
                    TARGET: {
                        "CreatedOnToolsVersion": "9.2",
                        "ProvisioningStyle": "Automatic",
                    },
                },
            },
            "buildConfigurationList": PROJECT_CONFIG_LIST,
            "compatibilityVersion": "Xcode 8.0",
            "developmentRegion": "en",
            "mainGroup": MAIN_GROUP,
            "productRefGroup": PRODUCTS_GROUP,
            "projectDirPath": "",
            "projectRoot": "",
            "targets": [TARGET],
        },
        MAIN_GROUP: {
            "isa": "PBXGroup",
            "children": [SOURCE_REF, PRODUCTS_GROUP],
            "sourceTree": "<group>",
        },
        PRODUCTS_GROUP: {
            "isa": "PBXGroup",
            "children": [APP_PRODUCT],
            "name": "Products",
            "sourceTree": "<group>",
        },
        APP_PRODUCT: {
            "isa": "PBXFileReference",
            "explicitFileType": "wrapper.application",
            "includeInIndex": "0",
            "path": "Demo.app",
            "sourceTree": "BUILT_PRODUCTS_DIR",
        },
        SOURCE_REF: {
            "isa": "PBXFileReference",
            "lastKnownFileType": "sourcecode.swift",
            "path": "AppDelegate.swift",
            "sourceTree": "<group>",
        },
        SOURCE_BUILD: {
            "isa": "PBXBuildFile",
            "fileRef": SOURCE_REF,
        },
        SOURCES_PHASE: {
            "isa": "PBXSourcesBuildPhase",
            "buildActionMask": "2147483647",
            "files": [SOURCE_BUILD],
            "runOnlyForDeploymentPostprocessing": "0",
        },
        FRAMEWORKS_PHASE: {
            "isa": "PBXFrameworksBuildPhase",
            "buildActionMask": "2147483647",
            "files": [],
            "runOnlyForDeploymentPostprocessing": "0",
        },
        RESOURCES_PHASE: {
            "isa": "PBXResourcesBuildPhase",
            "buildActionMask": "2147483647",
            "files": [],
            "runOnlyForDeploymentPostprocessing": "0",
        },
        TARGET: {
            "isa": "PBXNativeTarget",
            "buildConfigurationList": TARGET_CONFIG_LIST,
            "buildPhases": [SOURCES_PHASE, FRAMEWORKS_PHASE, RESOURCES_PHASE],
            "buildRules": [],
            "dependencies": [],
            "name": "Demo",
            "productName": "Demo",
            "productReference": APP_PRODUCT,
            "productType": "com.apple.product-type.application",
        },
        TARGET_CONFIG_LIST: {
            "isa": "XCConfigurationList",
            "buildConfigurations": [TARGET_DEBUG, TARGET_RELEASE],
            "defaultConfigurationIsVisible": "0",
            "defaultConfigurationName": "Release",
        },
        TARGET_DEBUG: {
            "isa": "XCBuildConfiguration",
            "buildSettings": {
                "CODE_SIGN_STYLE": "Automatic",
                "INFOPLIST_FILE": "Demo/Info.plist",
                "PRODUCT_BUNDLE_IDENTIFIER": "com.example.demo",
                "PRODUCT_NAME": "$(TARGET_NAME)",
            },
            "name": "Debug",
        },
        TARGET_RELEASE: {
            "isa": "XCBuildConfiguration",
            "buildSettings": {
                "CODE_SIGN_STYLE": "Automatic",
                "GCC_PREPROCESSOR_DEFINITIONS": PREPROCESSOR_DEFINITIONS,
                "INFOPLIST_FILE": "Demo/Info.plist",
                "PRODUCT_BUNDLE_IDENTIFIER": "com.example.demo",
                "PRODUCT_NAME": "$(TARGET_NAME)",
            },
            "name": "Release",
        },
        PROJECT_CONFIG_LIST: {
            "isa": "XCConfigurationList",
            "buildConfigurations": [PROJECT_DEBUG, PROJECT_RELEASE],
            "defaultConfigurationIsVisible": "0",
            "defaultConfigurationName": "Release",
        },
        PROJECT_DEBUG: {
            "isa": "XCBuildConfiguration",
            "buildSettings": {
                "ALWAYS_SEARCH_USER_PATHS": "NO",
                "SDKROOT": "iphoneos",
            },
            "name": "Debug",
        },
        PROJECT_RELEASE: {
            "isa": "XCBuildConfiguration",
            "buildSettings": {
                "ALWAYS_SEARCH_USER_PATHS": "NO",
                "SDKROOT": "iphoneos",
            },
            "name": "Release",
        },
    },
}

# The same project as Xcode writes it
PBXPROJ_TEXT = """\
// !$*UTF8*$!
{
	archiveVersion = 1;
	classes = {
	};
	objectVersion = 50;
	objects = {

/* Begin PBXBuildFile section */
		A10000000000000000000006 /* AppDelegate.swift in Sources */ = {isa = PBXBuildFile; fileRef = A10000000000000000000005 /* AppDelegate.swift */; };
/* End PBXBuildFile section */

/* Begin PBXFileReference section */
		A10000000000000000000004 /* Demo.app */ = {isa = PBXFileReference; explicitFileType = wrapper.application; includeInIndex = 0; path = Demo.app; sourceTree = BUILT_PRODUCTS_DIR; };
		A10000000000000000000005 /* AppDelegate.swift */ = {isa = PBXFileReference; lastKnownFileType = sourcecode.swift; path = AppDelegate.swift; sourceTree = "<group>"; };
/* End PBXFileReference section */

/* Begin PBXFrameworksBuildPhase section */
		A10000000000000000000008 /* Frameworks */ = {
			isa = PBXFrameworksBuildPhase;
			buildActionMask = 2147483647;
			files = (
			);
			runOnlyForDeploymentPostprocessing = 0;
		};
/* End PBXFrameworksBuildPhase section */

/* Begin PBXGroup section */
		A10000000000000000000002 = {
			isa = PBXGroup;
			children = (
				A10000000000000000000005 /* AppDelegate.swift */,
				A10000000000000000000003 /* Products */,
			);
			sourceTree = "<group>";
		};
		A10000000000000000000003 /* Products */ = {
			isa = PBXGroup;
			children = (
				A10000000000000000000004 /* Demo.app */,
			);
			name = Products;
			sourceTree = "<group>";
		};
/* End PBXGroup section */

/* Begin PBXNativeTarget section */
		A1000000000000000000000A /* Demo */ = {
			isa = PBXNativeTarget;
			buildConfigurationList = A1000000000000000000000B /* Build configuration list for PBXNativeTarget "Demo" */;
			buildPhases = (
				A10000000000000000000007 /* Sources */,
				A10000000000000000000008 /* Frameworks */,
				A10000000000000000000009 /* Resources */,
			);
			buildRules = (
			);
			dependencies = (
			);
			name = Demo;
			productName = Demo;
			productReference = A10000000000000000000004 /* Demo.app */;
			productType = "com.apple.product-type.application";
		};
/* End PBXNativeTarget section */

/* Begin PBXProject section */
		A10000000000000000000001 /* Project object */ = {
			isa = PBXProject;
			attributes = {
				LastUpgradeCheck = 0920;
				TargetAttributes = {
					A1000000000000000000000A = {
						CreatedOnToolsVersion = 9.2;
						ProvisioningStyle = Automatic;
					};
				};
			};
			buildConfigurationList = A1000000000000000000000E /* Build configuration list for PBXProject "Demo" */;
			compatibilityVersion = "Xcode 8.0";
			developmentRegion = en;
			mainGroup = A10000000000000000000002;
			productRefGroup = A10000000000000000000003 /* Products */;
			projectDirPath = "";
			projectRoot = "";
			targets = (
				A1000000000000000000000A /* Demo */,
			);
		};
/* End PBXProject section */

/* Begin PBXResourcesBuildPhase section */
		A10000000000000000000009 /* Resources */ = {
			isa = PBXResourcesBuildPhase;
			buildActionMask = 2147483647;
			files = (
			);
			runOnlyForDeploymentPostprocessing = 0;
		};
/* End PBXResourcesBuildPhase section */

/* Begin PBXSourcesBuildPhase section */
		A10000000000000000000007 /* Sources */ = {
			isa = PBXSourcesBuildPhase;
			buildActionMask = 2147483647;
			files = (
				A10000000000000000000006 /* AppDelegate.swift in Sources */,
			);
			runOnlyForDeploymentPostprocessing = 0;
		};
/* End PBXSourcesBuildPhase section */

/* Begin XCBuildConfiguration section */
		A1000000000000000000000C /* Debug */ = {
			isa = XCBuildConfiguration;
			buildSettings = {
				CODE_SIGN_STYLE = Automatic;
				INFOPLIST_FILE = Demo/Info.plist;
				PRODUCT_BUNDLE_IDENTIFIER = com.example.demo;
				PRODUCT_NAME = "$(TARGET_NAME)";
			};
			name = Debug;
		};
		A1000000000000000000000D /* Release */ = {
			isa = XCBuildConfiguration;
			buildSettings = {
				CODE_SIGN_STYLE = Automatic;
				GCC_PREPROCESSOR_DEFINITIONS = "DEMO_PATTERN=\\"s/\\\\./x/\\" DEMO_HOME=\\\\$HOME";
				INFOPLIST_FILE = Demo/Info.plist;
				PRODUCT_BUNDLE_IDENTIFIER = com.example.demo;
				PRODUCT_NAME = "$(TARGET_NAME)";
			};
			name = Release;
		};
		A1000000000000000000000F /* Debug */ = {
			isa = XCBuildConfiguration;
			buildSettings = {
				ALWAYS_SEARCH_USER_PATHS = NO;
				SDKROOT = iphoneos;
			};
			name = Debug;
		};
		A10000000000000000000010 /* Release */ = {
			isa = XCBuildConfiguration;
			buildSettings = {
				ALWAYS_SEARCH_USER_PATHS = NO;
				SDKROOT = iphoneos;
			};
			name = Release;
		};
/* End XCBuildConfiguration section */

/* Begin XCConfigurationList section */
		A1000000000000000000000B /* Build configuration list for PBXNativeTarget "Demo" */ = {
			isa = XCConfigurationList;
			buildConfigurations = (
				A1000000000000000000000C /* Debug */,
				A1000000000000000000000D /* Release */,
			);
			defaultConfigurationIsVisible = 0;
			defaultConfigurationName = Release;
		};
		A1000000000000000000000E /* Build configuration list for PBXProject "Demo" */ = {
			isa = XCConfigurationList;
			buildConfigurations = (
				A1000000000000000000000F /* Debug */,
				A10000000000000000000010 /* Release */,
			);
			defaultConfigurationIsVisible = 0;
			defaultConfigurationName = Release;
		};
/* End XCConfigurationList section */
	};
	rootObject = A10000000000000000000001 /* Project object */;
}
"""


@pytest.fixture
def document():
    """A fresh copy of the sample project document."""
    return copy.deepcopy(DOCUMENT)


@pytest.fixture
def store(document):
    return ObjectStore(document)


@pytest.fixture
def bundle(tmp_path):
    """The sample project on disk as Demo.xcodeproj/project.pbxproj."""
    bundle_path = tmp_path / "Demo.xcodeproj"
    bundle_path.mkdir()
    (bundle_path / "project.pbxproj").write_text(PBXPROJ_TEXT, encoding="utf-8")
    return bundle_path


@pytest.fixture
def framework(tmp_path):
    path = tmp_path / "vendor" / "Foo.framework"
    path.mkdir(parents=True)
    return str(path)


@pytest.fixture
def static_library(tmp_path):
    path = tmp_path / "libs" / "libbar.a"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"!<arch>\n")
    return str(path)
