import logging
from typing import Union

from pbxedit.project.model import CodeSignStyle, XCBuildConfiguration
from pbxedit.project.status import Status
from pbxedit.project.store import ObjectStore

logger = logging.getLogger(__name__)

PRODUCT_NAME = "PRODUCT_NAME"
PRODUCT_BUNDLE_IDENTIFIER = "PRODUCT_BUNDLE_IDENTIFIER"
CODE_SIGN_STYLE = "CODE_SIGN_STYLE"
PROVISIONING_STYLE = "ProvisioningStyle"


# Overwrite `key` wherever it already holds a non-empty string, the setting is
# never introduced where it is missing...
def replace_setting(store: ObjectStore, key: str, value: str) -> int:
    replaced = 0
    for config in store.of_type(XCBuildConfiguration):
        if config.setting(key):
            config.set_setting(key, value)
            replaced += 1
    return replaced


def first_setting(store: ObjectStore, key: str) -> str:
    for config in store.of_type(XCBuildConfiguration):
        value = config.setting(key)
        if value:
            return value
    return ""


def _set(store: ObjectStore, key: str, value: str) -> Status:
    if not value:
        logger.error("empty value for %s", key)
        return Status.INVALID_INPUT
    if not replace_setting(store, key, value):
        logger.warning("no build configuration defines %s", key)
        return Status.NOT_FOUND
    return Status.OK


def set_product_name(store: ObjectStore, name: str) -> Status:
    return _set(store, PRODUCT_NAME, name)


def set_bundle_id(store: ObjectStore, bundle_id: str) -> Status:
    return _set(store, PRODUCT_BUNDLE_IDENTIFIER, bundle_id)


def get_product_name(store: ObjectStore) -> str:
    return first_setting(store, PRODUCT_NAME)


def get_bundle_id(store: ObjectStore) -> str:
    return first_setting(store, PRODUCT_BUNDLE_IDENTIFIER)


def set_code_sign_style(store: ObjectStore, style: Union[CodeSignStyle, str]) -> Status:
    """Switch build configurations and target attributes to `style`.

    Only configurations that already set CODE_SIGN_STYLE and target attribute
    entries that already carry a ProvisioningStyle are changed.
    """
    try:
        style = CodeSignStyle(style)
    except ValueError:
        logger.error("unknown code sign style %r", style)
        return Status.INVALID_INPUT

    replaced = replace_setting(store, CODE_SIGN_STYLE, style.value)
    for target_id, attributes in store.root.target_attributes.items():
        if isinstance(attributes, dict) and PROVISIONING_STYLE in attributes:
            attributes[PROVISIONING_STYLE] = style.value
            replaced += 1
            logger.debug("set %s of target %s", PROVISIONING_STYLE, target_id)

    if not replaced:
        logger.warning("nothing in the project declares a code sign style")
        return Status.NOT_FOUND
    return Status.OK
