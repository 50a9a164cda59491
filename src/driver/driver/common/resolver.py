# ABOUTME: Inheritance resolution between adjacent settings levels
# ABOUTME: Fills unset child fields from the parent level's resolved values, root to leaf

from typing import TypeVar

from loguru import logger

from driver.common.freezable import SettingsObject
from driver.exceptions import InvalidArgumentError, InvalidStateError

S = TypeVar("S", bound=SettingsObject)


def resolve_inherited(child: S, parent: SettingsObject) -> S:
    """
    Fill every unset inheritable field of `child` from `parent`, in place.

    Each child field reads the parent field named by its `parent_field`
    (usually the same name). Fields declared with `inherit=False`, fields the
    parent does not declare, and fields the parent has unset are left as they
    are. The parent is never mutated and is not itself resolved: callers
    resolve levels root to leaf, each against its immediate parent.

    A mandatory field may still be unset afterwards if the parent had it
    unset; consumers reject that at the point of use.

    Args:
        child: The settings to complete. Must not be frozen.
        parent: The enclosing level's already resolved settings.

    Returns:
        The same `child` instance.

    Raises:
        InvalidStateError: If `child` is frozen.
        InvalidArgumentError: If `child` declares a `parent_type` and
            `parent` is not an instance of it.
    """
    if child.is_frozen:
        raise InvalidStateError(
            f"Cannot resolve inherited settings into a frozen {type(child).__name__}.",
            code="SETTINGS_FROZEN",
            details={"settings": type(child).__name__},
        )

    parent_type = type(child).parent_type
    if parent_type is not None and not isinstance(parent, parent_type):
        raise InvalidArgumentError(
            f"{type(child).__name__} inherits from {parent_type.__name__}, not {type(parent).__name__}.",
            code="INVALID_PARENT",
            details={"expected": parent_type.__name__, "actual": type(parent).__name__},
        )

    parent_fields = type(parent).field_names()
    inherited = []
    for field in type(child).settings_fields():
        if not field.inherit or child.is_set(field.name):
            continue
        if field.parent_field not in parent_fields or not parent.is_set(field.parent_field):
            continue
        child.set(field.name, parent.get(field.parent_field))
        inherited.append(field.name)

    if inherited:
        logger.debug(
            "{} inherited {} from {}", type(child).__name__, ", ".join(inherited), type(parent).__name__
        )
    return child


def derive(child: S, parent: SettingsObject) -> S:
    """
    Return a frozen, resolved copy of `child` without touching either input.

    This is what a level hands to its consumers: clone the caller's settings,
    resolve the clone against the parent, freeze it.

    Args:
        child: The caller's settings, frozen or not.
        parent: The enclosing level's resolved settings.

    Returns:
        A new frozen settings object.
    """
    return resolve_inherited(child.clone(), parent).freeze()


def resolve_chain(root: SettingsObject, *levels: SettingsObject) -> SettingsObject:
    """
    Resolve a whole hierarchy root to leaf and return the frozen leaf.

    Each level is derived against the previously resolved level, so none of
    the given objects is mutated.

    Args:
        root: The top level, expected to hold every mandatory field.
        *levels: Lower levels in order, e.g. database then collection settings.

    Returns:
        The frozen, fully resolved last level (the frozen root when no levels
        are given).
    """
    resolved = root.frozen_copy()
    for level in levels:
        resolved = derive(level, resolved)
    return resolved
