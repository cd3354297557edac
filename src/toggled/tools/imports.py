"""Resolve ``module:Name`` references."""

from __future__ import annotations

import importlib
import logging

from toggled.errors import ModelLookupError

logger = logging.getLogger(__name__)


def resolve_model(reference: str) -> object:
    """Import ``"package.module:Name"`` and return the named object.

    Dotted names after the colon walk attributes, so ``"pkg.mod:Outer.Inner"``
    resolves nested classes.

    Raises:
        ModelLookupError: If the module or attribute cannot be found.

    """
    module_name, sep, qualname = reference.partition(":")
    if not sep or not module_name or not qualname:
        raise ModelLookupError(f"Expected 'package.module:Name', got '{reference}'")
    try:
        target: object = importlib.import_module(module_name)
    except ImportError as e:
        raise ModelLookupError(f"Cannot import module '{module_name}': {e}") from e
    for part in qualname.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ModelLookupError(f"'{module_name}' has no attribute '{qualname}'") from e
    logger.debug("Resolved %s to %r", reference, target)
    return target


__all__ = ["resolve_model"]
