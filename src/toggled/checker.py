"""Validate configuration documents and render their normalized form."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Annotated

from cyclopts import Parameter
from pydantic import PydanticUserError, TypeAdapter, ValidationError

from toggled.errors import DocumentError, ModelLookupError
from toggled.models import CheckOptions
from toggled.models.defaults import DEFAULT_OUTPUT_FORMAT
from toggled.tools import load_document, render_document, resolve_model

if TYPE_CHECKING:
    from collections.abc import Callable
else:
    from collections import abc

    Callable = abc.Callable

CHECK_FAILED = "Check failed"

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Result of checking a document."""

    success: bool
    error: str = ""
    output: str | None = None


def build_adapter(reference: str) -> TypeAdapter[object]:
    """Resolve ``reference`` and build a pydantic adapter for it.

    Raises:
        ModelLookupError: If the reference cannot be imported or pydantic
            cannot build a schema for the object it names.

    """
    target = resolve_model(reference)
    try:
        return TypeAdapter(target)
    except (PydanticUserError, NameError, SyntaxError, TypeError) as e:
        raise ModelLookupError(f"'{reference}' is not a type pydantic can validate: {e}") from e


def run_check(opts: CheckOptions) -> CheckResult:
    """Validate ``opts.document`` against ``opts.model``.

    The document is decoded with the model's validator and encoded back in
    JSON mode, so switched-off sections come out as ``enable: false`` only.
    """
    try:
        adapter = build_adapter(opts.model)
        data = load_document(opts.document)
        value = adapter.validate_python(data)
        normalized = adapter.dump_python(value, mode="json")
        if not isinstance(normalized, dict):
            raise DocumentError(f"Model {opts.model} does not encode as a mapping")
        rendered = render_document(normalized, opts.output_format or DEFAULT_OUTPUT_FORMAT)
    except (DocumentError, ModelLookupError, PydanticUserError, ValidationError) as e:
        logger.debug("Check of %s failed", opts.document, exc_info=True)
        return CheckResult(success=False, error=f"{CHECK_FAILED}: {opts.document}: {e}")
    logger.info("Validated %s against %s", opts.document, opts.model)
    return CheckResult(success=True, output=rendered)


def check(
    opts: CheckOptions,
    status_callback: Annotated[Callable[[str], None] | None, Parameter(show=False)] = None,  # type: ignore[call-arg]
) -> int:
    """Check a configuration document against a model and print it normalized."""
    logging.basicConfig(level=opts.verbosity.log_level, format="%(levelname)s %(name)s: %(message)s")
    result = run_check(opts)
    if not result.success:
        err_func = partial(print, file=sys.stderr, flush=True) if status_callback is None else status_callback
        err_func(result.error)
        return 1
    out_func = print if status_callback is None else status_callback
    out_func((result.output or "").rstrip("\n"))
    return 0


__all__ = ["CHECK_FAILED", "CheckResult", "build_adapter", "check", "run_check"]
