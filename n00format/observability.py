"""Tracing helpers for the n00format setup flow."""

from __future__ import annotations

import os
from typing import Iterable

from opentelemetry import trace


def _as_bool(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_span():
    if _as_bool(os.environ.get("N00_DISABLE_TRACING")):
        return None
    tracer = trace.get_tracer("n00format.observability")
    return tracer.start_as_current_span if tracer else None


def record_copy_summary(
    templates_dir: str,
    copied: Iterable[str],
    skipped: Iterable[str],
    overwrite_all: bool,
) -> None:
    """Emit a span describing what the template copy changed."""
    starter = _get_span()
    if starter is None:
        return
    with starter("n00format.copy") as span:
        span.set_attribute("copy.templates_dir", templates_dir)
        span.set_attribute("copy.copied", len(list(copied)))
        span.set_attribute("copy.skipped", len(list(skipped)))
        span.set_attribute("copy.overwrite_all", overwrite_all)


def record_install_outcome(
    package_manager: str,
    package: str,
    returncode: int | None = None,
    error: str | None = None,
) -> None:
    starter = _get_span()
    if starter is None:
        return
    with starter("n00format.install") as span:
        span.set_attribute("install.package_manager", package_manager)
        span.set_attribute("install.package", package)
        if returncode is not None:
            span.set_attribute("install.returncode", returncode)
        if error:
            span.set_attribute("install.error", error)
