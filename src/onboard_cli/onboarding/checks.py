"""Local endpoint preflight probe and health check display."""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional
from urllib.parse import urljoin

import httpx
from rich.console import Console
from rich.table import Table

logger = logging.getLogger(__name__)

PREFLIGHT_TIMEOUT_MS = 3500


class PreflightFailureReason(str, Enum):
    """Why a local endpoint failed preflight."""

    ENDPOINT_UNREACHABLE = "endpoint-down"
    MODEL_NOT_LISTED = "model-missing"


@dataclass(frozen=True)
class PreflightOutcome:
    """Result of a single probe attempt.

    ``model_ids`` and ``detail`` are informational only; classification is
    carried entirely by ``ok`` and ``reason``.
    """

    ok: bool
    reason: Optional[PreflightFailureReason] = None
    model_ids: tuple[str, ...] = field(default_factory=tuple)
    detail: str = ""

    @classmethod
    def success(cls, model_ids: tuple[str, ...] = (), detail: str = "") -> "PreflightOutcome":
        return cls(ok=True, model_ids=model_ids, detail=detail)

    @classmethod
    def failure(
        cls,
        reason: PreflightFailureReason,
        model_ids: tuple[str, ...] = (),
        detail: str = "",
    ) -> "PreflightOutcome":
        return cls(ok=False, reason=reason, model_ids=model_ids, detail=detail)


def build_models_url(base_url: str) -> str:
    """Resolve ``models`` against ``base_url`` with exactly one separating slash."""
    base = base_url if base_url.endswith("/") else f"{base_url}/"
    return urljoin(base, "models")


def parse_model_ids(payload: Any) -> list[str]:
    """
    Extract model ids from an OpenAI-style ``/models`` listing.

    Expects ``{"data": [{"id": "..."}, ...]}``. Any other shape contributes
    nothing; this never raises.

    Args:
        payload: Decoded JSON body (any type)

    Returns:
        Non-blank, whitespace-stripped ids in listing order
    """
    if not isinstance(payload, dict):
        return []
    data = payload.get("data")
    if not isinstance(data, list):
        return []

    ids: list[str] = []
    for entry in data:
        if not isinstance(entry, dict):
            continue
        model_id = entry.get("id")
        if isinstance(model_id, str) and model_id.strip():
            ids.append(model_id.strip())
    return ids


async def probe_local_endpoint(
    base_url: str,
    expected_model_id: str,
    *,
    timeout_ms: int = PREFLIGHT_TIMEOUT_MS,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> PreflightOutcome:
    """
    Probe an OpenAI-compatible endpoint for reachability and the expected model.

    Args:
        base_url: API base URL, e.g. http://127.0.0.1:11434/v1
        expected_model_id: Model id that should appear in the listing
        timeout_ms: Deadline for the whole request, connect through body
        transport: Optional httpx transport override

    Returns:
        PreflightOutcome; transport errors, timeouts and non-2xx statuses are
        reported as ENDPOINT_UNREACHABLE, never raised
    """
    endpoint = build_models_url(base_url)
    logger.debug(f"Preflight GET {endpoint} (timeout {timeout_ms} ms)")

    timeout = timeout_ms / 1000
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            # httpx timeouts apply per phase; wait_for caps the whole request
            response = await asyncio.wait_for(client.get(endpoint), timeout)
    except asyncio.TimeoutError:
        logger.debug(f"Preflight request to {endpoint} exceeded {timeout_ms} ms")
        return PreflightOutcome.failure(
            PreflightFailureReason.ENDPOINT_UNREACHABLE, detail=f"Timed out after {timeout_ms} ms"
        )
    except (httpx.HTTPError, OSError) as e:
        logger.debug(f"Preflight request to {endpoint} failed: {e!r}")
        return PreflightOutcome.failure(
            PreflightFailureReason.ENDPOINT_UNREACHABLE, detail=str(e) or type(e).__name__
        )

    if not response.is_success:
        logger.debug(f"Preflight {endpoint} returned HTTP {response.status_code}")
        return PreflightOutcome.failure(
            PreflightFailureReason.ENDPOINT_UNREACHABLE,
            detail=f"HTTP {response.status_code}",
        )

    try:
        payload = response.json()
    except ValueError:
        payload = None

    ids = tuple(parse_model_ids(payload))
    if ids and expected_model_id not in ids:
        logger.debug(f"Model {expected_model_id!r} not in listing {list(ids)}")
        return PreflightOutcome.failure(
            PreflightFailureReason.MODEL_NOT_LISTED,
            model_ids=ids,
            detail=f"{len(ids)} model(s) listed",
        )

    return PreflightOutcome.success(model_ids=ids, detail=f"{len(ids)} model(s) listed")


def display_preflight_results(
    results: list[tuple[str, str, PreflightOutcome]],
    console: Console,
) -> bool:
    """
    Display preflight results in a Rich table.

    Args:
        results: List of tuples (provider_name, base_url, outcome)
        console: Console to print to

    Returns:
        True if every probe passed, False otherwise
    """
    table = Table(title="Local Endpoint Preflight", show_header=True, header_style="bold")
    table.add_column("Provider", style="cyan", width=14)
    table.add_column("Endpoint", style="white")
    table.add_column("Status", width=16)
    table.add_column("Details", style="white")

    all_passed = True
    for name, base_url, outcome in results:
        if outcome.ok:
            status = "[green]✓ PASS[/green]"
        elif outcome.reason is PreflightFailureReason.MODEL_NOT_LISTED:
            status = "[yellow]⚠ MODEL MISSING[/yellow]"
            all_passed = False
        else:
            status = "[red]✗ UNREACHABLE[/red]"
            all_passed = False
        table.add_row(name, base_url, status, outcome.detail)

    console.print(table)
    return all_passed
