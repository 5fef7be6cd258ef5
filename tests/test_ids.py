"""Tests for anchor id derivation."""

from __future__ import annotations

from aiblog.utils.ids import FALLBACK_ANCHOR, AnchorRegistry, slugify_heading


def test_slugify_heading_collapses_runs_and_trims() -> None:
    """It should lower-case and collapse non-alphanumeric runs into single hyphens."""

    assert slugify_heading("Getting Started with Next.js") == "getting-started-with-next-js"
    assert slugify_heading("What is Tailwind CSS?") == "what-is-tailwind-css"
    assert slugify_heading("  --Hello,   World!--  ") == "hello-world"


def test_slugify_heading_drops_non_ascii_letters() -> None:
    assert slugify_heading("Café & Crème") == "caf-cr-me"
    assert slugify_heading("???") == ""


def test_registry_suffixes_collisions_in_order() -> None:
    """Repeated text should get -1, -2 suffixes."""

    registry = AnchorRegistry()
    assert [registry.claim("Examples") for _ in range(3)] == ["examples", "examples-1", "examples-2"]


def test_registry_respects_reserved_ids() -> None:
    registry = AnchorRegistry()
    registry.reserve("setup")
    assert "setup" in registry
    assert registry.claim("Setup") == "setup-1"


def test_registry_without_dedupe_repeats_ids() -> None:
    registry = AnchorRegistry(dedupe=False)
    assert registry.claim("Examples") == registry.claim("Examples") == "examples"


def test_registry_falls_back_for_empty_slug() -> None:
    registry = AnchorRegistry()
    assert registry.claim("!!!") == FALLBACK_ANCHOR
    assert registry.claim("...") == f"{FALLBACK_ANCHOR}-1"
