"""Shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from aiblog.config import Settings

TAILWIND_POST = """---
title: Getting Started with Tailwind CSS
slug: tailwind-css
description: Utility-first styling.
date: 2024-03-12
author: Jane
image: /images/tailwind.png
---

## Introduction

Intro text.

## What is Tailwind CSS?

Body.

### Key Features

- Fast
"""

REPEATED_POST = """---
title: Examples Everywhere
description: Two subsections share a name.
---

## Routing

### Examples

One.

## Data

### Examples

Two.
"""

PLAIN_POST = """---
title: No Sections
slug: plain
---

Just a paragraph, no headings.
"""


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    root = tmp_path / "content"
    root.mkdir()
    (root / "a-tailwind.md").write_text(TAILWIND_POST, encoding="utf-8")
    (root / "b-examples.md").write_text(REPEATED_POST, encoding="utf-8")
    (root / "c-plain.md").write_text(PLAIN_POST, encoding="utf-8")
    return root


@pytest.fixture
def settings(content_dir: Path) -> Settings:
    return Settings(content_dir=content_dir, log_level="WARNING", default_theme="system")
