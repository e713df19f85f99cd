"""Pytest configuration and shared fixtures for the docmark test suite.

This module provides shared fixtures, test configuration, and lookup tables
that are used across the entire test suite.
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from docmark.references import KnowledgeBase

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


SYMBOLS = {
    "mod::fn": {"url": "/docs/mod/fn"},
    "core::module::func": {"url": "/docs/core/module/func"},
    "core::macros::vec!": {"url": "/docs/core/macros/vec"},
}

GLOSSARY = {
    "epsilon": {"name": "Epsilon", "short_desc": "small quantity"},
    "derivative": {"name": "Derivative", "short_desc": "rate of change"},
}

BASIS = {
    "chebyshev": {
        "name": "Chebyshev basis",
        "desc": ["Polynomials orthogonal on [-1, 1].", "Good for smooth functions."],
    },
    "monomial": {"desc": ["Powers of x."]},
}


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test files.

    Returns
    -------
    Path
        Temporary directory path cleaned up by pytest.

    """
    return tmp_path


@pytest.fixture
def knowledge_base() -> KnowledgeBase:
    """Provide a knowledge base with a few symbols, glossary and basis terms."""
    return KnowledgeBase.from_tables(symbols=SYMBOLS, glossary=GLOSSARY, basis=BASIS)


@pytest.fixture
def plain_highlighter():
    """Provide a deterministic highlighter that marks its input."""

    def highlighter(code: str) -> str:
        return f"<hl>{code}</hl>"

    return highlighter


@pytest.fixture
def sample_markdown() -> str:
    """Provide sample documentation content for testing.

    Returns
    -------
    str
        Guide page exercising every supported construct.

    """
    return """# Getting Started

This guide uses **strong**, *emphasis* and `let x = 1;` code.
See [[mod::fn]] and @[epsilon]{a small value}.

## Code

```rust
fn main() {}
```

```python
print("hi")
```

> ## Note
> Quoted text.

- one
- two

1. first
2. second

| Name | Value |
|------|-------|
| a    | 1     |
| b    | 2     |

***

Read [the intro](guide/intro) or ![logo](logo.png).
"""
