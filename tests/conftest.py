"""
Pytest configuration for MarkQuill
"""

import logging
from datetime import datetime

import pytest


@pytest.fixture(autouse=True)
def configure_logging():
    """Keep test output quiet and undo handlers installed by the CLI."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level

    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)


@pytest.fixture
def fixed_date():
    """Date used for the [Date] placeholder in tests."""
    return datetime(2025, 1, 15, 9, 30)


@pytest.fixture
def basic_timeline():
    """Timeline with a title, one section and two tasks."""
    return """
title Project Timeline
section Planning
    Task 1 :task1, 2025-01-01, 5d
    Task 2 :task2, 2025-01-06, 3d
"""


@pytest.fixture
def approval_signatures():
    """Two signature sections; the client section has pre-filled cells."""
    return """
## Approval Signatures

| Field | Project Manager | Director |
|-------|----------------|----------|
| **Name** | ... | ... |
| **Signature** | ... | ... |
| **Date** | ... | ... |

---

## Client Signatures

| Field | Client Representative | Witness |
|-------|----------------------|---------|
| **Name** | John Smith | ... |
| **Signature** | ... | ... |
| **Date** | 2025-01-15 | ... |
"""


@pytest.fixture
def blank_header_signatures():
    """Signature sections whose field-label header cell is blank."""
    return """
## Approval Signatures

|               | Project Manager  | Director |
|---------------|------------------|----------|
| **Name**      |                  |          |
| **Signature** |                  |          |
| **Date**      |                  |          |

---

## Client Signatures

|               | Client Representative | Witness |
|---------------|-----------------------|---------|
| **Name**      | John Smith            |         |
| **Signature** |                       |         |
| **Date**      | 2025-01-15            |         |
"""
