"""Test configuration and fixtures.

Provides reusable fixtures for:
- Single-candidate lines built from plain strings
- Lines with several candidate readings sharing sign ids
"""

import pytest

from signalign.core.models import Line, SignInterpretation, SignKind, SignSequence


# =============================================================================
# Basic Fixtures
# =============================================================================


@pytest.fixture
def abc_line():
    return Line.from_text("ABC", name="abc")


@pytest.fixture
def abxc_line():
    return Line.from_text("ABXC", name="abxc")


@pytest.fixture
def branching_line():
    """A line whose third sign has two competing readings (ids 2 and 3)."""
    a = SignInterpretation(0, "A")
    b = SignInterpretation(1, "B")
    c = SignInterpretation(2, "C")
    d = SignInterpretation(3, "D")
    e = SignInterpretation(4, "E")
    return Line(
        (SignSequence((a, b, c, e)), SignSequence((a, b, d, e))),
        name="branching",
    )


@pytest.fixture
def spaced_line():
    """'AB CD' where the gap is a space sign rather than a literal blank."""
    signs = (
        SignInterpretation(10, "A"),
        SignInterpretation(11, "B"),
        SignInterpretation(12, "", SignKind.SPACE),
        SignInterpretation(13, "C"),
        SignInterpretation(14, "D"),
    )
    return Line((SignSequence(signs),), name="spaced")
