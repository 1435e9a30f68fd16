#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from numstyle.options import Grouping, Precision
from numstyle.style import DEFAULT_STYLE, NumberStyle


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def default_style() -> NumberStyle:
    """Style with no options set."""
    return DEFAULT_STYLE


@pytest.fixture
def grouped_style() -> NumberStyle:
    """Comma grouping, shortest digits."""
    return DEFAULT_STYLE.with_grouping(Grouping.ALWAYS)


@pytest.fixture
def money_style() -> NumberStyle:
    """Comma grouping with exactly two fraction digits."""
    return DEFAULT_STYLE.with_grouping(Grouping.ALWAYS).with_precision(Precision.fraction_length(2))
