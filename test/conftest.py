import os

import pytest

from berkelium import DataFrame

SAMPLE_DATA = os.path.join(os.path.dirname(__file__), "data", "sample_data.csv")


@pytest.fixture
def sample_path():
    """Path of a 30 rows CSV file with people, their city, age, income and birth date."""
    return SAMPLE_DATA


@pytest.fixture
def sample_df():
    return DataFrame.open_csv(SAMPLE_DATA)
