import pytest

from schema_checker.config import CheckerConfig


@pytest.fixture
def shallow_config():
    return CheckerConfig(max_depth=3)


@pytest.fixture
def object_schema():
    return {
        'type': 'object',
        'properties': {
            'n': {'type': 'number'},
        },
    }
