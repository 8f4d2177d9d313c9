import os
import sys
from glob import glob
from typing import List

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tests.test_util import data_path, open_file  # noqa: E402


def data_files(pattern: str) -> List[str]:
    return sorted(glob(data_path(pattern), recursive=True))


@pytest.fixture(scope="session")
def arithmetic_program() -> str:
    return open_file(data_path("valid", "arithmetic.seid"))


@pytest.fixture(scope="session", params=data_files("**/*.seid"))
def file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=data_files("valid/*.seid"))
def valid_file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=data_files("parserError/*.seid"))
def parser_error(request) -> str:
    return request.param
