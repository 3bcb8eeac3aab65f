import json
from pathlib import Path

import pytest

from swagger_codegen_kit.analyzer import ReferenceLedger
from swagger_codegen_kit.model import SpecParser

TEST_DATA = Path(__file__).parent / "test_data"


def load_document(name):
    with open(TEST_DATA / name) as f:
        return json.load(f)


@pytest.fixture
def petstore_spec():
    return SpecParser().parse(load_document("petstore.json"))


@pytest.fixture
def broken_spec():
    return SpecParser().parse(load_document("broken.json"))


@pytest.fixture
def ledger():
    return ReferenceLedger()
