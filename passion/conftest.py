# passion/conftest.py
import sys
import pytest
from pathlib import Path

# Add repository root to PYTHONPATH
REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(scope="function", autouse=True)
def reset_stores():
    """
    Clear the in-memory trait and room stores around each test.

    Each test should start with a clean slate.
    """
    from passion.features.rooms import service as room_service
    from passion.features.traits import service as trait_service

    trait_service.reset_store()
    room_service.reset_store()
    yield
    trait_service.reset_store()
    room_service.reset_store()
