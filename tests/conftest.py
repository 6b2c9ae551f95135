import sys
from pathlib import Path

import pytest
from falcon import testing

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tzpicker import app  # noqa: E402


@pytest.fixture
def client():
    return testing.TestClient(app.get_wsgi_app({"debug": True}))
