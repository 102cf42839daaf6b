# conftest.py - shared fixtures
import pytest

APP_CONTENT = "function App() {\n  return <h1>Hello world</h1>\n}"


def sr_block(search: str, replace: str) -> str:
    """Render one SEARCH/REPLACE block the way an agent writes it."""
    return f"<<<<<<< SEARCH\n{search}\n=======\n{replace}\n>>>>>>> REPLACE\n"


@pytest.fixture
def app_content():
    return APP_CONTENT


@pytest.fixture
def make_diff():
    def _make(*pairs):
        return "".join(sr_block(s, r) for s, r in pairs)

    return _make
