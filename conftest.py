# conftest.py

import pytest
from sqlalchemy.orm import Session

from blog.site import create_app
from database import create_tables, make_engine
from models import PostRecord


@pytest.fixture(scope="function")
def engine(tmp_path):
    # Use a separate database file per test
    test_engine = make_engine(f"sqlite:///{tmp_path / 'test_blog.db'}")
    create_tables(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture(scope="function")
def add_posts(engine):
    """Insert posts; each item is a dict of column values."""
    def _add(rows):
        with Session(engine) as session:
            with session.begin():
                session.add_all([PostRecord(**row) for row in rows])
    return _add


def make_post(i, **overrides):
    row = {
        "id": i,
        "title": f"Post {i}",
        "content": f"<p>Body of post {i}</p>",
        "footer": f"Footer {i}",
        "timeadd": f"2023-01-{i:02d} 00:00:00",
    }
    row.update(overrides)
    return row


@pytest.fixture(scope="function")
def ten_posts(add_posts):
    add_posts([make_post(i) for i in range(1, 11)])


@pytest.fixture(scope="function")
def resource_dir(tmp_path):
    res = tmp_path / "resource"
    res.mkdir()
    (res / "style.css").write_text("body { color: black; }")
    return res


@pytest.fixture(scope="function")
def app(engine, resource_dir):
    flask_app = create_app(engine=engine, resource_dir=str(resource_dir), storage_errors="empty")
    flask_app.testing = True
    return flask_app


@pytest.fixture(scope="function")
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture(scope="function")
def unreachable_engine(tmp_path):
    # The parent directory does not exist, so sqlite cannot open the file
    broken = make_engine(f"sqlite:///{tmp_path / 'missing' / 'blog.db'}")
    yield broken
    broken.dispose()
