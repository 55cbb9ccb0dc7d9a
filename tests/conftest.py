from datetime import timedelta

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.database import Base, get_db
from main import app
from models.progress import Progress, ProgressStatus
from models.user import User
from models.word import Difficulty, ExamType, Word, utcnow


@pytest.fixture
def engine(tmp_path):
    # Use a temporary SQLite DB per test
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_word(db_session):
    def _make(term, exam_type=ExamType.IELTS, difficulty=Difficulty.B2, **fields):
        word = Word(
            term=term,
            translation=fields.get("translation", f"{term}-tr"),
            definition=fields.get("definition", f"definition of {term}"),
            example_sentence=fields.get("example_sentence", f"An example with {term}."),
            audio_url=fields.get("audio_url"),
            exam_type=exam_type,
            difficulty=difficulty,
        )
        db_session.add(word)
        db_session.commit()
        db_session.refresh(word)
        return word

    return _make


@pytest.fixture
def make_user(db_session):
    def _make(username="learner", daily_goal=10):
        user = User(username=username, daily_goal=daily_goal)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make


@pytest.fixture
def make_progress(db_session):
    def _make(user, word, status=ProgressStatus.LEARNING, due_in=timedelta(hours=-1), review_count=1):
        entry = Progress(
            user_id=user.id,
            word_id=word.id,
            status=status,
            next_review=utcnow() + due_in,
            review_count=review_count,
        )
        db_session.add(entry)
        db_session.commit()
        db_session.refresh(entry)
        return entry

    return _make


def dictionary_entry(term, audio=None, definition=None, example=None, part_of_speech="noun"):
    first_definition = {"definition": definition or f"meaning of {term}"}
    if example is not None:
        first_definition["example"] = example
    return [
        {
            "word": term,
            "phonetics": [{"text": f"/{term}/", "audio": audio or ""}],
            "meanings": [{"partOfSpeech": part_of_speech, "definitions": [first_definition]}],
        }
    ]


class FakeWeb:
    """Routes httpx requests to canned word lists and dictionary entries."""

    def __init__(self, lists=None, entries=None, broken_urls=()):
        self.lists = dict(lists or {})
        self.entries = dict(entries or {})
        self.broken_urls = set(broken_urls)
        self.requested: list[str] = []

    def add_entry(self, term, **kwargs):
        self.entries[term] = dictionary_entry(term, **kwargs)

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        if url in self.broken_urls:
            raise httpx.ConnectError("connection refused", request=request)
        if url in self.lists:
            return httpx.Response(200, text=self.lists[url])
        term = request.url.path.rsplit("/", 1)[-1]
        if "/entries/" in request.url.path and term in self.entries:
            return httpx.Response(200, json=self.entries[term])
        return httpx.Response(404, json={"title": "No Definitions Found"})

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_web():
    return FakeWeb()
