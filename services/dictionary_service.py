"""
Clients for the external word sources.

Word lists are raw files on GitHub (JSON or one word per line); definitions,
examples and pronunciation audio come from the Free Dictionary API
(api.dictionaryapi.dev), which answers with a JSON array of entries.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx

from core.config import settings
from models.word import Difficulty, ExamType

logger = logging.getLogger(__name__)

NO_DEFINITION = "No definition available."
NO_EXAMPLE = "No example available."

ALPHA_RE = re.compile(r"^[A-Za-z]+$")
WORD_KEYS = ("word", "term", "text")


@dataclass(frozen=True)
class WordSource:
    name: str
    url: str
    exam_type: ExamType
    default_difficulty: Difficulty
    fmt: str = "json"


@dataclass(frozen=True)
class DictionaryEntry:
    definition: str
    example: str
    audio_url: str | None = None


def _term_from_item(item: Any) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, dict):
        for key in WORD_KEYS:
            value = item.get(key)
            if isinstance(value, str) and value.strip():
                return value
    return ""


def parse_word_list(payload: str, fmt: str = "json") -> list[str]:
    """Turn a raw word-list file into lowercase terms.

    JSON payloads may be an array of strings, an array of objects carrying
    ``word``/``term``/``text``, or an object with a ``words`` array. Text
    payloads keep only purely alphabetic lines.
    """
    if fmt == "text":
        lines = (line.strip() for line in payload.splitlines())
        return [line.lower() for line in lines if line and ALPHA_RE.match(line)]

    data = json.loads(payload)
    if isinstance(data, dict) and isinstance(data.get("words"), list):
        data = data["words"]
    if not isinstance(data, list):
        raise ValueError("Unsupported word list structure")

    terms = (_term_from_item(item).strip().lower() for item in data)
    return [term for term in terms if term]


def extract_audio_url(phonetics: list[dict] | None) -> str | None:
    if not phonetics:
        return None

    for phonetic in phonetics:
        audio = phonetic.get("audio") or ""
        if "-us." in audio or "-us-" in audio:
            return audio

    for phonetic in phonetics:
        audio = phonetic.get("audio")
        if audio:
            return audio
    return None


def extract_definition_and_example(meanings: list[dict] | None) -> tuple[str, str]:
    for meaning in meanings or []:
        definitions = meaning.get("definitions") or []
        if definitions:
            first = definitions[0]
            definition = first.get("definition") or NO_DEFINITION
            example = first.get("example") or f"This is a {meaning.get('partOfSpeech') or 'word'}."
            return definition, example
    return NO_DEFINITION, NO_EXAMPLE


class DictionaryClient:
    def __init__(self, client: httpx.Client | None = None, base_url: str | None = None):
        self._owns_client = client is None
        self.client = client or httpx.Client(follow_redirects=True)
        self.base_url = (base_url or settings.DICTIONARY_API_URL).rstrip("/")

    def __enter__(self) -> "DictionaryClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def fetch_word_list(self, source: WordSource) -> list[str] | None:
        """Terms from one source, or None when the source could not be read."""
        logger.info("Fetching %s words from %s", source.name, source.url)
        try:
            r = self.client.get(source.url)
            r.raise_for_status()
            terms = parse_word_list(r.text, source.fmt)
        except httpx.HTTPError as exc:
            logger.error("Failed to fetch %s words: %s", source.name, exc)
            return None
        except ValueError as exc:
            logger.error("Failed to parse %s words: %s", source.name, exc)
            return None

        logger.info("Fetched %d %s words", len(terms), source.name)
        return terms

    def lookup(self, term: str) -> DictionaryEntry | None:
        try:
            r = self.client.get(f"{self.base_url}/{quote(term)}")
        except httpx.HTTPError as exc:
            logger.warning('Error fetching "%s": %s', term, exc)
            return None

        if not r.is_success:
            logger.warning('Failed to fetch data for "%s": %s', term, r.status_code)
            return None

        try:
            data = r.json()
        except ValueError:
            logger.warning('Invalid dictionary response for "%s"', term)
            return None
        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            logger.warning('Unexpected dictionary response for "%s"', term)
            return None

        entry = data[0]
        try:
            definition, example = extract_definition_and_example(entry.get("meanings"))
            audio_url = extract_audio_url(entry.get("phonetics"))
        except (AttributeError, TypeError, KeyError) as exc:
            logger.warning('Malformed dictionary entry for "%s": %s', term, exc)
            return None
        return DictionaryEntry(definition=definition, example=example, audio_url=audio_url)
