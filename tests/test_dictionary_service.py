import json

import pytest

from models.word import Difficulty, ExamType
from services.dictionary_service import (
    NO_DEFINITION,
    NO_EXAMPLE,
    DictionaryClient,
    WordSource,
    extract_audio_url,
    extract_definition_and_example,
    parse_word_list,
)

LIST_URL = "https://lists.example.test/words.json"


def test_parse_json_array_of_strings():
    assert parse_word_list(json.dumps(["Abate", " Candid ", ""])) == ["abate", "candid"]


def test_parse_json_objects_with_mixed_keys():
    payload = json.dumps([{"word": "Abate"}, {"term": "candid"}, {"text": "FRUGAL"}, {"meaning": "x"}])
    assert parse_word_list(payload) == ["abate", "candid", "frugal"]


def test_parse_json_object_with_words_array():
    assert parse_word_list(json.dumps({"words": ["Diligent"]})) == ["diligent"]


def test_parse_json_rejects_unknown_structure():
    with pytest.raises(ValueError):
        parse_word_list(json.dumps({"items": 3}))


def test_parse_text_keeps_alphabetic_lines_only():
    payload = "Abandon\n\n# list 01\nwell-known\n  Ability  \n42\n"
    assert parse_word_list(payload, fmt="text") == ["abandon", "ability"]


def test_audio_prefers_us_variant():
    phonetics = [
        {"audio": "https://audio.test/abate-uk.mp3"},
        {"audio": "https://audio.test/abate-us.mp3"},
    ]
    assert extract_audio_url(phonetics) == "https://audio.test/abate-us.mp3"


def test_audio_falls_back_to_first_non_empty():
    phonetics = [{"audio": ""}, {"text": "/x/"}, {"audio": "https://audio.test/abate-uk.mp3"}]
    assert extract_audio_url(phonetics) == "https://audio.test/abate-uk.mp3"


@pytest.mark.parametrize("phonetics", [None, [], [{"audio": ""}, {"text": "/x/"}]])
def test_audio_none_when_missing(phonetics):
    assert extract_audio_url(phonetics) is None


def test_definition_from_first_meaning_with_definitions():
    meanings = [
        {"partOfSpeech": "noun", "definitions": []},
        {"partOfSpeech": "verb", "definitions": [{"definition": "to lessen", "example": "The storm abated."}]},
    ]
    assert extract_definition_and_example(meanings) == ("to lessen", "The storm abated.")


def test_missing_example_mentions_part_of_speech():
    meanings = [{"partOfSpeech": "adjective", "definitions": [{"definition": "frank"}]}]
    assert extract_definition_and_example(meanings) == ("frank", "This is a adjective.")


def test_no_meanings_gives_placeholders():
    assert extract_definition_and_example(None) == (NO_DEFINITION, NO_EXAMPLE)


def test_lookup_success(fake_web):
    fake_web.add_entry("abate", audio="https://audio.test/abate-us.mp3", example="It abated.")
    client = DictionaryClient(client=fake_web.client(), base_url="https://dict.test/entries/en")

    entry = client.lookup("abate")

    assert entry.definition == "meaning of abate"
    assert entry.example == "It abated."
    assert entry.audio_url == "https://audio.test/abate-us.mp3"
    assert fake_web.requested == ["https://dict.test/entries/en/abate"]


def test_lookup_not_found_returns_none(fake_web):
    client = DictionaryClient(client=fake_web.client(), base_url="https://dict.test/entries/en")
    assert client.lookup("qwzx") is None


def test_lookup_network_error_returns_none(fake_web):
    fake_web.broken_urls.add("https://dict.test/entries/en/abate")
    client = DictionaryClient(client=fake_web.client(), base_url="https://dict.test/entries/en")
    assert client.lookup("abate") is None


def test_fetch_word_list_failure_returns_none(fake_web):
    fake_web.broken_urls.add(LIST_URL)
    source = WordSource("IELTS", LIST_URL, ExamType.IELTS, Difficulty.B2)
    client = DictionaryClient(client=fake_web.client())
    assert client.fetch_word_list(source) is None


def test_fetch_word_list_http_error_returns_none(fake_web):
    source = WordSource("IELTS", LIST_URL, ExamType.IELTS, Difficulty.B2)
    client = DictionaryClient(client=fake_web.client())
    assert client.fetch_word_list(source) is None


def test_fetch_word_list_parses_payload(fake_web):
    fake_web.lists[LIST_URL] = json.dumps([{"word": "Abate"}, {"word": "Candid"}])
    source = WordSource("IELTS", LIST_URL, ExamType.IELTS, Difficulty.B2)
    client = DictionaryClient(client=fake_web.client())
    assert client.fetch_word_list(source) == ["abate", "candid"]


@pytest.mark.parametrize(
    "us_audio",
    ["https://audio.test/abate-us.mp3", "https://audio.test/abate-us-1.mp3"],
)
def test_audio_us_marker_forms(us_audio):
    phonetics = [{"audio": "https://audio.test/abate-uk.mp3"}, {"audio": us_audio}]
    assert extract_audio_url(phonetics) == us_audio


def test_null_part_of_speech_in_example_fallback():
    meanings = [{"partOfSpeech": None, "definitions": [{"definition": "frank"}]}]
    assert extract_definition_and_example(meanings) == ("frank", "This is a word.")


@pytest.mark.parametrize(
    "entry",
    [
        {"word": "abate", "meanings": ["noun"]},
        {"word": "abate", "meanings": [{"partOfSpeech": "verb", "definitions": ["to lessen"]}]},
        {"word": "abate", "phonetics": ["/əˈbeɪt/"]},
        {"word": "abate", "meanings": 7},
    ],
)
def test_lookup_malformed_entry_returns_none(fake_web, entry):
    fake_web.entries["abate"] = [entry]
    client = DictionaryClient(client=fake_web.client(), base_url="https://dict.test/entries/en")
    assert client.lookup("abate") is None
