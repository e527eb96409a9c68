import json

import pytest
from pydantic import ValidationError

from wistia_kit import (decode, Outcome, Media, Project, Caption, Visitor, Event, MediaEngagement,
                        AssetKind, DecodeError, NoData)


def test_media_decodes_fully(load_fixture):
    media, error = decode(load_fixture("media.json"), Media)

    assert error is None
    assert media.hashed_id == "abcd123"
    assert media.duration == 167.25
    assert media.section is None
    assert media.thumbnail.width == 200
    assert [a.type for a in media.assets] == [
        AssetKind.ORIGINAL, AssetKind.HD_MP4, AssetKind.SD_MP4, AssetKind.IMAGE,
    ]
    assert media.assets[0].content_type == "video/mp4"
    assert media.assets[0].file_size == 41275489
    assert media.embed_code.startswith("<script")


def test_sequences_decode_to_tuples(load_fixture):
    projects = decode(load_fixture("projects.json"), tuple[Project, ...]).unwrap()
    assert isinstance(projects, tuple)
    assert [p.hashed_id for p in projects] == ["4d23503f70", "9b1a20e6cc"]
    assert projects[0].media_count == 12
    assert projects[0].medias == ()

    captions = decode(load_fixture("captions.json"), tuple[Caption, ...]).unwrap()
    assert captions[1].native_name == "Español"


def test_stats_shapes(load_fixture):
    visitors = decode(load_fixture("visitors.json"), tuple[Visitor, ...]).unwrap()
    assert visitors[0].visitor_identity.org == {"name": "Analytical Engines", "title": "Engineer"}
    assert visitors[0].user_agent_details.mobile is False
    assert visitors[1].user_agent_details is None

    (event,) = decode(load_fixture("events.json"), tuple[Event, ...]).unwrap()
    assert event.percent_viewed == 0.82
    assert event.media_id == "abcd123"

    engagement = decode(load_fixture("engagement.json"), MediaEngagement).unwrap()
    assert engagement.engagement_data[:2] == (611, 598)


def test_absent_body_is_not_an_error():
    outcome = decode(None, Media)
    assert outcome.is_absent
    assert not outcome.ok and not outcome.is_error
    assert tuple(outcome) == (None, None)
    with pytest.raises(NoData):
        outcome.unwrap()


def test_empty_body_is_an_error():
    outcome = decode(b"", Media)
    assert outcome.is_error
    assert outcome.value is None
    assert isinstance(outcome.error, DecodeError)


def test_missing_field_reports_path(load_fixture):
    payload = json.loads(load_fixture("media.json"))
    del payload["thumbnail"]["width"]

    media, error = decode(json.dumps(payload), Media)

    assert media is None
    assert isinstance(error, DecodeError)
    (issue,) = error.issues
    assert issue.path == "thumbnail.width"
    assert issue.expected == "int"
    assert issue.actual == "missing"
    assert issue.code == "missing"
    assert "expected int" in str(issue)


def test_type_mismatch_reports_expected_and_actual(load_fixture):
    payload = json.loads(load_fixture("media.json"))
    payload["assets"][1]["fileSize"] = "big"

    outcome = decode(json.dumps(payload), Media)

    (issue,) = outcome.error.issues
    assert issue.path == "assets.1.fileSize"
    assert issue.expected == "int"
    assert issue.actual == "str"
    assert issue.code == "int_parsing"
    assert "assets.1.fileSize" in str(outcome.error)


def test_unknown_asset_kind_rejected(load_fixture):
    payload = json.loads(load_fixture("media.json"))
    payload["assets"][0]["type"] = "FlashVideoFile"

    outcome = decode(json.dumps(payload), Media)

    assert outcome.value is None
    assert outcome.error.issues[0].path == "assets.0.type"
    assert outcome.error.issues[0].expected == "AssetKind"
    assert outcome.error.issues[0].code == "enum"


def test_malformed_json():
    outcome = decode(b'{"hashed_id": ', Media)
    assert isinstance(outcome.error, DecodeError)
    assert outcome.error.shape == "Media"


def test_decoded_resources_are_frozen(load_fixture):
    media = decode(load_fixture("media.json"), Media).unwrap()
    with pytest.raises(ValidationError):
        media.name = "other"


def test_outcome_unwrap_raises_carried_error():
    boom = ConnectionError("reset")
    with pytest.raises(ConnectionError):
        Outcome.failed(boom).unwrap()
    assert Outcome.of(3).unwrap() == 3


def test_expected_type_inside_sequences_and_optionals(load_fixture):
    payload = json.loads(load_fixture("visitors.json"))
    payload[0]["visitor_identity"]["org"] = {"name": 7}
    del payload[1]["play_count"]

    outcome = decode(json.dumps(payload), tuple[Visitor, ...])

    issues = {i.path: i for i in outcome.error.issues}
    assert issues["0.visitor_identity.org.name"].expected == "str"
    assert issues["0.visitor_identity.org.name"].actual == "int"
    assert issues["1.play_count"].expected == "int"
    assert issues["1.play_count"].code == "missing"


def test_malformed_json_expects_the_shape():
    (issue,) = decode(b'{"hashed_id": ', Media).error.issues
    assert issue.path == ""
    assert issue.expected == "Media"
    assert issue.code == "json_invalid"
