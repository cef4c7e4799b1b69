"""
Service-level tests.

Services are called directly with a MagicMock database to check the
mapping from storage outcomes to domain errors and response documents.
"""

from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from test_fixtures import food_log_payload, insert_result, make_food_log, utc
from domain.schemas import FoodLogCreate, ProfileDocument
from services import FoodLogService, ProfileService
from services.validation import parse_object_id, require_email
from app.exceptions import ConflictError, NotFoundError, ServiceValidationError


def test_require_email():
    assert require_email("a@b.com") == "a@b.com"
    with pytest.raises(ServiceValidationError):
        require_email(None)
    with pytest.raises(ServiceValidationError):
        require_email("")


def test_parse_object_id():
    oid = ObjectId()
    assert parse_object_id(str(oid)) == oid
    with pytest.raises(ServiceValidationError):
        parse_object_id("12345")


def test_profile_keeps_extra_fields(fake_db):
    fake_db["profile"].replace_one.return_value.upserted_id = None
    profile = ProfileDocument(email="a@b.com", age=31, allergies=["peanut"])

    saved = ProfileService.upsert_profile(fake_db, profile)

    assert saved == {"email": "a@b.com", "age": 31, "allergies": ["peanut"]}


def test_profile_conflict(fake_db):
    fake_db["profile"].replace_one.side_effect = DuplicateKeyError("dup", code=11000)

    with pytest.raises(ConflictError):
        ProfileService.upsert_profile(fake_db, ProfileDocument(email="a@b.com"))


def test_profile_not_found(fake_db):
    fake_db["profile"].find_one.return_value = None

    with pytest.raises(NotFoundError):
        ProfileService.get_profile(fake_db, "a@b.com")


def test_log_food_uses_given_clock(fake_db):
    fake_db["foodLog"].insert_one.return_value = insert_result()
    now = utc(2024, 1, 3, 7, 15)

    doc = FoodLogService.log_food(fake_db, FoodLogCreate(**food_log_payload()), now=now)

    assert doc["timestamp"] == now
    assert doc["email"] == "a@b.com"
    assert "_id" in doc


def test_list_food_logs_serializes_ids_and_timestamps(fake_db):
    log = make_food_log(datetime(2024, 2, 29, 23, 59, 59, 999000))
    fake_db["foodLog"].find.return_value.sort.return_value = [log]

    [entry] = FoodLogService.list_food_logs(fake_db, "a@b.com")

    assert entry["id"] == entry["_id"] == str(log["_id"])
    assert entry["timestamp"] == "2024-02-29T23:59:59.999Z"
    assert entry["calories"] == 200


def test_list_food_logs_converts_offsets_to_utc(fake_db):
    log = make_food_log(datetime(2024, 1, 3, 20, 0, tzinfo=timezone(timedelta(hours=-5))))
    fake_db["foodLog"].find.return_value.sort.return_value = [log]

    [entry] = FoodLogService.list_food_logs(fake_db, "a@b.com")

    assert entry["timestamp"] == "2024-01-04T01:00:00.000Z"
