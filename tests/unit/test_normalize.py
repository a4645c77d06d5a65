"""Unit tests for offer record normalization."""

from datetime import datetime, timezone

import pytest

from offer_engine.errors import BadRequestError
from offer_engine.models import FullTimeOffer, InternOffer, Profile
from offer_engine.normalize import (
    comparable_view,
    compensation_value,
    parse_offer_record,
    parse_offer_records,
    total_yoe,
)
from offer_engine.utils import stable_id
from tests.factories import fulltime, intern


def _relational_fulltime(**overrides):
    record = {
        "id": "offer-1",
        "jobType": "FULLTIME",
        "location": "Singapore",
        "monthYearReceived": "2022-09-01T00:00:00.000Z",
        "negotiationStrategy": "Asked for more stock",
        "companyId": "c1",
        "profileId": "p1",
        "company": {"id": "c1", "name": "Meta"},
        "profile": {
            "id": "p1",
            "profileName": "quiet-owl",
            "background": {
                "id": "b1",
                "totalYoe": 3,
                "experiences": [{"id": "e1", "company": {"id": "c2", "name": "Shopee"}}],
            },
        },
        "OffersFullTime": {
            "level": "E4",
            "specialization": "Frontend",
            "title": "Software Engineer",
            "baseSalary": {"value": 150000, "currency": "SGD"},
            "bonus": {"value": 10000, "currency": "SGD"},
            "stocks": {"value": 40000, "currency": "SGD"},
            "totalCompensation": {"value": 200000, "currency": "SGD"},
        },
        "OffersIntern": None,
    }
    record.update(overrides)
    return record


@pytest.mark.unit
class TestComparableView:
    def test_fulltime_uses_total_compensation(self):
        view = comparable_view(fulltime("a", 180, level="L5", specialization="ML", title="MLE"))

        assert view.compensation_value == 180
        assert view.level == "L5"
        assert view.specialization == "ML"
        assert view.title == "MLE"

    def test_intern_uses_monthly_salary_and_has_no_level(self):
        view = comparable_view(intern("b", 4500, specialization="Backend", title="SWE Intern"))

        assert view.compensation_value == 4500
        assert view.level is None
        assert view.specialization == "Backend"
        assert view.title == "SWE Intern"

    def test_missing_compensation_is_none(self):
        assert compensation_value(fulltime("a", None)) is None
        assert compensation_value(intern("b", None)) is None

    def test_rejects_unknown_type(self):
        with pytest.raises(TypeError):
            comparable_view(object())


@pytest.mark.unit
class TestTotalYoe:
    def test_reads_background(self):
        assert total_yoe(fulltime("a", yoe=7)) == 7

    def test_zero_is_a_value(self):
        assert total_yoe(fulltime("a", yoe=0)) == 0

    def test_none_without_yoe(self):
        assert total_yoe(fulltime("a", yoe=None)) is None

    def test_none_without_background(self):
        offer = fulltime("a", profile=Profile(id="p", background=None))
        assert total_yoe(offer) is None


@pytest.mark.unit
class TestParseOfferRecord:
    def test_relational_fulltime(self):
        offer = parse_offer_record(_relational_fulltime())

        assert isinstance(offer, FullTimeOffer)
        assert offer.id == "offer-1"
        assert offer.company.name == "Meta"
        assert offer.profile.profile_name == "quiet-owl"
        assert offer.profile.background.total_yoe == 3
        assert offer.profile.background.experiences[0].company.name == "Shopee"
        assert offer.full_time.total_compensation.value == 200000
        assert offer.full_time.bonus.currency == "SGD"
        assert offer.month_year_received == datetime(2022, 9, 1, tzinfo=timezone.utc)
        assert offer.negotiation_strategy == "Asked for more stock"

    def test_relational_intern(self):
        record = _relational_fulltime(
            jobType="INTERN",
            OffersFullTime=None,
            OffersIntern={
                "specialization": "Backend",
                "title": "SWE Intern",
                "monthlySalary": {"value": 4000, "currency": "SGD"},
            },
        )
        offer = parse_offer_record(record)

        assert isinstance(offer, InternOffer)
        assert offer.intern.monthly_salary.value == 4000
        assert compensation_value(offer) == 4000

    def test_both_payloads_rejected(self):
        record = _relational_fulltime(OffersIntern={"specialization": "Backend"})
        with pytest.raises(BadRequestError, match="both"):
            parse_offer_record(record)

    def test_no_payload_rejected(self):
        record = _relational_fulltime(OffersFullTime=None)
        with pytest.raises(BadRequestError, match="neither"):
            parse_offer_record(record)

    def test_declared_type_must_match_payload(self):
        record = _relational_fulltime(jobType="INTERN")
        with pytest.raises(BadRequestError, match="declares INTERN"):
            parse_offer_record(record)

    def test_invalid_field_is_bad_request(self):
        record = _relational_fulltime(location=None)
        with pytest.raises(BadRequestError, match="Malformed"):
            parse_offer_record(record)

    def test_missing_id_is_derived(self):
        record = _relational_fulltime()
        del record["id"]
        offer = parse_offer_record(record)

        assert offer.id == stable_id("p1", "c1", "Singapore", "2022-09-01T00:00:00.000Z")
        assert parse_offer_record(dict(record)).id == offer.id

    def test_snake_case_shape(self):
        source = intern("x", 3000)
        offer = parse_offer_record(source.model_dump(mode="json"))

        assert isinstance(offer, InternOffer)
        assert offer == source

    def test_non_object_rejected(self):
        with pytest.raises(BadRequestError):
            parse_offer_record(["not", "a", "record"])

    def test_parse_many(self):
        offers = parse_offer_records([_relational_fulltime(), fulltime("y").model_dump()])
        assert [o.id for o in offers] == ["offer-1", "y"]
