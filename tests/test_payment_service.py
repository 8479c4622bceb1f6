"""Tests for payments scheduled against house members."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from myhome.schemas.community import CommunityCreate, HouseCreate, HouseMemberCreate
from myhome.schemas.payment import PaymentCreate


@pytest.fixture
def member_id(community_service, house_service) -> str:
    community = community_service.create_community(
        CommunityCreate(name="Green Hills", district="North"), "nobody"
    )
    (house_id,) = community_service.add_houses_to_community(
        community.community_id, [HouseCreate(name="House A")]
    )
    (member,) = house_service.add_house_members(house_id, [HouseMemberCreate(name="Tom")])
    return member.member_id


def _request(admin_id: str, member_id: str, **overrides) -> PaymentCreate:
    values = dict(
        charge=Decimal("99.90"),
        type="maintenance",
        description="Monthly maintenance fee",
        recurring=True,
        due_date=date(2024, 6, 1),
        admin_id=admin_id,
        member_id=member_id,
    )
    values.update(overrides)
    return PaymentCreate(**values)


def test_schedule_payment(payment_service, create_user, member_id):
    john = create_user()

    payment = payment_service.schedule_payment(_request(john.user_id, member_id))

    assert payment.payment_id
    assert payment.charge == Decimal("99.90")
    assert payment.admin_id == john.user_id
    assert payment.member_id == member_id
    assert payment.recurring is True

    details = payment_service.get_payment_details(payment.payment_id)
    assert details == payment


def test_schedule_payment_with_missing_parties(payment_service, create_user, member_id):
    john = create_user()

    assert payment_service.schedule_payment(_request("missing", member_id)) is None
    assert payment_service.schedule_payment(_request(john.user_id, "missing")) is None
    assert payment_service.get_payments_by_member(member_id) == []


def test_payments_by_member_and_admin(payment_service, create_user, member_id):
    john = create_user()
    ann = create_user(email="ann@mail.com", name="Ann")
    first = payment_service.schedule_payment(_request(john.user_id, member_id))
    second = payment_service.schedule_payment(_request(ann.user_id, member_id, type="water"))

    assert [p.payment_id for p in payment_service.get_payments_by_member(member_id)] == [
        first.payment_id,
        second.payment_id,
    ]
    assert [p.payment_id for p in payment_service.get_payments_by_admin(john.user_id)] == [
        first.payment_id
    ]
    assert payment_service.get_payments_by_admin(john.user_id, skip=1) == []
    assert payment_service.get_payments_by_admin("missing") == []


def test_lookups_are_exact(payment_service, create_user, member_id):
    john = create_user()
    payment = payment_service.schedule_payment(_request(john.user_id, member_id))

    assert payment_service.get_payment_details(payment.payment_id[:8]) is None
    assert payment_service.get_payments_by_member(member_id[:8]) == []


def test_get_house_member(payment_service, member_id):
    assert payment_service.get_house_member(member_id).name == "Tom"
    assert payment_service.get_house_member("missing") is None


def test_charge_must_be_positive():
    with pytest.raises(ValidationError):
        _request("admin", "member", charge=Decimal("0"))
