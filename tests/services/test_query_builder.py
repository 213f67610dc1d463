"""
Application query builder tests

Statements are executed against the in-memory database
"""
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.crud import application_crud
from admissions.models import StatusValue
from admissions.services.query_builder import (
    ApplicationQuery,
    ApplicationQueryBuilder,
    SortType,
)
from admissions.services.visibility import build_caller_role
from tests.conftest import DataFactory, ELECTION_COMMITTEE, MAIN_BOARD


async def run(db: AsyncSession, member_ids, **filters):
    builder = ApplicationQueryBuilder(build_caller_role(member_ids), ApplicationQuery(**filters))
    applications, total = await application_crud.run_query(db, builder.build())
    return [a.name for a in applications], total, builder.applied_stages


@pytest.mark.asyncio
async def test_scope_per_role(db_session: AsyncSession, factory: DataFactory, committees: dict):
    await factory.create_application("Only Board", [MAIN_BOARD])
    await factory.create_application("Board And Football", [MAIN_BOARD, 7])
    await factory.create_application("Handball", [9])

    names, total, stages = await run(db_session, {ELECTION_COMMITTEE})
    assert sorted(names) == ["Board And Football", "Handball", "Only Board"]
    assert total == 3
    assert "scope" not in stages

    names, _, _ = await run(db_session, {MAIN_BOARD})
    assert sorted(names) == ["Board And Football", "Handball"]

    names, _, _ = await run(db_session, {7})
    assert names == ["Board And Football"]

    names, _, _ = await run(db_session, {7, 9})
    assert sorted(names) == ["Board And Football", "Handball"]


@pytest.mark.asyncio
async def test_name_filter_is_case_insensitive_substring(
    db_session: AsyncSession, factory: DataFactory, committees: dict
):
    await factory.create_application("Kari Nordmann", [7])
    await factory.create_application("Ola Hansen", [7])
    await factory.create_application("100% Sporty", [7])

    names, _, stages = await run(db_session, {7}, name="NORD")
    assert names == ["Kari Nordmann"]
    assert "name" in stages

    # wildcards in the input match literally
    names, _, _ = await run(db_session, {7}, name="%")
    assert names == ["100% Sporty"]

    _, _, stages = await run(db_session, {7})
    assert "name" not in stages


@pytest.mark.asyncio
async def test_name_filter_matches_non_ascii_letters_in_any_case(
    db_session: AsyncSession, factory: DataFactory, committees: dict
):
    await factory.create_application("Øystein Ærlig", [7])
    await factory.create_application("Åse Straße", [7])
    await factory.create_application("Ola Hansen", [7])

    names, _, _ = await run(db_session, {7}, name="øystein")
    assert names == ["Øystein Ærlig"]
    names, _, _ = await run(db_session, {7}, name="ærlig")
    assert names == ["Øystein Ærlig"]
    names, _, _ = await run(db_session, {7}, name="ÅSE STRASSE")
    assert names == ["Åse Straße"]


@pytest.mark.asyncio
async def test_committee_and_status_match_the_same_status(
    db_session: AsyncSession, factory: DataFactory, committees: dict
):
    await factory.create_application(
        "Split",
        [7, 9],
        [StatusValue.PENDING, StatusValue.ACCEPTED],
    )
    await factory.create_application(
        "Accepted Football",
        [7, 9],
        [StatusValue.ACCEPTED, StatusValue.PENDING],
    )

    names, _, stages = await run(
        db_session, {ELECTION_COMMITTEE}, committee_ids=[7], status=StatusValue.ACCEPTED
    )
    assert names == ["Accepted Football"]
    assert "status_for_committee" in stages


@pytest.mark.asyncio
async def test_status_only_and_committee_only_filters(
    db_session: AsyncSession, factory: DataFactory, committees: dict
):
    await factory.create_application("Football Rejected", [7], [StatusValue.REJECTED])
    await factory.create_application("Handball Pending", [9], [StatusValue.PENDING])

    names, _, _ = await run(db_session, {ELECTION_COMMITTEE}, status=StatusValue.REJECTED)
    assert names == ["Football Rejected"]

    names, _, _ = await run(db_session, {ELECTION_COMMITTEE}, committee_ids=[9])
    assert names == ["Handball Pending"]

    names, _, _ = await run(db_session, {ELECTION_COMMITTEE}, committee_ids=[7, 9])
    assert sorted(names) == ["Football Rejected", "Handball Pending"]


@pytest.mark.asyncio
async def test_committee_filter_cannot_widen_scope(
    db_session: AsyncSession, factory: DataFactory, committees: dict
):
    await factory.create_application("Handball", [9])

    names, total, _ = await run(db_session, {7}, committee_ids=[9])
    assert names == []
    assert total == 0


@pytest.mark.asyncio
async def test_sort_keys(db_session: AsyncSession, factory: DataFactory, committees: dict):
    start = datetime(2026, 3, 1, tzinfo=timezone.utc)
    await factory.create_application("Bravo", [7], submitted_date=start + timedelta(days=1))
    await factory.create_application("Alpha", [7], submitted_date=start + timedelta(days=2))
    await factory.create_application("Charlie", [7], submitted_date=start)

    names, _, _ = await run(db_session, {7}, sort=SortType.NAME_ASC)
    assert names == ["Alpha", "Bravo", "Charlie"]
    names, _, _ = await run(db_session, {7}, sort=SortType.NAME_DESC)
    assert names == ["Charlie", "Bravo", "Alpha"]
    names, _, _ = await run(db_session, {7}, sort=SortType.DATE_ASC)
    assert names == ["Charlie", "Bravo", "Alpha"]
    names, _, _ = await run(db_session, {7}, sort=SortType.DATE_DESC)
    assert names == ["Alpha", "Bravo", "Charlie"]

    _, _, stages = await run(db_session, {7})
    assert "sort" not in stages


@pytest.mark.asyncio
async def test_window_and_total_come_from_one_statement(
    db_session: AsyncSession, factory: DataFactory, committees: dict
):
    for i in range(10):
        await factory.create_application(f"Applicant {i:02d}", [7])

    names, total, _ = await run(db_session, {7}, sort=SortType.NAME_ASC, page=1)
    assert names == ["Applicant 00", "Applicant 01", "Applicant 02", "Applicant 03"]
    assert total == 10

    names, total, _ = await run(db_session, {7}, sort=SortType.NAME_ASC, page=3)
    assert names == ["Applicant 08", "Applicant 09"]
    assert total == 10

    names, total, _ = await run(db_session, {7}, page=4)
    assert names == []
    assert total == 0


@pytest.mark.asyncio
async def test_loaded_relations_keep_submission_order(
    db_session: AsyncSession, factory: DataFactory, committees: dict
):
    await factory.create_application(
        "Ordered",
        [9, MAIN_BOARD, 7],
        [StatusValue.PENDING, StatusValue.OFFER_GIVEN, StatusValue.REJECTED],
    )

    builder = ApplicationQueryBuilder(build_caller_role({ELECTION_COMMITTEE}), ApplicationQuery())
    applications, _ = await application_crud.run_query(db_session, builder.build())

    application = applications[0]
    assert [c.id for c in application.committees] == [9, MAIN_BOARD, 7]
    assert [s.committee_id for s in application.statuses] == [9, MAIN_BOARD, 7]
    assert [s.value for s in application.statuses] == ["Pending", "Offer given", "Rejected"]
