"""Tests for catalog seeding, listing, and service request submission."""

import pytest
from unittest.mock import patch

from src.models.operation_inputs import ListServicesInput, RequestServiceInput
from src.services.service_catalog import (
    ensure_default_services,
    list_services,
    request_service,
    seed_default_services,
)
from src.utils.errors import (
    AuthenticationRequired,
    InvalidAuthentication,
    MissingParameters,
    ServiceNotFound,
    SupabaseError,
)
from tests.utils.assertions import assert_valid_service


@pytest.mark.unit
@pytest.mark.asyncio
async def test_seed_empty_catalog_inserts_four_defaults_in_one_statement(fake_db):
    """Test an empty catalog gets exactly the defaults via a single bulk insert."""
    inserted = await ensure_default_services()

    assert inserted == 4
    assert sorted(s["name"] for s in fake_db.tables["services"]) == [
        "Application Server", "CI / CD", "File Cloud", "Web Hosting",
    ]
    writes = [entry for entry in fake_db.executed if entry[1] in ("insert", "upsert")]
    assert writes == [("services", "upsert")]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_seed_is_idempotent(fake_db):
    """Test a second run against a populated catalog inserts nothing."""
    assert await ensure_default_services() == 4
    assert await ensure_default_services() == 0

    assert len(fake_db.tables["services"]) == 4
    assert fake_db.executed.count(("services", "upsert")) == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_seed_skips_non_empty_catalog(fake_db):
    """Test any existing service blocks seeding."""
    fake_db.add_row("services", {"name": "Custom", "description": "Hand made"})

    assert await ensure_default_services() == 0
    assert [s["name"] for s in fake_db.tables["services"]] == ["Custom"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_seed_failure_is_reported_not_raised(fake_db):
    """Test storage errors are swallowed and sent to the error tracker."""
    fake_db.fail_on.add(("services", "upsert"))

    with patch("src.services.service_catalog.capture_exception") as mock_capture:
        assert await ensure_default_services() == 0

    mock_capture.assert_called_once()
    assert isinstance(mock_capture.call_args[0][0], SupabaseError)
    assert fake_db.tables["services"] == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_seed_default_services_propagates_errors(fake_db):
    fake_db.fail_on.add(("services", "select"))

    with pytest.raises(SupabaseError):
        await seed_default_services()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_list_services_sorted_by_name(seeded_catalog, regular_user):
    """Test services come back ordered by name with only public columns."""
    services = await list_services(ListServicesInput(userId=regular_user["id"], token=regular_user["token"]))

    assert [s["name"] for s in services] == [
        "Application Server", "CI / CD", "File Cloud", "Web Hosting",
    ]
    for service in services:
        assert_valid_service(service)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_list_services_empty_catalog(fake_db, regular_user):
    services = await list_services(ListServicesInput(userId=regular_user["id"], token=regular_user["token"]))
    assert services == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_list_services_requires_credentials(seeded_catalog):
    with pytest.raises(AuthenticationRequired):
        await list_services(ListServicesInput(userId=7))


@pytest.mark.unit
@pytest.mark.asyncio
async def test_list_services_invalid_credentials(seeded_catalog, regular_user):
    with pytest.raises(InvalidAuthentication):
        await list_services(ListServicesInput(userId=regular_user["id"], token="forged"))


@pytest.mark.unit
@pytest.mark.asyncio
async def test_list_services_storage_fault_propagates(seeded_catalog, regular_user):
    with patch("src.services.service_catalog.get_services_ordered_by_name", side_effect=SupabaseError("boom")):
        with pytest.raises(SupabaseError):
            await list_services(ListServicesInput(userId=regular_user["id"], token=regular_user["token"]))


@pytest.mark.unit
@pytest.mark.asyncio
async def test_request_service_creates_one_row(fake_db, seeded_catalog, regular_user):
    """Test a valid request writes exactly one pending row and returns its id."""
    target = seeded_catalog[2]
    request_id = await request_service(RequestServiceInput(
        userId=regular_user["id"],
        token=regular_user["token"],
        serviceId=target["id"],
        details="Need a JVM host",
    ))

    rows = fake_db.tables["service_requests"]
    assert len(rows) == 1
    assert rows[0]["id"] == request_id
    assert rows[0]["user_id"] == regular_user["id"]
    assert rows[0]["service_id"] == target["id"]
    assert rows[0]["details"] == "Need a JVM host"
    assert rows[0]["status"] == "pending"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_request_service_accepts_string_ids(fake_db, seeded_catalog, regular_user):
    request_id = await request_service(RequestServiceInput(
        userId=str(regular_user["id"]),
        token=regular_user["token"],
        serviceId=str(seeded_catalog[0]["id"]),
        details="Blog hosting",
    ))

    assert fake_db.tables["service_requests"][0]["id"] == request_id
    assert fake_db.tables["service_requests"][0]["service_id"] == seeded_catalog[0]["id"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_request_service_unknown_service(fake_db, seeded_catalog, regular_user):
    """Test an unknown service id is rejected and nothing is written."""
    with pytest.raises(ServiceNotFound):
        await request_service(RequestServiceInput(
            userId=regular_user["id"],
            token=regular_user["token"],
            serviceId=99999,
            details="Anything",
        ))

    assert fake_db.tables["service_requests"] == []


@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["userId", "token", "serviceId", "details"])
async def test_request_service_missing_parameter(fake_db, seeded_catalog, regular_user, missing):
    """Test presence is checked before anything touches storage."""
    body = {
        "userId": regular_user["id"],
        "token": regular_user["token"],
        "serviceId": seeded_catalog[0]["id"],
        "details": "Something",
    }
    body[missing] = ""
    executed_before = list(fake_db.executed)

    with pytest.raises(MissingParameters):
        await request_service(RequestServiceInput.model_validate(body))

    assert fake_db.executed == executed_before


@pytest.mark.unit
@pytest.mark.asyncio
async def test_request_service_auth_checked_before_service(fake_db, seeded_catalog, regular_user):
    """Test bad credentials win over an unknown service."""
    with pytest.raises(InvalidAuthentication):
        await request_service(RequestServiceInput(
            userId=regular_user["id"],
            token="forged",
            serviceId=99999,
            details="Anything",
        ))

    assert fake_db.executed[-1] == ("users", "select")
    assert fake_db.tables["service_requests"] == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_request_service_insert_fault_propagates(fake_db, seeded_catalog, regular_user):
    fake_db.fail_on.add(("service_requests", "insert"))

    with pytest.raises(SupabaseError):
        await request_service(RequestServiceInput(
            userId=regular_user["id"],
            token=regular_user["token"],
            serviceId=seeded_catalog[0]["id"],
            details="Anything",
        ))
