"""
In-memory doctor repository tests.
"""

import asyncio

import pytest

from clinicbook.domain.errors import DoctorNotFoundError, DuplicateDoctorError


@pytest.mark.asyncio
async def test_save_assigns_sequential_ids(repository, make_doctor):
    first = await repository.save(make_doctor())
    second = await repository.save(make_doctor(email="bruno.costa@healthclinic.org"))

    assert first.id == 1
    assert second.id == 2


@pytest.mark.asyncio
async def test_save_assigns_id_to_the_given_record(repository, make_doctor):
    doctor = make_doctor()
    saved = await repository.save(doctor)

    assert doctor.id == saved.id
    assert doctor.is_persisted


@pytest.mark.asyncio
async def test_find_by_id_round_trips_all_fields(repository, make_doctor):
    doctor = await repository.save(make_doctor())

    found = await repository.find_by_id(doctor.id)

    assert found == doctor
    assert found.password == "secret123"
    assert found.available_times == ["09:00-10:00", "10:00-11:00"]
    assert found.years_of_experience == 12
    assert found.clinic_address == "12 Harbor Street, Porto"
    assert found.rating == 4


@pytest.mark.asyncio
async def test_find_by_id_returns_none_for_unknown(repository):
    assert await repository.find_by_id(99) is None
    assert not await repository.exists_by_id(99)


@pytest.mark.asyncio
async def test_returned_records_are_copies(repository, make_doctor):
    doctor = await repository.save(make_doctor())

    found = await repository.find_by_id(doctor.id)
    found.specialty = "Neurology"
    found.available_times.append("17:00-18:00")

    stored = await repository.find_by_id(doctor.id)
    assert stored.specialty == "Cardiology"
    assert stored.available_times == ["09:00-10:00", "10:00-11:00"]


@pytest.mark.asyncio
async def test_save_existing_replaces_record(repository, make_doctor):
    doctor = await repository.save(make_doctor())
    doctor.rating = 5

    await repository.save(doctor)

    assert (await repository.find_by_id(doctor.id)).rating == 5


@pytest.mark.asyncio
async def test_save_with_unknown_id_fails(repository, make_doctor):
    with pytest.raises(DoctorNotFoundError):
        await repository.save(make_doctor(id=42))


@pytest.mark.asyncio
async def test_find_by_email_ignores_case(repository, make_doctor):
    doctor = await repository.save(make_doctor())

    found = await repository.find_by_email("Ana.Silva@HealthClinic.org")

    assert found == doctor
    assert await repository.find_by_email("nobody@healthclinic.org") is None


@pytest.mark.asyncio
async def test_find_all_orders_by_id_and_paginates(repository, make_doctor):
    for index in range(5):
        await repository.save(make_doctor(email=f"doctor{index}@healthclinic.org"))

    page = await repository.find_all(limit=2, offset=1)

    assert [d.id for d in page] == [2, 3]
    assert [d.id for d in await repository.find_all()] == [1, 2, 3, 4, 5]


@pytest.mark.asyncio
async def test_delete_removes_record_and_ids_are_not_reused(repository, make_doctor):
    doctor = await repository.save(make_doctor())

    assert await repository.delete(doctor.id)
    assert not await repository.delete(doctor.id)
    assert await repository.find_by_id(doctor.id) is None

    replacement = await repository.save(make_doctor())
    assert replacement.id == doctor.id + 1


@pytest.mark.asyncio
async def test_concurrent_saves_get_distinct_ids(repository, make_doctor):
    saved = await asyncio.gather(
        *(repository.save(make_doctor(email=f"doc{i}@healthclinic.org")) for i in range(20))
    )

    assert sorted(d.id for d in saved) == list(range(1, 21))


@pytest.mark.asyncio
async def test_rejected_save_leaves_record_unsaved(repository, make_doctor):
    await repository.save(make_doctor())
    doctor = make_doctor(name="Dr. Ana Costa", email="ANA.SILVA@healthclinic.org")

    with pytest.raises(DuplicateDoctorError):
        await repository.save(doctor)

    assert doctor.id is None
    assert not doctor.is_persisted
    assert [d.id for d in await repository.find_all()] == [1]
    assert (await repository.save(make_doctor(email="bruno.costa@healthclinic.org"))).id == 2


@pytest.mark.asyncio
async def test_update_to_taken_email_is_rejected(repository, make_doctor):
    await repository.save(make_doctor())
    other = await repository.save(make_doctor(email="bruno.costa@healthclinic.org"))

    other.email = "ana.silva@healthclinic.org"
    with pytest.raises(DuplicateDoctorError):
        await repository.save(other)

    assert (await repository.find_by_id(other.id)).email == "bruno.costa@healthclinic.org"


@pytest.mark.asyncio
async def test_saving_own_email_again_is_allowed(repository, make_doctor):
    doctor = await repository.save(make_doctor())
    doctor.email = "Ana.Silva@HealthClinic.org"

    saved = await repository.save(doctor)

    assert saved.email == "Ana.Silva@HealthClinic.org"


@pytest.mark.asyncio
async def test_concurrent_saves_with_same_email_store_one(repository, make_doctor):
    results = await asyncio.gather(
        *(repository.save(make_doctor()) for _ in range(5)), return_exceptions=True
    )

    errors = [r for r in results if isinstance(r, Exception)]
    assert len(errors) == 4
    assert all(isinstance(e, DuplicateDoctorError) for e in errors)
    assert len(await repository.find_all()) == 1
