import pytest

from rms_schedule.normalize import (
    FieldChain,
    Job,
    RecordNormalizer,
    StaffMember,
    joined,
    key,
    normalize_job,
    normalize_member,
)


def test_job_prefers_name_then_subject():
    assert normalize_job({"id": 1, "name": "Gala", "subject": "Other"}).name == "Gala"
    assert normalize_job({"id": 1, "name": "  ", "subject": "Load-in"}).name == "Load-in"
    assert normalize_job({"id": 7}).name == "Opportunity #7"


@pytest.mark.parametrize("field", ["starts_at", "starts_at_date", "start_at", "starts_at_on", "start_date"])
def test_job_start_variants(field):
    job = normalize_job({"id": 1, field: "2024-01-03T10:00:00Z"})
    assert job.starts_at == "2024-01-03T10:00:00Z"


def test_job_start_order_is_respected():
    raw = {"id": 1, "start_at": "2024-03-01", "starts_at_date": "2024-02-01", "starts_at": ""}
    assert normalize_job(raw).starts_at == "2024-02-01"


def test_missing_timestamps_are_none():
    job = normalize_job({"id": 3, "name": "No dates"})
    assert job.starts_at is None and job.ends_at is None


def test_end_variants():
    assert normalize_job({"id": 1, "ends_at_date": "2024-01-04"}).ends_at == "2024-01-04"
    assert normalize_job({"id": 1, "end_at": "2024-01-05"}).ends_at == "2024-01-05"


def test_member_name_fallbacks():
    assert normalize_member({"id": 1, "first_name": "Ada", "last_name": "Lovelace"}).name == "Ada Lovelace"
    assert normalize_member({"id": 1, "first_name": "Ada", "last_name": None, "name": "X"}).name == "Ada"
    assert normalize_member({"id": 2, "name": "Stage Crew Ltd"}).name == "Stage Crew Ltd"
    assert normalize_member({"id": 3, "full_name": "Bo Diddley"}).name == "Bo Diddley"
    assert normalize_member({"id": 4, "display_name": "Bo"}).name == "Bo"
    assert normalize_member({"id": 5, "company_name": "Acme"}).name == "Acme"
    assert normalize_member({"id": 6}).name == "Member #6"


def test_normalization_is_idempotent():
    raw = {"id": 55, "subject": "Load-in", "starts_at_date": "2024-01-03T10:00:00Z", "end_at": "2024-01-03T18:00:00Z", "extra": 1}
    job = normalize_job(raw)
    assert normalize_job(job.model_dump()) == job

    member = normalize_member({"id": 9, "first_name": "Cy", "last_name": "Twombly", "company_name": "Z"})
    assert normalize_member(member.model_dump()) == member


def test_deterministic():
    raw = {"id": 1, "subject": "A", "starts_at": "2024-01-01"}
    assert normalize_job(raw) == normalize_job(dict(raw))


def test_models_are_frozen():
    job = Job(id=1, name="x")
    with pytest.raises(Exception):
        job.name = "y"
    assert StaffMember(id="abc", name="n").id == "abc"


def test_custom_chains():
    normalizer = RecordNormalizer(
        job_name=FieldChain.of("title"),
        member_name=FieldChain(joined("surname", "given", sep=", "), key("nick")),
    )
    assert normalizer.job({"id": 1, "title": "T", "name": "ignored"}).name == "T"
    assert normalizer.member({"id": 1, "surname": "Doe", "given": "Jo"}).name == "Doe, Jo"
    assert normalizer.member({"id": 1, "nick": "JD"}).name == "JD"


def test_field_chain_skips_empty_values():
    chain = FieldChain.of("a", "b", "c")
    assert chain.first({"a": None, "b": "", "c": 0}) == 0
    assert chain.first({}) is None


def test_falsy_non_string_values_are_kept():
    assert normalize_job({"id": 1, "name": 0}).name == "0"
    assert normalize_job({"id": 2, "name": False, "subject": "ignored"}).name == "False"
    assert normalize_member({"id": 3, "name": 0}).name == "0"
