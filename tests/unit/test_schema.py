"""Unit tests for the resume schema."""

import pytest

from folio.contexts.document.schema import (
    Education,
    Experience,
    PersonalInfo,
    ResumeSchema,
    SectionKey,
    Skill,
    clamp_skill_level,
    clean_flag,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "level,expected",
    [(0, 1), (1, 1), (3, 3), (5, 5), (9, 5), (-2, 1), ("4", 4), ("high", 3), (None, 3), (True, 3)],
)
def test_skill_level_is_clamped(level, expected):
    assert clamp_skill_level(level) == expected
    assert Skill(name="Go", level=level).level == expected


@pytest.mark.unit
def test_string_flags():
    assert clean_flag("false") is False
    assert clean_flag("True") is True
    assert Experience(current="false").current is False


@pytest.mark.unit
def test_blank_optional_fields_become_none():
    info = PersonalInfo(first_name=" John ", email="   ", summary="")
    assert info.first_name == "John"
    assert info.email is None
    assert info.summary is None


@pytest.mark.unit
def test_full_name_skips_missing_parts():
    assert PersonalInfo(first_name="Cher").full_name == "Cher"
    assert PersonalInfo().full_name == ""


@pytest.mark.unit
def test_from_dict_accepts_camel_case_contract():
    schema = ResumeSchema.from_dict(
        {
            "personalInfo": {"firstName": "John", "linkedIn": "linkedin.com/in/jd", "zipCode": "94105"},
            "experience": [{"company": "Acme", "startDate": "2020-01", "current": True}],
            "education": [{"institution": "MIT", "field": "Physics", "gpa": 3.9}],
        }
    )
    assert schema.personal_info.linkedin == "linkedin.com/in/jd"
    assert schema.personal_info.zip_code == "94105"
    assert schema.experience[0].start_date == "2020-01"
    assert schema.experience[0].current is True
    assert schema.education[0].gpa == "3.9"
    assert schema.skills == []


@pytest.mark.unit
def test_from_dict_fills_missing_ids():
    schema = ResumeSchema.from_dict({"projects": [{"title": "A"}, {"id": "mine", "title": "B"}]})
    assert [p.id for p in schema.projects] == ["proj1", "mine"]


@pytest.mark.unit
def test_from_dict_filled_ids_do_not_collide():
    schema = ResumeSchema.from_dict(
        {"experience": [{"id": "exp2", "position": "X"}, {"position": "Y"}, {"position": "Z"}]}
    )
    assert [e.id for e in schema.experience] == ["exp2", "exp3", "exp4"]
    assert schema.find_entry(SectionKey.EXPERIENCE, "exp2").position == "X"


@pytest.mark.unit
def test_from_dict_ignores_malformed_sections():
    schema = ResumeSchema.from_dict({"skills": "not a list", "projects": ["not a dict"]})
    assert schema.skills == []
    assert schema.projects == []


@pytest.mark.unit
def test_to_dict_uses_contract_keys(sample_resume):
    data = sample_resume.to_dict()
    assert data["personalInfo"]["firstName"] == "John"
    assert "linkedIn" in data["personalInfo"]
    assert data["experience"][0]["startDate"] == "2020-01"
    assert data["experience"][0]["endDate"] == ""
    assert ResumeSchema.from_dict(data) == sample_resume


@pytest.mark.unit
def test_snapshot_is_independent(sample_resume):
    snapshot = sample_resume.snapshot()
    snapshot.experience[0].achievements.append("Extra")
    snapshot.skills.clear()

    assert "Extra" not in sample_resume.experience[0].achievements
    assert len(sample_resume.skills) == 6


@pytest.mark.unit
def test_section_presence(name_only_resume, sample_resume):
    for key in SectionKey:
        assert not name_only_resume.is_section_present(key)
        assert sample_resume.is_section_present(key)


@pytest.mark.unit
def test_replace_section_checks_entry_type(sample_resume):
    with pytest.raises(TypeError):
        sample_resume.replace_section(SectionKey.SKILLS, [Education()])
    with pytest.raises(ValueError):
        sample_resume.replace_section("summary", [])

    sample_resume.replace_section("projects", [])
    assert sample_resume.projects == []


@pytest.mark.unit
def test_duplicate_ids_resolve_to_last_entry():
    schema = ResumeSchema(
        experience=[
            Experience(id="dup", position="First"),
            Experience(id="dup", position="Second"),
        ]
    )
    assert schema.find_entry("experience", "dup").position == "Second"

    schema.upsert_entry("experience", Experience(id="dup", position="Replaced"))
    assert [e.position for e in schema.experience] == ["First", "Replaced"]

    schema.remove_entry("experience", "dup")
    assert schema.experience == []


@pytest.mark.unit
def test_upsert_appends_new_entry(sample_resume):
    sample_resume.upsert_entry(SectionKey.SKILLS, Skill(id="skill7", name="Rust", category="Languages"))
    assert sample_resume.skills[-1].name == "Rust"
    assert sample_resume.find_entry(SectionKey.SKILLS, "missing") is None
