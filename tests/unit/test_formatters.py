"""Unit tests for the section formatters shared by every renderer."""

import pytest

from folio.contexts.document.schema import (
    Certification,
    Education,
    PersonalInfo,
    Project,
    ResumeSchema,
    SectionKey,
    Skill,
)
from folio.contexts.templating.formatters import (
    certification_facts,
    document_facts,
    education_facts,
    format_date_range,
    format_locality,
    format_month_year,
    group_skills,
    header_facts,
    join_present,
    project_facts,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,expected",
    [
        ("2020-01", "Jan 2020"),
        ("2019-12-31", "Dec 2019"),
        ("2021-06-01T00:00:00", "Jun 2021"),
        ("2020-1", "Jan 2020"),
        ("2020-13", ""),
        ("2020-00", ""),
        ("2020", ""),
        ("January 2020", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_format_month_year(value, expected):
    assert format_month_year(value) == expected


@pytest.mark.unit
def test_current_overrides_any_end_date():
    assert format_date_range("2020-01", "2019-05", current=True) == "Jan 2020 - Present"
    assert format_date_range("2020-01", "garbage", current=True) == "Jan 2020 - Present"
    assert format_date_range(None, None, current=True) == "Present"


@pytest.mark.unit
def test_date_range_drops_missing_parts():
    assert format_date_range("2020-01", None) == "Jan 2020"
    assert format_date_range(None, "2019-06") == "Jun 2019"
    assert format_date_range("2018-10", "2018-12") == "Oct 2018 - Dec 2018"
    assert format_date_range("bad", "worse") == ""


@pytest.mark.unit
def test_group_skills_keeps_first_seen_and_insertion_order():
    skills = [
        Skill(id="0", name="s0", category="A"),
        Skill(id="1", name="s1", category="B"),
        Skill(id="2", name="s2", category="A"),
    ]
    groups = group_skills(skills)

    assert [g.category for g in groups] == ["A", "B"]
    assert [s.id for s in groups[0].skills] == ["0", "2"]


@pytest.mark.unit
def test_group_skills_accepts_any_category():
    groups = group_skills([Skill(name="Juggling", category="Circus Arts"), Skill(name="x", category="")])
    assert [g.category for g in groups] == ["Circus Arts", ""]
    assert group_skills([]) == []


@pytest.mark.unit
def test_join_helpers():
    assert join_present(["a", None, "", "b"], " | ") == "a | b"
    assert join_present([None, ""], " | ") == ""
    assert format_locality("San Francisco", "CA", "94105") == "San Francisco, CA 94105"
    assert format_locality(None, "CA", None) == "CA"
    assert format_locality(None, None, "94105") == ""


@pytest.mark.unit
def test_header_lines_omit_absent_fields():
    header = header_facts(PersonalInfo(first_name="A", last_name="B", phone="555", website="b.com"))
    assert header.full_name == "A B"
    assert header.lines == ("555", "b.com")
    assert header.location_line == ""


@pytest.mark.unit
def test_header_lines_for_sample(sample_resume):
    header = header_facts(sample_resume.personal_info)
    assert header.lines == (
        "john.doe@example.com | (555) 123-4567",
        "123 Main St | San Francisco, CA 94105",
        "linkedin.com/in/johndoe | johndoe.com",
    )


@pytest.mark.unit
def test_education_facts():
    facts = education_facts(
        Education(
            id="edu1",
            institution="MIT",
            degree="BSc",
            field="Physics",
            location="Cambridge, MA",
            start_date="2013-09",
            current=True,
            gpa="3.9",
            courses=["Optics"],
        )
    )
    assert facts.title == "BSc in Physics"
    assert facts.subtitle == "MIT, Cambridge, MA"
    assert facts.date_range == "Sep 2013 - Present"
    assert facts.details == (("GPA", "3.9"),)
    assert facts.items_label == "Relevant Coursework"
    assert facts.items == ("Optics",)


@pytest.mark.unit
def test_degree_without_field():
    assert education_facts(Education(degree="PhD")).title == "PhD"


@pytest.mark.unit
def test_project_and_certification_facts():
    project = project_facts(Project(title="P", technologies=["Go"], link="x.dev", end_date="2020-02"))
    assert project.date_range == "Feb 2020"
    assert project.details == (("Link", "x.dev"),)
    assert project.items_text == "Go"

    cert = certification_facts(
        Certification(name="CKA", issuer="CNCF", date="2021-06", expiration="2024-06", credential_id="42")
    )
    assert cert.subtitle == "CNCF"
    assert cert.date_range == "Jun 2021"
    assert cert.details == (("Credential ID", "42"), ("Expires", "Jun 2024"))


@pytest.mark.unit
def test_document_facts_follow_fixed_order(sample_resume):
    facts = document_facts(sample_resume)
    assert facts.section_keys == (
        SectionKey.SUMMARY,
        SectionKey.EXPERIENCE,
        SectionKey.EDUCATION,
        SectionKey.SKILLS,
        SectionKey.PROJECTS,
        SectionKey.CERTIFICATIONS,
    )


@pytest.mark.unit
def test_document_facts_skip_empty_sections(current_job_resume):
    facts = document_facts(current_job_resume)
    assert facts.section_keys == (SectionKey.EXPERIENCE, SectionKey.SKILLS)
    assert facts.sections[0].entries[0].date_range == "Jan 2020 - Present"


@pytest.mark.unit
def test_document_facts_never_raise_on_malformed_input(tricky_resume):
    facts = document_facts(tricky_resume)
    experience = facts.sections[1]
    assert [e.date_range for e in experience.entries] == ["", ""]
    assert document_facts(ResumeSchema()).sections == ()
