"""Shared fixtures for FOLIO tests."""

import pytest

from folio.contexts.document.defaults import default_resume
from folio.contexts.document.schema import (
    Experience,
    PersonalInfo,
    Project,
    ResumeSchema,
    Skill,
)


@pytest.fixture
def sample_resume() -> ResumeSchema:
    """The John Doe sample resume (every section populated)."""
    return default_resume()


@pytest.fixture
def name_only_resume() -> ResumeSchema:
    """A resume with a name and nothing else."""
    return ResumeSchema(personal_info=PersonalInfo(first_name="Ada", last_name="Lovelace"))


@pytest.fixture
def current_job_resume() -> ResumeSchema:
    """One current position with a stale end date, and no projects."""
    return ResumeSchema(
        personal_info=PersonalInfo(first_name="Grace", last_name="Hopper", email="grace@example.com"),
        experience=[
            Experience(
                id="exp1",
                company="Navy",
                position="Rear Admiral",
                start_date="2020-01",
                end_date="2019-05",
                current=True,
                achievements=["Popularized the term 'debugging'"],
            )
        ],
        skills=[
            Skill(id="s1", name="COBOL", level=5, category="A"),
            Skill(id="s2", name="FLOW-MATIC", level=4, category="B"),
            Skill(id="s3", name="Assembly", level=3, category="A"),
        ],
    )


@pytest.fixture
def tricky_resume() -> ResumeSchema:
    """Malformed dates, custom categories and LaTeX special characters."""
    return ResumeSchema(
        personal_info=PersonalInfo(
            first_name="R&D",
            last_name="Team_#1",
            summary="100% focused on $cost & {quality}",
        ),
        experience=[
            Experience(id="e1", company="Acme", position="Engineer", start_date="not a date"),
            Experience(id="e2", company="Acme", position="Lead", start_date="2021", end_date="2022-13"),
        ],
        skills=[Skill(id="s1", name="C#", category="Obscure ~ Stuff")],
        projects=[Project(id="p1", title="Side project", technologies=["Python"])],
    )
