"""
Default values for FOLIO resume documents.

Provides the sample document a new workspace starts from, an empty document,
and the category names offered when a skill is added. Categories are only
suggestions: grouping accepts any string.
"""

from folio.contexts.document.schema import (
    DEFAULT_SKILL_LEVEL,
    Certification,
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeSchema,
    Skill,
)

SUGGESTED_SKILL_CATEGORIES = [
    "Programming Languages",
    "Frameworks",
    "Databases",
    "Tools",
    "Soft Skills",
    "Other",
]

__all__ = [
    "DEFAULT_SKILL_LEVEL",
    "SUGGESTED_SKILL_CATEGORIES",
    "default_resume",
    "empty_resume",
]


def empty_resume() -> ResumeSchema:
    """Resume with no personal details and no entries."""
    return ResumeSchema()


def default_resume() -> ResumeSchema:
    """
    Sample resume used when no saved document exists.

    Returns a fresh instance on every call so callers can edit it freely.
    """
    return ResumeSchema(
        personal_info=PersonalInfo(
            first_name="John",
            last_name="Doe",
            email="john.doe@example.com",
            phone="(555) 123-4567",
            address="123 Main St",
            city="San Francisco",
            state="CA",
            zip_code="94105",
            linkedin="linkedin.com/in/johndoe",
            website="johndoe.com",
            summary=(
                "Experienced software engineer with a passion for creating user-friendly "
                "applications and solving complex problems."
            ),
        ),
        experience=[
            Experience(
                id="exp1",
                company="Tech Solutions Inc.",
                position="Senior Software Engineer",
                location="San Francisco, CA",
                start_date="2020-01",
                current=True,
                description="Lead developer for client-facing web applications",
                achievements=[
                    "Implemented new features that increased user engagement by 35%",
                    "Reduced page load time by 45% through code optimization",
                    "Mentored junior developers and led code reviews",
                ],
            ),
            Experience(
                id="exp2",
                company="Web Innovators",
                position="Software Engineer",
                location="Oakland, CA",
                start_date="2017-06",
                end_date="2019-12",
                description="Developed responsive web applications using React and Node.js",
                achievements=[
                    "Created RESTful APIs for mobile and web applications",
                    "Improved test coverage from 65% to 92%",
                    "Implemented CI/CD pipeline reducing deployment time by 60%",
                ],
            ),
        ],
        education=[
            Education(
                id="edu1",
                institution="University of California, Berkeley",
                degree="Bachelor of Science",
                field="Computer Science",
                location="Berkeley, CA",
                start_date="2013-09",
                end_date="2017-05",
                gpa="3.8",
                courses=["Data Structures", "Algorithms", "Database Systems", "Web Development"],
            )
        ],
        skills=[
            Skill(id="skill1", name="JavaScript", level=5, category="Programming Languages"),
            Skill(id="skill2", name="React", level=5, category="Frameworks"),
            Skill(id="skill3", name="Node.js", level=4, category="Frameworks"),
            Skill(id="skill4", name="TypeScript", level=4, category="Programming Languages"),
            Skill(id="skill5", name="SQL", level=3, category="Databases"),
            Skill(id="skill6", name="Git", level=4, category="Tools"),
        ],
        projects=[
            Project(
                id="proj1",
                title="E-commerce Platform",
                description="Built a full-stack e-commerce platform with React, Node.js, and MongoDB",
                technologies=["React", "Node.js", "Express", "MongoDB", "Redux"],
                link="github.com/johndoe/ecommerce",
                start_date="2019-03",
                end_date="2019-06",
            ),
            Project(
                id="proj2",
                title="Task Management App",
                description="Developed a task management application with drag-and-drop functionality",
                technologies=["React", "TypeScript", "Material UI", "Firebase"],
                link="github.com/johndoe/taskmanager",
                start_date="2018-10",
                end_date="2018-12",
            ),
        ],
        certifications=[
            Certification(
                id="cert1",
                name="AWS Certified Solutions Architect",
                issuer="Amazon Web Services",
                date="2021-06",
                expiration="2024-06",
                credential_id="AWS-123456",
                url="aws.amazon.com/certification",
            ),
            Certification(
                id="cert2",
                name="Professional Scrum Master I",
                issuer="Scrum.org",
                date="2020-03",
                credential_id="PSM-123456",
                url="scrum.org/certification",
            ),
        ],
    )
