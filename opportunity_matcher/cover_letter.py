# opportunity_matcher/cover_letter.py
from __future__ import annotations

from opportunity_matcher.models import Opportunity, Profile

DEFAULT_EDUCATION = "student"
DEFAULT_SKILLS = "various technologies"
DEFAULT_EXPERIENCE = (
    "I have experience in relevant projects and am eager to apply my skills "
    "in a professional environment."
)
DEFAULT_FIELD = "this field"
DEFAULT_NAME = "Applicant"


def _join(skills) -> str:
    return ", ".join(skills)


def compose_cover_letter(profile: Profile, opportunity: Opportunity) -> str:
    """
    Render the templated cover letter for one opportunity.
    Missing profile or opportunity fields fall back to fixed defaults; the
    company clause is left out entirely when there is no company.
    """
    company_clause = f" at {opportunity.company}" if opportunity.company else ""
    education = profile.education or DEFAULT_EDUCATION
    skills = _join(profile.skill_set) or DEFAULT_SKILLS
    experience = profile.experience or DEFAULT_EXPERIENCE
    required = _join(opportunity.skill_set) or DEFAULT_FIELD
    name = profile.name or DEFAULT_NAME

    return (
        f"Dear Hiring Manager{company_clause},\n"
        "\n"
        f"I am writing to express my interest in the {opportunity.title} opportunity "
        f"listed on {opportunity.platform}. As a {education} with skills in {skills}, "
        "I believe I am well-suited for this role.\n"
        "\n"
        f"{experience}\n"
        "\n"
        "I am particularly excited about this opportunity because it aligns with my "
        "career goals and would allow me to further develop my skills in "
        f"{required}.\n"
        "\n"
        "Thank you for considering my application. I look forward to the possibility "
        "of discussing this opportunity with you further.\n"
        "\n"
        "Sincerely,\n"
        f"{name}"
    )
