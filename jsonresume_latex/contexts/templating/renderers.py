"""
Section Renderers

One function per resume section, each mapping JSON Resume records into a LaTeX
fragment wrapped in the section's environment. The environment names and the
order of environment arguments are a contract with the preamble, which defines
every environment used here.

Every section renderer accepts None (section absent) and returns a placeholder
comment in that case. An empty list is not the same: it renders the section
environment with an empty body.
"""

from typing import Any, Dict, List, Optional

from jsonresume_latex.contexts.templating.formatters import (
    UNDISCLOSED,
    UNTITLED,
    format_date_range,
    format_phone_number,
    raw_phone,
    with_details,
)
from jsonresume_latex.contexts.templating.sections import Section
from jsonresume_latex.utils.latex_tools import (
    comment,
    command,
    escape,
    href,
    itemize,
    use_environment,
)
from jsonresume_latex.utils.timestamp import format_date

HEADER_PLACEHOLDER = comment("Header section omitted.")
SUMMARY_PLACEHOLDER = comment("Summary section omitted.")


def render_header(basics: Optional[Dict[str, Any]]) -> str:
    """
    Render the resume header from the basics block.

    Args:
        basics: The resume's basics block (name, label, contact, location)

    Returns:
        LaTeX header environment, or a placeholder comment if basics is absent
    """
    if basics is None:
        return HEADER_PLACEHOLDER

    contents = [command("name", escape(basics.get("name")))]

    if basics.get("label"):
        contents.append(command("personallabel", escape(basics["label"])))

    location = basics.get("location")
    if location:
        contents.append(
            command(
                "location",
                f"{escape(location.get('address'))} \\\\ "
                f"{escape(location.get('city'))}, {escape(location.get('postalCode'))}",
            )
        )

    if basics.get("email"):
        contents.append(command("email", basics["email"]))

    if basics.get("phone"):
        phone = raw_phone(basics["phone"])
        contents.append(command("phone", phone, format_phone_number(phone)))

    # Newer schema versions call the website "url"
    website = basics.get("website") or basics.get("url")
    if website:
        contents.append(command("website", website))

    return use_environment("header", "\n".join(contents))


def render_summary(summary: Optional[str]) -> str:
    """Render the resume summary, or a placeholder comment if absent."""
    if not summary:
        return SUMMARY_PLACEHOLDER
    return command("summary", escape(summary))


def render_work(work: Optional[List[Dict[str, Any]]]) -> str:
    """
    Render the work section.

    Each job becomes a job environment with arguments:
    1. Company (linked when a URL is given, followed by its description)
    2. Position
    3. Date range
    4. Location
    """
    if work is None:
        return Section.WORK.placeholder

    formatted_jobs = []
    for job in work:
        company = href(job.get("url"), job.get("company") or job.get("name") or UNDISCLOSED)
        if job.get("description"):
            company += f" {escape(job['description'])}"

        args = [
            company,
            escape(job.get("position") or UNTITLED),
            format_date_range(job.get("startDate"), job.get("endDate")),
            escape(job.get("location")),
        ]

        job_info = []
        if job.get("summary"):
            job_info.append(command("jobsummary", escape(job["summary"])))
        if job.get("highlights") is not None:
            job_info.append(use_environment("jobhighlights", itemize(job["highlights"])))

        formatted_jobs.append(use_environment("job", "\n".join(job_info), *args))

    return use_environment(Section.WORK.value, "\n".join(formatted_jobs))


def render_volunteer(volunteer: Optional[List[Dict[str, Any]]]) -> str:
    """
    Render the volunteer section.

    Each position becomes a position environment with arguments:
    1. Organization (linked when a URL is given, followed by its description)
    2. Position
    3. Date range
    4. Location
    """
    if volunteer is None:
        return Section.VOLUNTEER.placeholder

    formatted_positions = []
    for position in volunteer:
        organization = href(position.get("url"), position.get("organization") or UNDISCLOSED)
        if position.get("description"):
            organization += f" {escape(position['description'])}"

        args = [
            organization,
            escape(position.get("position") or UNTITLED),
            format_date_range(position.get("startDate"), position.get("endDate")),
            escape(position.get("location")),
        ]

        position_info = []
        if position.get("summary"):
            position_info.append(command("positionsummary", escape(position["summary"])))
        if position.get("highlights") is not None:
            position_info.append(
                use_environment("positionhighlights", itemize(position["highlights"]))
            )

        formatted_positions.append(use_environment("position", "\n".join(position_info), *args))

    return use_environment(Section.VOLUNTEER.value, "\n".join(formatted_positions))


def _degree(school: Dict[str, Any]) -> str:
    study_type = school.get("studyType")
    area = school.get("area")
    if study_type:
        return with_details(study_type, area)
    return area or ""


def render_education(education: Optional[List[Dict[str, Any]]]) -> str:
    """
    Render the education section.

    Each school becomes a school environment with arguments:
    1. Institution
    2. Degree, e.g. "Bachelor (Computer Science)"
    3. Date range
    4. GPA
    """
    if education is None:
        return Section.EDUCATION.placeholder

    formatted_schools = []
    for school in education:
        # Newer schema versions call the GPA "score"
        gpa = school.get("gpa") or school.get("score")

        args = [
            escape(school.get("institution")),
            escape(_degree(school)),
            format_date_range(school.get("startDate"), school.get("endDate")),
            escape(f"GPA: {gpa}" if gpa else ""),
        ]

        school_info = ""
        if school.get("courses") is not None:
            school_info = use_environment("courses", itemize(school["courses"]))

        formatted_schools.append(use_environment("school", school_info, *args))

    return use_environment(Section.EDUCATION.value, "\n".join(formatted_schools))


def render_awards(awards: Optional[List[Dict[str, Any]]]) -> str:
    """
    Render the awards section.

    Arguments to the award environment:
    1. Award title
    2. Date
    3. Awarder
    """
    if awards is None:
        return Section.AWARDS.placeholder

    formatted_awards = []
    for award in awards:
        args = [
            escape(award.get("title") or UNTITLED),
            escape(format_date(award.get("date"))),
            escape(award.get("awarder")),
        ]
        award_info = command("awardsummary", escape(award["summary"])) if award.get("summary") else ""
        formatted_awards.append(use_environment("award", award_info, *args))

    return use_environment(Section.AWARDS.value, "\n".join(formatted_awards))


def render_publications(publications: Optional[List[Dict[str, Any]]]) -> str:
    """
    Render the publications section.

    Arguments to the publication environment:
    1. Title (linked when a URL is given)
    2. Publisher
    3. Date
    """
    if publications is None:
        return Section.PUBLICATIONS.placeholder

    formatted_publications = []
    for publication in publications:
        args = [
            href(publication.get("url"), publication.get("name") or UNTITLED),
            escape(publication.get("publisher")),
            escape(format_date(publication.get("releaseDate"))),
        ]
        publication_info = ""
        if publication.get("summary"):
            publication_info = command("publicationsummary", escape(publication["summary"]))

        formatted_publications.append(use_environment("publication", publication_info, *args))

    return use_environment(Section.PUBLICATIONS.value, "\n".join(formatted_publications))


def render_skills(skills: Optional[List[Dict[str, Any]]]) -> str:
    """Render the skills section as items of the form "name (level)"."""
    if skills is None:
        return Section.SKILLS.placeholder

    formatted_skills = itemize(
        with_details(skill.get("name") or "", skill.get("level")) for skill in skills
    )
    return use_environment(Section.SKILLS.value, formatted_skills)


def render_languages(languages: Optional[List[Dict[str, Any]]]) -> str:
    """Render the languages section as items of the form "language (fluency)"."""
    if languages is None:
        return Section.LANGUAGES.placeholder

    formatted_languages = itemize(
        with_details(language.get("language") or "", language.get("fluency"))
        for language in languages
    )
    return use_environment(Section.LANGUAGES.value, formatted_languages)


def render_interests(interests: Optional[List[Dict[str, Any]]]) -> str:
    """Render the interests section."""
    if interests is None:
        return Section.INTERESTS.placeholder

    formatted_interests = itemize(interest.get("name") or "" for interest in interests)
    return use_environment(Section.INTERESTS.value, formatted_interests)


def render_references(references: Optional[List[Dict[str, Any]]]) -> str:
    """Render the references section."""
    if references is None:
        return Section.REFERENCES.placeholder

    formatted_references = [
        f"{command('reference', escape(reference.get('name')))} {escape(reference.get('reference'))}"
        for reference in references
    ]
    return use_environment(Section.REFERENCES.value, "\n".join(formatted_references))


def render_projects(projects: Optional[List[Dict[str, Any]]]) -> str:
    """
    Render the projects section.

    Arguments to the project environment:
    1. Name (linked when a URL is given)
    2. Roles, comma separated
    3. Date range
    4. Entity (company or organization the project was for)
    """
    if projects is None:
        return Section.PROJECTS.placeholder

    formatted_projects = []
    for project in projects:
        args = [
            href(project.get("url"), project.get("name") or UNTITLED),
            escape(", ".join(project.get("roles") or [])),
            format_date_range(project.get("startDate"), project.get("endDate")),
            escape(project.get("entity")),
        ]

        project_info = []
        if project.get("description"):
            project_info.append(command("projectsummary", escape(project["description"])))
        if project.get("highlights") is not None:
            project_info.append(use_environment("projecthighlights", itemize(project["highlights"])))

        formatted_projects.append(use_environment("project", "\n".join(project_info), *args))

    return use_environment(Section.PROJECTS.value, "\n".join(formatted_projects))


# Default renderer for each section
SECTION_RENDERERS = {
    Section.WORK: render_work,
    Section.VOLUNTEER: render_volunteer,
    Section.EDUCATION: render_education,
    Section.AWARDS: render_awards,
    Section.PUBLICATIONS: render_publications,
    Section.SKILLS: render_skills,
    Section.LANGUAGES: render_languages,
    Section.INTERESTS: render_interests,
    Section.REFERENCES: render_references,
    Section.PROJECTS: render_projects,
}
