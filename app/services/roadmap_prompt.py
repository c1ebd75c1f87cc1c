from typing import List, Sequence

from app.models import LearningStyle

CAREER_STYLE_GUIDANCE = """- For Visual learners, suggest video tutorials, diagrams, mind maps, and visual-heavy courses.
- For Auditory learners, recommend podcasts, audiobooks, lectures, and group discussions.
- For Reading/Writing learners, focus on books, articles, blogs, and tasks involving writing summaries or notes.
- For Kinesthetic learners, emphasize hands-on projects, workshops, coding exercises, and real-world application of skills."""

SCHOOL_STYLE_GUIDANCE = """- For Visual learners, suggest video lectures, visual aids like charts and diagrams, and platforms like Khan Academy or YouTube.
- For Auditory learners, recommend audio-based study materials, recorded lectures, and forming study groups for discussion.
- For Reading/Writing learners, focus on textbooks, reference books, note-taking, and practicing with past exam papers.
- For Kinesthetic learners, emphasize interactive online labs, hands-on experiments or projects, and practical problem-solving sessions."""


def build_roadmap_prompt(
    student_profile: str,
    career_path: str,
    current_skills: str,
    skill_gaps: str,
    learning_style: LearningStyle,
) -> str:
    return f"""
You are a career coach expert in the Indian and global job markets.

Based on the student profile, chosen career path, current skills, identified skill gaps, and learning style, generate a 6-12 month actionable roadmap for the student.
The roadmap should be broken down into monthly milestones. Each milestone should have a title and a list of specific tasks, resources (courses, certifications, projects).

Crucially, you MUST tailor the recommended resources and tasks to the student's learning style.
{CAREER_STYLE_GUIDANCE}

Student Profile: {student_profile}
Career Path: {career_path}
Current Skills: {current_skills}
Skill Gaps: {skill_gaps}
Learning Style: {learning_style.value}

📤 Strictly, respond ONLY in this JSON format, with milestones ordered chronologically:

{{
  "milestones": [
    {{
      "month": 1,
      "title": "...",
      "tasks": ["...", "..."]
    }},
    ...
  ]
}}
"""


def build_school_roadmap_prompt(student_profile: str, learning_style: LearningStyle) -> str:
    return f"""
You are an expert academic advisor for high school students aiming for top colleges in India and abroad.

Based on the student's profile and learning style, generate a 6-12 month actionable roadmap for college entrance preparation.
The roadmap should be broken down into quarterly milestones. Each milestone should have a title and a list of specific actions, subjects to focus on, entrance exams to prepare for (like JEE, NEET, SAT, etc.), and recommended study resources.

Crucially, you MUST tailor the recommended study resources and tasks to the student's learning style.
{SCHOOL_STYLE_GUIDANCE}

Student Profile: {student_profile}
Learning Style: {learning_style.value}

📤 Strictly, respond ONLY in this JSON format:

{{
  "milestones": [
    {{
      "quarter": 1,
      "title": "Foundation Building",
      "tasks": ["...", "..."]
    }},
    ...
  ]
}}
"""


def build_narration_prompt(milestones: Sequence, audience: str = "career coach") -> str:
    """
    Spoken-summary instructions for the speech model. Works for monthly and
    quarterly milestones alike through their ``period_label``.
    """
    lines: List[str] = [
        f"- {m.period_label}: {m.title} - {', '.join(m.tasks)}" for m in milestones
    ]
    body = "\n".join(lines)
    return f"""You are a {audience}. Summarize the following roadmap in a conversational and encouraging tone. Speak directly to the student.

Milestones:
{body}
"""
