from typing import List


def build_recommendation_prompt(
    academic_background: str, interests: str, skills: str, goals: str
) -> str:
    return f"""
You are a career counselor specializing in recommending career paths to students based on their profile.

Analyze the following student profile and suggest 3-5 career options tailored to their profile and the Indian and global job markets.

Academic Background: {academic_background}
Interests: {interests}
Skills: {skills}
Goals: {goals}

📤 Strictly, respond ONLY in this JSON format:

{{
  "careerOptions": ["...", "..."]
}}
"""


def build_skill_gap_prompt(career_path: str, student_skills: List[str]) -> str:
    skills_str = ", ".join(student_skills)
    return f"""
You are a career advisor specializing in identifying skill gaps.

You will receive a recommended career path and the student's current skills. Your task is to identify the missing technical and soft skills required for the student to succeed in the recommended career path.

Career Path: {career_path}
Student Skills: {skills_str}

Identify the missing technical and soft skills. Focus on skills that are crucial for the career path but not present in the student's current skills.

📤 Strictly, respond ONLY in this JSON format:

{{
  "missingTechnicalSkills": ["..."],
  "missingSoftSkills": ["..."]
}}
"""


def build_exploration_prompt(
    interests: str, skills: str, goals: str, academic_background: str
) -> str:
    return f"""
You are a career counselor specializing in recommending career paths to students based on their profiles.

You will use the following information to suggest 3-5 career options aligned with the student profile, tailored to the Indian and global job markets, and the missing technical and soft skills for each recommended career path based on the student current skill set.

Interests: {interests}
Skills: {skills}
Goals: {goals}
Academic Background: {academic_background}

📤 Strictly, respond ONLY in this JSON format:

{{
  "recommendations": [
    {{
      "careerPath": "...",
      "skills": ["...", "..."]
    }},
    ...
  ]
}}
"""
