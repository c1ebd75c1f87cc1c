from typing import Optional


def build_college_suggestion_prompt(
    course: str, degree_level: str, interests: str, preferences: Optional[str]
) -> str:
    return f"""
You are an expert higher education and admissions advisor for students in India and abroad.

Based on the student's profile, suggest 5-10 relevant colleges. Include a mix of public and private institutions where applicable.
For each college, you MUST provide:
1. Its name, location, and official website.
2. What it's notable for regarding the specified course and degree level.
3. The required entrance exams (e.g., GATE, GRE, CAT, JEE Advanced, SAT, NEET).
4. An overview of the required score, rank, or percentile based on recent trends.
5. An estimated annual cost breakdown (tuition, fees).
6. Whether it is a 'Public' or 'Private' institution.

If the user mentions a specific college in their preferences, use it as a benchmark and suggest strong alternatives.

Target Course: {course}
Degree Level: {degree_level}
Interests: {interests}
Preferences: {preferences or ""}

📤 Strictly, respond ONLY in this JSON format:

{{
  "colleges": [
    {{
      "collegeName": "...",
      "location": "City, Country",
      "notableFor": "...",
      "website": "https://...",
      "requiredExams": "...",
      "previousYearCutoff": "...",
      "costBreakdown": "...",
      "type": "Public"
    }},
    ...
  ]
}}
"""


def build_company_suggestion_prompt(career_path: str) -> str:
    return f"""
You are an expert career coach and industry analyst.

Based on the provided career path, suggest 5-10 top companies (in India and globally) that hire for this role.
For each company, provide:
1. Its name and industry.
2. Why it's a great place for this career.
3. A typical CTC (Cost to Company) salary range for entry-to-mid level roles.
4. Hiring insights, such as required key skills, qualifications (e.g., "strong portfolio of projects"), or typical interview process.

Career Path: {career_path}

📤 Strictly, respond ONLY in this JSON format:

{{
  "companies": [
    {{
      "companyName": "...",
      "industry": "...",
      "why": "...",
      "salaryRange": "...",
      "hiringInsights": "..."
    }},
    ...
  ]
}}
"""


def build_college_alternatives_prompt(student_profile: str) -> str:
    return f"""
You are an expert career counselor for students in India.

Based on the provided student profile, suggest 3-5 alternative colleges (a mix of public and private).
For each college, provide the required entrance exams, the typical marks/rank needed based on previous years, and an estimated cost breakdown.
Also, provide a detailed breakdown for each suggested college including advantages and disadvantages as compared to the student's choice, and the eligibility criteria.

Student Profile: {student_profile}

📤 Strictly, respond ONLY in this JSON format:

{{
  "alternatives": [
    {{
      "name": "...",
      "type": "Public",
      "requiredExams": "...",
      "previousYearRank": "...",
      "costBreakdown": "...",
      "advantages": ["..."],
      "disadvantages": ["..."],
      "eligibilityCriteria": "..."
    }},
    ...
  ]
}}
"""


def build_company_alternatives_prompt(student_profile: str, career_goal: str) -> str:
    return f"""
You are an expert career counselor for students in India.

Based on the provided student profile and career goal, suggest 3-5 alternative companies or employers (a mix of public sector, private and startups).
For each company, provide the key skills or entrance exams required, the typical qualifications needed, and an estimated annual CTC package.
Also, list the advantages and disadvantages of each company as compared to the student's goal, and the eligibility criteria for applying.

Student Profile: {student_profile}
Career Goal: {career_goal}

📤 Strictly, respond ONLY in this JSON format:

{{
  "alternatives": [
    {{
      "name": "...",
      "sector": "Private",
      "requiredSkills": "...",
      "typicalQualifications": "...",
      "estimatedCtc": "...",
      "advantages": ["..."],
      "disadvantages": ["..."],
      "eligibilityCriteria": "..."
    }},
    ...
  ]
}}
"""
