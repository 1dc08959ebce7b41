"""
Prompt templates sent to the Gemini model.
"""

CUSTOMIZE_RESUME_PROMPT = """
You are an expert resume editor. Given the user's resume and job details, extract only relevant skills, experiences, and qualifications from the resume that match the job description and requirements. Enhance and reword ONLY existing content to highlight alignment with the job, but do NOT add any new skills or experiences not present in the original resume. Output a professional, well-formatted resume in Markdown.

User Resume:
{resume_text}

Job Title: {title}
Job Description: {description}
Key Skills/Requirements: {skills}

Provide ONLY the customized resume, do NOT include explanations or additional text.
"""

# Literal braces in the example object are doubled for str.format
KEYWORDS_PROMPT = """
Extract keywords (skills, tools, certifications, technologies) from both the resume and the job description.
Return ONLY a valid JSON object, with no explanation or markdown. Example format:
{{
  "resumeKeywords": ["Java", "Spring Boot"],
  "jobKeywords": ["Java", "Spring Boot", "Microservices"],
  "matchedKeywords": ["Java", "Spring Boot"],
  "missingKeywords": ["Microservices"]
}}
Resume:
{resume_text}
Job Description:
{description}
Key Skills/Requirements: {skills}
"""

SUGGESTIONS_PROMPT = """
Review the resume for ATS optimization and provide actionable enhancement suggestions to improve keyword match, formatting, and content. Output as a bullet-point list, only the list, no explanations.
Resume:
{resume_text}
Job Title: {title}
Job Description: {description}
Key Skills/Requirements: {skills}
"""


def build_prompt(template: str, resume_text: str, job) -> str:
    """Fill a template with the resume text and the job fields."""
    return template.format(
        resume_text=resume_text,
        title=job.title,
        description=job.description,
        skills=job.skills,
    )
