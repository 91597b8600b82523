"""OpenAI interview question generation (optional, requires API key)."""

import json
import logging
from dataclasses import dataclass

from talent_match.config import InterviewConfig
from talent_match.utils.text_processing import extract_skills

logger = logging.getLogger("talent_match.interview")

# Category -> number of questions requested
QUESTION_CATEGORIES = {
    "technical": 5,
    "project_based": 3,
    "scenario_based": 3,
    "behavioral": 3,
    "coding_or_system_design": 2,
}

DIFFICULTIES = ("easy", "medium", "hard")

SYSTEM_PROMPT = (
    "You are an expert technical interviewer. Generate personalized interview questions "
    "based on the candidate's resume and job description. Return ONLY valid JSON without "
    "any markdown formatting or code blocks."
)


class InterviewPrepError(RuntimeError):
    pass


@dataclass(frozen=True)
class InterviewQuestion:
    question: str
    answer: str
    difficulty: str = "medium"
    skill_tested: str = ""


@dataclass(frozen=True)
class InterviewPrep:
    technical: tuple[InterviewQuestion, ...] = ()
    project_based: tuple[InterviewQuestion, ...] = ()
    scenario_based: tuple[InterviewQuestion, ...] = ()
    behavioral: tuple[InterviewQuestion, ...] = ()
    coding_or_system_design: tuple[InterviewQuestion, ...] = ()

    def to_dict(self) -> dict:
        return {
            category: [
                {
                    "question": q.question,
                    "answer": q.answer,
                    "difficulty": q.difficulty,
                    "skill_tested": q.skill_tested,
                }
                for q in getattr(self, category)
            ]
            for category in QUESTION_CATEGORIES
        }


def build_prompt(job_description: str, resume_text: str) -> str:
    skills = sorted(extract_skills(resume_text))
    counts = "\n".join(f"- {n} {name.replace('_', ' ')} questions" for name, n in QUESTION_CATEGORIES.items())
    schema = json.dumps(
        {name: [{"question": "", "answer": "", "difficulty": "", "skill_tested": ""}] for name in QUESTION_CATEGORIES},
        indent=2,
    )
    return (
        "Generate personalized interview questions AND strong model answers based strictly on "
        "the candidate's resume and the job description.\n\n"
        "Rules:\n"
        "- Questions must test the exact technologies, projects, and responsibilities mentioned\n"
        "- Avoid generic or textbook questions\n"
        "- Answers are concise (4-6 lines) and sound like strong interview responses\n"
        "- Do NOT invent experience that is not in the resume\n\n"
        f"Generate:\n{counts}\n\n"
        f"For each item include question, answer, difficulty ({' | '.join(DIFFICULTIES)}), skill_tested.\n\n"
        f"Return EXACT JSON in this structure:\n{schema}\n\n"
        f"JOB DESCRIPTION:\n{job_description[:6000]}\n\n"
        f"Candidate key skills: {', '.join(skills) or 'none detected'}\n\n"
        f"CANDIDATE RESUME:\n{resume_text[:6000]}"
    )


def parse_response(content: str) -> InterviewPrep:
    """Parse the model's JSON reply, tolerating a markdown code fence."""
    content = (content or "").strip()
    if not content:
        raise InterviewPrepError("No content received from OpenAI")

    if content.startswith("```"):
        body = content.split("\n", 1)[1] if "\n" in content else ""
        content = body.rsplit("```", 1)[0].strip()

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse interview prep response as JSON: %s", e)
        raise InterviewPrepError(f"Invalid JSON from OpenAI: {e}") from e
    if not isinstance(data, dict):
        raise InterviewPrepError("Expected a JSON object of question categories")

    sections = {}
    for category in QUESTION_CATEGORIES:
        items = data.get(category) or []
        questions = []
        for item in items if isinstance(items, list) else []:
            if not isinstance(item, dict) or not item.get("question"):
                continue
            difficulty = str(item.get("difficulty", "medium")).lower()
            questions.append(InterviewQuestion(
                question=str(item["question"]),
                answer=str(item.get("answer", "")),
                difficulty=difficulty if difficulty in DIFFICULTIES else "medium",
                skill_tested=str(item.get("skill_tested", "")),
            ))
        sections[category] = tuple(questions)
    return InterviewPrep(**sections)


def generate_interview_questions(
    job_description: str,
    resume_text: str,
    config: InterviewConfig,
) -> InterviewPrep:
    """Generate interview questions for one candidate with OpenAI.

    Raises InterviewPrepError on missing inputs, missing key, or API errors.
    """
    if not job_description or not resume_text:
        raise InterviewPrepError("Job description and resume text are required")
    if not config.openai_api_key:
        raise InterviewPrepError("OpenAI API key is not configured. Set OPENAI_API_KEY or interview.openai_api_key.")

    from openai import OpenAI

    client = OpenAI(api_key=config.openai_api_key)

    try:
        response = client.chat.completions.create(
            model=config.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_prompt(job_description, resume_text)},
            ],
            temperature=config.temperature,
            max_tokens=3000,
        )
    except Exception as e:
        logger.warning("Interview prep request failed: %s", e)
        raise InterviewPrepError(f"Failed to generate interview questions: {e}") from e

    prep = parse_response(response.choices[0].message.content)
    logger.info(
        "Generated %d interview questions",
        sum(len(getattr(prep, c)) for c in QUESTION_CATEGORIES),
    )
    return prep
