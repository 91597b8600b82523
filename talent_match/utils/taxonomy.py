"""Read-only reference tables shared by the resume and job extractors."""

import re

# Canonical skill labels. Matching returns these spellings, not the source text's.
SKILL_KEYWORDS = (
    # Languages
    "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "Ruby", "Go",
    "Swift", "Kotlin", "Rust", "PHP", "Scala", "R", "Perl", "Dart",
    "Objective-C", "MATLAB", "Lua", "Haskell", "Elixir", "Clojure",
    # Frontend
    "React", "Angular", "Vue", "Svelte", "Next.js", "Nuxt.js", "jQuery",
    "HTML", "CSS", "SASS", "LESS", "Tailwind", "Bootstrap", "Material UI",
    "Redux", "Webpack", "Vite",
    # Backend
    "Node.js", "Express", "Django", "Flask", "Spring", "Spring Boot",
    "FastAPI", "NestJS", "Rails", "Laravel", "ASP.NET",
    # Databases
    "MongoDB", "PostgreSQL", "MySQL", "Redis", "SQLite", "Oracle",
    "Cassandra", "DynamoDB", "Elasticsearch", "SQL Server", "Firebase",
    # Cloud & DevOps
    "Docker", "Kubernetes", "AWS", "Azure", "GCP", "Terraform", "Ansible",
    "Jenkins", "GitHub Actions", "GitLab CI", "CircleCI", "Nginx", "Apache",
    # Tools & Practices
    "Git", "Linux", "Agile", "Scrum", "REST", "GraphQL", "CI/CD",
    "Microservices", "Serverless", "TDD", "BDD",
    # Data & AI
    "Machine Learning", "Deep Learning", "AI", "NLP", "Computer Vision",
    "TensorFlow", "PyTorch", "Pandas", "NumPy", "Spark", "Hadoop",
    "Data Science", "Data Engineering", "ETL", "Power BI", "Tableau",
    # Mobile
    "React Native", "Flutter", "iOS", "Android", "SwiftUI",
    # Other
    "Blockchain", "IoT", "Cybersecurity", "DevSecOps", "OAuth", "JWT",
    "WebSocket", "RabbitMQ", "Kafka", "gRPC", "Figma", "Jira",
)

# Labels at or below this length only match as standalone tokens
# ("r" in "career" or "git" in "digital" is not a skill).
SHORT_SKILL_MAX_LEN = 4

# Filler words dropped from job-posting keywords.
STOP_WORDS = frozenset({
    "about", "above", "after", "again", "against", "along", "among", "apply",
    "based", "before", "being", "below", "between", "bonus", "bring", "build",
    "candidate", "candidates", "click", "close", "company", "could",
    "description", "desired", "does", "doing", "during",
    "each", "equal", "every", "experience", "employer",
    "first", "follow", "from", "further",
    "great", "growth",
    "have", "having", "here", "hiring",
    "ideal", "including", "information", "into",
    "join", "just",
    "know",
    "learn", "least", "level", "location", "looking",
    "major", "make", "many", "minimum", "more", "most", "much", "must",
    "need", "needs",
    "offer", "only", "open", "opportunity", "other", "over",
    "part", "please", "plus", "position", "preferred", "provide",
    "range", "related", "required", "requirements", "responsibilities",
    "responsibility", "right", "role",
    "same", "should", "skills", "some", "strong", "such",
    "take", "team", "than", "that", "their", "them", "then", "there",
    "these", "they", "this", "those", "through", "title", "together",
    "under", "understanding", "upon", "using",
    "very",
    "want", "well", "were", "what", "when", "where", "which", "while",
    "will", "with", "within", "work", "working", "would",
    "year", "years", "your",
})

# Degree tiers, highest first. Each pattern is applied to lower-cased text.
# Two-letter abbreviations that collide with English words ("be", "ma") need
# their dots to count.
DEGREE_TIERS = (
    ("PhD", re.compile(r"\bph\.?\s?d\b|\bdoctorate\b|\bdoctor of philosophy\b")),
    ("Master's", re.compile(
        r"\bmaster'?s?\b|\bmba\b|\bm\.b\.a\b|\bmsc\b|\bm\.?s\.?(?=\W|$)|\bm\.?tech\b|\bm\.a\."
    )),
    ("Bachelor's", re.compile(
        r"\bbachelor'?s?\b|\bbsc\b|\bb\.?s\.?(?=\W|$)|\bb\.?a\.?(?=\W|$)|\bb\.?tech\b|\bb\.e\b|\bundergraduate\b"
    )),
    ("Associate's", re.compile(r"\bassociate'?s?\b|\bdiploma\b")),
)

# Degree synonyms used when scoring a resume against required tiers. Only
# dotted two-letter forms count, so "MS Office" or "BA team" is no degree.
DEGREE_SYNONYMS = (
    ("PhD", ("ph.d", "phd", "doctorate", "doctor of philosophy")),
    ("Master's", ("master", "msc", "m.s.", "mba", "m.b.a", "mtech", "m.tech", "m.a.")),
    ("Bachelor's", (
        "bachelor", "bsc", "b.s.", "btech", "b.tech", "b.a.", "b.e.", "undergraduate",
    )),
    ("Associate's", ("associate", "diploma")),
)

# Words that mark a line or file name as a job title rather than a person's name.
JOB_TITLE_WORDS = (
    "manager", "engineer", "developer", "analyst", "director", "specialist",
    "technician", "coordinator", "consultant", "administrator", "professional",
    "certified", "architect", "designer", "lead", "senior", "junior", "intern",
    "associate", "officer", "project", "management", "network", "field",
    "pmp", "safe", "scrum", "agile",
)

# Role nouns a job-posting title line must contain (case-sensitive).
ROLE_NOUNS = (
    "Engineer", "Developer", "Manager", "Analyst", "Designer", "Architect",
    "Specialist", "Lead", "Director", "Consultant",
)

# Technology fragments; a line with two or more is a skills line, not a name.
TECH_TERMS = (
    "python", "java", "sql", "react", "node", "docker", "aws", "azure", "git",
    "linux", "html", "css", "api", "ml", "ai", "etl", "ci/cd",
)

# Resume headings that can never be a name line.
SECTION_WORDS = (
    "summary", "objective", "experience", "education", "skills",
    "certifications", "projects", "references", "profile", "contact", "about",
    "work", "employment", "professional", "technical", "personal",
    "curriculum", "resume", "cv", "languages", "framework", "tools",
    r"soft\s*skills", "data", "cloud", "visualization", "internship",
)

# Certification phrasings. Free-text tails stay on one line.
CERTIFICATION_PATTERNS = (
    re.compile(r"\b(AWS[ \t]+Certified[ \t]+[\w \t-]+)", re.IGNORECASE),
    re.compile(
        r"\b(Azure[ \t]+(?:Administrator|Developer|Solutions[ \t]+Architect)[\w \t-]*)",
        re.IGNORECASE,
    ),
    re.compile(r"\b(Google[ \t]+Cloud[ \t]+(?:Professional|Associate)[\w \t-]*)", re.IGNORECASE),
    re.compile(r"\b(PMP|CISSP|CCNA|CCNP|CKAD|CKA|CompTIA[ \t]+\w+)\b", re.IGNORECASE),
    re.compile(r"\b(Scrum[ \t]+Master|Product[ \t]+Owner)\b", re.IGNORECASE),
)
