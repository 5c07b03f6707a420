"""
Keyword dictionaries used by the heuristic extractor.

Declaration order is load-bearing: fields of study are reported in this
order and the first country with a hit wins, so these are ordered tuples
rather than dicts.
"""
import re


# Highest credential first - a PhD CV almost always mentions a bachelor's too
EDUCATION_LEVEL_PATTERNS = (
    ("PhD", re.compile(r"ph\.?d|doctorate|doctor of")),
    ("Master's", re.compile(r"master|m\.?s\.?c|m\.?a\.|m\.?b\.?a")),
    ("Bachelor's", re.compile(r"bachelor|b\.?s\.?c|b\.?a\.|b\.?eng")),
    ("High School", re.compile(r"high school|secondary school")),
)


FIELD_OF_STUDY_KEYWORDS = (
    ("Computer Science", (
        "computer science", "software", "programming", "development", "software engineering",
        "information systems", "information technology", "cybersecurity", "cloud computing",
    )),
    ("Engineering", (
        "engineering", "electrical", "mechanical", "civil", "chemical", "biomedical", "environmental",
    )),
    ("Data Science", (
        "data science", "data analytics", "big data", "machine learning", "artificial intelligence", "ai",
    )),
    ("Business", (
        "business", "management", "finance", "marketing", "mba", "economics", "accounting",
    )),
    ("Medicine", (
        "medicine", "medical", "health", "nursing", "pharmacy", "public health",
    )),
    ("Science", (
        "physics", "chemistry", "biology", "science", "mathematics", "statistics",
    )),
    ("Arts", (
        "arts", "history", "literature", "english", "sociology", "psychology", "philosophy",
    )),
    ("Law", (
        "law", "legal", "criminology",
    )),
)


COUNTRY_KEYWORDS = (
    ("USA", ("united states", "usa", "u.s.a", "new york", "california", "texas", "florida", "washington", "chicago")),
    ("UK", ("united kingdom", "uk", "london", "england", "scotland", "wales", "manchester", "birmingham")),
    ("Canada", ("canada", "toronto", "vancouver", "montreal", "ontario", "quebec")),
    ("Australia", ("australia", "sydney", "melbourne", "brisbane", "perth")),
    ("India", ("india", "delhi", "mumbai", "bangalore", "hyderabad", "chennai", "pune", "kolkata")),
    ("Nigeria", ("nigeria", "lagos", "abuja", "kano", "ibadan")),
    ("Pakistan", ("pakistan", "lahore", "karachi", "islamabad", "faisalabad")),
    ("China", ("china", "beijing", "shanghai", "shenzhen", "guangzhou")),
    ("Germany", ("germany", "berlin", "munich", "hamburg", "frankfurt")),
    ("Netherlands", ("netherlands", "amsterdam", "rotterdam", "utrecht")),
    ("France", ("france", "paris", "lyon", "marseille")),
    ("Sweden", ("sweden", "stockholm", "gothenburg")),
    ("Switzerland", ("switzerland", "zurich", "geneva", "basel")),
    ("Japan", ("japan", "tokyo", "osaka", "kyoto")),
    ("Singapore", ("singapore",)),
    ("New Zealand", ("new zealand", "auckland", "wellington")),
    ("Ireland", ("ireland", "dublin", "cork")),
    ("Denmark", ("denmark", "copenhagen")),
    ("Norway", ("norway", "oslo")),
    ("Finland", ("finland", "helsinki")),
    ("Austria", ("austria", "vienna")),
    ("Belgium", ("belgium", "brussels", "antwerp")),
    ("Italy", ("italy", "rome", "milan", "naples")),
    ("Spain", ("spain", "madrid", "barcelona", "seville")),
)

COUNTRY_LABELS = tuple(label for label, _ in COUNTRY_KEYWORDS)


SKILL_VOCABULARY = (
    "javascript", "python", "java", "c++", "react", "node.js", "angular", "vue",
    "html", "css", "sql", "nosql", "mongodb", "aws", "docker", "kubernetes",
    "git", "agile", "scrum", "communication", "leadership", "problem solving",
    "project management", "data analysis", "machine learning", "ai", "devops",
)


# "2018 - 2020", "2019–2021", "2020 - Present"
DATE_RANGE_PATTERN = re.compile(r"(\d{4})\s*[-–]\s*(present|\d{4})", re.IGNORECASE)
