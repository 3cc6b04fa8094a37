"""Built-in keyword vocabulary.

Stopwords are dropped during tokenization; phrases are matched as a single
term before single-token splitting. Both lists can be replaced at startup
with STOPWORDS_FILE / PHRASES_FILE (see utils/config.py).
"""

from typing import FrozenSet, Iterable, Tuple

# ---------------------------------------------------------------------------
# English function words
# ---------------------------------------------------------------------------

_FUNCTION_WORDS = """
a about above after again against all also am an and any are as at be because been
before being below between both but by can could did do does doing done down during
each either else etc few for from further had has have having he her here hers herself
him himself his how however i if in into is it its itself just let me more most must my
myself neither no nor not now of off on once only or other our ours ourselves out over
own per same she should since so some such than that the their theirs them themselves then
there these they this those through thus to too under until up upon us very via was we
were what when where whether which while who whom whose why will with within without
would yet you your yours yourself yourselves e.g i.e etc. vs
"""

# ---------------------------------------------------------------------------
# Generic resume / job-posting filler
# ---------------------------------------------------------------------------

_RESUME_FILLER = """
ability able across activities applicant applicants apply background based best
candidate candidates career company daily demonstrated description desired developer
duties engineer environment excellent experience experienced expert expertise familiar
familiarity good great hands-on help ideal including job join key knowledge like looking
make new opportunity plus position preferred professional proficiency proficient proven
related relevant required requirement requirements responsibilities responsible role
seeking skill skilled skills solid strong successful team understanding use used using
various well work worked working years year
"""

# ---------------------------------------------------------------------------
# Multi-word technical phrases and slash terms
# ---------------------------------------------------------------------------

_PHRASES = [
    # --- AI / data ---
    "machine learning", "deep learning", "computer vision", "natural language processing",
    "data science", "data analysis", "data engineering", "data pipeline", "data visualization",
    "feature engineering", "neural network", "reinforcement learning", "transfer learning",
    "large language model", "retrieval augmented generation", "prompt engineering",
    "time series", "a/b testing", "big data", "business intelligence",
    # --- Engineering practice ---
    "ci/cd", "continuous integration", "continuous delivery", "continuous deployment",
    "test driven development", "unit testing", "integration testing", "code review",
    "version control", "object oriented programming", "functional programming",
    "system design", "distributed systems", "design patterns", "infrastructure as code",
    "site reliability engineering", "incident management", "performance tuning",
    # --- Web / API ---
    "rest api", "restful api", "web services", "front end", "back end", "full stack",
    "single page application", "responsive design", "ui/ux", "user experience",
    "user interface", "tcp/ip", "github actions", "gitlab ci",
    # --- Cloud ---
    "google cloud", "cloud computing", "amazon web services", "microsoft azure",
    "cloud functions", "serverless architecture",
    # --- Databases ---
    "sql server", "relational databases", "nosql databases", "data modeling",
    "data warehouse", "data warehousing",
    # --- Security ---
    "information security", "network security", "penetration testing", "identity management",
    # --- Languages and frameworks with spaces ---
    "spring boot", "ruby on rails", "react native", "asp.net core", "visual basic",
    # --- Business / soft ---
    "project management", "product management", "stakeholder management",
    "agile methodology", "cross functional", "problem solving", "critical thinking",
    "communication skills", "time management", "customer service", "technical writing",
    "requirements gathering", "change management", "risk management",
]


def normalize_entry(entry: str) -> str:
    """Casefold an entry and collapse inner whitespace, matching normalized text."""
    return " ".join(entry.casefold().split())


def build_stopwords(entries: Iterable[str]) -> FrozenSet[str]:
    return frozenset(e for e in (normalize_entry(x) for x in entries) if e)


def build_phrases(entries: Iterable[str]) -> Tuple[str, ...]:
    """Deduplicate phrases, longest first so greedy matching prefers the longer one."""
    unique = {e for e in (normalize_entry(x) for x in entries) if e}
    return tuple(sorted(unique, key=lambda p: (-len(p), p)))


DEFAULT_STOPWORDS: FrozenSet[str] = build_stopwords((_FUNCTION_WORDS + _RESUME_FILLER).split())
DEFAULT_PHRASES: Tuple[str, ...] = build_phrases(_PHRASES)
