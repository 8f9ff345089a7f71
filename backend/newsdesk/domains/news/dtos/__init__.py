from .page import NewsPage  # noqa: F401
from .submission import SubmissionOutcome, SubmissionResult  # noqa: F401
