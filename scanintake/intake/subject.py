"""Subject line inference over extracted document text."""

import re

# A "subject"/"subj" marker, an optional colon or dash, then everything up to
# a run of 2+ whitespace chars, a line break or . ! ? :
SUBJECT_PATTERN = re.compile(
    r"(?:subject|subj)\s*[:\-]?\s*(.*?)(?:\s{2,}|$|\n|\r|!|\?|\.|:)",
    re.IGNORECASE,
)


def find_subject(text: str) -> str | None:
    """Return the first subject found in text, or None.

    >>> find_subject("Subject: Budget Report  next line")
    'Budget Report'
    >>> find_subject("subj - Annual Leave.")
    'Annual Leave'
    """
    match = SUBJECT_PATTERN.search(text)
    if match is None:
        return None
    subject = match.group(1).strip()
    return subject or None
