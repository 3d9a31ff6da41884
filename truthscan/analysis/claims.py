from truthscan.analysis.constants import MIN_CLAIM_LENGTH, NO_CLAIM_SENTINEL, SENTENCE_SPLIT_REGEX


def extract_main_claim(content: str) -> str:
    """First sentence longer than MIN_CLAIM_LENGTH characters, trimmed."""
    for fragment in SENTENCE_SPLIT_REGEX.split(content):
        sentence = fragment.strip()
        if len(sentence) > MIN_CLAIM_LENGTH:
            return sentence
    return NO_CLAIM_SENTINEL
