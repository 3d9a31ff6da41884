"""
Static reference data for the local credibility heuristics.

Everything here is immutable and shared process-wide: keyword tables, the
authoritative-source catalogue, canned corrections and user-facing strings.
"""

import re
from types import MappingProxyType

from truthscan.schemas.analysis import ContentType, SourceRef

# --- Text scoring signals ---

SENSATIONAL_KEYWORDS = (
    "BREAKING",
    "SHOCKING",
    "UNBELIEVABLE",
    "MIRACLE",
    "SECRET",
    "THEY DON'T WANT YOU TO KNOW",
)

# Subset that also marks a claim FALSE and drives the sensationalism finding
FALSE_CLAIM_KEYWORDS = ("BREAKING", "SHOCKING")

EMOTIONAL_REGEX = re.compile(r"catastrophe|disaster|terrible|horrific|amazing|incredible", re.IGNORECASE)
STATISTICS_REGEX = re.compile(r"\d+%|\d+\.\d+|statistics|study|research|according to", re.IGNORECASE)
ATTRIBUTION_REGEX = re.compile(r"according to|reported by|study shows|research indicates", re.IGNORECASE)
# Narrower form used for the "lacks attribution" finding
ATTRIBUTION_FINDING_REGEX = re.compile(r"according to|reported by|study shows", re.IGNORECASE)
SENTENCE_SPLIT_REGEX = re.compile(r"[.!?]+")

NO_CLAIM_SENTINEL = "No specific claim identified"
MIN_CLAIM_LENGTH = 10

# --- URL signals ---

KNOWN_NEWS_DOMAINS = (
    "cnn.com",
    "bbc.com",
    "reuters.com",
    "apnews.com",
    "nytimes.com",
    "washingtonpost.com",
    "theguardian.com",
    "npr.org",
)

PHISHING_PATTERNS = ("-verify", "-secure", "-login", "account-", "update-")

MAX_HOST_LABELS = 3

# --- Findings ---

FINDINGS_COUNT = 4

TEXT_FINDINGS_CREDIBLE = (
    "Language patterns match credible news sources",
    "Claims are specific and potentially verifiable",
    "Tone is appropriately measured and factual",
    "No excessive emotional manipulation detected",
)
FINDING_SENSATIONAL = "Sensationalist language detected - often used in fake news"
FINDING_EXCLAMATION = "Excessive exclamation marks suggest emotional manipulation"
FINDING_NO_ATTRIBUTION = "Lacks source attribution and credible references"
FINDING_BRIEF = "Unusually brief content lacking context and detail"
FINDING_INCONSISTENT = "Multiple inconsistencies detected in content patterns"
FINDING_TEXT_FILLER = "Cross-check key claims with trusted fact-checking organizations"

FINDING_HTTPS = "URL uses HTTPS encryption"
FINDING_NO_HTTPS = "URL does not use HTTPS encryption - security risk detected"
FINDING_KNOWN_DOMAIN = "Domain is from a recognized news organization"
FINDING_UNKNOWN_DOMAIN = "Domain is not a widely recognized major news source"
FINDING_PHISHING = "Domain contains suspicious patterns often used in phishing"
FINDING_SUBDOMAINS = "URL has unusual subdomain structure"
FINDING_DIGITS = "Domain contains numbers which may indicate suspicious site"
FINDING_INVALID_URL = "Invalid URL format detected"
FINDING_URL_FILLER = "Manual verification recommended for this URL"

MEDIA_FINDINGS_CLEAN = (
    "No significant manipulation artifacts detected",
    "Metadata matches expected patterns",
    "Lighting and shadows appear consistent",
    "No evidence of AI-generated content",
)
MEDIA_FINDINGS_SUSPECT = (
    "Irregular pixel patterns detected in multiple areas",
    "Metadata inconsistencies found",
    "Unnatural edge artifacts present",
    "Signs of AI generation or manipulation detected",
)

# --- Recommendations ---

RECOMMENDATION_TEXT_CREDIBLE = (
    "This content shows strong indicators of authenticity. The claims appear consistent "
    "and verifiable. However, always cross-reference with multiple trusted sources."
)
RECOMMENDATION_TEXT_SUSPECT = (
    "Multiple red flags detected in this content. We recommend treating this information "
    "with high skepticism and verifying through authoritative sources before sharing."
)
RECOMMENDATION_MEDIA_CREDIBLE = (
    "Based on our analysis, this media appears authentic. However, always cross-reference "
    "important information with trusted sources."
)
RECOMMENDATION_MEDIA_SUSPECT = (
    "We recommend treating this media with skepticism. Verify the source and cross-check "
    "with reliable outlets before sharing or making decisions based on this content."
)

# --- Detection metrics: (label, jitter amplitude) per content type ---

DETECTION_METRICS = MappingProxyType({
    ContentType.TEXT: (
        ("Source Credibility", 5.0),
        ("Fact Consistency", 4.0),
        ("Bias Detection", 6.0),
        ("Language Patterns", 5.0),
    ),
    ContentType.URL: (
        ("Domain Credibility", 5.0),
        ("Content Authenticity", 4.0),
        ("Security Indicators", 6.0),
        ("Source Reputation", 5.0),
    ),
    ContentType.MEDIA: (
        ("Metadata Integrity", 5.0),
        ("Visual Consistency", 4.0),
        ("Artifact Detection", 6.0),
        ("Pattern Analysis", 5.0),
    ),
})

# --- Authoritative sources ---

SOURCE_CATEGORIES = (
    (
        "health",
        ("health", "vaccine", "covid", "disease"),
        (
            SourceRef(name="WHO", url="https://www.who.int",
                      credibility_note="World Health Organization - Global Authority"),
            SourceRef(name="CDC", url="https://www.cdc.gov",
                      credibility_note="U.S. Centers for Disease Control"),
            SourceRef(name="PubMed", url="https://pubmed.ncbi.nlm.nih.gov",
                      credibility_note="Medical Research Database"),
        ),
    ),
    (
        "climate",
        ("climate", "weather", "temperature"),
        (
            SourceRef(name="NASA Climate", url="https://climate.nasa.gov",
                      credibility_note="NASA Climate Research"),
            SourceRef(name="NOAA", url="https://www.noaa.gov",
                      credibility_note="National Oceanic & Atmospheric Administration"),
            SourceRef(name="IPCC", url="https://www.ipcc.ch",
                      credibility_note="UN Climate Change Panel"),
        ),
    ),
    (
        "civic",
        ("election", "vote", "government"),
        (
            SourceRef(name="USA.gov", url="https://www.usa.gov",
                      credibility_note="Official U.S. Government Portal"),
            SourceRef(name="Vote.gov", url="https://vote.gov",
                      credibility_note="Official Voting Information"),
            SourceRef(name="Election Officials", url="https://www.eac.gov",
                      credibility_note="U.S. Election Assistance Commission"),
        ),
    ),
)

GENERAL_FACT_CHECKERS = (
    SourceRef(name="Reuters Fact Check", url="https://www.reuters.com/fact-check",
              credibility_note="Independent International Fact-Checking"),
    SourceRef(name="AP Fact Check", url="https://apnews.com/ap-fact-check",
              credibility_note="Associated Press Fact-Checking"),
    SourceRef(name="Full Fact", url="https://fullfact.org",
              credibility_note="UK Independent Fact-Checker"),
    SourceRef(name="FactCheck.org", url="https://www.factcheck.org",
              credibility_note="Nonpartisan Fact-Checking"),
    SourceRef(name="Snopes", url="https://www.snopes.com",
              credibility_note="Established Fact-Checking Organization"),
)

MAX_SOURCES = 6

# --- Corrections: (any-of keywords, text); first match wins ---

EXPLANATIONS = (
    (
        ("vaccine", "covid"),
        "According to the CDC and WHO, vaccines are safe and effective. COVID-19 vaccines have "
        "undergone rigorous testing and continue to be monitored for safety. Claims about vaccines "
        "causing widespread harm are not supported by scientific evidence.",
    ),
    (
        ("climate", "global warming"),
        "According to NASA and NOAA, climate change is real and primarily caused by human "
        "activities. The overwhelming majority of climate scientists agree that global "
        "temperatures are rising due to greenhouse gas emissions.",
    ),
    (
        ("election", "vote"),
        "According to official government sources and independent election security experts, "
        "there is no evidence of widespread voter fraud. Elections are secured through multiple "
        "layers of verification and oversight.",
    ),
    (
        ("5g", "radiation"),
        "According to the FDA and WHO, 5G technology operates within safe radiofrequency exposure "
        "limits. There is no scientific evidence linking 5G to health problems. Radio frequency "
        "exposure from 5G is well below international safety guidelines.",
    ),
)
EXPLANATION_FALLBACK = (
    "The claims in this content are not supported by credible sources. Please verify "
    "information through official government websites and trusted fact-checking "
    "organizations before accepting or sharing it."
)

CORRECTED_STATEMENTS = (
    (
        ("vaccine", "covid"),
        "COVID-19 vaccines are safe, effective, and have been approved by health authorities "
        "worldwide after extensive clinical trials. Vaccination significantly reduces the risk of "
        "severe illness and hospitalization.",
    ),
    (
        ("climate", "global warming"),
        "Climate change is occurring primarily due to human activities, particularly the emission "
        "of greenhouse gases. The scientific consensus is overwhelming, with 97% of climate "
        "scientists agreeing on human-caused climate change.",
    ),
    (
        ("election", "vote"),
        "Elections in democratic countries are secure and transparent, with multiple safeguards "
        "including voter registration systems, ballot verification, and independent oversight. "
        "There is no evidence of widespread fraud affecting election outcomes.",
    ),
    (
        ("5g", "radiation"),
        "5G technology is safe and operates at radiofrequency levels well below international "
        "safety limits established by health organizations. There is no scientific evidence "
        "linking 5G networks to adverse health effects.",
    ),
    (
        ("bank", "withdraw"),
        "Banks do not freeze accounts without proper legal procedures and customer notification. "
        "Official bank maintenance is announced in advance through verified channels, not social "
        "media messages.",
    ),
)
# Requires "government" together with one of the qualifiers
GOVERNMENT_POLICY_QUALIFIERS = ("mandatory", "ban")
GOVERNMENT_POLICY_STATEMENT = (
    "Government policies are announced through official channels and government websites. "
    "Major policy changes involve legislative processes and are not implemented through viral "
    "social media messages."
)
CORRECTED_STATEMENT_FALLBACK = (
    "This information is not verified by credible sources. Always check official government "
    "websites, established news organizations, and trusted fact-checking platforms before "
    "believing or sharing such claims."
)

NEEDS_VERIFICATION_EXPLANATION = (
    "While some concerns were detected, we recommend verifying this information through the "
    "official sources listed below."
)

# --- Languages (ISO 639-1) ---

DEFAULT_LANGUAGE = "en"

LANGUAGE_NAMES = {
    "en": "English", "es": "Spanish", "fr": "French", "de": "German", "hi": "Hindi",
    "ar": "Arabic", "zh": "Chinese", "ja": "Japanese", "ko": "Korean", "pt": "Portuguese",
    "ru": "Russian", "it": "Italian", "tr": "Turkish", "vi": "Vietnamese", "th": "Thai",
    "id": "Indonesian", "bn": "Bengali", "pa": "Punjabi", "te": "Telugu", "mr": "Marathi",
    "ta": "Tamil", "ur": "Urdu", "nl": "Dutch", "pl": "Polish", "uk": "Ukrainian",
}
