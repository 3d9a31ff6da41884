"""
Gemini prompt factory.

Prompts are stateless: each builder takes the content and the target language
code and returns the full instruction. Non-English languages get an explicit
"answer in <language>" requirement so findings and corrections come back in the
user's language.
"""

from truthscan.analysis.constants import DEFAULT_LANGUAGE, LANGUAGE_NAMES
from truthscan.config import settings


def language_name(code: str) -> str:
    return LANGUAGE_NAMES.get(code, LANGUAGE_NAMES[DEFAULT_LANGUAGE])


def get_language_detection_prompt(text: str) -> str:
    sample = text[:settings.language_sample_chars]
    codes = ", ".join(f"{code} ({name})" for code, name in LANGUAGE_NAMES.items())
    return f"""You are a language detection expert. Analyze this text carefully and identify its language.

    Text to analyze:
    "{sample}"

    CRITICAL INSTRUCTIONS:
    1. Look at the script/alphabet used (Latin, Devanagari, Arabic, Chinese, etc.)
    2. Identify language-specific words and patterns
    3. Respond with ONLY the two-letter ISO 639-1 code
    4. Supported codes: {codes}

    Respond with ONLY the language code (2 letters), absolutely nothing else."""


def _output_language_rule(language: str, fields: str) -> str:
    if language == DEFAULT_LANGUAGE:
        return ""
    name = language_name(language)
    return (
        f"\n    CRITICAL LANGUAGE REQUIREMENT: The input is in {name}. "
        f"ALL of {fields} MUST be written in {name}. Do NOT translate to English."
    )


def get_content_analysis_prompt(content: str, language: str) -> str:
    return f"""[PERSONA]
    You are an expert fake news detector and fact-checker.

    [TASK]
    Analyze the following text and determine if it is authentic or fake news.

    Text to analyze:
    "{content}"
    {_output_language_rule(language, "findings and recommendation")}

    [RULES]
    1. Provide exactly 4 specific findings about this content.
    2. Consider: sensationalist language, source credibility, factual accuracy, bias, writing quality.
    3. "score" is a number between 0 and 100, where 100 is completely authentic.
    4. The recommendation must be detailed and actionable.

    Respond ONLY with JSON of the form {{"score": ..., "findings": [...], "recommendation": "..."}}."""


def get_url_analysis_prompt(url: str, language: str) -> str:
    return f"""[PERSONA]
    You are an expert in website credibility and digital security.

    [TASK]
    Analyze this URL and determine its trustworthiness.

    URL to analyze:
    "{url}"
    {_output_language_rule(language, "findings and recommendation")}

    [RULES]
    1. Provide exactly 4 specific findings about this URL.
    2. Consider: domain reputation, known phishing patterns, HTTPS security, domain age indicators.
    3. Check whether the domain looks like a legitimate news source, organization, or potential scam.
    4. Identify suspicious URL patterns (misspellings, unusual characters, shortened links).
    5. "score" is a number between 0 and 100, where 100 is completely trustworthy.

    Respond ONLY with JSON of the form {{"score": ..., "findings": [...], "recommendation": "..."}}."""


def get_fact_check_prompt(content: str, language: str) -> str:
    return f"""[PERSONA]
    You are a fact-checker working with official sources worldwide.

    [TASK]
    Analyze this claim thoroughly and provide fact-checked information.

    Claim:
    "{content}"
    {_output_language_rule(language, "claim, explanation and corrected_statement")}

    [RULES]
    1. "verdict" must be exactly one of "FALSE", "MISLEADING", "NEEDS VERIFICATION".
    2. If the claim is FALSE or MISLEADING you MUST provide "corrected_statement" with accurate, factual information.
    3. Cross-reference MULTIPLE official sources:
       - Health: WHO, CDC, national health ministries
       - Science: NASA, NOAA, scientific journals
       - Government: official government websites, fact-checking organizations
       - News: Reuters, AP, BBC Fact Check
    4. Cite specific sources in your explanation.
    5. Be culturally aware and check against local official sources for that region/language.

    Respond ONLY with JSON of the form
    {{"claim": "...", "verdict": "...", "explanation": "...", "corrected_statement": "..."}}."""
