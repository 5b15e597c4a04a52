"""
Prompt builder for exam coverage analysis.

The prompt is a pure function of the syllabus catalog: the catalog is
serialized to stable JSON and interpolated into a fixed instruction
template.
"""

import json
from dataclasses import dataclass

from exam_coverage.config.syllabus import SYLLABUS_NAME, SyllabusCatalog


@dataclass(frozen=True)
class PromptTemplate:
    """
    A prompt template with placeholders.

    Usage:
        template = PromptTemplate(template="Hello {name}!", description="A greeting")
        result = template.format(name="World")
    """
    template: str
    description: str = ""

    def format(self, **kwargs) -> str:
        """Format the template with provided values"""
        try:
            return self.template.format(**kwargs)
        except (KeyError, ValueError, IndexError):
            # Templates containing literal braces: replace only the provided keys
            result = self.template
            for k, v in kwargs.items():
                result = result.replace("{" + k + "}", str(v))
            return result

    def __str__(self) -> str:
        return f"PromptTemplate({self.description})"


ANALYSIS_PROMPT = PromptTemplate(
    description="Compare uploaded exam pages against the syllabus topic by topic",
    template="""You are a senior mathematics teacher and exam reviewer.

The attached files are scanned pages of one exam paper. Read every question
on every page, then compare the paper against the syllabus below
({syllabus_name}) topic by topic.

SYLLABUS (JSON list of topics; "id" is the only valid topic identifier):
{syllabus}

Produce a coverage report:
1. topicScores: one entry for every syllabus topic the paper tests. "score"
   is 0-100 and reflects how thoroughly and at what depth the paper tests
   that topic.
2. missingTopics: one entry for every syllabus topic the paper does not test
   at all. "reason" explains why the omission matters; "suggestion"
   describes a concrete question type that would cover it.
3. overallScore: 0-100, how completely the paper covers the syllabus.
4. aiCommentary: a short overall assessment (structure, difficulty balance,
   most important gaps).
5. questionCount: the number of distinct questions found in the pages.

Rules:
- Use only topic ids that appear in the syllabus above.
- A topic appears in topicScores or missingTopics, never both.
- Write reason, suggestion and aiCommentary in Simplified Chinese.
- Return only the JSON object described by the response schema.
""",
)


def serialize_syllabus(syllabus: SyllabusCatalog) -> str:
    """Stable textual form of the catalog (catalog order, 2-space indent)."""
    return json.dumps(syllabus.to_serializable(), ensure_ascii=False, indent=2)


def build(syllabus: SyllabusCatalog, syllabus_name: str = SYLLABUS_NAME) -> str:
    """Build the analysis directive for a syllabus catalog."""
    return ANALYSIS_PROMPT.format(
        syllabus=serialize_syllabus(syllabus),
        syllabus_name=syllabus_name,
    )
