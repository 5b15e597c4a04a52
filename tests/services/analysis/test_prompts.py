"""
Tests for exam_coverage.services.analysis.prompts
"""

import json

from exam_coverage.config.syllabus import SYLLABUS, SYLLABUS_NAME, SyllabusCatalog, SyllabusTopic
from exam_coverage.services.analysis.prompts import ANALYSIS_PROMPT, PromptTemplate, build, serialize_syllabus


class TestBuild:
    def test_is_deterministic(self):
        assert build(SYLLABUS) == build(SYLLABUS)

    def test_contains_every_topic_id(self):
        prompt = build(SYLLABUS)
        for topic_id in SYLLABUS.ids():
            assert topic_id in prompt

    def test_keeps_chinese_text_unescaped(self):
        prompt = build(SYLLABUS)
        assert SYLLABUS_NAME in prompt
        assert "集合" in prompt
        assert "\\u" not in prompt

    def test_no_placeholders_left(self):
        prompt = build(SYLLABUS)
        assert "{syllabus}" not in prompt
        assert "{syllabus_name}" not in prompt

    def test_mentions_report_fields(self):
        prompt = build(SYLLABUS)
        for name in ("topicScores", "missingTopics", "overallScore", "aiCommentary", "questionCount"):
            assert name in prompt

    def test_different_catalogs_give_different_prompts(self):
        small = SyllabusCatalog([SyllabusTopic("T-1", "Limits", "Limits of sequences", "Calculus")])
        assert build(small) != build(SYLLABUS)
        assert "T-1" in build(small, syllabus_name="Calculus I")


class TestSerializeSyllabus:
    def test_round_trips_in_catalog_order(self):
        data = json.loads(serialize_syllabus(SYLLABUS))
        assert [item["id"] for item in data] == SYLLABUS.ids()

    def test_entries_have_all_fields(self):
        first = json.loads(serialize_syllabus(SYLLABUS))[0]
        assert set(first) == {"id", "name", "description", "module"}


class TestPromptTemplate:
    def test_format(self):
        template = PromptTemplate(template="Hello {name}!")
        assert template.format(name="World") == "Hello World!"

    def test_literal_braces_fall_back_to_replace(self):
        template = PromptTemplate(template='Return {"a": 1} for {name}')
        assert template.format(name="x") == 'Return {"a": 1} for x'

    def test_str(self):
        assert "syllabus" in str(ANALYSIS_PROMPT)
