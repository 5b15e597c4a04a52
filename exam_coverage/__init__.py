"""
Exam Coverage Analyzer

Compares photographed or scanned exam papers against a fixed syllabus using
Gemini and reports per-topic coverage, missing topics and commentary.
"""

__version__ = "1.0.0"
