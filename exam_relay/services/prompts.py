# exam_relay/services/prompts.py
from __future__ import annotations

from typing import Optional

EXAM_PROMPT = """Generate a math exam for primary school students with exactly {count} questions on the topic "{topic}".

Format strictly:
- Title: "Math Exam - {topic}"
- Number questions: 1., 2., 3., ...
- Ages 6-12
- Mixed difficulty
- Simple, relatable word problems
- Clear, unambiguous wording
Do NOT include answers. Only questions."""

ANSWER_KEY_PROMPT = """Here are math exam questions for primary school students{topic_clause}:

{exam_questions}

Provide a clear answer key with brief explanations for teachers.
Format:
1. [Answer] - [Brief explanation]
2. [Answer] - [Brief explanation]
..."""


def build_exam_prompt(topic: str, question_count: int) -> str:
    return EXAM_PROMPT.format(count=question_count, topic=topic)


def build_answer_key_prompt(exam_questions: str, topic: Optional[str] = None) -> str:
    # no topic means no clause at all, not an empty one
    topic_clause = f' on the topic "{topic}"' if topic else ""
    return ANSWER_KEY_PROMPT.format(topic_clause=topic_clause, exam_questions=exam_questions)
