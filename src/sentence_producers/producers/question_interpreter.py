"""Question interpreter.

Turns multiple-choice questions into declarative candidate sentences, one per
(question, answer option), in file order. Input is JSONL:

    {"question": "What is the largest planet?", "answers": ["Jupiter", "Mars"]}

"choices" is accepted as an alias for "answers".

Rewrite rules, first match wins:
1) a blank ("___") is filled with the answer
2) a leading "What"/"Who" is replaced by the answer
3) otherwise the answer is appended to the question
"""

from __future__ import annotations
from typing import Any, Dict, Iterator, List, Optional, Tuple
import json
import logging
import random
import re

from ..config.params import require_param
from .base import GENERATED_PARAMS, GeneratedSentenceProducer

log = logging.getLogger("sentence_producers.producers.question_interpreter")

_BLANK_RE = re.compile(r"_{2,}")
_WH_RE = re.compile(r"^(what|who)\b\s*", re.IGNORECASE)

def _finish(sentence: str) -> str:
    sentence = sentence.strip().rstrip("?").strip()
    if not sentence:
        return sentence
    sentence = sentence[0].upper() + sentence[1:]
    return sentence if sentence[-1] in ".!" else sentence + "."

def interpret(question: str, answer: str) -> str:
    question = question.strip()
    answer = answer.strip()
    if _BLANK_RE.search(question):
        return _finish(_BLANK_RE.sub(lambda _: answer, question, count=1))
    if _WH_RE.match(question):
        return _finish(_WH_RE.sub(lambda _: answer + " ", question, count=1))
    return _finish(f"{question.rstrip('?')} {answer}")

class QuestionInterpreter(GeneratedSentenceProducer):
    name = "Question Interpreter"
    output_dir_name = "interpreted"
    valid_params = GENERATED_PARAMS + ("questions",)

    def __init__(self, params: Dict[str, Any], rng: Optional[random.Random] = None):
        super().__init__(params, rng)
        self.questions_file = require_param(params, "questions", str, owner=self.name)

    @property
    def inputs(self):
        return {(self.questions_file, None)}

    def read_questions(self) -> Iterator[Tuple[str, List[str]]]:
        with open(self.questions_file, "r", encoding="utf-8") as f:
            for line_num, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    ex = json.loads(line)
                except json.JSONDecodeError as e:
                    log.warning(f"Invalid JSON in {self.questions_file}:{line_num}: {e}")
                    continue
                question = ex.get("question")
                answers = ex.get("answers", ex.get("choices"))
                if not question or not isinstance(answers, list):
                    log.warning(f"{self.questions_file}:{line_num}: missing question/answers, skipping")
                    continue
                yield str(question), [str(a) for a in answers]

    def produce_sentences(self) -> List[str]:
        return [interpret(q, a) for q, answers in self.read_questions() for a in answers]
