from .models import QuestionBank, QuestionRecord
from .loader import DEFAULT_MAX_QUESTIONS, load, load_file, load_resource

__all__ = [
    "QuestionBank",
    "QuestionRecord",
    "DEFAULT_MAX_QUESTIONS",
    "load",
    "load_file",
    "load_resource",
]
