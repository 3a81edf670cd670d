from .generator import PinyinConverter, PypinyinConverter, QuizItem, QuizPool, parse_text_to_quiz_items
