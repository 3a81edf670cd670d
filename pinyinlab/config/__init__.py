from .config import OUTPUT_FORMATS, default_quiz_config, load_quiz_config
