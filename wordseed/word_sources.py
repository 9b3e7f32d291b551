# wordseed/word_sources.py
from typing import Dict, List

# Plaintext lists, one word per line
WORD_SOURCES: Dict[str, str] = {
    # Wordle's own lists (answers are the best fit for the game)
    "WORDLE_ANSWERS": "https://raw.githubusercontent.com/tabatkins/wordle-list/main/words",
    "WORDLE_ALLOWED": "https://raw.githubusercontent.com/tabatkins/wordle-list/main/words-allowed",
    # Common English words
    "COMMON_10K": "https://raw.githubusercontent.com/first20hours/google-10000-english/master/google-10000-english-no-swears.txt",
    # Large dictionary, includes obscure words
    "COMPREHENSIVE": "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt",
}

# Returned whenever the cache and the download both fail
FALLBACK_WORDS: List[str] = [
    "ABOUT", "ABOVE", "ABUSE", "ACTOR", "ACUTE", "ADMIT", "ADOPT", "ADULT", "AFTER", "AGAIN",
    "AGENT", "AGREE", "AHEAD", "ALARM", "ALBUM", "ALERT", "ALIEN", "ALIGN", "ALIKE", "ALIVE",
    "ALLOW", "ALONE", "ALONG", "ALTER", "AMONG", "ANGER", "ANGLE", "ANGRY", "APART", "APPLE",
]
