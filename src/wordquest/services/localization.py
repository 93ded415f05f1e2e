"""Translation tables for UI strings, words and quiz questions."""
import logging
from enum import Enum
from typing import Dict, Union

logger = logging.getLogger(__name__)


class Language(Enum):
    """Languages the game can be played in."""
    FILIPINO = "filipino"
    ENGLISH = "english"

    @classmethod
    def from_code(cls, code: Union[str, "Language", None]) -> "Language":
        """Resolve a language name or ISO-ish code, defaulting to the base language."""
        if isinstance(code, Language):
            return code
        normalized = (code or "").strip().lower()
        if normalized in ("english", "en", "en-us"):
            return cls.ENGLISH
        if normalized not in ("filipino", "tl", "fil", "tl-ph", ""):
            logger.debug(f"Unknown language code {code!r}, using {BASE_LANGUAGE.value}")
        return BASE_LANGUAGE

    @property
    def other(self) -> "Language":
        return Language.ENGLISH if self is Language.FILIPINO else Language.FILIPINO


# Canonical word keys are Filipino words
BASE_LANGUAGE = Language.FILIPINO


UI_STRINGS: Dict[Language, Dict[str, str]] = {
    Language.FILIPINO: {
        # Common UI
        "back": "Bumalik",
        "settings": "Mga Setting",
        "level": "Level",
        "stars": "Stars",
        "hearts": "Hearts",
        "gold": "Gold",
        "start": "Start",
        "continue": "Tuloy",
        "complete": "Tapos",
        # Landing page
        "wordQuest": "WORD QUEST ✨",
        "magicalWorld": "Ang Mahiwagang Mundo ng Pagbabasa! ✨",
        "startAdventure": "START ADVENTURE! 🌟✨",
        "chooseHero": "CHOOSE YOUR HERO! ⚡✨",
        "chooseChampion": "Piliin ang reading champion mo! ^^",
        "heroNameQuestion": "Anong pangalan ng",
        "enterHeroName": "Enter your hero name...",
        "quickStartAnonymous": "Quick Start as Anonymous Hero 👤",
        "portalOpening": "PORTAL OPENING... ✨",
        "heroReady": "is ready! ✨",
        # Characters
        "wordWizard": "Word Wizard",
        "spaceReader": "Space Reader",
        "bookHero": "Book Hero",
        "storyPrincess": "Story Princess",
        "reader": "Reader",
        "magicReadingPowers": "Magic Reading Powers",
        "cosmicKnowledge": "Cosmic Knowledge",
        "superLearning": "Super Learning",
        "fairyTaleMagic": "Fairy Tale Magic",
        "readyToLearn": "Handa ka na bang matuto?",
        # Reading lesson
        "learning": "Nag-aaral",
        "testing": "Nag-eexam",
        "quizMode": "Quiz Mode",
        "listen": "Pakinggan",
        "playing": "Pinapatugtog...",
        "gotIt": "Nakuha ko na! ✅",
        "animals": "Mga Hayop (Animals)",
        "objects": "Mga Bagay (Objects)",
        "progress": "Progress",
        "points": "Points",
        "questions": "Mga Tanong",
        "quiz": "Quiz",
        "finished": "Tapos na!",
        "lessonComplete": "TAPOS ANG ARALIN!",
        "correctAnswers": "Tamang Sagot",
        "goldEarned": "Gold na Nakuha",
        "excellent": "🌟 Napakahusay! 🌟",
        "good": "👍 Magaling! 👍",
        "keep_learning": "💪 Tuloy lang sa pag-aaral! 💪",
        "continueAdventure": "🎉 Ituloy ang Adventure!",
        "skipToDashboard": "🏠 Bumalik sa Dashboard",
        # Questions - Level 1
        "whoMeows": "Sino ang tumutunog ng 'meow'?",
        "whatIsDogInFilipino": "Anong tawag sa 'dog' sa Pilipino?",
        # Questions - Level 2
        "whereEat": "Saan tayo kumakain?",
        "whatForReading": "Anong ginagamit natin sa pagbabasa?",
        "whereLive": "Saan tayo nakatira?",
        "whatToPlay": "Anong lalaruan mo sa labas?",
        # Settings
        "language": "Wika",
        "showPhonetics": "Ipakita ang Phonetics",
        "reduceMotion": "Reduce Motion",
        "hapticFeedback": "Haptic Feedback",
        "testSound": "🔊 Test Audio",
        "testVibration": "📳 Test ng Vibration",
        "testSpeech": "Kumusta! Ang ganda ng settings mo!",
        "vibrationNotAvailable": "Haptic feedback hindi available sa browser mo",
        "enableHapticFirst": "I-enable muna ang haptic feedback sa settings",
        "soundNotAvailable": "Hindi ma-play ang tunog",
        "on": "Bukas",
        "off": "Sarado",
        # Dashboard
        "startLesson": "Simulan ang Aralin!",
        "shop": "🛍️ MAGIC SHOP 🛍️",
        "resetProgress": "I-reset ang progreso",
        "comingSoon": "Coming Soon!",
        # Celebration
        "levelUp": "LEVEL UP!",
        "greatJob": "⭐ Magaling! ⭐",
        "newContentUnlocked": "🏠 May bagong aralin! 🏠",
    },
    Language.ENGLISH: {
        # Common UI
        "back": "Back",
        "settings": "Settings",
        "level": "Level",
        "stars": "Stars",
        "hearts": "Hearts",
        "gold": "Gold",
        "start": "Start",
        "continue": "Continue",
        "complete": "Complete",
        # Landing page
        "wordQuest": "WORD QUEST ✨",
        "magicalWorld": "The Magical World of Reading! ✨",
        "startAdventure": "START ADVENTURE! 🌟✨",
        "chooseHero": "CHOOSE YOUR HERO! ⚡✨",
        "chooseChampion": "Choose your reading champion! ^^",
        "heroNameQuestion": "What's your",
        "enterHeroName": "Enter your hero name...",
        "quickStartAnonymous": "Quick Start as Anonymous Hero 👤",
        "portalOpening": "PORTAL OPENING... ✨",
        "heroReady": "is ready! ✨",
        # Characters
        "wordWizard": "Word Wizard",
        "spaceReader": "Space Reader",
        "bookHero": "Book Hero",
        "storyPrincess": "Story Princess",
        "reader": "Reader",
        "magicReadingPowers": "Magic Reading Powers",
        "cosmicKnowledge": "Cosmic Knowledge",
        "superLearning": "Super Learning",
        "fairyTaleMagic": "Fairy Tale Magic",
        "readyToLearn": "Ready to learn?",
        # Reading lesson
        "learning": "Learning",
        "testing": "Testing",
        "quizMode": "Quiz Mode",
        "listen": "Listen",
        "playing": "Playing...",
        "gotIt": "Got it! ✅",
        "animals": "Animals",
        "objects": "Objects",
        "progress": "Progress",
        "points": "Points",
        "questions": "Questions",
        "quiz": "Quiz",
        "finished": "Finished!",
        "lessonComplete": "LESSON COMPLETE!",
        "correctAnswers": "Correct Answers",
        "goldEarned": "Gold Earned",
        "excellent": "🌟 Excellent Work! 🌟",
        "good": "👍 Good Job! 👍",
        "keep_learning": "💪 Keep Learning! 💪",
        "continueAdventure": "🎉 Continue Adventure!",
        "skipToDashboard": "🏠 Skip to Dashboard",
        # Questions - Level 1
        "whoMeows": "Who makes the 'meow' sound?",
        "whatIsDogInFilipino": "What do you call 'dog' in Filipino?",
        # Questions - Level 2
        "whereEat": "Where do we eat?",
        "whatForReading": "What do we use for reading?",
        "whereLive": "Where do we live?",
        "whatToPlay": "What will you play with outside?",
        # Settings
        "language": "Language",
        "showPhonetics": "Show Phonetics",
        "reduceMotion": "Reduce Motion",
        "hapticFeedback": "Haptic Feedback",
        "testSound": "🔊 Test Sound",
        "testVibration": "📳 Test Vibration",
        "testSpeech": "Hello! Your settings look great!",
        "vibrationNotAvailable": "Haptic feedback not available in your browser",
        "enableHapticFirst": "Please enable haptic feedback in settings first",
        "soundNotAvailable": "Sound could not be played",
        "on": "On",
        "off": "Off",
        # Dashboard
        "startLesson": "Start Lesson!",
        "shop": "🛍️ MAGIC SHOP 🛍️",
        "resetProgress": "Reset progress",
        "comingSoon": "Coming Soon!",
        # Celebration
        "levelUp": "LEVEL UP!",
        "greatJob": "⭐ Great Job! ⭐",
        "newContentUnlocked": "🏠 New Content Unlocked! 🏠",
    },
}


WORD_TRANSLATIONS: Dict[str, Dict[Language, str]] = {
    "aso": {Language.FILIPINO: "aso", Language.ENGLISH: "dog"},
    "pusa": {Language.FILIPINO: "pusa", Language.ENGLISH: "cat"},
    "manok": {Language.FILIPINO: "manok", Language.ENGLISH: "chicken"},
    "baboy": {Language.FILIPINO: "baboy", Language.ENGLISH: "pig"},
    "mesa": {Language.FILIPINO: "mesa", Language.ENGLISH: "table"},
    "libro": {Language.FILIPINO: "libro", Language.ENGLISH: "book"},
    "bola": {Language.FILIPINO: "bola", Language.ENGLISH: "ball"},
    "bulaklak": {Language.FILIPINO: "bulaklak", Language.ENGLISH: "flower"},
    "bahay": {Language.FILIPINO: "bahay", Language.ENGLISH: "house"},
    "kotse": {Language.FILIPINO: "kotse", Language.ENGLISH: "car"},
}


def t(key: str, language: Union[Language, str]) -> str:
    """Translate a UI string, passing the key through when it is missing."""
    table = UI_STRINGS[Language.from_code(language)]
    if key not in table:
        logger.debug(f"No UI string for key {key!r}")
        return key
    return table[key]


def translate_word(word_key: str, language: Union[Language, str]) -> str:
    """Translate a canonical word key, passing the key through when it is missing."""
    entry = WORD_TRANSLATIONS.get(word_key)
    if entry is None:
        logger.debug(f"No translation for word {word_key!r}")
        return word_key
    return entry.get(Language.from_code(language), word_key)


def translate_question(question_key: str, language: Union[Language, str]) -> str:
    """Translate a question key; questions share the UI string table."""
    return t(question_key, language)
