"""Clue sentence generation interfaces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence

from ..core.constants import BLANK_MARKER
from ..core.exceptions import ClueGenerationError
from ..core.models import CrosswordResult
from ..utils.logger import get_logger
from .gemini_client import GeminiAPIError, GeminiClient


LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class ClueSentence:
    """A sentence with a blank where the localized word belongs."""

    sentence: str
    localized_word: str


ClueTexts = Dict[str, Dict[str, ClueSentence]]


class ClueTextGenerator(Protocol):
    def generate(self, words: Sequence[str], languages: Sequence[str]) -> ClueTexts:
        """Return mapping ``WORD -> language -> ClueSentence``."""


class GeminiClueGenerator:
    """LLM clue writer using Gemini."""

    CLUE_PROMPT = (
        "You are the StarCon navigation computer. For these source words (they will "
        "appear in a crossword): {words}, write space-log sentences in the following "
        "languages: {languages}.\n"
        "Mandatory rules:\n"
        "1. THEME: Space Quest, Roger Wilco, spaceships, retro-futuristic technology, "
        "funny aliens.\n"
        "2. SENTENCE: every sentence MUST contain \"{blank}\" where the translation of "
        "the source word into THAT language goes.\n"
        "3. LOCALIZED WORD: give the exact word that fills \"{blank}\" in THAT language.\n"
        "4. STRUCTURE: respond with a JSON object whose top-level keys are the source "
        "words in UPPERCASE.\n"
        "Example: {{\"SUN\": {{\"English\": {{\"sentence\": \"The {blank} of Xenon is "
        "blindingly bright.\", \"localizedWord\": \"Sun\"}}, \"Spanish\": {{\"sentence\": "
        "\"El {blank} de Xenon es cegadoramente brillante.\", \"localizedWord\": \"Sol\"}}}}}}"
    )

    def __init__(self, gemini_client: Optional[GeminiClient] = None) -> None:
        self._client = gemini_client

    def generate(self, words: Sequence[str], languages: Sequence[str]) -> ClueTexts:
        prompt = self._render_prompt(words, languages)
        client = self._client or GeminiClient()
        self._client = client
        return self._parse_response(client.generate_json(prompt))

    @classmethod
    def _render_prompt(cls, words: Sequence[str], languages: Sequence[str]) -> str:
        return cls.CLUE_PROMPT.format(
            words=", ".join(words),
            languages=", ".join(languages),
            blank=BLANK_MARKER,
        )

    @staticmethod
    def _parse_response(data: Any) -> ClueTexts:
        if not isinstance(data, dict):
            raise ClueGenerationError("Gemini clue payload is not a JSON object")
        result: ClueTexts = {}
        for word, per_language in data.items():
            if not isinstance(per_language, dict):
                continue
            entries: Dict[str, ClueSentence] = {}
            for language, entry in per_language.items():
                if not isinstance(entry, dict):
                    continue
                sentence = entry.get("sentence")
                localized = entry.get("localizedWord") or entry.get("localized_word")
                if sentence and localized:
                    entries[language] = ClueSentence(sentence=sentence, localized_word=localized)
            if entries:
                result[str(word).upper()] = entries
        return result


class TemplateClueGenerator:
    """Simple fallback clue writer."""

    TEMPLATE = "The data log for {blank} is stored in the {language} sector."

    def generate(self, words: Sequence[str], languages: Sequence[str]) -> ClueTexts:
        results: ClueTexts = {}
        for word in words:
            results[word.upper()] = {
                language: ClueSentence(
                    sentence=self.TEMPLATE.format(blank=BLANK_MARKER, language=language),
                    localized_word=word,
                )
                for language in languages
            }
        return results


def generate_clue_texts(
    words: Sequence[str],
    languages: Sequence[str],
    generator: Optional[ClueTextGenerator] = None,
) -> ClueTexts:
    """Generate clue sentences, filling failures and gaps from the template writer."""

    fallback = TemplateClueGenerator().generate(words, languages)
    if generator is None:
        return fallback
    try:
        generated = generator.generate(words, languages)
    except (GeminiAPIError, ClueGenerationError) as exc:
        LOGGER.warning("Clue generation failed (%s); using template clues", exc)
        return fallback

    merged: ClueTexts = {}
    for word in words:
        key = word.upper()
        per_language = dict(fallback[key])
        per_language.update(
            {lang: entry for lang, entry in generated.get(key, {}).items() if lang in per_language}
        )
        missing: List[str] = [lang for lang in languages if lang not in generated.get(key, {})]
        if missing:
            LOGGER.warning("No generated clue for %s in %s; using template", key, missing)
        merged[key] = per_language
    return merged


def attach_clue_texts(result: CrosswordResult, texts: ClueTexts, language: str) -> None:
    """Write the ``language`` sentence of every placed word into its clue."""

    for clue in result.clues:
        entry = texts.get(clue.word, {}).get(language)
        clue.clue = entry.sentence if entry is not None else ""


def clue_texts_to_jsonable(texts: ClueTexts) -> Dict[str, Dict[str, Dict[str, str]]]:
    return {
        word: {
            language: {"sentence": entry.sentence, "localized_word": entry.localized_word}
            for language, entry in per_language.items()
        }
        for word, per_language in texts.items()
    }
