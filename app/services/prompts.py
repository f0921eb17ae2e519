"""Prompts y esquemas de salida enviados al modelo generativo"""

from google.genai import types

VOCABULARY_MODES = ("generate", "raw")

VOCABULARY_SCHEMA = types.Schema(
    type=types.Type.ARRAY,
    items=types.Schema(
        type=types.Type.OBJECT,
        properties={
            "from": types.Schema(type=types.Type.STRING),
            "to": types.Schema(type=types.Type.STRING),
        },
        required=["from", "to"],
    ),
)

WORD_INFO_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "partOfSpeech": types.Schema(type=types.Type.STRING),
        "synonyms": types.Schema(
            type=types.Type.ARRAY, items=types.Schema(type=types.Type.STRING)
        ),
        "antonyms": types.Schema(
            type=types.Type.ARRAY, items=types.Schema(type=types.Type.STRING)
        ),
        "examples": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "sentence": types.Schema(type=types.Type.STRING),
                    "translation": types.Schema(type=types.Type.STRING),
                },
                required=["sentence", "translation"],
            ),
        ),
    },
    required=["partOfSpeech", "synonyms", "antonyms", "examples"],
)

_PRACTICE_RULES = (
    "Output MUST be clean and ready for language practice, avoid dashes, "
    "commas, or punctuation. Only include vocabulary suitable for typing exercises."
)


def _pair_format(known_language: str, learn_language: str) -> str:
    return (
        "[\n"
        f'  {{ "from": "<word in {known_language}>", "to": "<word in {learn_language}>" }},\n'
        "  ...\n"
        "]"
    )


def build_vocabulary_prompt(
    mode: str,
    known_language: str,
    learn_language: str,
    input_text: str,
    amount: int,
) -> str:
    """
    Construye el prompt de importación de vocabulario

    Args:
        mode: "generate" (palabras sobre un tema) o "raw" (extraer de un texto)
        known_language: Idioma que el usuario ya conoce
        learn_language: Idioma que el usuario aprende
        input_text: Tema o texto libre según el modo
        amount: Número de pares a generar (sólo modo "generate")

    Raises:
        ValueError: Modo desconocido
    """
    pairs = _pair_format(known_language, learn_language)

    if mode == "generate":
        return (
            f'Generate {amount} vocabulary word pairs related to the topic: "{input_text}".\n'
            f"The user knows {known_language} and wants to learn {learn_language}.\n"
            "Respond as a JSON array of objects with this format:\n"
            f"{pairs}\n"
            f"{_PRACTICE_RULES}\n"
            "Return only the array.\n"
        )
    elif mode == "raw":
        return (
            "Extract useful vocabulary words from the following unstructured text:\n"
            f'"{input_text}"\n\n'
            f"Translate each word or phrase from {known_language} to {learn_language}.\n\n"
            "Respond ONLY with a JSON array like:\n"
            f"{pairs}\n\n"
            f"{_PRACTICE_RULES}\n"
        )

    raise ValueError(f"Invalid mode: {mode!r}")


def build_word_info_prompt(
    known_language: str, learn_language: str, known_word: str, learn_word: str
) -> str:
    """Construye el prompt de información léxica de una palabra"""
    return (
        f'Give linguistic information about the {learn_language} word "{learn_word}", '
        f'which means "{known_word}" in {known_language}.\n'
        "Respond as a JSON object with this format:\n"
        "{\n"
        f'  "partOfSpeech": "<part of speech, written in {known_language}>",\n'
        f'  "synonyms": ["<synonym in {learn_language}>", ...],\n'
        f'  "antonyms": ["<antonym in {learn_language}>", ...],\n'
        '  "examples": [\n'
        f'    {{ "sentence": "<example sentence in {learn_language}>", '
        f'"translation": "<the sentence in {known_language}>" }},\n'
        "    ...\n"
        "  ]\n"
        "}\n"
        "Give at most 3 synonyms and at most 3 antonyms, using empty arrays when "
        "there are none, and exactly 3 short example sentences.\n"
        "Return only the object.\n"
    )
